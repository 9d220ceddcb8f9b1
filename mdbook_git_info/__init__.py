"""mdBook preprocessor that appends git provenance metadata to each chapter."""

__version__ = "0.1.0"
