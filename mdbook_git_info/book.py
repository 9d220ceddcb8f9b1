"""
Helpers for the JSON documents exchanged with mdBook.

mdBook writes a `[context, book]` pair to the preprocessor's stdin and
expects the (possibly modified) book back on stdout. The book is kept as
plain dicts so that fields this preprocessor does not know about survive
the round trip untouched.
"""
import json
import os
from typing import Any, Dict, Iterator, TextIO, Tuple

from mdbook_git_info.config import DEFAULT_BOOK_SRC
from mdbook_git_info.errors import ProtocolError


def parse_input(stream: TextIO) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Reads the [context, book] request sent by mdBook."""
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Unable to parse the input from mdBook: {e}") from e

    if not isinstance(payload, list) or len(payload) != 2:
        raise ProtocolError("Expected a [context, book] pair from mdBook")
    context, book = payload
    if not isinstance(context, dict) or not isinstance(book, dict):
        raise ProtocolError("Expected a [context, book] pair from mdBook")
    return context, book


def write_output(book: Dict[str, Any], stream: TextIO):
    json.dump(book, stream)
    stream.flush()


def iter_chapters(book: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yields every chapter of the book depth-first, in reading order."""
    yield from _iter_items(book.get("sections", []))


def _iter_items(items) -> Iterator[Dict[str, Any]]:
    for item in items:
        # Separators are bare strings, part titles are {"PartTitle": "..."}
        if not isinstance(item, dict) or "Chapter" not in item:
            continue
        chapter = item["Chapter"]
        yield chapter
        yield from _iter_items(chapter.get("sub_items", []))


def source_root(context: Dict[str, Any]) -> str:
    """Directory the chapters' `source_path` values are relative to."""
    root = context.get("root", ".")
    src = context.get("config", {}).get("book", {}).get("src", DEFAULT_BOOK_SRC)
    return os.path.join(root, src)
