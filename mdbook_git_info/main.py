import argparse
import os
import sys

# GitPython probes for a git binary on import; a missing binary is reported
# per chapter as ToolUnavailable instead.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from loguru import logger

from mdbook_git_info.book import parse_input, write_output
from mdbook_git_info.config import load_configuration
from mdbook_git_info.errors import GitInfoError, UnsupportedRenderer
from mdbook_git_info.preprocessor import GitInfoPreprocessor
from mdbook_git_info.utils import GitCommandRunner, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-git-info",
        description="A mdbook preprocessor which extracts metadata from Git and adds it to the chapters of the book.",
    )
    subparsers = parser.add_subparsers(dest="command")
    supports = subparsers.add_parser(
        "supports", help="Check whether a renderer is supported by this preprocessor."
    )
    supports.add_argument("renderer", help="Name of the mdbook renderer.")
    return parser


def handle_supports(preprocessor: GitInfoPreprocessor, renderer: str):
    if not preprocessor.supports_renderer(renderer):
        raise UnsupportedRenderer(renderer)


def handle_preprocessing(preprocessor: GitInfoPreprocessor, stdin=None, stdout=None):
    context, book = parse_input(stdin or sys.stdin)
    processed_book = preprocessor.run(context, book)
    write_output(processed_book, stdout or sys.stdout)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    setup_logging(config['LOG_LEVEL'])

    preprocessor = GitInfoPreprocessor(GitCommandRunner(config['GIT_EXECUTABLE']))

    # Dispatch to the correct handler
    try:
        if args.command == "supports":
            handle_supports(preprocessor, args.renderer)
        else:
            handle_preprocessing(preprocessor)
    except UnsupportedRenderer as e:
        logger.debug(str(e))
        return 1
    except GitInfoError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
