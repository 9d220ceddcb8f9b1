import os
from typing import Any, Dict

from loguru import logger

from mdbook_git_info import git_history
from mdbook_git_info.book import iter_chapters, source_root
from mdbook_git_info.config import PREPROCESSOR_NAME, SUPPORTED_RENDERERS, TARGET_MDBOOK_VERSION
from mdbook_git_info.errors import ChapterError, GitHistoryError
from mdbook_git_info.summary import render_history
from mdbook_git_info.utils import GitCommandRunner, QueryRunner


class GitInfoPreprocessor:
    """Preprocessor for mdBook that extracts info from the git metadata of each chapter of the book."""

    def __init__(self, runner: QueryRunner | None = None):
        self.runner = runner or GitCommandRunner()

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS

    def run(self, context: Dict[str, Any], book: Dict[str, Any]) -> Dict[str, Any]:
        """
        Appends the history table to every chapter of the book.
        Stops at the first chapter whose history cannot be extracted.
        """
        check_mdbook_version(context.get("mdbook_version"))

        renderer = context.get("renderer")
        if renderer is not None and not self.supports_renderer(renderer):
            logger.warning(f"Renderer {renderer} is not supported, leaving the book untouched")
            return book

        root = source_root(context)
        for chapter in iter_chapters(book):
            self.enrich_chapter(root, chapter)
        return book

    def enrich_chapter(self, root: str, chapter: Dict[str, Any]):
        name = chapter.get("name", "<unnamed>")
        source_path = chapter.get("source_path")
        if not source_path:
            logger.debug(f"Skipping draft chapter {name}")
            return

        try:
            history = git_history.extract(os.path.join(root, source_path), self.runner)
        except GitHistoryError as e:
            raise ChapterError(name, e) from e

        chapter["content"] = chapter.get("content", "") + render_history(history)
        logger.debug(f"Added git info to chapter {name} ({len(history)} commits)")


def check_mdbook_version(version: str | None):
    """Warns when mdBook's major.minor version differs from the one this plugin targets."""
    if version is None:
        return
    if version.split(".")[:2] != TARGET_MDBOOK_VERSION.split(".")[:2]:
        logger.warning(
            f"The {PREPROCESSOR_NAME} preprocessor targets mdbook {TARGET_MDBOOK_VERSION}, "
            f"but we're being called from version {version}"
        )
