import sys
from abc import ABC, abstractmethod
from typing import List, NamedTuple

import git
from loguru import logger

from mdbook_git_info.errors import ToolUnavailable


class QueryResult(NamedTuple):
    """Outcome of one external command: exit status and captured streams."""
    status: int
    stdout: bytes
    stderr: str


class QueryRunner(ABC):
    """Runs a single external command synchronously and captures its output."""

    @abstractmethod
    def run(self, command: List[str], cwd: str = ".") -> QueryResult:
        pass


class GitCommandRunner(QueryRunner):
    """Runs git through GitPython, one process per call."""

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def run(self, command: List[str], cwd: str = ".") -> QueryResult:
        logger.debug(f"Running git command: {self.executable} {' '.join(command)} (cwd={cwd})")
        try:
            status, stdout, stderr = git.Git(cwd).execute(
                [self.executable, *command],
                with_extended_output=True,
                with_exceptions=False,
                stdout_as_string=False,
            )
        except git.GitCommandNotFound as e:
            raise ToolUnavailable(self.executable, str(e)) from e
        except OSError as e:
            raise ToolUnavailable(self.executable, str(e)) from e
        return QueryResult(status, stdout, stderr)


def setup_logging(level: str = "WARNING"):
    """Sends all log output to stderr; stdout carries the book JSON."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {name}:{function} - {message}")
