import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from loguru import logger

from mdbook_git_info.config import LOG_FORMAT
from mdbook_git_info.errors import MalformedOutput, QueryFailed
from mdbook_git_info.utils import GitCommandRunner, QueryRunner

# RFC 3339 date-time, the shape of git's %aI
RFC3339_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})")


@dataclass(frozen=True)
class CommitRecord:
    """A single entry of the git log of a file."""
    author: str
    timestamp: datetime


def extract(path: str, runner: QueryRunner | None = None) -> List[CommitRecord]:
    """
    Extracts the git history of the given file using `git log`.
    Records are returned newest first, in the order git emits them.
    """
    runner = runner or GitCommandRunner()
    path = os.path.abspath(path)
    command = ["log", LOG_FORMAT, "--", path]

    result = runner.run(command, os.path.dirname(path))
    if result.status != 0:
        raise QueryFailed(
            result.status,
            result.stdout.decode("utf-8", errors="replace"),
            result.stderr,
        )

    history = parse_log(result.stdout)
    logger.debug(f"Found {len(history)} commits for {path}")
    return history


def parse_log(output: bytes) -> List[CommitRecord]:
    """Parses the quoted `author<TAB>timestamp` lines produced by `git log`."""
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedOutput(f"Invalid UTF-8 output from git: {e}") from e

    # Only "\n" separates entries; author names may contain other line breaks
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [parse_log_line(line) for line in lines]


def parse_log_line(line: str) -> CommitRecord:
    fields = line.strip('"').split("\t")
    if len(fields) != 2:
        raise MalformedOutput("Unexpected git output format", line)

    author, raw_timestamp = fields
    if not author:
        raise MalformedOutput("Missing author in git output", line)

    if not RFC3339_PATTERN.fullmatch(raw_timestamp):
        raise MalformedOutput("Timestamp is not an RFC 3339 date-time", line)

    try:
        timestamp = datetime.fromisoformat(raw_timestamp.replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedOutput(f"Invalid timestamp in git output ({e})", line) from e

    return CommitRecord(author=author, timestamp=timestamp.astimezone(timezone.utc))
