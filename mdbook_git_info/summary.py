from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from mdbook_git_info.config import CONTRIBUTOR_SEPARATOR, DATE_FORMAT, NOT_AVAILABLE
from mdbook_git_info.git_history import CommitRecord

HISTORY_TEMPLATE = (
    "\n"
    "\n"
    "<br>\n"
    "\n"
    "---\n"
    "\n"
    "<br>\n"
    "\n"
    "| Created on | Created by | Last edit on | Last edit by | Other contributors |\n"
    "| :---: | :---: | :---: | :---: | --- |\n"
    "| **{created_on}** | **{created_by}** | **{last_edit_on}** | **{last_edit_by}** | {others} |\n"
)


@dataclass(frozen=True)
class HistorySummary:
    first_commit: Optional[CommitRecord]
    last_commit: Optional[CommitRecord]
    other_contributors: Tuple[str, ...] = ()


def summarize(history: Sequence[CommitRecord]) -> HistorySummary:
    """Reduces a newest-first history to its first/last commits and the other contributors."""
    last_commit = history[0] if history else None
    first_commit = history[-1] if history else None

    # Everything strictly between the newest and the oldest entry
    candidates = history[1:-1]
    other_contributors = {
        entry.author
        for entry in candidates
        if last_commit is None or entry.author != last_commit.author
    }

    return HistorySummary(
        first_commit=first_commit,
        last_commit=last_commit,
        other_contributors=tuple(sorted(other_contributors)),
    )


def _format_date(commit: Optional[CommitRecord]) -> str:
    return commit.timestamp.strftime(DATE_FORMAT) if commit else NOT_AVAILABLE


def _format_author(commit: Optional[CommitRecord]) -> str:
    return commit.author if commit else NOT_AVAILABLE


def render(summary: HistorySummary) -> str:
    """Renders the summary as the Markdown table appended to a chapter."""
    return HISTORY_TEMPLATE.format(
        created_on=_format_date(summary.first_commit),
        created_by=_format_author(summary.first_commit),
        last_edit_on=_format_date(summary.last_commit),
        last_edit_by=_format_author(summary.last_commit),
        others=CONTRIBUTOR_SEPARATOR.join(summary.other_contributors),
    )


def render_history(history: Sequence[CommitRecord]) -> str:
    return render(summarize(history))
