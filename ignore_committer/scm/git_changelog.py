"""Git changelog parsing and the git changeset adapter.

The host produces the changelog between two revisions in git's raw format
(as written by ``git whatchanged --no-abbrev -M --format=raw``):

    commit 3b7e1f...
    tree 9a0c...
    parent 5d2e...
    author Jane Doe <jane@example.com> 1530000000 +1000
    committer Jane Doe <jane@example.com> 1530000000 +1000

        Fix parser

    :100644 100644 1111... 2222... M	src/parser.py

Only the fields the author filter needs are extracted.
"""

import re
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta, timezone

from ignore_committer.core.logging import get_logger
from ignore_committer.scm.base import ChangesetSource
from ignore_committer.scm.revisions import normalize_git_revision
from ignore_committer.shared.exceptions import ChangesetParseError
from ignore_committer.shared.models import Commit

logger = get_logger(__name__)

# "author Name <email> <epoch> <tz>"; name may be empty
_AUTHOR_LINE = re.compile(
    r"^author (?P<name>.*?) ?<(?P<email>[^>]*)> (?P<epoch>\d+) (?P<tz>[+-]\d{4})$"
)
_MESSAGE_INDENT = "    "

GitChangelogReader = Callable[[str | None, str | None], str]


def _parse_timestamp(epoch: str, tz: str) -> datetime:
    sign = -1 if tz.startswith("-") else 1
    offset = timedelta(hours=int(tz[1:3]), minutes=int(tz[3:5])) * sign
    return datetime.fromtimestamp(int(epoch), tz=UTC).astimezone(timezone(offset))


def _build_commit(commit_id: str, header: dict[str, str], message_lines: list[str]) -> Commit:
    author_line = header.get("author")
    author: str | None = None
    author_name: str | None = None
    timestamp: datetime | None = None

    if author_line is not None:
        match = _AUTHOR_LINE.match(author_line)
        if match:
            author = match.group("email")
            author_name = match.group("name") or None
            timestamp = _parse_timestamp(match.group("epoch"), match.group("tz"))
        else:
            logger.debug("git.changelog.author_unparsed", commit_id=commit_id[:7])

    return Commit(
        commit_id=commit_id,
        author=author,
        author_name=author_name,
        message="\n".join(message_lines).strip(),
        timestamp=timestamp,
    )


def parse_git_changelog(changelog: str) -> list[Commit]:
    """Parse raw git changelog output into commits.

    Args:
        changelog: Raw changelog text, possibly empty

    Returns:
        Commits in the order they appear in the changelog

    Raises:
        ChangesetParseError: If a "commit" line carries no commit id
    """
    commits: list[Commit] = []
    commit_id: str | None = None
    header: dict[str, str] = {}
    message_lines: list[str] = []

    for line_number, line in enumerate(changelog.splitlines(), start=1):
        if line.startswith("commit ") or line == "commit":
            if commit_id is not None:
                commits.append(_build_commit(commit_id, header, message_lines))
            # "commit <sha> (from <sha>)" appears for merges with -m
            parts = line.split()
            if len(parts) < 2:
                raise ChangesetParseError(f"Missing commit id on line {line_number}")
            commit_id = parts[1]
            header = {}
            message_lines = []
            continue

        if commit_id is None:
            # Preamble before the first commit carries nothing we need
            continue

        if line.startswith(_MESSAGE_INDENT):
            message_lines.append(line[len(_MESSAGE_INDENT) :])
        elif line and not line.startswith(":"):
            key, _, value = line.partition(" ")
            # Keep the first occurrence (e.g., first parent)
            header.setdefault(key, f"{key} {value}")

    if commit_id is not None:
        commits.append(_build_commit(commit_id, header, message_lines))

    return commits


class GitChangelogSource(ChangesetSource):
    """Changeset adapter over a host-provided git "changes since" call.

    Args:
        reader: Callable taking (prev_revision, curr_revision) as normalized
            commit ids (prev may be None) and returning raw changelog text
    """

    def __init__(self, reader: GitChangelogReader) -> None:
        self._reader = reader

    @property
    def scm_type(self) -> str:
        return "git"

    def changes_since(
        self, prev_revision: str | None, curr_revision: str | None
    ) -> Iterable[Commit]:
        prev_id = normalize_git_revision(prev_revision)
        curr_id = normalize_git_revision(curr_revision)
        changelog = self._reader(prev_id, curr_id)
        commits = parse_git_changelog(changelog)
        logger.debug(
            "git.changelog.parsed",
            prev_revision=prev_id[:7] if prev_id else None,
            curr_revision=curr_id[:7] if curr_id else None,
            commits=len(commits),
        )
        return commits
