"""Subversion log parsing and the svn changeset adapter."""

import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable
from datetime import datetime

from ignore_committer.core.logging import get_logger
from ignore_committer.scm.base import ChangesetSource
from ignore_committer.scm.revisions import svn_revision_range
from ignore_committer.shared.exceptions import ChangesetParseError
from ignore_committer.shared.models import Commit

logger = get_logger(__name__)

SvnLogReader = Callable[[int, int], str]


def _parse_svn_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug("svn.log.date_unparsed", value=value)
        return None


def parse_svn_log(log_xml: str) -> list[Commit]:
    """Parse ``svn log --xml`` output into commits.

    Args:
        log_xml: XML document with a <log> root and <logentry> children

    Returns:
        Commits in document order; entries without <author> get author=None

    Raises:
        ChangesetParseError: If the XML is malformed or an entry lacks a revision

    Example:
        >>> xml = '<log><logentry revision="7"><author>bob</author></logentry></log>'
        >>> [(c.commit_id, c.author) for c in parse_svn_log(xml)]
        [('7', 'bob')]
    """
    if not log_xml.strip():
        return []

    try:
        root = ET.fromstring(log_xml)
    except ET.ParseError as e:
        raise ChangesetParseError(f"Invalid svn log XML: {e}") from e

    commits: list[Commit] = []
    for entry in root.iter("logentry"):
        revision = entry.get("revision")
        if not revision:
            raise ChangesetParseError("svn log entry without revision attribute")

        commits.append(
            Commit(
                commit_id=revision,
                author=entry.findtext("author"),
                message=(entry.findtext("msg") or "").strip(),
                timestamp=_parse_svn_date(entry.findtext("date")),
            )
        )

    return commits


class SvnLogSource(ChangesetSource):
    """Changeset adapter over a host-provided svn log call.

    Args:
        reader: Callable taking an inclusive (start, end) revision range and
            returning ``svn log --xml`` output for the repository root
    """

    def __init__(self, reader: SvnLogReader) -> None:
        self._reader = reader

    @property
    def scm_type(self) -> str:
        return "svn"

    def changes_since(
        self, prev_revision: str | None, curr_revision: str | None
    ) -> Iterable[Commit]:
        start, end = svn_revision_range(prev_revision, curr_revision)
        if start > end:
            logger.debug("svn.log.empty_range", start=start, end=end)
            return []

        commits = parse_svn_log(self._reader(start, end))
        logger.debug("svn.log.parsed", start=start, end=end, commits=len(commits))
        return commits
