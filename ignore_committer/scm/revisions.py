"""Revision identifier normalization for git and svn adapters."""

import re

from ignore_committer.shared.exceptions import RevisionError

GIT_OBJECT_ID_LENGTH = 40
_GIT_OBJECT_ID = re.compile(r"^[0-9a-f]{40}$")


def normalize_git_revision(revision: object | None) -> str | None:
    """Reduce a host revision object to a plain git commit id.

    Hosts often hand over revision objects whose string form carries extra
    decoration after the hash (e.g., "<sha> (refs/heads/main)"). Only the
    leading 40 characters are kept.

    Args:
        revision: Revision object or string, or None for "no previous build"

    Returns:
        Lower-case 40-character commit id, or None if revision is None

    Raises:
        RevisionError: If the leading 40 characters are not a commit id

    Example:
        >>> normalize_git_revision("3B7E" + "0" * 36 + " (main)")
        '3b7e000000000000000000000000000000000000'
    """
    if revision is None:
        return None
    candidate = str(revision).strip()[:GIT_OBJECT_ID_LENGTH].lower()
    if not _GIT_OBJECT_ID.match(candidate):
        raise RevisionError(f"Not a git commit id: {str(revision)!r}")
    return candidate


def parse_svn_revision(revision: object | None) -> int:
    """Parse a host revision object into an svn revision number.

    Raises:
        RevisionError: If revision is missing or not a non-negative integer
    """
    if revision is None:
        raise RevisionError("Missing svn revision")
    text = str(revision).strip()
    if not (text.isascii() and text.isdigit()):
        raise RevisionError(f"Not an svn revision number: {text!r}")
    return int(text)


def svn_revision_range(
    prev_revision: object | None, curr_revision: object | None
) -> tuple[int, int]:
    """Compute the inclusive svn log range for a branch event.

    The previously built revision itself is excluded, so the range starts
    one past it.

    Args:
        prev_revision: Last built revision
        curr_revision: Newly detected revision

    Returns:
        (start, end) revision numbers; start > end means nothing new

    Raises:
        RevisionError: If either revision cannot be parsed
    """
    start = parse_svn_revision(prev_revision) + 1
    end = parse_svn_revision(curr_revision)
    return start, end
