"""Changeset adapter interface between the host SCM layer and the author filter."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ignore_committer.shared.models import Commit


class ChangesetSource(ABC):
    """Abstract base class for changeset adapters.

    The host owns retrieval (servers, credentials, working copies). An adapter
    only turns what the host hands it into an ordered sequence of Commit
    records for a revision range.
    """

    @property
    @abstractmethod
    def scm_type(self) -> str:
        """Get SCM type identifier.

        Returns:
            SCM name (e.g., "git", "svn")
        """
        pass

    @abstractmethod
    def changes_since(
        self, prev_revision: str | None, curr_revision: str | None
    ) -> Iterable[Commit]:
        """List commits after prev_revision up to and including curr_revision.

        Args:
            prev_revision: Last revision that was built (None on first build)
            curr_revision: Newly detected revision

        Returns:
            Commits in the order reported by the SCM (oldest first is typical)

        Raises:
            ChangesetError: If the changeset cannot be produced
        """
        pass


class StaticChangesetSource(ChangesetSource):
    """Changeset source for hosts that already hold (author, id) pairs."""

    def __init__(self, commits: Iterable[Commit], scm_type: str = "static") -> None:
        self._commits = list(commits)
        self._scm_type = scm_type

    @property
    def scm_type(self) -> str:
        return self._scm_type

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str | None, str]]) -> "StaticChangesetSource":
        """Create a source from (author, commit_id) pairs.

        Example:
            >>> source = StaticChangesetSource.from_pairs([("bot@ci", "abc123")])
            >>> [c.author for c in source.changes_since(None, None)]
            ['bot@ci']
        """
        return cls(Commit(commit_id=commit_id, author=author) for author, commit_id in pairs)

    def changes_since(
        self, prev_revision: str | None, curr_revision: str | None
    ) -> Iterable[Commit]:
        return list(self._commits)
