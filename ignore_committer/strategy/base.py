"""Abstract base class for branch build decision policies."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ignore_committer.scm.base import ChangesetSource


class BuildDecisionPolicy(ABC):
    """Decides whether a detected branch change should be built automatically.

    Implementations are registered with the strategy registry under
    strategy_id and must always answer with a plain bool.

    Attributes:
        strategy_id: Registry key (e.g., "ignore-committer")
        display_name: Human-readable name shown by the host
    """

    strategy_id: ClassVar[str]
    display_name: ClassVar[str]

    @abstractmethod
    def is_automatic_build(
        self,
        source: ChangesetSource | None,
        head: str,
        curr_revision: str | None,
        prev_revision: str | None,
    ) -> bool:
        """Decide whether the change from prev_revision to curr_revision builds.

        Args:
            source: Changeset adapter for the branch, or None if the host could
                not resolve the owning job
            head: Branch name
            curr_revision: Newly detected revision
            prev_revision: Last built revision (None on first build)

        Returns:
            True if the host should schedule a build
        """
        pass
