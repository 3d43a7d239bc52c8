"""Branch build strategy that ignores changes by configured committers."""

from ignore_committer.core.config import Settings
from ignore_committer.core.logging import bound_decision_context, get_logger
from ignore_committer.scm.base import ChangesetSource
from ignore_committer.shared.models import AuthorPolicy
from ignore_committer.strategy.author_filter import should_build
from ignore_committer.strategy.base import BuildDecisionPolicy
from ignore_committer.strategy.registry import register_strategy

logger = get_logger(__name__)


@register_strategy
class IgnoreCommitterStrategy(BuildDecisionPolicy):
    """Skip automatic builds based on who authored the new commits.

    The policy is parsed once at construction and never mutated, so a single
    instance can evaluate many branches concurrently.

    Every failure while producing or scanning the changeset results in a
    build: a missed legitimate build is worse than an unnecessary one.

    Attributes:
        ignored_authors: Comma-separated author identities as configured
        allow_build_if_not_excluded_author: Inclusion mode flag as configured
        policy: Normalized AuthorPolicy used for decisions
    """

    strategy_id = "ignore-committer"
    display_name = "Ignore Committer Strategy"

    def __init__(
        self,
        ignored_authors: str | None = "",
        allow_build_if_not_excluded_author: bool | None = False,
    ) -> None:
        self.ignored_authors = ignored_authors or ""
        self.allow_build_if_not_excluded_author = bool(allow_build_if_not_excluded_author)
        self.policy = AuthorPolicy.from_config(ignored_authors, allow_build_if_not_excluded_author)

    @classmethod
    def from_settings(cls, settings: Settings) -> "IgnoreCommitterStrategy":
        """Create a strategy from application settings."""
        return cls(
            ignored_authors=settings.ignored_authors,
            allow_build_if_not_excluded_author=settings.allow_build_if_not_excluded_author,
        )

    def is_automatic_build(
        self,
        source: ChangesetSource | None,
        head: str,
        curr_revision: str | None,
        prev_revision: str | None,
    ) -> bool:
        """Decide whether the new commits on a branch should be built.

        Args:
            source: Changeset adapter for the branch, or None if unavailable
            head: Branch name
            curr_revision: Newly detected revision
            prev_revision: Last built revision

        Returns:
            True if the changeset has no commits by ignored authors (veto mode)
            or at least one commit by an author that is not ignored (inclusion
            mode); True on any error
        """
        with bound_decision_context(head, curr_revision, prev_revision):
            if source is None:
                logger.error("strategy.source.unavailable", build=True)
                return True

            try:
                logger.info(
                    "strategy.policy.loaded",
                    scm_type=source.scm_type,
                    ignored_authors=sorted(self.policy.ignored_authors),
                    allow_build_if_not_excluded_author=self.allow_build_if_not_excluded_author,
                )
                commits = source.changes_since(prev_revision, curr_revision)
                return should_build(commits, self.policy)
            except Exception:
                logger.error("strategy.decision.failed", build=True, exc_info=True)
                return True
