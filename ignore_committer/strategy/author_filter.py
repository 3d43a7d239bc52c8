"""Commit author filtering for automatic branch builds."""

from collections.abc import Iterable

from ignore_committer.core.logging import get_logger
from ignore_committer.shared.models import AuthorPolicy, Commit

logger = get_logger(__name__)


def should_build(commits: Iterable[Commit], policy: AuthorPolicy) -> bool:
    """Decide whether a changeset should trigger a build based on its authors.

    Scans commits in the order supplied and stops at the first decisive one:
    1. Veto mode (allow_build_if_not_excluded_author=False): a commit by an
       ignored author returns False immediately
    2. Inclusion mode (allow_build_if_not_excluded_author=True): a commit by an
       author that is not ignored returns True immediately
    3. No decisive commit: build in veto mode, skip in inclusion mode

    Commits without a resolvable author are skipped. The iterable is consumed
    lazily, so commits after the decisive one are never pulled.

    Args:
        commits: Changeset entries, typically oldest first
        policy: Normalized author policy

    Returns:
        True if a build should be scheduled, False otherwise

    Examples:
        >>> policy = AuthorPolicy.from_config("bot@ci", False)
        >>> should_build([Commit(commit_id="a1", author="bot@ci")], policy)
        False
        >>> should_build([Commit(commit_id="b2", author="dev@x")], policy)
        True
        >>> should_build([], AuthorPolicy.from_config("bot@ci", True))
        False
    """
    allow_if_not_excluded = policy.allow_build_if_not_excluded_author

    for commit in commits:
        author = commit.normalized_author
        if author is None:
            logger.debug("filter.commit.skipped", commit_id=commit.commit_id, reason="no_author")
            continue

        if policy.is_ignored(author):
            if not allow_if_not_excluded:
                logger.info(
                    "filter.author.ignored",
                    author=author,
                    commit_id=commit.commit_id,
                    allow_build_if_not_excluded_author=allow_if_not_excluded,
                    build=False,
                )
                return False
        elif allow_if_not_excluded:
            logger.info(
                "filter.author.allowed",
                author=author,
                commit_id=commit.commit_id,
                allow_build_if_not_excluded_author=allow_if_not_excluded,
                build=True,
            )
            return True

    # Only ignored authors in inclusion mode, or no ignored authors in veto mode
    build = not allow_if_not_excluded
    logger.info(
        "filter.scan.completed",
        all_authors_ignored=allow_if_not_excluded,
        allow_build_if_not_excluded_author=allow_if_not_excluded,
        build=build,
    )
    return build
