"""Host harness: evaluate the ignore committer strategy on a captured changelog.

Reads the changelog the host captured for a branch event (raw git changelog,
``svn log --xml`` output, or "author,commit_id" lines for the static source)
from a file or stdin, prints "build" or "skip", and exits 0 or 1.

Invalid configuration and an unreadable changelog both print "build" and
exit 0. Exit 2 is left to argparse for command-line usage errors.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from ignore_committer.core.config import Settings, get_settings
from ignore_committer.core.logging import get_logger, new_correlation_id, setup_logging
from ignore_committer.scm.base import ChangesetSource, StaticChangesetSource
from ignore_committer.scm.git_changelog import GitChangelogSource
from ignore_committer.scm.svn_log import SvnLogSource
from ignore_committer.shared.exceptions import ConfigError
from ignore_committer.strategy.ignore_committer import IgnoreCommitterStrategy
from ignore_committer.strategy.registry import StrategyRegistry

logger = get_logger(__name__)

EXIT_BUILD = 0
EXIT_SKIP = 1


def parse_static_changelog(text: str) -> StaticChangesetSource:
    """Parse "author,commit_id" lines; blank lines and '#' comments are skipped."""
    pairs: list[tuple[str | None, str]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        author, _, commit_id = line.partition(",")
        pairs.append((author.strip() or None, commit_id.strip()))
    return StaticChangesetSource.from_pairs(pairs)


def read_changelog(path: Path | None) -> str:
    """Read the captured changelog from path, or stdin when path is None.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content is not UTF-8
    """
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def build_source(scm_type: str, changelog: str) -> ChangesetSource:
    """Wrap captured changelog text in the adapter for scm_type."""
    if scm_type == "git":
        return GitChangelogSource(lambda _prev, _curr: changelog)
    if scm_type == "svn":
        return SvnLogSource(lambda _start, _end: changelog)
    return parse_static_changelog(changelog)


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ignore-committer",
        description="Decide whether a branch change should trigger a build.",
    )
    parser.add_argument("--branch", required=True, help="Branch name")
    parser.add_argument("--curr", required=True, help="Newly detected revision")
    parser.add_argument("--prev", default=None, help="Last built revision")
    parser.add_argument(
        "--scm",
        choices=sorted(Settings.VALID_SCM_TYPES),
        default=settings.scm_type,
        help="Changelog format (default: SCM_TYPE setting)",
    )
    parser.add_argument(
        "--changelog",
        type=Path,
        default=None,
        help="Captured changelog file (default: stdin)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single build decision.

    Returns:
        Process exit code: 0 build, 1 skip
    """
    try:
        settings = get_settings()
    except (ConfigError, ValueError) as e:
        setup_logging()
        logger.error("main.config.invalid", error=str(e), build=True)
        print("build")
        return EXIT_BUILD

    setup_logging(settings.log_level)
    new_correlation_id()
    args = parse_args(argv, settings)

    try:
        changelog = read_changelog(args.changelog)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "main.changelog.unreadable",
            path=str(args.changelog) if args.changelog else "<stdin>",
            error=str(e),
            build=True,
        )
        print("build")
        return EXIT_BUILD

    strategy = StrategyRegistry.get_global().create(
        IgnoreCommitterStrategy.strategy_id,
        ignored_authors=settings.ignored_authors,
        allow_build_if_not_excluded_author=settings.allow_build_if_not_excluded_author,
    )
    decision = strategy.is_automatic_build(
        build_source(args.scm, changelog), args.branch, args.curr, args.prev
    )

    logger.info(
        "main.decision.completed",
        strategy=strategy.display_name,
        environment=settings.environment,
        app_version=settings.app_version,
        build=decision,
    )
    print("build" if decision else "skip")
    return EXIT_BUILD if decision else EXIT_SKIP


if __name__ == "__main__":
    sys.exit(main())
