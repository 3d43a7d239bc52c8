"""Pytest fixtures for strategy tests."""

from collections.abc import Callable, Iterator
from unittest.mock import MagicMock

import pytest

from ignore_committer.shared.models import AuthorPolicy, Commit


class RecordingChangeset:
    """Lazy changeset that records how many commits were pulled."""

    def __init__(self, commits: list[Commit]) -> None:
        self.commits = commits
        self.pulled = 0

    def __iter__(self) -> Iterator[Commit]:
        for commit in self.commits:
            self.pulled += 1
            yield commit


def _make_commits(*authors: str | None) -> list[Commit]:
    return [
        Commit(commit_id=f"c{index}", author=author)
        for index, author in enumerate(authors, start=1)
    ]


@pytest.fixture
def make_commits() -> Callable[..., list[Commit]]:
    """Factory building commits with ids c1, c2, ... for the given authors."""
    return _make_commits


@pytest.fixture
def make_recording_changeset() -> Callable[..., RecordingChangeset]:
    """Factory wrapping authors in a lazy changeset that counts pulls."""

    def _factory(*authors: str | None) -> RecordingChangeset:
        return RecordingChangeset(_make_commits(*authors))

    return _factory


@pytest.fixture
def veto_policy() -> AuthorPolicy:
    """Policy that vetoes builds containing commits by bot@ci."""
    return AuthorPolicy.from_config("bot@ci", False)


@pytest.fixture
def inclusion_policy() -> AuthorPolicy:
    """Policy that builds only if someone other than bot@ci committed."""
    return AuthorPolicy.from_config("bot@ci", True)


@pytest.fixture
def mock_filter_logger(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace the author filter's module logger with a mock."""
    import ignore_committer.strategy.author_filter

    mock_logger = MagicMock()
    monkeypatch.setattr(ignore_committer.strategy.author_filter, "logger", mock_logger)
    return mock_logger


@pytest.fixture
def mock_strategy_logger(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace the strategy's module logger with a mock."""
    import ignore_committer.strategy.ignore_committer

    mock_logger = MagicMock()
    monkeypatch.setattr(ignore_committer.strategy.ignore_committer, "logger", mock_logger)
    return mock_logger
