"""Shared pytest fixtures for harness tests."""

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

SHA_PREV = "0" * 40
SHA_CURR = "3b7e1f0c9d8a7b6c5d4e3f2a1b0c9d8e7f6a5b4c"


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Reset the global settings cache and isolate it from the environment."""
    import ignore_committer.core.config

    for name in ("IGNORED_AUTHORS", "ALLOW_BUILD_IF_NOT_EXCLUDED_AUTHOR", "SCM_TYPE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    ignore_committer.core.config._settings = None
    yield
    ignore_committer.core.config._settings = None


@pytest.fixture
def mock_setup_logging(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Keep the harness from reconfiguring structlog during tests."""
    import ignore_committer.main

    mock = MagicMock()
    monkeypatch.setattr(ignore_committer.main, "setup_logging", mock)
    return mock


@pytest.fixture
def git_changelog_by(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a one-commit git changelog by the given author e-mail."""

    def _write(email: str) -> Path:
        path = tmp_path / "changes.log"
        path.write_text(
            f"commit {SHA_CURR}\n"
            f"parent {SHA_PREV}\n"
            f"author Someone <{email}> 1530000000 +0000\n"
            "\n"
            "    Change\n"
        )
        return path

    return _write
