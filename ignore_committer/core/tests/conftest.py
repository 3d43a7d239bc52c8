"""Shared fixtures for core tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate settings from the developer's environment and .env file.

    Also resets the cached Settings singleton before and after each test.
    """
    import ignore_committer.core.config

    for name in (
        "IGNORED_AUTHORS",
        "ALLOW_BUILD_IF_NOT_EXCLUDED_AUTHOR",
        "SCM_TYPE",
        "LOG_LEVEL",
        "APP_VERSION",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    ignore_committer.core.config._settings = None
    yield
    ignore_committer.core.config._settings = None
