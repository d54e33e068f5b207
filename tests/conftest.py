"""Shared pytest fixtures for infixcalc tests."""

from pathlib import Path

import pytest

from infixcalc.core.session import Session


@pytest.fixture
def store() -> dict[str, float]:
    """Return an empty variable store."""
    return {}


@pytest.fixture
def session() -> Session:
    """Return a session with no variables."""
    return Session()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no config file or log level override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("INFIXCALC_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def config_file(isolated_cwd: Path) -> Path:
    """Write an infixcalc.toml into the working directory."""
    path = isolated_cwd / "infixcalc.toml"
    path.write_text(
        """
[calculator]
show_tree = true
prompt = ">> "

[logging]
level = "info"

[variables]
pi = 3.5
answer = 42
"""
    )
    return path
