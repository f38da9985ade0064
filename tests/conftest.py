"""
pytest configuration and shared fixtures for cli-init tests.

Fixtures defined here are automatically available to all tests.

Fixtures
--------
git_config : FakeGitConfig
    A git config reader returning a fixed author ("jane").

empty_git_config : FakeGitConfig
    A git config reader where every key is missing.

fake_git : dict[str, str]
    Patches ``GitConfig.read`` globally (for CLI tests) and returns the
    backing dictionary so tests can adjust it.

registry : TemplateRegistry
    The real templates shipped with the package.
"""

import pytest
from pathlib import Path

from cliinit.errors import ConfigReadFailure
from cliinit.identity import GitConfig
from cliinit.registry import TemplateRegistry


class FakeGitConfig(GitConfig):
    """GitConfig backed by a dictionary instead of the git binary."""

    def __init__(self, values: dict[str, str]) -> None:
        super().__init__()
        self.values = values
        self.calls: list[str] = []

    def read(self, key: str) -> str:
        self.calls.append(key)
        if key not in self.values:
            raise ConfigReadFailure("git config key is not set", key=key)
        return self.values[key]


@pytest.fixture
def git_config() -> FakeGitConfig:
    """Git config with a complete identity."""
    return FakeGitConfig({"user.name": "jane", "user.email": "jane@x.com"})


@pytest.fixture
def empty_git_config() -> FakeGitConfig:
    """Git config with nothing set."""
    return FakeGitConfig({})


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """
    Replace ``GitConfig.read`` for code that builds its own reader.

    Returns
    -------
    dict[str, str]
        The values served; mutate it to change the identity.
    """
    values = {"user.name": "jane", "user.email": "jane@x.com"}

    def read(self: GitConfig, key: str) -> str:
        if key not in values:
            raise ConfigReadFailure("git config key is not set", key=key)
        return values[key]

    monkeypatch.setattr(GitConfig, "read", read)
    return values


@pytest.fixture
def registry() -> TemplateRegistry:
    """Templates shipped with cli-init."""
    return TemplateRegistry.load()


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """A clean directory for generated output."""
    return tmp_path


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external resources"
    )
