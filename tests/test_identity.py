"""
Tests for cliinit.identity
==========================

Test Organization
-----------------
- TestGitConfig: Tests for reading git configuration via subprocess
- TestResolveIdentity: Tests for author/email/username resolution
"""

import subprocess
import pytest
from unittest.mock import patch

from cliinit.errors import ConfigReadFailure
from cliinit.identity import GitConfig, Identity, resolve_identity


def completed(returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess:
    """Build the result of a finished git call."""
    return subprocess.CompletedProcess(
        args=["git", "config"], returncode=returncode, stdout=stdout, stderr=""
    )


# =============================================================================
# GitConfig Tests
# =============================================================================

class TestGitConfig:
    """Tests for GitConfig."""

    def test_read_returns_stripped_value(self) -> None:
        """Test the value printed by git is returned without newline."""
        with patch("cliinit.identity.subprocess.run", return_value=completed(0, "jane\n")) as run:
            assert GitConfig().read("user.name") == "jane"

        assert run.call_args.args[0] == ["git", "config", "user.name"]

    def test_read_missing_key_raises(self) -> None:
        """Test an unset key raises ConfigReadFailure."""
        with patch("cliinit.identity.subprocess.run", return_value=completed(1, "")):
            with pytest.raises(ConfigReadFailure) as exc_info:
                GitConfig().read("user.email")

        assert exc_info.value.context["key"] == "user.email"

    def test_read_without_git_raises(self) -> None:
        """Test a missing git binary raises ConfigReadFailure."""
        with patch("cliinit.identity.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(ConfigReadFailure) as exc_info:
                GitConfig().read("user.name")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_get_swallows_failure(self) -> None:
        """Test get() turns a read failure into an empty string."""
        with patch("cliinit.identity.subprocess.run", side_effect=FileNotFoundError("git")):
            assert GitConfig().get("user.name") == ""

    def test_get_returns_value(self) -> None:
        """Test get() returns the configured value."""
        with patch("cliinit.identity.subprocess.run", return_value=completed(0, "jane@x.com\n")):
            assert GitConfig().get("user.email") == "jane@x.com"

    def test_custom_executable(self) -> None:
        """Test a different git binary can be used."""
        with patch("cliinit.identity.subprocess.run", return_value=completed(0, "x")) as run:
            GitConfig(executable="/usr/local/bin/git").read("user.name")

        assert run.call_args.args[0][0] == "/usr/local/bin/git"


# =============================================================================
# resolve_identity Tests
# =============================================================================

class TestResolveIdentity:
    """Tests for resolve_identity."""

    def test_username_falls_back_to_author(self, git_config) -> None:
        """Test an empty override uses the git author."""
        identity = resolve_identity("", git_config=git_config)
        assert identity == Identity(author="jane", email="jane@x.com", username="jane")

    def test_override_wins(self, git_config) -> None:
        """Test a non-empty override is used regardless of the author."""
        identity = resolve_identity("bob", git_config=git_config)

        assert identity.username == "bob"
        assert identity.author == "jane"

    def test_missing_config_gives_empty_strings(self, empty_git_config) -> None:
        """Test missing keys never raise."""
        identity = resolve_identity("", git_config=empty_git_config)
        assert identity == Identity(author="", email="", username="")

    def test_reads_name_and_email(self, git_config) -> None:
        """Test both identity keys are looked up."""
        resolve_identity("", git_config=git_config)
        assert git_config.calls == ["user.name", "user.email"]

    def test_default_reader_uses_git(self) -> None:
        """Test a GitConfig is created when none is given."""
        with patch("cliinit.identity.subprocess.run", return_value=completed(0, "jane\n")):
            identity = resolve_identity("")

        assert identity.author == "jane"
