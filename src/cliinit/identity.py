"""
cliinit.identity - Author Identity from Git Configuration
=========================================================

The generated README and source headers credit an author. That identity is
read from ``git config user.name`` / ``git config user.email``; a missing
git binary or unset key is never fatal, the value simply becomes ``""``.

Usage
-----
>>> from cliinit.identity import resolve_identity
>>> identity = resolve_identity("bob")
>>> identity.username
'bob'
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from cliinit.errors import ConfigReadFailure


logger = logging.getLogger(__name__)


class GitConfig:
    """
    Reads keys from the local git configuration.

    Parameters
    ----------
    executable : str, default="git"
        Git binary to invoke.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def read(self, key: str) -> str:
        """
        Return the configured value for ``key``.

        Raises
        ------
        ConfigReadFailure
            If git is not installed, exits non-zero, or prints nothing.
        """
        try:
            result = subprocess.run(
                [self.executable, "config", key],
                check=False, capture_output=True,
                text=True,
            )
        except (FileNotFoundError, PermissionError) as e:
            raise ConfigReadFailure("git is not available", key=key) from e

        value = result.stdout.strip()
        if result.returncode != 0 or not value:
            raise ConfigReadFailure(
                "git config key is not set", key=key, returncode=result.returncode
            )
        return value

    def get(self, key: str) -> str:
        """Return the value for ``key``, or ``""`` when it cannot be read."""
        try:
            return self.read(key)
        except ConfigReadFailure as e:
            logger.debug("Ignoring %s", e)
            return ""


@dataclass(frozen=True)
class Identity:
    """Author details used by the templates."""

    author: str
    email: str
    username: str


def resolve_identity(
    explicit_username: str = "",
    git_config: GitConfig | None = None,
) -> Identity:
    """
    Resolve author, email and username.

    ``username`` is ``explicit_username`` when given, otherwise the git
    author name.
    """
    config = git_config or GitConfig()

    author = config.get("user.name")
    email = config.get("user.email")
    username = explicit_username or author

    logger.debug("Resolved identity author=%r email=%r username=%r", author, email, username)
    return Identity(author=author, email=email, username=username)
