"""
cliinit.errors - Error Kinds Raised by the Scaffolding Core
===========================================================

Every failure the core can produce is a subclass of ``CliInitError``. Each
subclass carries a ``kind`` tag so callers (the CLI, or a library user) can
tell template problems apart from filesystem problems without inspecting
messages.

Hierarchy
---------
    CliInitError
    ├── ConfigReadFailure        (non-fatal, identity lookup)
    ├── InvalidSubCommandName    (fatal to the run)
    │   └── DuplicateSubCommandName
    ├── AssetLoadFailure         (fatal at startup)
    ├── TemplateParseFailure     (fatal at startup)
    ├── TemplateRenderFailure    (fatal, internal invariant violation)
    └── FilesystemFailure        (fatal, earlier files are kept)

Usage
-----
>>> raise FilesystemFailure("cannot write file", path="todo/README.md")
Traceback (most recent call last):
...
cliinit.errors.FilesystemFailure: [FilesystemFailure] cannot write file (path='todo/README.md')
"""

from __future__ import annotations

from typing import Any


class CliInitError(Exception):
    """
    Base class for all scaffolding errors.

    Parameters
    ----------
    message : str
        Human readable description.
    **context : Any
        Extra values (paths, template names, ...) shown in the message
        and available through ``to_dict``.
    """

    kind = "CliInitError"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        if ctx_str:
            return f"[{self.kind}] {self.message} ({ctx_str})"
        return f"[{self.kind}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serializable form for logs."""
        return {"kind": self.kind, "message": self.message, **self.context}


class ConfigReadFailure(CliInitError):
    """A git configuration key could not be read."""

    kind = "ConfigReadFailure"


class InvalidSubCommandName(CliInitError):
    """A sub-command name cannot be turned into generated symbols."""

    kind = "InvalidSubCommandName"


class DuplicateSubCommandName(InvalidSubCommandName):
    """The same sub-command name was requested more than once."""

    kind = "DuplicateSubCommandName"


class AssetLoadFailure(CliInitError):
    """A template asset is missing from the bundle."""

    kind = "AssetLoadFailure"


class TemplateParseFailure(CliInitError):
    """A template asset exists but is not valid Jinja2."""

    kind = "TemplateParseFailure"


class TemplateRenderFailure(CliInitError):
    """A template referenced data the application model does not provide."""

    kind = "TemplateRenderFailure"


class FilesystemFailure(CliInitError):
    """Creating a directory or writing a file failed."""

    kind = "FilesystemFailure"
