"""
cliinit.models - Pydantic Models for the Application Scaffold
=============================================================

This module defines the data model every template is rendered against. It
is the single source of truth for a run: the CLI collects raw strings, this
module turns them into validated, immutable objects, and the generator only
ever reads them.

Architecture Notes
------------------
The models are organized in a small hierarchy:

    Application (aggregate root, frozen)
    ├── name, author, email, username: str
    ├── has_sub_command: bool
    └── sub_commands: tuple[SubCommand, ...]
        ├── name: str
        ├── define_name: str     ("command" + UpperFirst(name))
        └── function_name: str   ("do" + UpperFirst(name))

Sub-command Policy
------------------
- ``[]`` and the legacy ``[""]`` value both mean "no sub-commands".
- Any other empty name raises ``InvalidSubCommandName``.
- A repeated name raises ``DuplicateSubCommandName``, since both entries
  would produce the same generated symbols.

Usage Example
-------------
>>> from cliinit.models import build_sub_commands
>>> [c.define_name for c in build_sub_commands(["add", "list"])]
['commandAdd', 'commandList']
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cliinit.errors import DuplicateSubCommandName, InvalidSubCommandName
from cliinit.identity import GitConfig, resolve_identity


logger = logging.getLogger(__name__)


# =============================================================================
# Symbol Derivation
# =============================================================================

def upper_first(text: str) -> str:
    """
    Upper-case the first character of ``text`` and keep the rest as is.

    This is not ``str.capitalize``: the remainder is left untouched, so
    ``"listAll"`` becomes ``"ListAll"`` rather than ``"Listall"``. Python
    strings index by code point, so non-ASCII names work too.

    Examples
    --------
    >>> upper_first("add")
    'Add'
    >>> upper_first("émettre")
    'Émettre'
    >>> upper_first("")
    ''
    """
    return text[:1].upper() + text[1:]


def parse_sub_commands(raw: str | None) -> list[str]:
    """
    Split the comma-separated ``--subcommands`` value into names.

    A blank value yields an explicit empty list rather than ``[""]``.
    Whitespace around each item is removed; empty items between commas
    are kept so that ``build_sub_commands`` can reject them.

    Examples
    --------
    >>> parse_sub_commands("add, list,delete")
    ['add', 'list', 'delete']
    >>> parse_sub_commands("")
    []
    """
    if raw is None or not raw.strip():
        return []
    return [item.strip() for item in raw.split(",")]


# =============================================================================
# Models
# =============================================================================

class SubCommand(BaseModel):
    """
    A verb the generated application will support.

    Attributes
    ----------
    name : str
        Name exactly as supplied (no case normalization).
    define_name : str
        Identifier of the generated command definition, e.g. ``commandAdd``.
    function_name : str
        Identifier of the generated action function, e.g. ``doAdd``.

    Examples
    --------
    >>> SubCommand.from_name("add").function_name
    'doAdd'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Sub-command name as typed")
    define_name: str = Field(description="Generated command variable name")
    function_name: str = Field(description="Generated action function name")

    @model_validator(mode="after")
    def check_derived_names(self) -> SubCommand:
        """The derived symbols must always match the name."""
        if self.define_name != "command" + upper_first(self.name):
            msg = f"define_name {self.define_name!r} does not match name {self.name!r}"
            raise ValueError(msg)
        if self.function_name != "do" + upper_first(self.name):
            msg = f"function_name {self.function_name!r} does not match name {self.name!r}"
            raise ValueError(msg)
        return self

    @classmethod
    def from_name(cls, name: str) -> SubCommand:
        """
        Derive a sub-command from its name.

        Raises
        ------
        InvalidSubCommandName
            If ``name`` is empty.
        """
        if not name:
            raise InvalidSubCommandName("sub-command name must not be empty")
        return cls(
            name=name,
            define_name="command" + upper_first(name),
            function_name="do" + upper_first(name),
        )


class Application(BaseModel):
    """
    Everything the templates know about the application being scaffolded.

    Constructed once per run and never modified afterwards.

    Attributes
    ----------
    name : str
        Application (and output directory) name.
    author : str
        ``user.name`` from git config, empty if unavailable.
    email : str
        ``user.email`` from git config, empty if unavailable.
    username : str
        Explicit override (e.g. a GitHub user), otherwise ``author``.
    has_sub_command : bool
        True iff ``sub_commands`` is non-empty.
    sub_commands : tuple[SubCommand, ...]
        Requested sub-commands in input order.

    Examples
    --------
    >>> app = Application(name="todo", author="jane")
    >>> app.username, app.has_sub_command
    ('jane', False)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Application name")
    author: str = Field(default="", description="Author from git config")
    email: str = Field(default="", description="Author email from git config")
    username: str = Field(default="", description="Repository owner")
    has_sub_command: bool = Field(default=False, description="Any sub-commands?")
    sub_commands: tuple[SubCommand, ...] = Field(
        default=(),
        description="Sub-commands in input order",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_derived_fields(cls, data: object) -> object:
        """Default ``username`` to ``author`` and infer ``has_sub_command``."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("username"):
            data["username"] = data.get("author") or ""
        if "has_sub_command" not in data:
            data["has_sub_command"] = bool(data.get("sub_commands"))
        return data

    @field_validator("sub_commands")
    @classmethod
    def validate_unique_names(
        cls, v: tuple[SubCommand, ...]
    ) -> tuple[SubCommand, ...]:
        """Two sub-commands with one name would generate clashing symbols."""
        seen: set[str] = set()
        for command in v:
            if command.name in seen:
                msg = f"Duplicate sub-command name: {command.name}"
                raise ValueError(msg)
            seen.add(command.name)
        return v

    @model_validator(mode="after")
    def validate_sub_command_flag(self) -> Application:
        """``has_sub_command`` must agree with ``sub_commands``."""
        if self.has_sub_command != bool(self.sub_commands):
            msg = (
                f"has_sub_command={self.has_sub_command} but "
                f"{len(self.sub_commands)} sub-command(s) given"
            )
            raise ValueError(msg)
        return self


# =============================================================================
# Builders
# =============================================================================

def build_sub_commands(names: Sequence[str]) -> tuple[SubCommand, ...]:
    """
    Turn a list of requested names into ordered ``SubCommand`` values.

    Parameters
    ----------
    names : Sequence[str]
        Requested names. ``[]`` (or the legacy ``[""]``) means none.

    Returns
    -------
    tuple[SubCommand, ...]
        One entry per name, in input order.

    Raises
    ------
    InvalidSubCommandName
        If any name is empty.
    DuplicateSubCommandName
        If a name is requested twice.
    """
    if not names or list(names) == [""]:
        return ()

    commands: list[SubCommand] = []
    seen: set[str] = set()
    for position, name in enumerate(names):
        if not name:
            raise InvalidSubCommandName(
                "sub-command name must not be empty", position=position
            )
        if name in seen:
            raise DuplicateSubCommandName(
                "sub-command requested more than once", name=name
            )
        seen.add(name)
        commands.append(SubCommand.from_name(name))

    return tuple(commands)


def define_application(
    app_name: str,
    sub_command_names: Sequence[str],
    username_override: str = "",
    git_config: GitConfig | None = None,
) -> Application:
    """
    Assemble the ``Application`` model for one run.

    Parameters
    ----------
    app_name : str
        Application name. Not validated here; the CLI rejects blank names.
    sub_command_names : Sequence[str]
        Requested sub-command names (see ``build_sub_commands``).
    username_override : str
        Explicit username; empty means "use the git author".
    git_config : GitConfig | None
        Git configuration reader, mainly for tests.

    Returns
    -------
    Application
        The frozen model consumed by every template.
    """
    identity = resolve_identity(username_override, git_config=git_config)
    sub_commands = build_sub_commands(sub_command_names)

    logger.debug(
        "Defining application %r with sub-commands %s",
        app_name,
        [c.name for c in sub_commands],
    )

    return Application(
        name=app_name,
        author=identity.author,
        email=identity.email,
        username=identity.username,
        has_sub_command=bool(sub_commands),
        sub_commands=sub_commands,
    )
