"""
cliinit.registry - The Fixed Set of Named Templates
===================================================

Five Jinja2 templates describe every file cli-init writes. They are parsed
once, up front, so that a missing or broken template stops the program
before anything touches the disk.

Template Keys
-------------
    version    -> templates/version.go.j2
    main       -> templates/main.go.j2
    commands   -> templates/commands.go.j2
    readme     -> templates/README.md.j2
    changelog  -> templates/CHANGELOG.md.j2

Usage
-----
>>> from cliinit.registry import TemplateRegistry
>>> registry = TemplateRegistry.load()
>>> registry.names
('version', 'main', 'commands', 'readme', 'changelog')
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from jinja2 import (
    BaseLoader,
    Environment,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from cliinit.errors import AssetLoadFailure, TemplateParseFailure
from cliinit.models import upper_first


logger = logging.getLogger(__name__)


TEMPLATE_DIR = "templates"

# Registry key -> asset file inside the templates package
TEMPLATE_FILES: dict[str, str] = {
    "version": "version.go.j2",
    "main": "main.go.j2",
    "commands": "commands.go.j2",
    "readme": "README.md.j2",
    "changelog": "CHANGELOG.md.j2",
}


def create_jinja_env(loader: BaseLoader | None = None) -> Environment:
    """
    Create the Jinja2 environment used for all templates.

    Parameters
    ----------
    loader : BaseLoader | None
        Asset source. Defaults to the ``cliinit/templates`` package.

    Returns
    -------
    Environment
        Configured environment. ``StrictUndefined`` turns a reference to a
        missing model field into an error instead of empty output.
    """
    env = Environment(
        loader=loader or PackageLoader("cliinit", TEMPLATE_DIR),
        autoescape=select_autoescape([]),  # Generating code, not HTML
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["upper_first"] = upper_first
    return env


class TemplateRegistry(Mapping[str, Template]):
    """
    Read-only mapping of template key to parsed ``jinja2.Template``.

    Build it with ``TemplateRegistry.load()``; the constructor itself
    accepts already-parsed templates and is mostly useful in tests.
    """

    def __init__(self, templates: Mapping[str, Template]) -> None:
        self._templates = dict(templates)

    @classmethod
    def load(
        cls,
        loader: BaseLoader | None = None,
        package: str = "cliinit",
    ) -> TemplateRegistry:
        """
        Parse every template listed in ``TEMPLATE_FILES``.

        Parameters
        ----------
        loader : BaseLoader | None
            Asset source. Defaults to the ``templates`` directory of ``package``.
        package : str, default="cliinit"
            Package holding the templates when no loader is given.

        Raises
        ------
        AssetLoadFailure
            If the template directory or a template file cannot be found.
        TemplateParseFailure
            If a template file is not valid Jinja2.
        """
        try:
            env = create_jinja_env(loader or PackageLoader(package, TEMPLATE_DIR))
        except ValueError as e:
            raise AssetLoadFailure(
                "template directory not found", package=package, path=TEMPLATE_DIR
            ) from e

        templates: dict[str, Template] = {}

        for key, filename in TEMPLATE_FILES.items():
            try:
                templates[key] = env.get_template(filename)
            except TemplateNotFound as e:
                raise AssetLoadFailure(
                    "template asset not found", template=key, path=filename
                ) from e
            except TemplateSyntaxError as e:
                raise TemplateParseFailure(
                    f"invalid template syntax: {e.message}",
                    template=key,
                    path=filename,
                    line=e.lineno,
                ) from e
            logger.debug("Loaded template %s from %s", key, filename)

        return cls(templates)

    @property
    def names(self) -> tuple[str, ...]:
        """Template keys in registration order."""
        return tuple(self._templates)

    def __getitem__(self, key: str) -> Template:
        return self._templates[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)
