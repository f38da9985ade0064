"""
cliinit.templates - Jinja2 Template Files
=========================================

This package contains the Jinja2 templates for every file cli-init
generates. They are parsed once by ``cliinit.registry.TemplateRegistry``.

Available Templates
-------------------
    - README.md.j2: Install, usage, contribution and author sections
    - CHANGELOG.md.j2: Initial changelog entry
    - version.go.j2: ``Name`` and ``Version`` constants
    - main.go.j2: ``main`` function wiring the codegangsta/cli app
    - commands.go.j2: One ``cli.Command`` and action stub per sub-command

Template Context
----------------
All templates receive:

    app : Application
        The frozen application model (name, author, email, username,
        has_sub_command, sub_commands).

    cliinit_version : str
        Version of cli-init.

The ``upper_first`` filter is also registered.
"""

# Templates are loaded by Jinja2's PackageLoader.
