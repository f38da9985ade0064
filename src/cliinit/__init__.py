"""
cliinit - The Easy Way to Start Building a Command-Line App
===========================================================

cli-init generates the skeleton of a Go command-line application built on
``github.com/codegangsta/cli``: a README, a changelog, a version file, the
main entry file, and (when sub-commands are requested) a commands file.

Quick Start
-----------
```bash
# Application without sub-commands
cli-init todo

# Application with sub-commands
cli-init -s add,list,delete todo
```

Example
-------
>>> from cliinit import TemplateRegistry, create_application, define_application
>>> app = define_application("todo", ["add", "list", "delete"], "bob")
>>> create_application(app, TemplateRegistry.load())

Architecture
------------
- ``identity``: Author name/email from git config
- ``models``: Pydantic application and sub-command models
- ``registry``: The five parsed Jinja2 templates
- ``generator``: Renders templates and writes files
- ``cli``: Typer-based command line interface
- ``errors``: Error kinds raised by the core

License
-------
MIT License
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__author__ = "cli-init contributors"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from cliinit.generator import create_application
from cliinit.models import (
    Application,
    SubCommand,
    build_sub_commands,
    define_application,
)
from cliinit.registry import TemplateRegistry


__all__ = [
    # Models
    "Application",
    "SubCommand",
    "TemplateRegistry",
    "__author__",
    # Version info
    "__version__",
    "build_sub_commands",
    # Core functions
    "create_application",
    "define_application",
]
