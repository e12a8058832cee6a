"""
modmap CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import imports, layout, scan


@click.group()
@click.version_option(package_name="modmap")
def main():
    """modmap: module dependency maps for JS/TS projects.

    \b
    Quick Start:
      modmap scan ./my-app
      modmap layout ./my-app -o layout.json
      modmap imports ./my-app/src/index.ts
    """
    pass


# Register commands
main.add_command(scan.scan)
main.add_command(layout.layout)
main.add_command(imports.imports)

if __name__ == "__main__":
    main()
