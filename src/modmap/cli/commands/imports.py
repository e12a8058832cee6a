"""
Imports Command - Show what a single file imports and where it resolves.
"""

import sys
from pathlib import Path, PurePath

import click
from rich.console import Console
from rich.tree import Tree

from ...core.types import SourceType
from ...parsing.javascript.parser import ImportExtractor
from ...parsing.resolver import PathResolver, canonicalize
from ..utils import configure_logging, echo_error

console = Console()


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def imports(file: str, verbose: bool):
    """
    List the import specifiers of FILE and their resolved paths.

    \b
    Examples:
      modmap imports src/index.ts
    """
    configure_logging(verbose)
    canonical = canonicalize(file)
    source_type = SourceType.from_path(file)

    try:
        content = Path(file).read_bytes()
    except OSError as e:
        echo_error(f"Failed to read {file}: {e}")
        sys.exit(1)

    result = ImportExtractor().extract(content, source_type, canonical)
    if result.is_err():
        echo_error(f"Parse error in {result.error}")
        sys.exit(1)

    resolver = PathResolver()
    importer_dir = PurePath(canonical).parent

    tree = Tree(f"📄 [bold]{canonical}[/bold] [dim]({source_type.grammar})[/dim]")
    specifiers = result.unwrap()
    for specifier in specifiers:
        target = resolver.resolve(specifier, importer_dir)
        if target is not None:
            tree.add(f"[cyan]{specifier}[/cyan] → {target}")
        elif specifier.startswith("."):
            tree.add(f"[yellow]{specifier}[/yellow] [dim](not found)[/dim]")
        else:
            tree.add(f"{specifier} [dim](package)[/dim]")

    console.print(tree)
    console.print(f"{len(specifiers)} import(s)")
