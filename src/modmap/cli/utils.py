"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, logging setup and settings loading used across the
modmap commands.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from .. import config
from ..core.manifest import ManifestError, ProjectSettings

def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))

def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)

def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )

def load_settings(root_dir: Path) -> Optional[ProjectSettings]:
    """
    Load modmap.toml from root_dir.

    Returns:
        The settings (defaults when the file is absent), or None after
        reporting a malformed file.
    """
    try:
        return ProjectSettings.load(root_dir / config.MANIFEST_FILENAME)
    except ManifestError as e:
        echo_error(str(e))
        return None
