"""
Layout Command - Compute canvas coordinates for a project's import graph.

Writes the placement list a canvas host draws from: for each file its
name, path, (x, y) and the positions of the files it is connected to.
"""

import json
import sys
from pathlib import Path

import click

from ...layout.force import LayoutConfig, compute_layout
from ...parsing.engine import GraphBuilder
from ...parsing.scanner import ScanConfig
from ..utils import configure_logging, echo_error, echo_success, load_settings


@click.command()
@click.argument("directory", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write JSON to this file instead of stdout")
@click.option("--iterations", type=int, help="Simulation steps (default 100)")
@click.option("--seed", type=int, help="Seed for the initial random placement")
@click.option("--width", type=float, help="Canvas width in layout units")
@click.option("--height", type=float, help="Canvas height in layout units")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def layout(
    directory: str,
    output: str | None,
    iterations: int | None,
    seed: int | None,
    width: float | None,
    height: float | None,
    verbose: bool,
):
    """
    Lay out the import graph of DIRECTORY and output node positions as JSON.
    """
    configure_logging(verbose)
    root = Path(directory).absolute()

    settings = load_settings(root)
    if settings is None:
        sys.exit(1)

    try:
        layout_config = LayoutConfig.from_settings(
            settings, iterations=iterations, seed=seed, width=width, height=height
        )
    except ValueError as e:
        echo_error(str(e))
        sys.exit(1)

    result = GraphBuilder().build(ScanConfig.from_settings(root, settings))
    if result.is_err():
        echo_error(result.error.message)
        sys.exit(1)

    placements = compute_layout(result.unwrap().graph, layout_config)
    payload = json.dumps(
        {
            "canvas": {"width": layout_config.width, "height": layout_config.height},
            "nodes": [placed.to_dict() for placed in placements],
        },
        indent=2,
    )

    if output:
        Path(output).write_text(payload)
        echo_success(f"Wrote {len(placements)} positions to {output}")
    else:
        click.echo(payload)
