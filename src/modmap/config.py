"""
Global Configuration and Defaults.

This module centralizes the defaults used by the scanner, the path
resolver, the layout engine and the viewport. Project-level overrides
are read from ``modmap.toml`` (see ``modmap.core.manifest``).
"""

from typing import Set, Tuple

# --- Discovery ---

# Extensions (without the dot) treated as JS/TS source files
SOURCE_EXTENSIONS: Set[str] = {"ts", "tsx", "js", "jsx", "mjs", "cjs"}

# Directories ignored wherever they appear in a path
IGNORE_DIRECTORIES: Set[str] = {
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
}

# Name of the optional project settings file at the scanned root
MANIFEST_FILENAME = "modmap.toml"

# --- Resolution ---

# Probe order for "./foo" -> foo.<ext>, then foo/index.<ext>
RESOLVE_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
INDEX_BASENAME = "index"

# --- Layout ---

CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 600.0
LAYOUT_ITERATIONS = 100
COOLING_FACTOR = 0.95
LAYOUT_SEED = 42

# Centering pull, scaled by the ideal edge length k
GRAVITY_STRENGTH = 0.02

# Repulsion used when two nodes sit on the same point
COINCIDENT_REPULSION = 1000.0

# --- Viewport ---

MIN_ZOOM = 0.1
MAX_ZOOM = 10.0

# Side of the square hit box around each node, in layout units
NODE_BOX_SIZE = 40.0

# Zoom change per unit of wheel delta when the zoom modifier is held
WHEEL_ZOOM_STEP = 0.01
