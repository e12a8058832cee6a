"""
Settings definition and parsing for modmap.toml.

A project can tune discovery, layout and viewport defaults by dropping a
``modmap.toml`` next to its sources:

    [scan]
    extensions = ["ts", "tsx"]
    ignore_dirs = ["node_modules", ".git", "generated"]

    [layout]
    width = 1200
    height = 900
    iterations = 150
    seed = 7

    [viewport]
    max_zoom = 5.0

Every key is optional; missing keys keep the defaults from modmap.config.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """
    Raised when modmap.toml exists but cannot be used.

    Attributes:
        path: The settings file that failed.
        message: Human-readable error message.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


@dataclass
class ScanSection:
    extensions: Optional[List[str]] = None
    ignore_dirs: Optional[List[str]] = None


@dataclass
class LayoutSection:
    width: Optional[float] = None
    height: Optional[float] = None
    iterations: Optional[int] = None
    seed: Optional[int] = None
    gravity: Optional[float] = None


@dataclass
class ViewportSection:
    min_zoom: Optional[float] = None
    max_zoom: Optional[float] = None
    node_size: Optional[float] = None


def _section(cls, name: str, data: Dict[str, Any], path: Path):
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        raise ManifestError(path, f"[{name}] must be a table")

    known = {f.name for f in fields(cls)}
    for key in raw:
        if key not in known:
            logger.warning(f"Ignoring unknown key '{key}' in [{name}] of {path}")
    return cls(**{k: v for k, v in raw.items() if k in known})


@dataclass
class ProjectSettings:
    """
    Parsed content of a modmap.toml file.

    Attributes:
        scan: Overrides for file discovery.
        layout: Overrides for the force-directed layout.
        viewport: Overrides for zoom bounds and node hit boxes.
        source: The file the settings came from, None for defaults.
    """

    scan: ScanSection = field(default_factory=ScanSection)
    layout: LayoutSection = field(default_factory=LayoutSection)
    viewport: ViewportSection = field(default_factory=ViewportSection)
    source: Optional[Path] = None

    @classmethod
    def load(cls, path: Path) -> "ProjectSettings":
        """
        Load and parse a modmap.toml file.

        A missing file yields default settings.

        Raises:
            ManifestError: The file is not valid TOML or a section is malformed.
        """
        if not path.exists():
            logger.debug(f"No settings file at {path}, using defaults")
            return cls()

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            raise ManifestError(path, f"Failed to parse settings: {e}") from e

        return cls(
            scan=_section(ScanSection, "scan", data, path),
            layout=_section(LayoutSection, "layout", data, path),
            viewport=_section(ViewportSection, "viewport", data, path),
            source=path,
        )
