"""
Source file discovery.

Walks a project tree and yields JS/TS source files, skipping dependency
and build output directories wherever they appear below the root.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generator, Set

from .. import config
from ..core.manifest import ProjectSettings

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    root_dir: Path = field(default_factory=lambda: Path.cwd())
    skip_dirs: Set[str] = field(default_factory=lambda: config.IGNORE_DIRECTORIES.copy())
    file_extensions: Set[str] = field(default_factory=lambda: config.SOURCE_EXTENSIONS.copy())
    follow_symlinks: bool = False

    @classmethod
    def from_settings(cls, root_dir: Path, settings: ProjectSettings) -> "ScanConfig":
        cfg = cls(root_dir=root_dir)
        if settings.scan.extensions is not None:
            cfg.file_extensions = {ext.lstrip(".") for ext in settings.scan.extensions}
        if settings.scan.ignore_dirs is not None:
            cfg.skip_dirs = set(settings.scan.ignore_dirs)
        return cfg

    def should_skip_dir(self, dir_name: str) -> bool:
        return dir_name in self.skip_dirs

    def is_source_file(self, file_path: Path) -> bool:
        return file_path.suffix.lstrip(".") in self.file_extensions


class SourceScanner:
    """
    Enumerates candidate source files under a root directory.

    Order is deterministic: directories and files are visited in sorted
    name order, so NodeId assignment is reproducible across runs.
    """

    def __init__(self, scan_config: ScanConfig):
        self.config = scan_config

    def _on_walk_error(self, error: OSError) -> None:
        logger.debug(f"Skipping unreadable path {error.filename}: {error.strerror}")

    def discover(self) -> Generator[Path, None, None]:
        """Recursive file discovery."""
        root = self.config.root_dir
        # Every segment counts, the root's own included
        ignored = [part for part in Path(root).parts if self.config.should_skip_dir(part)]
        if ignored:
            logger.debug(f"Root {root} lies inside ignored directory '{ignored[0]}'")
            return

        for dirpath, dirs, files in os.walk(
            root,
            onerror=self._on_walk_error,
            followlinks=self.config.follow_symlinks,
        ):
            kept = []
            for d in sorted(dirs):
                if self.config.should_skip_dir(d):
                    logger.debug(f"Skipping directory {Path(dirpath) / d}")
                else:
                    kept.append(d)
            dirs[:] = kept

            for name in sorted(files):
                path = Path(dirpath) / name
                if self.config.is_source_file(path):
                    yield path


def discover_source_files(root_dir: Path) -> Generator[Path, None, None]:
    """Discover source files under root_dir with the default configuration."""
    return SourceScanner(ScanConfig(root_dir=root_dir)).discover()
