"""
Import Path Resolver.

Turns a relative import specifier into the canonical path of the file it
refers to.

Resolution Strategy:
    1. Bare specifiers ("react", "@scope/pkg") are never resolved.
    2. Join the specifier onto the importing file's directory and
       canonicalize it; paths that do not exist are normalized lexically.
    3. Probe <path>.ts, .tsx, .js, .jsx (replacing any extension).
    4. Probe <path>/index.ts, .tsx, .js, .jsx.
    5. Canonicalize the match so it lines up with SourceFile identities.
"""

import logging
import os
from pathlib import Path, PurePath
from typing import Optional, Sequence

from .. import config

logger = logging.getLogger(__name__)


def canonicalize(path: str | Path) -> str:
    """
    Canonical absolute form of an existing path.

    Falls back to the absolute (unresolved) path when the filesystem
    cannot resolve it.
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        return os.path.abspath(path)


def lexical_normalize(path: Path) -> Path:
    """
    Resolve "." and ".." segments without touching the filesystem.

    ".." pops the preceding segment; the anchor ("/" or a drive) is kept.
    """
    anchor = path.anchor
    parts = list(path.parts[1:] if anchor else path.parts)
    stack = []
    for part in parts:
        if part == ".":
            continue
        if part == "..":
            if stack:
                stack.pop()
            continue
        stack.append(part)
    return Path(anchor, *stack) if anchor else Path(*stack)


class PathResolver:
    """Resolves relative specifiers against the importing file's directory."""

    def __init__(
        self,
        extensions: Sequence[str] = config.RESOLVE_EXTENSIONS,
        index_basename: str = config.INDEX_BASENAME,
    ):
        self.extensions = tuple(extensions)
        self.index_basename = index_basename

    def resolve(self, specifier: str, importer_dir: str | Path) -> Optional[str]:
        """
        Resolve a raw specifier to a canonical file path.

        Args:
            specifier: The string passed to import/require/import().
            importer_dir: Canonical directory of the importing file.

        Returns:
            The canonical path of the target file, or None when the
            specifier is bare or no candidate file exists.
        """
        if not specifier.startswith("."):
            return None

        joined = Path(importer_dir) / specifier
        try:
            base = joined.resolve(strict=True)
        except (OSError, RuntimeError):
            base = lexical_normalize(joined)

        match = self._probe(base)
        if match is None:
            logger.debug(f"Unresolved import '{specifier}' from {importer_dir}")
            return None

        return canonicalize(match)

    def _probe(self, base: Path) -> Optional[Path]:
        if base.name:
            for ext in self.extensions:
                candidate = base.with_suffix(ext)
                if candidate.is_file():
                    return candidate

        for ext in self.extensions:
            candidate = base / f"{self.index_basename}{ext}"
            if candidate.is_file():
                return candidate

        return None


def resolve_import(specifier: str, importer_file: str | Path) -> Optional[str]:
    """Resolve a specifier as written in importer_file."""
    importer_dir = PurePath(canonicalize(importer_file)).parent
    return PathResolver().resolve(specifier, importer_dir)
