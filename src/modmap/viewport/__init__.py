"""
Viewport package: pan/zoom state, hit-testing and selection.
"""

from .controller import (
    FileOpener,
    SelectionState,
    ViewportConfig,
    ViewportController,
    ViewState,
)
from .workspace import WorkspaceView

__all__ = [
    "FileOpener",
    "SelectionState",
    "ViewState",
    "ViewportConfig",
    "ViewportController",
    "WorkspaceView",
]
