"""
Layout package: turns a WorkspaceGraph into canvas coordinates.
"""

from .force import ForceDirectedLayout, LayoutConfig, compute_layout

__all__ = ["ForceDirectedLayout", "LayoutConfig", "compute_layout"]
