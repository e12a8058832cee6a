"""
modmap: module dependency maps for JavaScript and TypeScript projects.

Scans a source tree, extracts import relationships, lays the resulting
graph out with a force-directed simulation and exposes pan/zoom/selection
state for an interactive canvas.
"""

__version__ = "0.1.0"
