"""
Workspace view: the object a canvas host talks to.

Bundles an import graph, its layout settings and a ViewportController.
Every ``draw()`` re-runs the layout from scratch and refreshes the hit
boxes, so hover and selection always match what was last drawn.
"""

from pathlib import Path
from typing import List

from ..core.graph import WorkspaceGraph
from ..core.manifest import ProjectSettings
from ..core.result import Result, map_ok
from ..core.types import PlacedNode
from ..layout.force import LayoutConfig, compute_layout
from ..parsing.engine import GraphBuilder, ScanError
from ..parsing.scanner import ScanConfig
from .controller import FileOpener, ViewportConfig, ViewportController


class WorkspaceView:
    def __init__(
        self,
        graph: WorkspaceGraph,
        layout_config: LayoutConfig | None = None,
        viewport_config: ViewportConfig | None = None,
        on_open: FileOpener | None = None,
    ):
        self.graph = graph
        self.layout_config = layout_config or LayoutConfig()
        self.controller = ViewportController(viewport_config, on_open=on_open)

    @classmethod
    def open(
        cls,
        root_dir: Path,
        settings: ProjectSettings | None = None,
        on_open: FileOpener | None = None,
    ) -> Result["WorkspaceView", ScanError]:
        """Scan root_dir and wrap the resulting graph in a view."""
        settings = settings or ProjectSettings()
        built = GraphBuilder().build(ScanConfig.from_settings(root_dir, settings))
        return map_ok(
            built,
            lambda report: cls(
                report.graph,
                LayoutConfig.from_settings(settings),
                ViewportConfig.from_settings(settings),
                on_open=on_open,
            ),
        )

    def draw(self) -> List[PlacedNode]:
        """Full layout for this frame; also refreshes the controller's hit boxes."""
        placements = compute_layout(self.graph, self.layout_config)
        self.controller.update_boxes(placements)
        return placements

    # Host event entry points

    def on_pointer_down(self, x: float | None = None, y: float | None = None) -> None:
        self.controller.pointer_down(x, y)

    def on_pointer_up(self) -> None:
        self.controller.pointer_up()

    def on_pointer_move(self, x: float, y: float) -> None:
        self.controller.pointer_move(x, y)

    def on_wheel(self, dx: float, dy: float, zoom_modifier: bool = False) -> None:
        self.controller.wheel(dx, dy, zoom_modifier)

    def on_pinch(self, delta: float) -> None:
        self.controller.pinch(delta)

    def on_click(self, toggle: bool = False) -> None:
        self.controller.click(toggle)

    def on_double_click(self) -> None:
        self.controller.double_click()
