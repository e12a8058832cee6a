"""
Viewport and Selection Controller.

Owns the pan/zoom transform of the workspace canvas and the hover and
selection state, and maps raw pointer input onto them. The host UI feeds
pointer events in synchronously and redraws after each call; nothing
here schedules work or notifies observers, apart from the "open file"
callback handed in by the host.

Screen space is ``world * zoom + translation``.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .. import config
from ..core.manifest import ProjectSettings
from ..core.types import NodeId, PlacedNode, ScreenBox

logger = logging.getLogger(__name__)

# Called with the canonical path of the file to open
FileOpener = Callable[[str], None]


@dataclass(frozen=True)
class ViewportConfig:
    min_zoom: float = config.MIN_ZOOM
    max_zoom: float = config.MAX_ZOOM
    node_size: float = config.NODE_BOX_SIZE
    wheel_zoom_step: float = config.WHEEL_ZOOM_STEP

    def __post_init__(self):
        if not 0 < self.min_zoom <= self.max_zoom:
            raise ValueError(
                f"Zoom bounds must satisfy 0 < min_zoom <= max_zoom, "
                f"got [{self.min_zoom}, {self.max_zoom}]"
            )
        if self.node_size <= 0:
            raise ValueError(f"node_size must be positive, got {self.node_size}")

    @classmethod
    def from_settings(cls, settings: ProjectSettings) -> "ViewportConfig":
        return cls(**{k: v for k, v in vars(settings.viewport).items() if v is not None})


@dataclass
class ViewState:
    zoom: float = 1.0
    translation_x: float = 0.0
    translation_y: float = 0.0

    # Drag and pointer tracking
    dragging: bool = False
    pointer_x: float = 0.0
    pointer_y: float = 0.0


@dataclass
class SelectionState:
    hovered_node: Optional[NodeId] = None
    hovered_path: Optional[str] = None
    selected_paths: Set[str] = field(default_factory=set)


class ViewportController:
    """
    Pan, zoom, hover and selection over a laid-out workspace.

    Features:
    - Incremental drag panning (each move adds its delta since the last move)
    - Zoom anchored on the pointer, clamped to the configured bounds
    - Hit-testing against the screen boxes of the latest draw
    - Single and toggle selection, open-on-double-click
    """

    def __init__(
        self,
        viewport_config: ViewportConfig | None = None,
        on_open: FileOpener | None = None,
    ):
        self.config = viewport_config or ViewportConfig()
        self.on_open = on_open
        self.view = ViewState()
        self.selection = SelectionState()
        self.boxes: List[ScreenBox] = []

    # --- Transform ---

    def world_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        zoom = self.view.zoom
        return x * zoom + self.view.translation_x, y * zoom + self.view.translation_y

    def screen_to_world(self, x: float, y: float) -> Tuple[float, float]:
        zoom = self.view.zoom
        return (x - self.view.translation_x) / zoom, (y - self.view.translation_y) / zoom

    def pan(self, dx: float, dy: float) -> None:
        self.view.translation_x += dx
        self.view.translation_y += dy

    def zoom(
        self,
        delta: float,
        pointer_x: float | None = None,
        pointer_y: float | None = None,
    ) -> bool:
        """
        Change zoom by delta, keeping the world point under the pointer fixed.

        Defaults to the last tracked pointer position. Returns False when
        the clamped zoom did not change.
        """
        px = self.view.pointer_x if pointer_x is None else pointer_x
        py = self.view.pointer_y if pointer_y is None else pointer_y

        old_zoom = self.view.zoom
        new_zoom = min(max(old_zoom + delta, self.config.min_zoom), self.config.max_zoom)
        if new_zoom == old_zoom:
            return False

        world_x, world_y = self.screen_to_world(px, py)
        self.view.zoom = new_zoom
        self.view.translation_x = px - world_x * new_zoom
        self.view.translation_y = py - world_y * new_zoom
        return True

    # --- Pointer input ---

    def pointer_down(self, x: float | None = None, y: float | None = None) -> None:
        if x is not None and y is not None:
            self.view.pointer_x, self.view.pointer_y = x, y
        self.view.dragging = True

    def pointer_move(self, x: float, y: float) -> None:
        previous_x, previous_y = self.view.pointer_x, self.view.pointer_y
        self.view.pointer_x, self.view.pointer_y = x, y

        if self.view.dragging:
            self.pan(x - previous_x, y - previous_y)

        self.track_hover(x, y)

    def pointer_up(self) -> None:
        self.view.dragging = False

    def wheel(self, dx: float, dy: float, zoom_modifier: bool = False) -> None:
        """Scroll pans; scroll with the zoom modifier zooms around the pointer."""
        if zoom_modifier:
            self.zoom(-dy * self.config.wheel_zoom_step)
        else:
            self.pan(dx, dy)

    def pinch(self, delta: float) -> Optional[str]:
        """
        Zoom by a pinch delta.

        Pinching in until the maximum zoom while hovering a file opens it;
        returns the opened path in that case.
        """
        self.zoom(delta)
        if delta > 0 and self.view.zoom >= self.config.max_zoom:
            return self.open_hovered()
        return None

    def click(self, toggle: bool = False) -> None:
        """Select the hovered file (or clear); with toggle, flip it in the selection."""
        if toggle:
            self.toggle_hovered()
        else:
            self.select(self.selection.hovered_path)

    def double_click(self) -> Optional[str]:
        return self.open_hovered()

    # --- Hover & selection ---

    def update_boxes(self, placements: Iterable[PlacedNode]) -> List[ScreenBox]:
        """Recompute the screen-space hit box of every node for the current frame."""
        half = self.config.node_size * self.view.zoom / 2.0
        boxes = []
        for placed in placements:
            cx, cy = self.world_to_screen(placed.position.x, placed.position.y)
            boxes.append(
                ScreenBox(
                    node_id=placed.node_id,
                    path=placed.file.path,
                    left=cx - half,
                    top=cy - half,
                    right=cx + half,
                    bottom=cy + half,
                )
            )
        self.boxes = boxes
        return boxes

    def hit_test(self, x: float, y: float) -> Optional[ScreenBox]:
        """First box (in draw order) containing the point."""
        for box in self.boxes:
            if box.contains(x, y):
                return box
        return None

    def track_hover(self, x: float, y: float) -> Optional[str]:
        box = self.hit_test(x, y)
        self.set_hover(box)
        return self.selection.hovered_path

    def set_hover(self, box: ScreenBox | None) -> None:
        if box is None:
            self.selection.hovered_node = None
            self.selection.hovered_path = None
        else:
            self.selection.hovered_node = box.node_id
            self.selection.hovered_path = box.path

    def select(self, path: str | None) -> None:
        """Make path the only selected file, or clear the selection."""
        self.selection.selected_paths = {path} if path is not None else set()

    def toggle_hovered(self) -> None:
        path = self.selection.hovered_path
        if path is None:
            return
        if path in self.selection.selected_paths:
            self.selection.selected_paths.discard(path)
        else:
            self.selection.selected_paths.add(path)

    def open_hovered(self) -> Optional[str]:
        path = self.selection.hovered_path
        if path is None:
            return None
        logger.debug(f"Opening {path}")
        if self.on_open is not None:
            self.on_open(path)
        return path

    @property
    def hovered_path(self) -> Optional[str]:
        return self.selection.hovered_path

    @property
    def selected_paths(self) -> Set[str]:
        return set(self.selection.selected_paths)
