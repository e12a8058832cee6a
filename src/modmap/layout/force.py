"""
Force-Directed Layout Engine.

Places the files of a WorkspaceGraph on a fixed-size canvas with a
Fruchterman-Reingold style simulation:

- Every pair of nodes repels with k^2 / d.
- Every edge (each duplicate included) attracts its ends with d^2 / k.
- Every node is pulled toward the canvas centre with strength k * gravity.
- Per-iteration displacement is capped by a temperature that cools
  geometrically; positions are clamped into the canvas.

where k = sqrt(width * height / node_count) is the ideal edge length.

Nodes are seeded uniformly at random from a fixed seed, so identical
inputs always give identical layouts. The whole simulation runs from
scratch on every call: repulsion is O(n^2) per iteration and nothing is
cached between runs.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List

from .. import config
from ..core.graph import WorkspaceGraph
from ..core.manifest import ProjectSettings
from ..core.types import NodeId, PlacedNode, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    width: float = config.CANVAS_WIDTH
    height: float = config.CANVAS_HEIGHT
    iterations: int = config.LAYOUT_ITERATIONS
    cooling_factor: float = config.COOLING_FACTOR
    seed: int = config.LAYOUT_SEED
    gravity: float = config.GRAVITY_STRENGTH
    coincident_repulsion: float = config.COINCIDENT_REPULSION

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must have a positive size, got {self.width}x{self.height}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")

    @classmethod
    def from_settings(cls, settings: ProjectSettings, **overrides) -> "LayoutConfig":
        values = {
            k: v
            for k, v in vars(settings.layout).items()
            if v is not None
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class ForceDirectedLayout:
    """
    One layout run over a graph.

    Holds its own position map; the input graph is never modified.
    """

    def __init__(self, graph: WorkspaceGraph, layout_config: LayoutConfig | None = None):
        self.graph = graph
        self.config = layout_config or LayoutConfig()

        self._nodes: List[NodeId] = graph.node_ids()
        self._edges = [(a, b) for a, b, _ in graph.edges()]
        self.positions: Dict[NodeId, List[float]] = {}

        count = len(self._nodes)
        self.k = math.sqrt(self.config.width * self.config.height / count) if count else 0.0
        self.temperature = self.config.width / 10.0

        rng = random.Random(self.config.seed)
        for node in self._nodes:
            self.positions[node] = [
                rng.uniform(0.0, self.config.width),
                rng.uniform(0.0, self.config.height),
            ]

    def repulsive_force(self, distance: float) -> float:
        if distance == 0.0:
            return self.config.coincident_repulsion
        return (self.k * self.k) / distance

    def attractive_force(self, distance: float) -> float:
        return (distance * distance) / self.k

    def iterate(self) -> None:
        """Run a single simulation step and cool down."""
        disp = {node: [0.0, 0.0] for node in self._nodes}
        pos = self.positions

        # Repulsion between every unordered pair
        nodes = self._nodes
        for i in range(len(nodes)):
            v = nodes[i]
            pv = pos[v]
            for j in range(i + 1, len(nodes)):
                u = nodes[j]
                pu = pos[u]
                dx = pv[0] - pu[0]
                dy = pv[1] - pu[1]
                distance = math.hypot(dx, dy)
                force = self.repulsive_force(distance)
                if distance > 0.0:
                    ux, uy = dx / distance, dy / distance
                else:
                    # Coincident: separate along the x axis
                    ux, uy = 1.0, 0.0
                disp[v][0] += ux * force
                disp[v][1] += uy * force
                disp[u][0] -= ux * force
                disp[u][1] -= uy * force

        # Attraction along every edge instance
        for a, b in self._edges:
            pa, pb = pos[a], pos[b]
            dx = pb[0] - pa[0]
            dy = pb[1] - pa[1]
            distance = math.hypot(dx, dy)
            if distance == 0.0:
                continue
            force = self.attractive_force(distance)
            ux, uy = dx / distance, dy / distance
            disp[a][0] += ux * force
            disp[a][1] += uy * force
            disp[b][0] -= ux * force
            disp[b][1] -= uy * force

        # Pull toward the centre
        center_x = self.config.width / 2.0
        center_y = self.config.height / 2.0
        gravity = self.k * self.config.gravity
        for node in nodes:
            p = pos[node]
            disp[node][0] += (center_x - p[0]) * gravity
            disp[node][1] += (center_y - p[1]) * gravity

        # Integrate, capped by temperature and clamped to the canvas
        for node in nodes:
            dx, dy = disp[node]
            length = math.hypot(dx, dy)
            if length == 0.0:
                continue
            step = min(length, self.temperature)
            p = pos[node]
            p[0] = min(max(p[0] + dx / length * step, 0.0), self.config.width)
            p[1] = min(max(p[1] + dy / length * step, 0.0), self.config.height)

        self.temperature *= self.config.cooling_factor

    def run(self) -> None:
        for _ in range(self.config.iterations):
            self.iterate()

    def position_of(self, node: NodeId) -> Position:
        x, y = self.positions[node]
        return Position(x, y)


def compute_layout(
    graph: WorkspaceGraph,
    layout_config: LayoutConfig | None = None,
) -> List[PlacedNode]:
    """
    Lay out graph and return one PlacedNode per file, in NodeId order.

    An empty graph gives an empty list.
    """
    if graph.node_count == 0:
        return []

    layout = ForceDirectedLayout(graph, layout_config)
    layout.run()
    logger.debug(
        f"Laid out {graph.node_count} files in {layout.config.iterations} iterations "
        f"(k={layout.k:.2f}, final temperature={layout.temperature:.3f})"
    )

    adjacency: Dict[NodeId, List[NodeId]] = {node: [] for node in graph.node_ids()}
    for a, b, _ in graph.edges():
        adjacency[a].append(b)
        if a != b:
            adjacency[b].append(a)

    return [
        PlacedNode(
            node_id=node,
            file=file,
            position=layout.position_of(node),
            neighbor_positions=[layout.position_of(n) for n in adjacency[node]],
        )
        for node, file in graph.iter_files()
    ]
