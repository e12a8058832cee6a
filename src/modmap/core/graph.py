"""
Workspace Graph implementation backed by rustworkx.

An undirected multigraph of source files. It manages:
- The map between canonical file paths and rustworkx integer indices.
- SourceFile payloads (one per canonical path).
- Import edges, one per import statement, duplicates and self-imports kept.

Node indices are never removed, so a NodeId stays valid for the lifetime
of the graph.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

import rustworkx as rx

from .types import NodeId, SourceFile


class WorkspaceGraph:
    """
    Undirected import graph of a workspace.

    Features:
    - O(1) node lookup via path-to-index map
    - Stable, ascending NodeId iteration order
    - Parallel edges for repeated imports between the same files
    """

    def __init__(self):
        self._graph = rx.PyGraph(multigraph=True)
        self._path_to_idx: Dict[str, NodeId] = {}

    def add_file(self, file: SourceFile) -> NodeId:
        """
        Add a file node, or return the existing id for its canonical path.
        """
        existing = self._path_to_idx.get(file.path)
        if existing is not None:
            return existing

        idx = self._graph.add_node(file)
        self._path_to_idx[file.path] = idx
        return idx

    def add_import(self, a: NodeId, b: NodeId, weight: float = 1.0) -> None:
        """Add an undirected import edge between two existing nodes."""
        self._check(a)
        self._check(b)
        self._graph.add_edge(a, b, weight)

    def get_file(self, node_id: NodeId) -> SourceFile:
        self._check(node_id)
        return self._graph[node_id]

    def node_id_for(self, path: str) -> Optional[NodeId]:
        """Look up the NodeId of a canonical path."""
        return self._path_to_idx.get(path)

    def has_file(self, path: str) -> bool:
        return path in self._path_to_idx

    def node_ids(self) -> List[NodeId]:
        return list(self._graph.node_indices())

    def iter_files(self) -> Iterator[Tuple[NodeId, SourceFile]]:
        for idx in self._graph.node_indices():
            yield idx, self._graph[idx]

    def edges(self) -> List[Tuple[NodeId, NodeId, float]]:
        """All edges as (a, b, weight), in insertion order."""
        return [(a, b, w) for a, b, w in self._graph.weighted_edge_list()]

    def neighbors(self, node_id: NodeId) -> List[NodeId]:
        """
        Nodes connected to node_id, one entry per edge.

        A self-import lists the node itself once.
        """
        return [b if a == node_id else a for a, b in self._incident(node_id)]

    def degree(self, node_id: NodeId) -> int:
        """Number of edge endpoints at node_id (a self-import counts twice)."""
        return sum(2 if a == b else 1 for a, b in self._incident(node_id))

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        touched = set()
        self_loops = 0
        for a, b in self._graph.edge_list():
            touched.add(a)
            touched.add(b)
            if a == b:
                self_loops += 1

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "isolated_files": self.node_count - len(touched),
            "self_imports": self_loops,
            "backend": "rustworkx",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {"id": idx, **file.model_dump()} for idx, file in self.iter_files()
            ],
            "edges": [
                {"source": a, "target": b, "weight": w} for a, b, w in self.edges()
            ],
            "stats": self.get_stats(),
        }

    def _incident(self, node_id: NodeId) -> List[Tuple[NodeId, NodeId]]:
        """Endpoints of the edges touching node_id, in insertion order."""
        self._check(node_id)
        # A self-loop can be listed once per end
        edge_indices = sorted(set(self._graph.incident_edges(node_id)))
        return [self._graph.get_edge_endpoints_by_index(e) for e in edge_indices]

    def _check(self, node_id: NodeId) -> None:
        if not 0 <= node_id < self._graph.num_nodes():
            raise KeyError(f"Unknown node id: {node_id}")
