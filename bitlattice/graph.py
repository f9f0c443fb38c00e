"""
bitlattice Hasse diagram export

Materializes a small hypercube as a NetworkX graph: nodes are all 2^N
BitVectors, edges are the single-bit flips produced by
horizon(lower=False) from every point. Each node carries a label from an
optional labeler (typically Learner.classify), and the whole diagram can
be rendered as DOT text.

This is the only part of bitlattice that walks the entire cube, so the
width is capped at MAX_GRAPH_WIDTH.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import networkx as nx

from bitlattice.bits import BitVector
from bitlattice.oracle import Learner

logger = logging.getLogger(__name__)

MAX_GRAPH_WIDTH = 16

Labeler = Callable[[BitVector], str]


class LatticeGraph:
    """The cover graph of {0,1}^N with labeled nodes.

    Nodes = every point of the cube
    Edges = undirected, one per single-bit flip
    """

    def __init__(self, width: int, labeler: Optional[Labeler] = None) -> None:
        if not 0 <= width <= MAX_GRAPH_WIDTH:
            raise ValueError(
                f"Cannot export a {width}-cube: limit is {MAX_GRAPH_WIDTH} coordinates"
            )
        self.width = width
        self._graph = nx.Graph()

        for n in range(1 << width):
            b = BitVector.from_uint(n, width)
            self._graph.add_node(b, label=labeler(b) if labeler else "")

        for b in list(self._graph.nodes):
            for up in b.horizon(False):
                self._graph.add_edge(b, up)

        logger.debug(
            "built %d-cube: %d nodes, %d edges",
            width, self._graph.number_of_nodes(), self._graph.number_of_edges(),
        )

    @classmethod
    def from_learner(cls, learner: Learner) -> LatticeGraph:
        """Label every point against the learner's current frontiers."""
        return cls(learner.width, learner.classify)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def graph(self) -> nx.Graph:
        """Access the underlying NetworkX graph directly."""
        return self._graph

    @property
    def nodes(self) -> list[BitVector]:
        return list(self._graph.nodes)

    @property
    def edges(self) -> list[tuple[BitVector, BitVector]]:
        return list(self._graph.edges)

    def label(self, b: BitVector) -> str:
        return self._graph.nodes[b]["label"]

    def neighbors(self, b: BitVector) -> list[BitVector]:
        """All points one flip away, in either direction."""
        return list(self._graph.neighbors(b))

    def find_path(self, source: BitVector, target: BitVector) -> list[BitVector]:
        """A shortest flip path between any two points.

        For comparable points this is one of the monotone paths, of length
        distance + 1.
        """
        return nx.shortest_path(self._graph, source, target)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_dot(self) -> str:
        """Render as an undirected DOT graph without edge labels."""
        lines = ["graph {"]
        for b, data in self._graph.nodes(data=True):
            text = f"{b} {data['label']}".strip()
            lines.append(f'    "{b}" [label="{text}"];')
        for a, b in self._graph.edges:
            lines.append(f'    "{a}" -- "{b}";')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def summary(self) -> str:
        """Human-readable graph summary."""
        lines = [
            f"Lattice Graph: {self._graph.number_of_nodes()} points, "
            f"{self._graph.number_of_edges()} edges",
        ]
        labeled = [
            (b, data["label"])
            for b, data in self._graph.nodes(data=True)
            if data["label"]
        ]
        if labeled:
            lines.append("")
            lines.append("Labeled points:")
            for b, label in sorted(labeled, key=lambda x: str(x[0])):
                lines.append(f"  [{label}] {b}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"<LatticeGraph: N={self.width} {self._graph.number_of_nodes()} nodes, "
            f"{self._graph.number_of_edges()} edges>"
        )
