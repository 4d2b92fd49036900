"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
from typing import List, Tuple
from xml.sax.saxutils import escape

from .engine import ShortestPaths
from .graph import Graph, Vertex


def shortest_path_tree(result: ShortestPaths) -> List[Tuple[Vertex, Vertex]]:
    """Return the ``(predecessor, vertex)`` edges of the finalized paths.

    Every reached vertex except the source contributes exactly one edge, in
    finalize order.
    """
    tree: List[Tuple[Vertex, Vertex]] = []
    for v in result.order:
        prev = result[v].previous()
        if prev is not None:
            tree.append((prev.destination, v))
    return tree


def export_tree_json(G: Graph, result: ShortestPaths) -> str:
    """Return a JSON string with every vertex and the tree edges.

    Unreached vertices carry ``"total": null``.
    """
    totals = result.distances()
    data = {
        "source": result.source.index,
        "nodes": [
            {"id": v.index, "key": str(v.key), "total": totals.get(v)} for v in G
        ],
        "edges": [
            {"source": u.index, "target": v.index} for (u, v) in shortest_path_tree(result)
        ],
    }
    return json.dumps(data)


def export_tree_graphml(G: Graph, result: ShortestPaths) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    totals = result.distances()
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="key" for="node" attr.name="key" attr.type="string"/>')
    lines.append('  <key id="total" for="node" attr.name="total" attr.type="double"/>')
    lines.append('  <graph id="T" edgedefault="directed">')
    for v in G:
        if v not in totals:
            continue
        lines.append(
            f'    <node id="n{v.index}"><data key="key">{escape(str(v.key))}</data>'
            f'<data key="total">{totals[v]}</data></node>'
        )
    for u, v in shortest_path_tree(result):
        lines.append(f'    <edge source="n{u.index}" target="n{v.index}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


__all__ = ["export_tree_graphml", "export_tree_json", "shortest_path_tree"]
