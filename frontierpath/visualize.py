"""NetworkX conversion and Matplotlib rendering of graphs and routes."""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import networkx as nx

from .engine import ShortestPaths
from .graph import Graph, Vertex


def to_networkx(G: Graph) -> nx.MultiDiGraph:
    """Return ``G`` as a :class:`networkx.MultiDiGraph`.

    Nodes are vertex indices with a ``key`` attribute; every stored edge
    (mirrors included) becomes one arc with a ``weight`` attribute.
    """
    H = nx.MultiDiGraph()
    for v in G:
        H.add_node(v.index, key=v.key)
    for u, v, w in G.edges():
        H.add_edge(u.index, v.index, weight=w)
    return H


def draw_route(
    G: Graph,
    result: ShortestPaths,
    destination: Optional[Vertex] = None,
    out_path: Optional[str] = None,
    *,
    layout: str = "spring",
    seed: int = 0,
    show_weights: bool = False,
):
    """Render ``G`` with the route to ``destination`` highlighted.

    The source is drawn in red, reached vertices in light blue, unreached
    ones in grey. Without ``destination`` the whole shortest-path tree is
    highlighted.

    Returns:
        The Matplotlib figure. Saved to ``out_path`` when given.
    """
    H = nx.DiGraph()
    for v in G:
        H.add_node(v.index)
    for u, v, w in G.edges():
        if not H.has_edge(u.index, v.index) or w < H[u.index][v.index]["weight"]:
            H.add_edge(u.index, v.index, weight=w)

    if layout == "circular":
        pos = nx.circular_layout(H)
    else:
        pos = nx.spring_layout(H, seed=seed)

    if destination is not None:
        route = result.route(destination)
        highlight = list(zip((v.index for v in route), (v.index for v in route[1:])))
    else:
        highlight = []
        for v in result.order:
            prev = result[v].previous()
            if prev is not None:
                highlight.append((prev.destination.index, v.index))

    colors = []
    for v in G:
        if v is result.source:
            colors.append("tab:red")
        elif v in result:
            colors.append("lightblue")
        else:
            colors.append("lightgrey")

    fig, ax = plt.subplots(figsize=(8, 6))
    nx.draw_networkx_nodes(H, pos, node_color=colors, node_size=300, ax=ax)
    nx.draw_networkx_labels(H, pos, labels={v.index: str(v.key) for v in G}, font_size=8, ax=ax)
    nx.draw_networkx_edges(H, pos, edge_color="lightgrey", arrows=G.directed, ax=ax)
    nx.draw_networkx_edges(
        H, pos, edgelist=highlight, edge_color="tab:red", width=2.0, arrows=True, ax=ax
    )
    if show_weights:
        labels = {(u, v): d["weight"] for u, v, d in H.edges(data=True)}
        nx.draw_networkx_edge_labels(H, pos, edge_labels=labels, font_size=7, ax=ax)
    ax.set_axis_off()
    fig.tight_layout()
    if out_path:
        fig.savefig(out_path, dpi=150)
    return fig


__all__ = ["draw_route", "to_networkx"]
