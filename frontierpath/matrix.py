"""NumPy dense-matrix view of a graph and an array-scan reference search."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from .exceptions import InputError
from .graph import Graph, Vertex


def weight_matrix(G: Graph) -> npt.NDArray[np.float64]:
    """Return the ``n x n`` weight matrix of ``G``.

    Entry ``[u, v]`` is the cheapest weight among parallel ``u -> v`` edges
    and ``inf`` where no edge exists. Rows and columns follow
    ``Vertex.index``.
    """
    n = len(G)
    W = np.full((n, n), np.inf, dtype=np.float64)
    for u, v, w in G.edges():
        if w < W[u.index, v.index]:
            W[u.index, v.index] = w
    return W


def dense_distances(G: Graph, source: Vertex) -> npt.NDArray[np.float64]:
    """Shortest distances from ``source`` by scanning a distance array.

    Every step picks the unsettled vertex with the smallest tentative
    distance with ``argmin``, which costs ``O(V)`` per step and ``O(V^2)``
    overall. Unreachable vertices stay at ``inf``.

    Raises:
        InputError: If ``source`` does not belong to ``G``.
    """
    if not G.owns(source):
        raise InputError("source must be a vertex of the graph.")
    W = weight_matrix(G)
    n = len(G)
    dist = np.full(n, np.inf, dtype=np.float64)
    dist[source.index] = 0.0
    done = np.zeros(n, dtype=bool)
    for _ in range(n):
        masked = np.where(done, np.inf, dist)
        u = int(np.argmin(masked))
        if not np.isfinite(masked[u]):
            break
        done[u] = True
        np.minimum(dist, dist[u] + W[u], out=dist)
    return dist


__all__ = ["dense_distances", "weight_matrix"]
