"""Graph input/output helpers.

CSV and JSONL name vertices by key, so vertices sharing a key merge on
read. GraphML names them by node id and keeps every vertex apart.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from xml.sax.saxutils import escape, quoteattr

from .exceptions import GraphFormatError
from .graph import EdgeTriple, Graph, Vertex, Weight

EdgeList = List[EdgeTriple]

GRAPHML_NS = "http://graphml.graphdrawing.org/xmlns"


def _parse_weight(raw: str) -> Weight:
    """Parse ``raw`` as an ``int`` when possible, else as a ``float``."""
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _read_csv(path: Path, directed: bool) -> Graph:
    """Read ``u,v,w`` rows (comma or tab separated).

    A row holding a single field declares a vertex without adding an edge.
    Blank lines and lines starting with ``#`` are skipped. Keys are kept as
    stripped strings.

    Raises:
        GraphFormatError: If a row is malformed or the file holds nothing.
    """
    keys: List[str] = []
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) == 1:
                keys.append(parts[0].strip())
                continue
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected 'u,v,w'")
            try:
                w = _parse_weight(parts[2])
            except ValueError as exc:
                raise GraphFormatError(f"{path}:{lineno}: bad weight {parts[2]!r}") from exc
            edges.append((parts[0].strip(), parts[1].strip(), w))
    if not edges and not keys:
        raise GraphFormatError("no vertices or edges parsed from file")
    return Graph.from_edges(edges, directed=directed, vertices=keys)


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# vertices\n")
        for v in G:
            fh.write(f"{v.key}\n")
        fh.write("# u,v,w\n")
        for u, v, w in G.edges():
            fh.write(f"{u.key},{v.key},{w}\n")


def _read_jsonl(path: Path, directed: bool) -> Graph:
    """Read one ``{"u": ..., "v": ..., "w": ...}`` object per line.

    A ``{"vertex": ...}`` line declares a vertex without adding an edge.

    Raises:
        GraphFormatError: If a line is not valid JSON, lacks a field, or the
            file holds nothing.
    """
    keys: List[Any] = []
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                if "vertex" in obj:
                    keys.append(obj["vertex"])
                else:
                    edges.append((obj["u"], obj["v"], obj["w"]))
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: {exc}") from exc
    if not edges and not keys:
        raise GraphFormatError("no vertices or edges parsed from file")
    return Graph.from_edges(edges, directed=directed, vertices=keys)


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for v in G:
            fh.write(json.dumps({"vertex": v.key}) + "\n")
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u.key, "v": v.key, "w": w}) + "\n")


def _read_graphml(path: Path, directed: bool) -> Graph:
    """Parse a GraphML file.

    One vertex is created per ``<node>``, keyed by its ``<data key="key">``
    child when present, else by the node id. Edges refer to nodes by id, so
    nodes sharing a key stay distinct. Weights come from a ``weight``
    attribute or a ``<data key="w">`` child and default to ``1``.

    Raises:
        GraphFormatError: If the XML is invalid, a node lacks an id, an edge
            lacks an endpoint, or the file holds no nodes or edges.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"invalid GraphML: {exc}") from exc
    ns = f"{{{GRAPHML_NS}}}"
    g = Graph(directed=directed)
    by_id: Dict[str, Vertex] = {}

    def node(node_id: str) -> Vertex:
        if node_id not in by_id:
            by_id[node_id] = g.add_vertex(node_id)
        return by_id[node_id]

    for elem in root.iter(f"{ns}node"):
        node_id = elem.attrib.get("id")
        if node_id is None:
            raise GraphFormatError("GraphML <node> without an id")
        if node_id in by_id:
            continue
        data = elem.find(f"{ns}data[@key='key']")
        by_id[node_id] = g.add_vertex(data.text if (data is not None and data.text) else node_id)
    for elem in root.iter(f"{ns}edge"):
        u = elem.attrib.get("source")
        v = elem.attrib.get("target")
        if u is None or v is None:
            raise GraphFormatError(f"GraphML <edge> without source or target ({u}, {v})")
        w_attr = elem.attrib.get("weight")
        if w_attr is None:
            data = elem.find(f"{ns}data[@key='w']")
            w_attr = data.text if (data is not None and data.text is not None) else "1"
        try:
            w = _parse_weight(w_attr)
        except ValueError as exc:
            raise GraphFormatError(f"bad weight {w_attr!r} on edge ({u}, {v})") from exc
        g.add_edge(node(u), node(v), w)
    if not len(g):
        raise GraphFormatError("no nodes or edges parsed from file")
    return g


def _write_graphml(path: Path, G: Graph) -> None:
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<graphml xmlns="{GRAPHML_NS}">')
    lines.append('  <key id="key" for="node" attr.name="key" attr.type="string"/>')
    edgedefault = "directed" if G.directed else "undirected"
    lines.append(f'  <graph id="G" edgedefault="{edgedefault}">')
    for v in G:
        lines.append(f'    <node id="n{v.index}"><data key="key">{escape(str(v.key))}</data></node>')
    for u, v, w in G.edges():
        lines.append(f'    <edge source="n{u.index}" target="n{v.index}" weight={quoteattr(str(w))}/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    path.write_text("\n".join(lines), encoding="utf-8")


_FMT_READERS: Dict[str, Callable[[Path, bool], Graph]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "graphml": _read_graphml,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "graphml": _write_graphml,
}


def detect_format(path: Path) -> Optional[str]:
    """Return the format implied by the extension of ``path``, if any."""
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    if ext == ".graphml":
        return "graphml"
    return None


def read_graph(path: str, fmt: Optional[str] = None, directed: bool = True) -> Graph:
    """Read a graph from ``path``.

    Args:
        path: Edge file.
        fmt: ``"csv"``, ``"jsonl"`` or ``"graphml"``; auto-detected from the
            extension when ``None``.
        directed: Build an undirected graph (mirror edges) when ``False``.

    Raises:
        GraphFormatError: If the format is unknown or the file is malformed.
    """
    p = Path(path)
    fmt = fmt or detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown graph format")
    return _FMT_READERS[fmt](p, directed)


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write every vertex and stored edge of ``G`` to ``path``.

    Edgeless vertices survive a round trip in every format. Vertices sharing
    a key survive only in GraphML. Mirror edges of undirected graphs are written as separate arcs, so read
    the file back with ``directed=True`` to get the same adjacency.

    Raises:
        GraphFormatError: If the format is unknown.
    """
    p = Path(path)
    fmt = fmt or detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError("unknown graph format")
    _FMT_WRITERS[fmt](p, G)


__all__ = ["detect_format", "read_graph", "write_graph"]
