"""Styled node and edge insertion for sigma.js-style graphs.

The graph object is supplied by the caller and only needs networkx-style
``add_node(node_id, **attrs)`` and ``add_edge(source, target, **attrs)``
methods. Attribute names follow the renderer's conventions
(``labelColor``, ``image``), so the stored attributes can be serialised
straight to the page.

Usage::

    import networkx as nx
    from pubgraph.graph import EdgeOptions, NodeOptions, create_edge, create_nodes

    g = nx.Graph()
    create_nodes(g, [
        "Person One",
        ("Person Two", NodeOptions(size=12.0, color="#00ff00")),
        {"name": "Person Three", "options": {"size": 20.0, "imageFolder": "images/special/"}},
    ])
    create_edge(g, "Person One", "Person Two", EdgeOptions(label="coauthor", size=1))
    g.edges["Person One", "Person Two"]["size"]   # 2, the minimum edge size
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping

DEFAULT_COLOR = "#999999"
DEFAULT_NODE_SIZE = 8.0
DEFAULT_EDGE_SIZE = 3.0

# Thinner edges are hard to click in the renderer
MIN_EDGE_SIZE = 2


def _from_mapping(cls, values: Mapping[str, Any], aliases: Mapping[str, str]):
    """Build an options dataclass from snake_case or renderer camelCase keys."""
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in values.items():
        name = aliases.get(key, key)
        if name not in known:
            raise TypeError(f"unknown {cls.__name__} option: {key!r}")
        kwargs[name] = value
    return cls(**kwargs)


def _check_non_negative(owner: str, name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{owner}.{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class NodeOptions:
    """Node styling; unset fields fall back to the defaults below.

    Args:
        size: Node size (default 8.0).
        color: Node color (default "#999999").
        type: Renderer node program (default "image").
        image_folder: Folder prefix of the node image (default "images/").
        image_extension: Image file extension (default ".jpg").
        label: Displayed label (default: the node name).
        label_color: Label color (default: the node color).
    """

    size: float = DEFAULT_NODE_SIZE
    color: str | None = None
    type: str = "image"
    image_folder: str = "images/"
    image_extension: str = ".jpg"
    label: str | None = None
    label_color: str | None = None

    def __post_init__(self):
        _check_non_negative("NodeOptions", "size", self.size)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "NodeOptions":
        return _from_mapping(cls, values, _NODE_ALIASES)

    def attributes(self, name: str) -> dict[str, Any]:
        """Renderer attributes for a node called *name*."""
        color = self.color or DEFAULT_COLOR
        return {
            "size": self.size,
            "label": self.label if self.label is not None else name,
            "type": self.type,
            "image": f"{self.image_folder}{name}{self.image_extension}",
            "color": color,
            "labelColor": self.label_color or color,
        }


_NODE_ALIASES = {
    "imageFolder": "image_folder",
    "imageExtension": "image_extension",
    "labelColor": "label_color",
}


@dataclass(frozen=True)
class EdgeOptions:
    """Edge styling.

    Args:
        type: Renderer edge program (default "line").
        weight: Edge weight (default 1.0).
        label: Edge label (default "").
        size: Edge thickness (default 3.0), raised to ``MIN_EDGE_SIZE``
            when smaller.
        color: Edge color (default "#999999").
    """

    type: str = "line"
    weight: float = 1.0
    label: str = ""
    size: float = DEFAULT_EDGE_SIZE
    color: str = DEFAULT_COLOR

    def __post_init__(self):
        _check_non_negative("EdgeOptions", "size", self.size)
        _check_non_negative("EdgeOptions", "weight", self.weight)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EdgeOptions":
        return _from_mapping(cls, values, {})

    def attributes(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "weight": self.weight,
            "label": self.label,
            "size": max(self.size, MIN_EDGE_SIZE),
            "color": self.color,
        }


def _coerce(cls, options):
    if options is None:
        return cls()
    if isinstance(options, cls):
        return options
    return cls.from_mapping(options)


def create_node(graph, name: str, options: NodeOptions | Mapping[str, Any] | None = None) -> None:
    """Add a styled node to *graph*.

    Args:
        graph: Object with ``add_node(node_id, **attrs)``.
        name: Node id; also the default label and the image file stem.
        options: NodeOptions, or a mapping of option names.
    """
    opts = _coerce(NodeOptions, options)
    graph.add_node(name, **opts.attributes(name))


def create_nodes(graph, nodes: Iterable) -> None:
    """Add several nodes in order.

    Each element is a ``(name, options)`` tuple, a mapping with a
    ``"name"`` key and an optional ``"options"`` key, or anything else,
    which is taken as a bare node id (so integer ids work too).
    """
    for node in nodes:
        if isinstance(node, tuple):
            name, options = node
            create_node(graph, name, options)
        elif isinstance(node, Mapping):
            create_node(graph, node["name"], node.get("options"))
        else:
            create_node(graph, node)


def create_edge(
    graph,
    source: str,
    target: str,
    options: EdgeOptions | Mapping[str, Any] | None = None,
) -> None:
    """Add a styled edge from *source* to *target*.

    Args:
        graph: Object with ``add_edge(source, target, **attrs)``.
        source: Source node id.
        target: Target node id.
        options: EdgeOptions, or a mapping of option names.
    """
    opts = _coerce(EdgeOptions, options)
    graph.add_edge(source, target, **opts.attributes())


def create_edges(graph, edges: Iterable) -> None:
    """Add several edges in order.

    Each element is a ``(source, target)`` or ``(source, target, options)``
    tuple, or a mapping with ``"source"``, ``"target"`` and an optional
    ``"options"`` key.
    """
    for edge in edges:
        if isinstance(edge, Mapping):
            create_edge(graph, edge["source"], edge["target"], edge.get("options"))
        else:
            create_edge(graph, *edge)
