"""The node-graph document: nodes, the links between their pins, and the YAML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .ids import IdProvider
from .nodes import InputNode, Node, OutputNode, RasterizedNode, create_node

APPLICATION_NAME = "HawkEyeEdit"
FIRST_LINK_ID = 100


@dataclass(frozen=True)
class Link:
    """A connection between two pins; each link has an identifier of its own."""

    id: int
    input_id: int
    output_id: int
    input_node_id: int
    output_node_id: int


class Editor:
    """Holds the nodes and links of one graph file.

    Used as a context manager it loads the file on entry and saves it on a
    clean exit.
    """

    name = APPLICATION_NAME

    def __init__(self, path: str | Path, provider: IdProvider | None = None) -> None:
        self.path = Path(path)
        self.provider = provider if provider is not None else IdProvider()
        self.nodes: list[Node] = []
        self.links: list[Link] = []
        self._next_link_id = FIRST_LINK_ID

    def __enter__(self) -> Editor:
        self.load()
        return self

    def __exit__(self, exc_type: Any, exc: Any, traceback: Any) -> None:
        if exc_type is None:
            self.save()

    def load(self) -> None:
        """Read the nodes stored in the file; a missing file leaves the graph as is."""
        if not self.path.exists():
            return
        with self.path.open(encoding="utf-8") as stream:
            document = yaml.safe_load(stream) or {}
        for item in document.get("nodes") or []:
            meta = item["meta"]
            x, y = float(meta["x"]), float(meta["y"])
            node = create_node(item["type"], x, y, self.provider)
            node.deserialize(item)
            node.position = (x, y)
            self.nodes.append(node)

    def save(self) -> None:
        """Write the nodes to the file; nothing is written when there are none."""
        if not self.nodes:
            return
        entries = []
        for node in self.nodes:
            entry = node.serialize()
            x, y = node.position
            entry["meta"] = {"x": x, "y": y}
            entries.append(entry)
        with self.path.open("w", encoding="utf-8") as stream:
            yaml.safe_dump({"nodes": entries}, stream, sort_keys=False)

    def _add(self, node: Node) -> Node:
        self.nodes.append(node)
        return node

    def add_input_node(self, x: float, y: float) -> InputNode:
        return self._add(InputNode(x, y, self.provider))

    def add_output_node(self, x: float, y: float) -> OutputNode:
        return self._add(OutputNode(x, y, self.provider))

    def add_rasterized_node(self, x: float, y: float) -> RasterizedNode:
        return self._add(RasterizedNode(x, y, self.provider))

    def _owner_of(self, pin_id: int) -> int | None:
        for node in self.nodes:
            if node.owns_input(pin_id) or node.owns_output(pin_id):
                return node.id
        return None

    def connect(self, input_pin_id: int, output_pin_id: int) -> Link:
        """Link two distinct pins that belong to nodes of this graph."""
        if not input_pin_id or not output_pin_id or input_pin_id == output_pin_id:
            raise ValueError("a link needs two distinct, non-zero pins")
        input_node_id = self._owner_of(input_pin_id)
        output_node_id = self._owner_of(output_pin_id)
        if input_node_id is None or output_node_id is None:
            raise ValueError(
                f"pins {input_pin_id} and {output_pin_id} do not both belong to a node"
            )
        link = Link(
            self._next_link_id, input_pin_id, output_pin_id, input_node_id, output_node_id
        )
        self._next_link_id += 1
        self.links.append(link)
        return link

    def disconnect(self, link_id: int) -> bool:
        """Remove the link with this identifier; return whether one was removed."""
        for link in self.links:
            if link.id == link_id:
                self.links.remove(link)
                return True
        return False