"""Render-graph nodes, their resources and pins, and their YAML-ready form."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .ids import IdProvider, number_to_uuid_string, uuid_string_to_number

MAX_INPUTS = 20

TYPE_OPTIONS = ("image", "buffer")
CONTENT_OPERATION_OPTIONS = ("don't care", "preserve", "clear")


class NodeTypeError(ValueError):
    """Raised when serialized data does not describe the expected kind of node."""


def _clamp_count(count: int) -> int:
    return max(1, min(MAX_INPUTS, int(count)))


@dataclass
class Dimensions:
    """Extent of a resource."""

    x: int = 0
    y: int = 0
    z: int = 0


@dataclass
class ResourcePin:
    """One end of a resource; a slot of -1 means the pin is absent."""

    node_id: int
    slot: int
    is_input: bool
    dimensions: Dimensions = field(default_factory=Dimensions)
    format: str = ""

    @property
    def exists(self) -> bool:
        return self.slot != -1

    def pin_id(self) -> int:
        """Identifier of this pin within the editor."""
        if not self.exists:
            raise ValueError("pin is absent and has no identifier")
        offset = self.slot + 1 if self.is_input else MAX_INPUTS + self.slot + 1
        return self.node_id + offset

    def deserialize(self, data: dict[str, Any] | None) -> None:
        """Read dimensions and format; without dimensions nothing is read."""
        if not data or not data.get("dimensions"):
            return
        dimensions = data["dimensions"]
        for axis in ("x", "y", "z"):
            if dimensions.get(axis) is not None:
                setattr(self.dimensions, axis, int(dimensions[axis]))
        if data.get("format") is not None:
            self.format = str(data["format"])

    def serialize(self) -> dict[str, Any]:
        return {
            "dimensions": {
                "x": self.dimensions.x,
                "y": self.dimensions.y,
                "z": self.dimensions.z,
            },
            "format": self.format,
        }


class Resource:
    """A resource passing through a node, with an optional input and output pin."""

    def __init__(self, node_id: int, in_slot: int, out_slot: int) -> None:
        self.type = 0
        self.content_operation = 0
        self.input = ResourcePin(node_id, in_slot, True)
        self.output = ResourcePin(node_id, out_slot, False)

    @property
    def type_name(self) -> str:
        return TYPE_OPTIONS[self.type]

    @property
    def content_operation_name(self) -> str:
        return CONTENT_OPERATION_OPTIONS[self.content_operation]

    def deserialize(self, data: dict[str, Any]) -> None:
        self.type = int(data["type"])
        if data.get("content-operation") is not None:
            self.content_operation = int(data["content-operation"])
        self.input.deserialize(data.get("input"))
        self.output.deserialize(data.get("output"))

    def serialize(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content-operation": self.content_operation,
            "input": self.input.serialize(),
            "output": self.output.serialize(),
        }


class Node(ABC):
    """A node of the render graph placed at a position in the editor."""

    kind: ClassVar[str]

    def __init__(self, x: float, y: float, provider: IdProvider) -> None:
        self.id = provider.next()
        self.position = (float(x), float(y))

    @property
    def id_str(self) -> str:
        return number_to_uuid_string(self.id)

    @property
    @abstractmethod
    def input_count(self) -> int: ...

    @property
    @abstractmethod
    def output_count(self) -> int: ...

    def input_id(self, position: int) -> int:
        return self.id + position + 1

    def output_id(self, position: int) -> int:
        return self.id + MAX_INPUTS + position + 1

    def owns_input(self, pin_id: int) -> bool:
        return pin_id in range(self.input_id(0), self.input_id(self.input_count))

    def owns_output(self, pin_id: int) -> bool:
        return pin_id in range(self.output_id(0), self.output_id(self.output_count))

    def _read_header(self, data: dict[str, Any]) -> None:
        if data["type"] != self.kind:
            raise NodeTypeError(
                f"the type of a {self.kind} node has to be {self.kind!r}, "
                f"got {data['type']!r}"
            )
        self.id = uuid_string_to_number(str(data["id"]))

    def _header(self) -> dict[str, Any]:
        return {"id": self.id_str, "type": self.kind}

    @abstractmethod
    def deserialize(self, data: dict[str, Any]) -> None: ...

    @abstractmethod
    def serialize(self) -> dict[str, Any]: ...


class InputNode(Node):
    """Source of resources: output pins only."""

    kind = "input"

    def __init__(self, x: float, y: float, provider: IdProvider) -> None:
        super().__init__(x, y, provider)
        self.resources: list[Resource] = []
        self.set_output_count(1)

    @property
    def input_count(self) -> int:
        return 0

    @property
    def output_count(self) -> int:
        return len(self.resources)

    def set_output_count(self, count: int) -> None:
        """Resize the resources to ``count``, kept within 1..MAX_INPUTS."""
        count = _clamp_count(count)
        del self.resources[count:]
        self.resources.extend(
            Resource(self.id, -1, slot) for slot in range(len(self.resources), count)
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        self._read_header(data)
        int(data["resource-count"])  # required by the format; the list is authoritative
        self.resources = []
        for slot, item in enumerate(data.get("resources") or []):
            resource = Resource(self.id, -1, slot)
            resource.deserialize(item)
            self.resources.append(resource)
        self.set_output_count(len(self.resources))

    def serialize(self) -> dict[str, Any]:
        data = self._header()
        data["resource-count"] = self.output_count
        data["resources"] = [resource.serialize() for resource in self.resources]
        return data


class OutputNode(Node):
    """Sink of resources: input pins only."""

    kind = "output"

    def __init__(self, x: float, y: float, provider: IdProvider) -> None:
        super().__init__(x, y, provider)
        self.resources: list[Resource] = []
        self.set_input_count(1)

    @property
    def input_count(self) -> int:
        return len(self.resources)

    @property
    def output_count(self) -> int:
        return 0

    def set_input_count(self, count: int) -> None:
        """Resize the resources to ``count``, kept within 1..MAX_INPUTS."""
        count = _clamp_count(count)
        del self.resources[count:]
        self.resources.extend(
            Resource(self.id, slot, -1) for slot in range(len(self.resources), count)
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        self._read_header(data)
        self.resources = []
        for slot, item in enumerate(data.get("resources") or []):
            resource = Resource(self.id, slot, -1)
            resource.deserialize(item)
            self.resources.append(resource)
        self.set_input_count(len(self.resources))

    def serialize(self) -> dict[str, Any]:
        data = self._header()
        data["resources"] = [resource.serialize() for resource in self.resources]
        return data


class RasterizedNode(Node):
    """A rasterization pass with counted input and output resources."""

    kind = "rasterized"

    def __init__(self, x: float, y: float, provider: IdProvider) -> None:
        super().__init__(x, y, provider)
        self._input_count = 1
        self._output_count = 1

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def output_count(self) -> int:
        return self._output_count

    def set_input_count(self, count: int) -> None:
        self._input_count = _clamp_count(count)

    def set_output_count(self, count: int) -> None:
        self._output_count = _clamp_count(count)

    def deserialize(self, data: dict[str, Any]) -> None:
        self._read_header(data)
        self.set_input_count(data["input"]["resource-count"])
        self.set_output_count(data["output"]["resource-count"])

    def serialize(self) -> dict[str, Any]:
        data = self._header()
        data["input"] = {"resource-count": self._input_count}
        data["output"] = {"resource-count": self._output_count}
        return data


_NODE_KINDS: dict[str, type[Node]] = {
    cls.kind: cls for cls in (OutputNode, InputNode, RasterizedNode)
}


def create_node(kind: str, x: float, y: float, provider: IdProvider) -> Node:
    """Create an empty node of the named kind at the given position."""
    try:
        cls = _NODE_KINDS[kind]
    except KeyError:
        raise NodeTypeError(f"unknown node type {kind!r}") from None
    return cls(x, y, provider)