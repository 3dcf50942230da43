"""Nodes and trees of a parsed YML document, and the errors they raise."""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Iterator, TextIO, Union

NESTING_SPACES = 2

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class YmlError(Exception):
    """Base class of every error raised while reading YML."""


class YmlFileError(YmlError):
    """A YML file could not be opened."""

    def __init__(self, error: str) -> None:
        super().__init__(f"Could not open file: {error}")


class InvalidNodeType(YmlError):
    """A node was read as a type its value does not hold."""

    def __init__(self, name: str, type_name: str) -> None:
        super().__init__(f"{name}: Invalid node type: {type_name}.")


class UnknownNodeType(YmlError):
    """A node was read as a type that is not supported."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: Unknown node type.")


class NodeType(Enum):
    """How the value of a node is to be interpreted."""

    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    OBJECT = "object"
    LIST = "list"
    UNKNOWN = "unknown"


def _parse_int_prefix(text: str) -> int | None:
    """Read a leading 32-bit integer the way a stream extraction would."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def _parse_float_prefix(text: str) -> float | None:
    """Read a leading floating-point number, ignoring what follows it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


class Tree:
    """Named child nodes, kept in insertion order."""

    def __init__(self) -> None:
        self._children: dict[str, Node] = {}

    def add_node(self, node: Node) -> None:
        """Add a node under its name; an existing node of that name is kept."""
        self._children.setdefault(node.name, node)

    def clear(self) -> None:
        """Remove every child node."""
        self._children.clear()

    def names(self) -> list[str]:
        """Names of the child nodes, in insertion order."""
        return list(self._children)

    def __getitem__(self, key: Union[str, int]) -> Node:
        if isinstance(key, str):
            try:
                return self._children[key]
            except KeyError:
                raise KeyError(f"No such node: {key}") from None
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < len(self._children):
                raise IndexError("Index out of range in Tree")
            return list(self._children.values())[key]
        raise TypeError(f"Tree keys are names or indices, not {type(key).__name__}")

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over the child nodes themselves."""
        return iter(list(self._children.values()))

    def __repr__(self) -> str:
        return f"Tree({self.names()!r})"


class Node:
    """One entry of a YML document: a name, an optional value and children."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        self.is_list = False
        self.type = NodeType.UNKNOWN
        self.children = Tree()
        self._detect_list()
        self._detect_type()

    def _detect_list(self) -> None:
        if len(self.name) < 2:
            return
        self.is_list = self.name.startswith("- ")
        if self.is_list:
            self.name = self.name[2:]

    def _detect_type(self) -> None:
        if len(self.children):
            self.type = NodeType.LIST if self.is_list else NodeType.OBJECT
        elif not self.value:
            self.type = NodeType.STRING
        elif self.value in ("true", "false"):
            self.type = NodeType.BOOLEAN
        elif "." in self.value:
            parsed = _parse_float_prefix(self.value)
            self.type = NodeType.STRING if parsed is None else NodeType.DOUBLE
        else:
            parsed = _parse_int_prefix(self.value)
            self.type = NodeType.STRING if parsed is None else NodeType.INTEGER

    def as_type(self, kind: type = str) -> Union[str, int, float, bool]:
        """Return the value converted to ``str``, ``int``, ``float`` or ``bool``."""
        if kind is str:
            return self.value
        if kind is int:
            if self.type is not NodeType.INTEGER:
                raise InvalidNodeType(self.name, "INT")
            number = _parse_int_prefix(self.value)
            if number is None:
                raise InvalidNodeType(self.name, "INT")
            return number
        if kind is float:
            if self.type not in (NodeType.DOUBLE, NodeType.INTEGER):
                raise InvalidNodeType(self.name, "FLOAT")
            number = _parse_float_prefix(self.value)
            if number is None:
                raise InvalidNodeType(self.name, "FLOAT")
            return number
        if kind is bool:
            if self.type is not NodeType.BOOLEAN:
                raise InvalidNodeType(self.name, "BOOLEAN")
            return self.value in ("true", "1")
        raise UnknownNodeType(self.name)

    def dump(self, depth: int = 0, file: TextIO | None = None) -> None:
        """Print this node and its children, indented by depth."""
        out = sys.stdout if file is None else file
        indent = " " * (depth * NESTING_SPACES)
        if self.is_list:
            suffix = ":" if len(self.children) else ""
            out.write(f"{indent}- {self.name}{suffix}\n")
        else:
            suffix = f" {self.value}" if self.value else ""
            out.write(f"{indent}{self.name}:{suffix}\n")
        for child in self.children:
            child.dump(depth + 1, out)

    def __getitem__(self, key: Union[str, int]) -> Node:
        return self.children[key]

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, value={self.value!r}, type={self.type.name})"