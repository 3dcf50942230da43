"""Line-based parser that turns YML text into a tree of nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from raytracer.yml_node import Node, Tree, YmlError

if TYPE_CHECKING:
    from raytracer.yml import Yml

_WHITESPACE = frozenset(" \t\n\v\f\r")


def split(text: str, delim: str) -> list[str]:
    """Split text on a delimiter and strip leading spaces from every piece."""
    return [piece.lstrip(" ") for piece in text.split(delim)]


def _count_leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _should_skip_line(line: str) -> bool:
    """Blank lines, lines of whitespace only and comments are skipped."""
    for char in line:
        if char not in _WHITESPACE:
            return char == "#"
    return True


def _path_prefix(path: str, depth: int) -> str:
    """Keep the first ``depth`` dot-separated components of a path."""
    if not path or depth == 0:
        return ""
    return ".".join(path.split(".")[:depth])


def _is_object(name: str, line: str) -> bool:
    return f"{name}:" in line


class Parser:
    """Fills a tree from YML text; the text is parsed on construction."""

    def __init__(self, yml: Yml, raw_content: str, tree: Tree, nesting_level: int) -> None:
        if nesting_level <= 0:
            raise ValueError("nesting level must be a positive number of spaces")
        self._yml = yml
        self._tree = tree
        self._nesting_level = nesting_level
        self._current_path = ""
        self.parse(raw_content)

    def parse(self, raw_content: str) -> None:
        """Parse every meaningful line of the text into the tree."""
        for line in raw_content.split("\n"):
            if _should_skip_line(line):
                continue
            self._parse_line(line)

    def _parse_line(self, line: str) -> None:
        spaces = _count_leading_spaces(line)
        tokens = split(line, ":")
        if len(tokens) > 2:
            raise YmlError(f"Invalid line: {line!r}")
        node = Node(tokens[0], tokens[1] if len(tokens) == 2 else "")
        self._place_node(line, node, spaces)

    def _place_node(self, line: str, node: Node, spaces: int) -> None:
        depth = spaces // self._nesting_level
        self._current_path = _path_prefix(self._current_path, depth)

        parent = None
        if self._current_path:
            parent = self._yml.get_node(self._current_path)
            if parent is None:
                raise YmlError(f"No such node: {self._current_path}")

        if not node.value and _is_object(node.name, line):
            if self._current_path:
                self._current_path += "."
            self._current_path += node.name

        if parent is None:
            self._tree.add_node(node)
        else:
            parent.children.add_node(node)