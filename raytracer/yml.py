"""Loading YML documents from files or text and looking up their nodes."""

from __future__ import annotations

import sys
from typing import TextIO

from raytracer.yml_node import NESTING_SPACES, Node, Tree, YmlFileError
from raytracer.yml_parser import Parser, split


class Yml:
    """A parsed YML document."""

    def __init__(
        self,
        source: str | None = None,
        is_raw_content: bool = False,
        nesting_level: int = NESTING_SPACES,
    ) -> None:
        self.filepath = source or ""
        self.raw_content = ""
        self.tree = Tree()
        if source is None:
            return
        if is_raw_content:
            self.load_from_raw_content(source, nesting_level)
        else:
            self.load_from_filepath(source, nesting_level)

    def load_from_filepath(self, filepath: str, nesting_level: int = NESTING_SPACES) -> None:
        """Replace the document with the content of a file."""
        self.tree.clear()
        try:
            with open(filepath, encoding="utf-8") as handle:
                self.raw_content = handle.read()
        except OSError:
            raise YmlFileError(filepath) from None
        Parser(self, self.raw_content, self.tree, nesting_level)

    def load_from_raw_content(self, raw_content: str, nesting_level: int = NESTING_SPACES) -> None:
        """Replace the document with the given text."""
        self.tree.clear()
        self.raw_content = raw_content
        Parser(self, self.raw_content, self.tree, nesting_level)

    def get_node(self, search: str) -> Node | None:
        """Find a node by its dotted path, or return None."""
        current: Node | None = None
        for part in split(search, "."):
            container = self.tree if current is None else current.children
            if part not in container:
                return None
            current = container[part]
        return current

    def dump(self, file: TextIO | None = None) -> None:
        """Print the whole document."""
        out = sys.stdout if file is None else file
        out.write("---=== YML Dump ===---\n\n")
        for node in self.tree:
            node.dump(0, out)
        out.write("\n---=== -------- ===---\n")

    def __getitem__(self, name: str) -> Node:
        return self.tree[name]

    def __contains__(self, name: object) -> bool:
        return name in self.tree