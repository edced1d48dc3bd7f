"""
noglobals — Go source parser using tree-sitter.
"""

from __future__ import annotations

import logging

import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser, Tree


GO_LANGUAGE = Language(tsgo.language())

# The grammar also accepts statements at file level; Go does not
_TOP_LEVEL_TYPES = {
    "comment",
    "import_declaration",
    "function_declaration",
    "method_declaration",
    "const_declaration",
    "var_declaration",
    "type_declaration",
}

logger = logging.getLogger("noglobals.parser")


class ParseError(ValueError):
    """A Go file could not be parsed. Fatal for the whole scan."""

    def __init__(
        self,
        message: str,
        file_path: str = "<unknown>",
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file_path = file_path
        self.line = line
        self.column = column

    def __str__(self) -> str:
        location = self.file_path
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{location}: {self.message}"


def _first_error(node: Node) -> Node | None:
    """Depth-first search for the first ERROR or missing node."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class GoParser:
    """Thin wrapper around tree-sitter for Go source code."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def parse(self, code: str | bytes, file_path: str = "<unknown>") -> tuple[Tree, bytes]:
        """Parse Go source and return (tree, source_bytes).

        Raises ParseError if the code contains a syntax error, does not
        start with a package clause, or has anything but declarations at
        file level.
        """
        source_bytes = code.encode("utf-8") if isinstance(code, str) else code
        tree = self._parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            bad = _first_error(root) or root
            row, col = bad.start_point
            if bad.is_missing:
                message = f"missing {bad.type}"
            else:
                snippet = source_bytes[bad.start_byte:bad.end_byte].decode(
                    "utf-8", errors="replace"
                )
                message = f"syntax error near {snippet[:40]!r}"
            logger.debug("Parse failed for %s at %d:%d", file_path, row + 1, col + 1)
            raise ParseError(message, file_path, row + 1, col + 1)

        first = next((c for c in root.named_children if c.type != "comment"), None)
        if first is None or first.type != "package_clause":
            line = first.start_point[0] + 1 if first is not None else 1
            raise ParseError("expected 'package' clause", file_path, line, 1)

        for node in root.named_children:
            if node.start_byte == first.start_byte or node.type in _TOP_LEVEL_TYPES:
                continue
            row, col = node.start_point
            raise ParseError(
                f"non-declaration statement outside function body ({node.type})",
                file_path, row + 1, col + 1,
            )

        return tree, source_bytes
