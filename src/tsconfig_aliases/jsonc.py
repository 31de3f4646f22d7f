"""JSON-with-comments support: blank out // and /* */ comments using tree-sitter."""

from __future__ import annotations

from typing import List

import tree_sitter_json as tsjson
from tree_sitter import Language, Node, Parser

COMMENT_NODE = "comment"


def _comment_nodes(root: Node) -> List[Node]:
    """Collect comment nodes anywhere in the tree, including inside ERROR nodes."""
    found: List[Node] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == COMMENT_NODE:
            found.append(node)
            continue
        stack.extend(node.children)
    return found


def _blank(chunk: bytes) -> bytes:
    """Replace every byte with a space, keeping line breaks."""
    return bytes(b if b in (0x0A, 0x0D) else 0x20 for b in chunk)


class CommentStripper:
    """TextPreprocessor that removes comments from tsconfig-style JSON."""

    def __init__(self) -> None:
        self._language = Language(tsjson.language())
        self._parser = Parser(self._language)

    def strip_comments(self, text: str) -> str:
        """
        Return text with comments replaced by whitespace.

        Comments are blanked, not deleted: line and column numbers in a later
        JSON error match the original file. Comment markers inside string
        literals are left alone.
        Invalid JSON is not rejected here; json.loads reports it afterwards.
        """
        source = text.encode("utf-8")
        tree = self._parser.parse(source)
        comments = _comment_nodes(tree.root_node)
        if not comments:
            return text
        out = bytearray(source)
        for node in comments:
            out[node.start_byte : node.end_byte] = _blank(source[node.start_byte : node.end_byte])
        return out.decode("utf-8")


def strip_comments(text: str) -> str:
    """Strip // and /* */ comments from JSON text (see CommentStripper)."""
    return CommentStripper().strip_comments(text)
