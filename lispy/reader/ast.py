from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AstNode:
    """Syntax tree node handed from the parser to the reader.

    `tag` is the `|`-joined chain of grammar rules that produced the node
    (e.g. ``expr|integer|regex``); leaves carry their literal text in
    `contents`, interior nodes their ordered `children`.
    """

    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    column: int = 1

    @property
    def children_num(self) -> int:
        return len(self.children)

    def is_leaf(self) -> bool:
        return not self.children

    def pretty(self, indent: int = 0) -> str:
        pad = "  " * indent
        if self.is_leaf():
            return f"{pad}{self.tag}:{self.line}:{self.column} '{self.contents}'"
        lines = [f"{pad}{self.tag} "]
        lines.extend(child.pretty(indent + 1) for child in self.children)
        return "\n".join(lines)


def count_nodes(node: AstNode) -> int:
    """Number of nodes in the tree rooted at `node`, `node` included."""
    return 1 + sum(count_nodes(child) for child in node.children)
