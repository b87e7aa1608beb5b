"""A general tree with printable structure and a binary tree with path traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

LEFT = "left"
RIGHT = "right"
_DIRECTIONS = (LEFT, RIGHT)


class TreeNode:
    """A node holding a value and any number of child nodes."""

    def __init__(self, value: str) -> None:
        self.value = value
        self.children: list[TreeNode] = []

    def add(self, child: TreeNode) -> None:
        """Append ``child`` as the last child."""
        self.children.append(child)

    def __getitem__(self, index: int) -> TreeNode:
        """Return the child at ``index``; negative or too large indices raise ``IndexError``."""
        if not 0 <= index < len(self.children):
            raise IndexError(
                f"child index {index} out of range for {len(self.children)} children"
            )
        return self.children[index]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.children)

    def render(self, indent: int = 0) -> str:
        """Return the tree as lines, each child indented two more spaces than its parent."""
        lines = [f"{' ' * indent}{self.value}\n"]
        lines.extend(child.render(indent + 2) for child in self.children)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r}, children={len(self.children)})"


@dataclass
class BinaryNode:
    """A binary tree node with optional left and right subtrees."""

    value: Any = 0
    left: BinaryNode | None = None
    right: BinaryNode | None = None


def traverse_path(node: BinaryNode | None, *args: str) -> BinaryNode | None:
    """Follow the directions ``"left"`` / ``"right"`` from ``node``.

    The last step may lead to an empty subtree, giving ``None``; stepping on
    from an empty subtree raises ``ValueError``, as does an unknown direction.
    """
    current = node
    for step, direction in enumerate(args):
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction {direction!r}")
        if current is None:
            raise ValueError(f"path leaves the tree before step {step}")
        current = getattr(current, direction)
    return current