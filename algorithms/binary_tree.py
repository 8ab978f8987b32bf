"""Binary trees built from level order, with recursive and iterative walks."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BinaryTreeNode:
    """A node holding ``data`` and optional children."""

    data: Any
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class BinaryTree:
    """A binary tree; every traversal yields nodes."""

    def __init__(self, root: BinaryTreeNode | None = None) -> None:
        self.root = root

    @staticmethod
    def build_by_level(values: Sequence[Any]) -> BinaryTree:
        """Build a tree from values in level order.

        ``None`` or an empty string marks a missing child.
        """
        if not values:
            return BinaryTree()
        root = BinaryTreeNode(values[0])
        queue = deque([root])
        rest = iter(values[1:])
        while queue:
            current = queue.popleft()
            try:
                left = next(rest)
            except StopIteration:
                break
            if not _is_missing(left):
                current.left = BinaryTreeNode(left)
                queue.append(current.left)
            try:
                right = next(rest)
            except StopIteration:
                break
            if not _is_missing(right):
                current.right = BinaryTreeNode(right)
                queue.append(current.right)
        return BinaryTree(root)

    def _start(self, node: BinaryTreeNode | None) -> BinaryTreeNode | None:
        return self.root if node is None else node

    def pre_order(self, node: BinaryTreeNode | None = None) -> Iterator[BinaryTreeNode]:
        """Node, then left subtree, then right subtree, from ``node`` or the root."""
        start = self._start(node)
        if start is not None:
            yield from self._pre(start)

    def _pre(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        yield node
        if node.left:
            yield from self._pre(node.left)
        if node.right:
            yield from self._pre(node.right)

    def in_order(self, node: BinaryTreeNode | None = None) -> Iterator[BinaryTreeNode]:
        """Left subtree, then node, then right subtree."""
        start = self._start(node)
        if start is not None:
            yield from self._in(start)

    def _in(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        if node.left:
            yield from self._in(node.left)
        yield node
        if node.right:
            yield from self._in(node.right)

    def post_order(self, node: BinaryTreeNode | None = None) -> Iterator[BinaryTreeNode]:
        """Left subtree, then right subtree, then node."""
        start = self._start(node)
        if start is not None:
            yield from self._post(start)

    def _post(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        if node.left:
            yield from self._post(node.left)
        if node.right:
            yield from self._post(node.right)
        yield node

    def level_order(self) -> Iterator[BinaryTreeNode]:
        """Breadth first, left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)

    def pre_order_iterative(self) -> Iterator[BinaryTreeNode]:
        """Pre-order walk with an explicit stack."""
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def in_order_iterative(self) -> Iterator[BinaryTreeNode]:
        """In-order walk with an explicit stack."""
        stack: list[BinaryTreeNode] = []
        current = self.root
        while stack or current:
            while current:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def post_order_iterative(self) -> Iterator[BinaryTreeNode]:
        """Post-order walk using two stacks."""
        pending = [self.root] if self.root else []
        output: list[BinaryTreeNode] = []
        while pending:
            node = pending.pop()
            output.append(node)
            if node.left:
                pending.append(node.left)
            if node.right:
                pending.append(node.right)
        yield from reversed(output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a binary tree from level-order values and walk it."
    )
    parser.add_argument(
        "values",
        nargs="*",
        default=["A", "B", "C", "D", "E"],
        help="values in level order; an empty string marks a missing child",
    )
    args = parser.parse_args(argv)
    tree = BinaryTree.build_by_level(args.values)

    def show(label: str, nodes: Iterator[BinaryTreeNode]) -> None:
        print(f"{label}: " + " ".join(str(node.data) for node in nodes))

    show("preOrder", tree.pre_order())
    show("preOrder with no recursive", tree.pre_order_iterative())
    show("inOrder", tree.in_order())
    show("inOrder with no recursive", tree.in_order_iterative())
    show("postOrder", tree.post_order())
    show("postOrder with no recursive", tree.post_order_iterative())
    show("levelOrder", tree.level_order())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())