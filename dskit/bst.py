"""Binary trees: traversals and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then the right subtree."""
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values node first, then the left subtree, then the right subtree."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree first, then the right subtree, then the node."""
    stack = [node] if node is not None else []
    visited: list[Any] = []
    while stack:
        current = stack.pop()
        visited.append(current.data)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(visited)


class BinarySearchTree:
    """Unbalanced binary search tree.

    Equal values go to the right subtree when ``allow_duplicates`` is true and
    are ignored otherwise.
    """

    def __init__(self, values: Iterable[Any] = (), allow_duplicates: bool = True) -> None:
        self.root: Optional[TreeNode] = None
        self.allow_duplicates = allow_duplicates
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` at its place in the tree."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.data or self.allow_duplicates:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if value < node.data else node.right  # type: ignore[operator]
        return False

    def min(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        node = self.root
        if node is None:
            raise ValueError("tree is empty")
        while node.left is not None:
            node = node.left
        return node.data

    def max(self) -> Any:
        """Return the largest value; raise ValueError if the tree is empty."""
        node = self.root
        if node is None:
            raise ValueError("tree is empty")
        while node.right is not None:
            node = node.right
        return node.data

    def inorder(self) -> list[Any]:
        """Return the values in sorted order."""
        return list(inorder(self.root))

    def preorder(self) -> list[Any]:
        return list(preorder(self.root))

    def postorder(self) -> list[Any]:
        return list(postorder(self.root))

    def kth_smallest(self, k: int) -> Any:
        """Return the ``k``-th smallest value, counting from 1."""
        if k < 1:
            raise ValueError("k must be at least 1")
        found = list(islice(inorder(self.root), k - 1, k))
        if not found:
            raise IndexError(f"Less than {k} elements in BST.")
        return found[0]

    def __iter__(self) -> Iterator[Any]:
        return inorder(self.root)

    def __len__(self) -> int:
        return self._size