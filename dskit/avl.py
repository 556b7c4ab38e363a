"""A self-balancing AVL tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from dskit.bst import inorder, preorder


@dataclass
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.data:
        node.left = _insert(node.left, key)
    elif key > node.data:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.data:
        return _rotate_right(node)
    if balance < -1 and key > node.right.data:
        return _rotate_left(node)
    if balance > 1 and key > node.left.data:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.data:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is None:
            return None
        node = child
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data)

    _update(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Height-balanced binary search tree; duplicate keys are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> None:
        """Insert ``key`` unless it is already present."""
        if key in self:
            return
        self._root = _insert(self._root, key)
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key``; a key that is not present leaves the tree unchanged."""
        if key not in self:
            return
        self._root = _delete(self._root, key)
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def inorder(self) -> list[Any]:
        """Return the keys in sorted order."""
        return list(inorder(self._root))

    def preorder(self) -> list[Any]:
        return list(preorder(self._root))

    def height(self) -> int:
        """Return the number of levels; 0 for an empty tree."""
        return _height(self._root)