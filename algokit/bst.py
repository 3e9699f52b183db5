"""Unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return True
        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                return False
        self._size += 1
        return True

    def _find(self, value: Any) -> Tuple[Optional[_Node], Optional[_Node]]:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return parent, node

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent, node = self._find(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.value = succ.value
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def preorder(self) -> List[Any]:
        """Values in node, left, right order."""
        result: List[Any] = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def inorder(self) -> List[Any]:
        """Values in ascending order."""
        result: List[Any] = []
        stack: List[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> List[Any]:
        """Values in left, right, node order."""
        result: List[Any] = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, value: Any) -> bool:
        return self._find(value)[1] is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.preorder()!r})"