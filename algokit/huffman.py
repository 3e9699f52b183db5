"""Huffman coding trees and the prefix codes they give."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(eq=False)
class HuffmanNode:
    """Node of a Huffman tree; only leaves carry a symbol."""

    frequency: int
    symbol: Any = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Binary min-heap of nodes keyed on frequency, built in place."""

    def __init__(self, nodes: List[HuffmanNode]) -> None:
        self._items = nodes
        for index in range((len(nodes) - 2) // 2, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child].frequency < items[smallest].frequency:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def pop(self) -> HuffmanNode:
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self._items
        items.append(node)
        index = len(items) - 1
        while index:
            parent = (index - 1) // 2
            if not node.frequency < items[parent].frequency:
                break
            items[index] = items[parent]
            index = parent
        items[index] = node


def build_huffman_tree(symbols: Sequence[Any], frequencies: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two rarest nodes.

    The first node taken becomes the left child, the second the right.
    """
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if any(f < 0 for f in frequencies):
        raise ValueError("frequencies must not be negative")
    heap = _MinHeap([HuffmanNode(f, s) for s, f in zip(symbols, frequencies)])
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(left.frequency + right.frequency, None, left, right))
    return heap.pop()


def huffman_codes(symbols: Sequence[Any], frequencies: Sequence[int]) -> Dict[Any, str]:
    """Map each symbol to its code of '0' (left) and '1' (right) digits.

    Symbols appear in left-to-right order of the tree's leaves. A lone
    symbol gets the empty code.
    """
    root = build_huffman_tree(symbols, frequencies)
    codes: Dict[Any, str] = {}
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes