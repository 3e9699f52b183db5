"""Classic algorithms and data structures: sorts, searches, queues, linked
lists, a binary search tree, greedy and graph algorithms, Huffman coding and
a terminal tic-tac-toe game."""

__version__ = "0.1.0"

__all__ = [
    "assembly",
    "bst",
    "circular",
    "dijkstra",
    "doubly",
    "greedy",
    "huffman",
    "priority_queues",
    "queues",
    "searching",
    "singly",
    "sorting",
    "tictactoe",
]