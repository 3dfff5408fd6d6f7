"""Classic algorithms and data structures: graphs, dynamic programming, number theory, heaps, hash maps, linked lists and more."""

__version__ = "0.1.0"