"""Classic data structures: a dynamic array, linked lists, a graph, a hash table, a min-heap, a disjoint set and a trie."""

__version__ = "0.1.0"