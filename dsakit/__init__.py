"""Teaching implementations of expression notation conversion, bounded
queues and stacks, integer hash tables and Prim's minimum spanning tree."""

__version__ = "0.1.0"
__all__ = ["notation", "containers", "hashing", "graph", "cli"]