"""Classic algorithms: searching, cyclic sort, graphs, dynamic programming, greedy and interview problems."""

__version__ = "0.1.0"