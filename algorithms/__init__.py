"""Classic algorithms and data structures: string matching, sorting, graphs and binary trees."""

__version__ = "0.1.0"