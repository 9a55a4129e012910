"""Classic algorithms and data structures, with two small command-line tools."""

__version__ = "0.1.0"