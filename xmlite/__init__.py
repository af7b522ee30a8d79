"""A small stack-driven XML parser building a node tree from UTF-8 input."""

__version__ = "1.0.0"

__all__ = ["alloc", "chars", "encoding", "errors", "node", "parser", "reader", "xmlstring"]