"""Building blocks for traceroute-style probing: bits, typed fields, generators and containers."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "buffer",
    "common",
    "dynarray",
    "field",
    "fieldtype",
    "generator",
    "linkedlist",
    "objects",
    "pair",
    "treemap",
    "treeset",
]