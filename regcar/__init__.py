"""Fixed-record binary files with a chained hash index: a car registry, a ticket counter and a float log."""

__version__ = "0.1.0"

__all__ = [
    "hashtable",
    "plates",
    "cars",
    "registry",
    "cars_cli",
    "tickets",
    "floatlog",
]