"""Recursive mountain, temple and word generators, with a small test runner."""

__version__ = "1.0.0"

__all__ = [
    "console",
    "memory",
    "mountains",
    "simpletest",
    "temple",
    "testdriver",
    "textutils",
    "timer",
    "words",
]