"""Read, inspect and write MPEG transport stream packets, with command-line tools."""

__version__ = "0.1.0"