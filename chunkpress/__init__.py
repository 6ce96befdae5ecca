"""Chunked compression tools, a text-file demo and a snake game."""

__version__ = "0.1.0"
__all__ = ["textfile", "rle", "zchunks", "snake"]