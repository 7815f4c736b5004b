"""Dot encoding of files with printable-ASCII conversion, size reporting and dictionary generation."""

__version__ = "0.1.0"