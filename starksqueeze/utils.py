"""Small helpers shared across the package."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

_FELT_MAX_CHARS = 31
_U128_MASK = (1 << 128) - 1


def short_string_to_felt(text: str) -> int:
    """Pack a short alphanumeric string into a field-element integer.

    The lowercased text is left-aligned in a 31-byte big-endian buffer and
    only the low 128 bits of that value are kept.
    """
    if len(text.encode()) > _FELT_MAX_CHARS:
        raise ValueError("String too long to fit in felt")
    if not all(c.isascii() and c.isalnum() for c in text):
        raise ValueError("String contains invalid characters")
    buffer = text.lower().encode("ascii").ljust(_FELT_MAX_CHARS, b"\0")
    return int.from_bytes(buffer, "big") & _U128_MASK


def read_file_bytes(file_path: str | PathLike[str]) -> bytes:
    """Return the raw contents of a file."""
    return Path(file_path).read_bytes()


def binary_to_dots(binary_string: str) -> str:
    """Replace every ``0`` with ``.`` and every ``1`` with a space."""
    return binary_string.replace("0", ".").replace("1", " ")


def matches_pattern(text: str, pattern: str) -> bool:
    """Return whether ``text`` begins with ``pattern``."""
    return text.startswith(pattern)