"""Substitution dictionaries used by the two encoding stages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from os import PathLike
from pathlib import Path
from types import MappingProxyType

FIRST_DICT: Mapping[str, str] = MappingProxyType(
    {
        "00000": "",
        "00001": ".",
        "00010": ".",
        "00011": "..",
        "00100": ".",
        "00101": ". .",
        "00110": "..",
        "00111": "...",
        "01000": ".",
        "01001": ". .",
        "01010": ". .",
        "01011": ". ..",
        "01100": "..",
        "01101": ".. .",
        "01110": "...",
        "01111": "....",
        "10000": ".",
        "10001": ". .",
        "10010": ". .",
        "10011": ". ..",
        "10100": ". .",
        "10101": ". . .",
        "10110": ". ..",
        "10111": ". ...",
        "11000": "..",
        "11001": ".. .",
        "11010": ".. .",
        "11011": ".. ..",
        "11100": "...",
        "11101": "... .",
        "11110": "....",
        "11111": ".....",
    }
)

SECOND_DICT: Mapping[str, str] = MappingProxyType(
    {
        ".....": "!",
        "....": "#",
        "...": "$",
        "..": "%",
        ". .": "&",
        ".": "*",
    }
)


class DictionaryError(Exception):
    """Base class for dictionary problems."""


class InvalidFormatError(DictionaryError):
    """Raised when dictionary data or encoder input is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid format: {message}")
        self.message = message


class EmptyDictionaryError(DictionaryError):
    """Raised when a dictionary file holds no entries."""

    def __init__(self) -> None:
        super().__init__("Dictionary is empty")


class CustomDictionary(Mapping):
    """A user-supplied mapping from chunks to replacement strings."""

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._map: dict[str, str] = dict(entries) if entries is not None else {}

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> CustomDictionary:
        """Load ``key=value`` lines from a text file.

        Every line must contain an ``=``; keys and values are stripped.
        Raises OSError if the file cannot be read.
        """
        contents = Path(path).read_text()
        dictionary = cls()
        for line in contents.splitlines():
            key, sep, value = line.partition("=")
            if not sep:
                raise InvalidFormatError("Each line must contain exactly one '=' separator")
            dictionary.insert(key.strip(), value.strip())
        if not dictionary:
            raise EmptyDictionaryError()
        return dictionary

    def insert(self, key: str, value: str) -> None:
        self._map[key] = value

    def remove(self, key: str) -> str | None:
        """Remove ``key`` and return its value, or None if it was absent."""
        return self._map.pop(key, None)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._map.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self._map[key]

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"