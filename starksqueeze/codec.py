"""The two-stage dot encoding and validation of ASCII dictionaries."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from .dictionary import FIRST_DICT, SECOND_DICT, DictionaryError, InvalidFormatError

_CHUNK_SIZE = 5
_ASCII_LIMIT = 126


class CodecError(ValueError):
    """Raised when the built-in encoders cannot process their input."""


class DictionaryValidationError(ValueError):
    """Base class for problems found in an ASCII dictionary."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidAsciiFieldError(DictionaryValidationError):
    """A field holds a character outside the range 0..126."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field contains invalid ASCII characters: {field}", field)


class LengthMismatchError(DictionaryValidationError):
    """A field is not exactly five bytes long."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field has incorrect length (must be 5): {field}", field)


class DuplicateEntryError(DictionaryValidationError):
    """The same field appears twice."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate entry found: {field}", field)


class MissingCharsError(DictionaryValidationError):
    """Some ASCII characters are covered by no field."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Dictionary missing ASCII characters: {missing!r}")
        self.missing = missing


def _is_binary(text: str) -> bool:
    return all(c in "01" for c in text)


def _inverse(dictionary: Mapping[str, str]) -> dict[str, str]:
    """Map values back to keys; where values repeat, the first key wins."""
    inverse: dict[str, str] = {}
    for key, value in dictionary.items():
        if value:
            inverse.setdefault(value, key)
    return inverse


def _greedy_translate(text: str, dictionary: Mapping[str, str]) -> str:
    """Emit a value each time the accumulated characters form a key."""
    parts: list[str] = []
    current = ""
    for char in text:
        current += char
        value = dictionary.get(current)
        if value is not None:
            parts.append(value)
            current = ""
    if current:
        raise InvalidFormatError(f"Invalid sequence at end: {current}")
    return "".join(parts)


def encoding_one_with_dict(binary_string: str, dictionary: Mapping[str, str]) -> str:
    """Left-pad a bit string to whole 5-bit chunks and substitute each chunk."""
    if not binary_string:
        return ""
    if not _is_binary(binary_string):
        raise InvalidFormatError("Input must be a binary string")

    padded_length = -(-len(binary_string) // _CHUNK_SIZE) * _CHUNK_SIZE
    padded = binary_string.rjust(padded_length, "0")

    parts: list[str] = []
    for start in range(0, padded_length, _CHUNK_SIZE):
        chunk = padded[start:start + _CHUNK_SIZE]
        value = dictionary.get(chunk)
        if value is None:
            raise InvalidFormatError(f"No mapping found for chunk: {chunk}")
        parts.append(value)
    return "".join(parts)


def decoding_one_with_dict(dot_string: str, dictionary: Mapping[str, str]) -> str:
    """Reverse the first stage using the inverse of ``dictionary``."""
    if not dot_string:
        return ""
    return _greedy_translate(dot_string, _inverse(dictionary))


def encoding_two_with_dict(dot_string: str, dictionary: Mapping[str, str]) -> str:
    """Replace dot patterns by symbols, longest pattern first.

    Spaces that do not belong to a pattern are dropped.
    """
    if not dot_string:
        return ""
    keys = sorted((key for key in dictionary if key), key=len, reverse=True)
    parts: list[str] = []
    position = 0
    while position < len(dot_string):
        for key in keys:
            if dot_string.startswith(key, position):
                parts.append(dictionary[key])
                position += len(key)
                break
        else:
            if dot_string[position] != " ":
                raise InvalidFormatError(
                    f"Invalid sequence at position {position}: {dot_string[position:]}"
                )
            position += 1
    return "".join(parts)


def decoding_two_with_dict(encoded_string: str, dictionary: Mapping[str, str]) -> str:
    """Reverse the second stage using the inverse of ``dictionary``."""
    if not encoded_string:
        return ""
    return _greedy_translate(encoded_string, _inverse(dictionary))


def _with_codec_error(
    func: Callable[[str, Mapping[str, str]], str], text: str, dictionary: Mapping[str, str]
) -> str:
    try:
        return func(text, dictionary)
    except DictionaryError as exc:
        raise CodecError(str(exc)) from exc


def encoding_one(binary_string: str) -> str:
    """First stage with the built-in dictionary."""
    return _with_codec_error(encoding_one_with_dict, binary_string, FIRST_DICT)


def decoding_one(dot_string: str) -> str:
    """Inverse of the first stage with the built-in dictionary."""
    return _with_codec_error(decoding_one_with_dict, dot_string, FIRST_DICT)


def encoding_two(dot_string: str) -> str:
    """Second stage with the built-in dictionary."""
    return _with_codec_error(encoding_two_with_dict, dot_string, SECOND_DICT)


def decoding_two(encoded_string: str) -> str:
    """Inverse of the second stage with the built-in dictionary."""
    return _with_codec_error(decoding_two_with_dict, encoded_string, SECOND_DICT)


def validate_ascii_dictionary(dict_array: Sequence[str]) -> None:
    """Check that fields are unique 5-byte ASCII strings covering codes 0..126."""
    seen: set[str] = set()
    covered: set[str] = set()
    for field in dict_array:
        if len(field.encode("utf-8")) != _CHUNK_SIZE:
            raise LengthMismatchError(field)
        for char in field:
            if ord(char) > _ASCII_LIMIT:
                raise InvalidAsciiFieldError(field)
            covered.add(char)
        if field in seen:
            raise DuplicateEntryError(field)
        seen.add(field)

    missing = sorted(set(map(chr, range(_ASCII_LIMIT + 1))) - covered)
    if missing:
        raise MissingCharsError(missing)