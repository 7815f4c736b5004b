"""Reading and writing files as ASCII text and bit strings."""

from __future__ import annotations

import hashlib
import json
from os import PathLike
from pathlib import Path

from .ascii_converter import convert_file_to_ascii

_DEFAULT_OUTPUT = "output.bin"
_MAX_ASCII = 126


class AsciiToFileError(Exception):
    """Base class for failures when writing ASCII text to a file."""


class InvalidAsciiError(AsciiToFileError, ValueError):
    """Raised when text or file data holds non-ASCII characters."""


class FileIntegrityError(AsciiToFileError):
    """Raised when a written file does not match what was written."""


def ascii_to_file(ascii_input: str, output_path: str | PathLike[str]) -> None:
    """Write ASCII text byte for byte and verify the written file."""
    if any(ord(c) > 127 for c in ascii_input):
        raise InvalidAsciiError("Input contains non-ASCII characters (code > 127)")

    data = ascii_input.encode("ascii")
    path = Path(output_path)
    path.write_bytes(data)

    written = path.read_bytes()
    if len(written) != len(data):
        raise FileIntegrityError("File size mismatch after writing")
    if hashlib.sha256(written).digest() != hashlib.sha256(data).digest():
        raise FileIntegrityError("Hash mismatch detected after file write")

    print(f"✅ ASCII string successfully written to {path} and verified.")


def file_to_binary(file_path: str | PathLike[str]) -> bytes:
    """Read an ASCII file and convert its control characters to printable ones.

    Raises InvalidAsciiError at the first byte above 126.
    """
    data = Path(file_path).read_bytes()
    for offset, byte in enumerate(data):
        if byte > _MAX_ASCII:
            raise InvalidAsciiError(f"Non-ASCII byte (value {byte}) found at offset {offset}")
    print("\n🔄 Converting file to printable ASCII...")
    return convert_file_to_ascii(data)


def pad_binary_string(binary_string: str) -> str:
    """Right-pad with zeros to a whole number of bytes."""
    return binary_string + "0" * (-len(binary_string) % 8)


def unpad_binary_string(padded: str, original_length: int) -> str:
    return padded[:original_length]


def binary_to_file(text: str, output_path: str | PathLike[str] | None = None) -> Path:
    """Pack a bit string into a file headed by its bit count.

    Whitespace in ``text`` is ignored. The header is a big-endian 16-bit
    count, so lengths are stored modulo 65536.
    """
    binary_string = "".join(text.split())
    if not all(c in "01" for c in binary_string):
        raise ValueError("Invalid binary string")

    path = Path(output_path if output_path is not None else _DEFAULT_OUTPUT)
    print(f"🚀 Converting binary string of size {len(binary_string)} bits to file...")

    header = (len(binary_string) & 0xFFFF).to_bytes(2, "big")
    padded = pad_binary_string(binary_string)
    body = bytes(int(padded[i:i + 8], 2) for i in range(0, len(padded), 8))
    path.write_bytes(header + body)

    print(f"✅ File saved successfully to: {path} 🎉")
    return path


def read_binary_file(file_path: str | PathLike[str]) -> str:
    """Read a file written by binary_to_file back into a bit string."""
    data = Path(file_path).read_bytes()
    if len(data) < 2:
        raise EOFError("File too short to hold a length header")
    original_length = int.from_bytes(data[:2], "big")
    needed = -(-original_length // 8)
    body = data[2:2 + needed]
    if len(body) < needed:
        raise EOFError("File ended before all bits were read")
    bits = "".join(f"{byte:08b}" for byte in body)
    return unpad_binary_string(bits, original_length)


def split_by_5(binary_string: str) -> str:
    """Return a JSON array of the 5-bit chunks of a bit string.

    Empty or non-binary input gives an empty array.
    """
    if not binary_string or not all(c in "01" for c in binary_string):
        return "[]"
    print(f"🚀 Splitting binary string of size {len(binary_string)} bits...")
    chunks = [binary_string[i:i + 5] for i in range(0, len(binary_string), 5)]
    return json.dumps(chunks, separators=(",", ":"))


def join_by_5(data: bytes, output_path: str | PathLike[str]) -> Path:
    """Write ``data`` to ``output_path`` in 5-byte chunks."""
    print(f"🚀 Processing {len(data)} bytes...")
    path = Path(output_path)
    with path.open("wb") as handle:
        for start in range(0, len(data), 5):
            handle.write(data[start:start + 5])
    print(f"📁 File saved: {path}")
    return path