"""Conversion of arbitrary bytes to printable ASCII before compression."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

ASCII_PRINTABLE_START = 32
ASCII_PRINTABLE_END = 126

_CHAR_MAPPINGS: dict[int, int] = {
    0: ord("0"),
    1: ord("1"),
    2: ord("2"),
    3: ord("3"),
    4: ord("4"),
    5: ord("5"),
    6: ord("6"),
    7: ord("7"),
    8: ord("b"),
    9: ord(" "),
    10: ord(" "),
    11: ord("v"),
    12: ord("f"),
    13: ord(" "),
    14: ord("e"),
    15: ord("f"),
    27: ord("E"),
    127: ord("D"),
}

_SUMMARY_TOP = 10


class NonPrintableError(ValueError):
    """Raised when data contains a byte outside the printable ASCII range."""

    def __init__(self, position: int, byte: int) -> None:
        super().__init__(f"Non-printable character found at position {position}: 0x{byte:02X}")
        self.position = position
        self.byte = byte


def _is_printable(byte: int) -> bool:
    return ASCII_PRINTABLE_START <= byte <= ASCII_PRINTABLE_END


def _describe_byte(byte: int) -> str:
    if byte <= 31:
        return f"0x{byte:02X} (control)"
    if byte <= 126:
        return f"0x{byte:02X} ('{chr(byte)}')"
    if byte == 127:
        return "0x7F (DEL)"
    return f"0x{byte:02X} (extended)"


@dataclass
class ConversionStats:
    """Counts of the bytes seen and replaced during a conversion."""

    total_bytes: int = 0
    converted_bytes: int = 0
    character_map: Counter = field(default_factory=Counter)

    def summary_lines(self) -> list[str]:
        """Return the human-readable conversion summary."""
        if self.converted_bytes == 0:
            return [
                "✅ No character conversions needed - file already contains only printable ASCII!"
            ]
        percent = self.converted_bytes / self.total_bytes * 100.0
        lines = [
            "📊 ASCII Conversion Summary:",
            f"  {self.total_bytes} Total bytes processed",
            f"  {self.converted_bytes} Bytes converted ({percent:.2f}%)",
        ]
        if self.character_map:
            lines.append("")
            lines.append("  Character conversion details:")
            ranked = sorted(self.character_map.items(), key=lambda item: (-item[1], item[0]))
            for byte, count in ranked[:_SUMMARY_TOP]:
                lines.append(f"    {_describe_byte(byte)} → converted {count} times")
            extra = len(self.character_map) - _SUMMARY_TOP
            if extra > 0:
                lines.append(f"    {extra} more unique characters...")
        return lines

    def log_summary(self) -> None:
        """Print the conversion summary."""
        for line in self.summary_lines():
            print(line)


def convert_byte(byte: int, stats: ConversionStats | None = None) -> int:
    """Map one byte to a printable ASCII byte, recording the change in ``stats``."""
    if _is_printable(byte):
        return byte

    if stats is not None:
        stats.converted_bytes += 1
        stats.character_map[byte] += 1

    mapped = _CHAR_MAPPINGS.get(byte)
    if mapped is not None:
        return mapped
    if byte > 127:
        return 48 + (byte - 128) % 75
    if 16 <= byte <= 26:
        return ord("A") + (byte - 16)
    if 28 <= byte <= 31:
        return ord("L") + (byte - 28)
    return ord("?")


def convert_to_printable_ascii(data: bytes) -> tuple[bytes, ConversionStats]:
    """Convert every byte of ``data`` to printable ASCII."""
    stats = ConversionStats(total_bytes=len(data))
    converted = bytes(convert_byte(byte, stats) for byte in data)
    return converted, stats


def convert_file_to_ascii(data: bytes) -> bytes:
    """Convert file contents to printable ASCII and print a summary."""
    converted, stats = convert_to_printable_ascii(data)
    stats.log_summary()
    return converted


def validate_printable_ascii(data: bytes) -> None:
    """Raise NonPrintableError at the first byte outside the printable range."""
    for position, byte in enumerate(data):
        if not _is_printable(byte):
            raise NonPrintableError(position, byte)