"""Size accounting and reporting for the compression pipeline."""

from __future__ import annotations

from dataclasses import dataclass

_UNITS = ("B", "KB", "MB", "GB")
_RULE = "═══════════════════════════════════════"
_LABEL_WIDTH = 15


def format_bytes(size: int) -> str:
    """Format a byte count with the largest unit up to GB."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{size} {_UNITS[0]}"
    return f"{value:.1f} {_UNITS[unit]}"


def _efficiency(before: int, after: int) -> float:
    if before <= 0:
        return 0.0
    return (before - after) / before * 100.0


@dataclass
class CompressionMetrics:
    """Sizes in bytes after each stage of compressing one file."""

    raw_size: int = 0
    ascii_size: int = 0
    first_encoding_size: int = 0
    final_size: int = 0
    verbose: bool = False

    def calculate_ratio(self, current_size: int, base_size: int) -> float:
        """Return ``current_size`` as a percentage of ``base_size``; 0 for an empty base."""
        if base_size == 0:
            return 0.0
        return current_size / base_size * 100.0

    def space_saved(self) -> int:
        """Bytes saved by compression, never negative."""
        return max(self.raw_size - self.final_size, 0)

    def _stage_line(self, label: str, size: int, note: str) -> str:
        return f"{label:<{_LABEL_WIDTH}} {format_bytes(size)} ({note})"

    def report_lines(self) -> list[str]:
        """Return the compression report as lines of text."""
        ascii_ratio = self.calculate_ratio(self.ascii_size, self.raw_size)
        first_ratio = self.calculate_ratio(self.first_encoding_size, self.raw_size)
        final_ratio = self.calculate_ratio(self.final_size, self.raw_size)
        saved = self.space_saved()
        saved_ratio = self.calculate_ratio(saved, self.raw_size)

        lines = [
            "",
            _RULE,
            "         COMPRESSION REPORT            ",
            _RULE,
            self._stage_line("Input:", self.raw_size, "raw"),
            self._stage_line("ASCII:", self.ascii_size, f"{ascii_ratio:.1f}%"),
            self._stage_line("5-bit Chunks:", self.first_encoding_size, f"{first_ratio:.1f}%"),
            self._stage_line("Final:", self.final_size, f"{final_ratio:.1f}%"),
            f"→ Overall: {final_ratio:.1f}% of original size",
            f"Space Saved: {format_bytes(saved)} ({saved_ratio:.1f}%)",
        ]
        if self.verbose:
            lines.extend(self._verbose_lines())
        lines.append(_RULE)
        return lines

    def _verbose_lines(self) -> list[str]:
        raw_bits = self.raw_size * 8
        final_bits = self.final_size * 8
        bit_rows = (
            ("  Raw bits:          ", raw_bits),
            ("  ASCII bits:        ", self.ascii_size * 8),
            ("  First encoding:    ", self.first_encoding_size * 8),
            ("  Final bits:        ", final_bits),
        )
        stage_rows = (
            ("  ASCII Conversion:  ", _efficiency(self.raw_size, self.ascii_size)),
            ("  First Encoding:    ", _efficiency(self.ascii_size, self.first_encoding_size)),
            ("  Final Encoding:    ", _efficiency(self.first_encoding_size, self.final_size)),
        )

        lines = ["", "┌─ VERBOSE DETAILS ─┐", "Bit-level Analysis:"]
        lines.extend(f"{label}{f'{bits:,}':>12}" for label, bits in bit_rows)
        lines.extend(["", "Stage-by-stage Efficiency:"])
        lines.extend(f"{label}{f'{abs(value):.1f}%':>9}" for label, value in stage_rows)
        lines.extend(["", "Analysis:"])

        ratio = self.calculate_ratio(self.final_size, self.raw_size)
        if final_bits > raw_bits:
            lines.append(
                "  ⚠️  Final size larger than input - consider different encoding for this file type"
            )
        elif ratio > 80.0:
            lines.append("  ℹ️  Low compression ratio - file may already be compressed or encrypted")
        elif ratio < 20.0:
            lines.append("  ✅ Excellent compression achieved!")
        else:
            lines.append("  ✅ Good compression ratio achieved")
        lines.append("└─────────────────────┘")
        return lines

    def display_report(self) -> None:
        """Print the compression report."""
        for line in self.report_lines():
            print(line)