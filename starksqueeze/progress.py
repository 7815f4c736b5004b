"""A minimal terminal progress bar."""

from __future__ import annotations

import math
import sys
import time
from enum import Enum
from typing import TextIO

_RED = "\x1b[31m"
_YELLOW = "\x1b[33m"
_GREEN = "\x1b[32m"
_RESET = "\x1b[0m"


class ProgressStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    SPINNER = "spinner"


class Verbosity(Enum):
    MINIMAL = "minimal"
    DETAILED = "detailed"


class ProgressBar:
    """Progress bar that redraws a single line on every update."""

    WIDTH = 20
    SPINNER_FRAMES = ("-", "\\", "|", "/")
    BLOCKS = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")

    def __init__(
        self,
        total: int,
        style: ProgressStyle = ProgressStyle.UNICODE,
        verbosity: Verbosity = Verbosity.MINIMAL,
        stream: TextIO | None = None,
    ) -> None:
        self.total = total
        self.current = 0
        self.style = style
        self.verbosity = verbosity
        self._stream = stream if stream is not None else sys.stdout
        self._start = time.monotonic()
        self.last_update = self._start
        self._spinner_index = 0

    def inc(self, n: int = 1) -> None:
        self.current += n
        self.last_update = time.monotonic()
        self._draw()

    def finish(self) -> None:
        self.current = self.total
        self._draw()
        self._stream.write("\n")
        self._stream.flush()

    def _draw(self) -> None:
        self._stream.write("\r" + self.render())
        self._stream.flush()

    def _bar(self, fraction: float) -> str:
        width = self.WIDTH
        if self.style is ProgressStyle.ASCII:
            filled = math.floor(fraction * width + 0.5)
            return "[" + "=" * filled + " " * (width - filled) + "]"
        if self.style is ProgressStyle.UNICODE:
            scaled = fraction * width
            filled = math.floor(scaled)
            bar = "█" * filled
            if filled < width:
                remainder = (scaled - filled) * 8.0
                bar += self.BLOCKS[int(remainder)] + " " * (width - filled - 1)
            return f"[{bar}]"
        frame = self.SPINNER_FRAMES[self._spinner_index % len(self.SPINNER_FRAMES)]
        self._spinner_index += 1
        return f"[{frame}]"

    def render(self) -> str:
        """Return the current line; spinner bars advance one frame per call."""
        fraction = self.current / self.total if self.total else 0.0
        elapsed = time.monotonic() - self._start
        rate = self.current / elapsed if elapsed > 0 else 0.0
        if self.current > 0:
            remaining = self.total - self.current
            eta = remaining / rate if rate > 0 else math.inf
        else:
            eta = 0.0

        if eta > 1.0:
            color = _RED
        elif eta > 0.5:
            color = _YELLOW
        else:
            color = _GREEN

        head = f"{color} {self._bar(fraction)} {self.current}/{self.total} ({fraction * 100:.0f}%)"
        if self.verbosity is Verbosity.DETAILED:
            return f"{head} @ {rate / 1000:.1f}K patterns/sec, ETA: {eta:.1f}s{_RESET}"
        return f"{head}{_RESET}"