"""Generation of the dictionary of all 5-character base-127 patterns."""

from __future__ import annotations

import hashlib
import json
import sys
import time
from os import PathLike
from pathlib import Path

BASE = 127
PATTERN_LENGTH = 5
TOTAL_COMBINATIONS = BASE ** PATTERN_LENGTH
BATCH_SIZE = 1_000_000
CHECKPOINT_INTERVAL = 100_000
MAX_MEMORY_BYTES = 1_000_000_000
DEFAULT_TIMEOUT = 10 * 60
OUTPUT_FILE = "dictionary.json"
CHECKPOINT_FILE = "checkpoint.txt"

_PAGE_SIZE = 4096


def _memory_usage_bytes() -> int:
    """Approximate memory use of this process, or 0 where it cannot be read."""
    try:
        fields = Path("/proc/self/statm").read_text().split()
        return int(fields[0]) * _PAGE_SIZE
    except (OSError, ValueError, IndexError):
        return 0


def generate_pattern(value: int) -> str:
    """Spell ``value`` as five base-127 digits, most significant first."""
    digits = []
    for _ in range(PATTERN_LENGTH):
        value, digit = divmod(value, BASE)
        digits.append(chr(digit))
    return "".join(reversed(digits))


def load_checkpoint(path: str | PathLike[str] = CHECKPOINT_FILE) -> int:
    """Return the saved index, or 0 if there is none or it is unreadable."""
    try:
        return int(Path(path).read_text().strip())
    except (OSError, ValueError):
        return 0


def save_checkpoint(path: str | PathLike[str], index: int) -> None:
    """Record ``index`` so that generation can resume from it; failures are ignored."""
    try:
        Path(path).write_text(str(index))
    except OSError:
        pass


def generate_dictionary(
    output_path: str | PathLike[str] = OUTPUT_FILE,
    checkpoint_path: str | PathLike[str] = CHECKPOINT_FILE,
    total: int = TOTAL_COMBINATIONS,
    timeout: float = DEFAULT_TIMEOUT,
) -> str | None:
    """Write every pattern below ``total`` as a JSON dictionary file.

    Resumes from a checkpoint by appending. Stops early when ``timeout``
    seconds have passed or memory use exceeds its limit. Returns the SHA-256
    hex digest of the finished file, or None if generation stopped early.
    """
    start = time.monotonic()
    index = load_checkpoint(checkpoint_path)
    output = Path(output_path)

    with output.open("a" if index != 0 else "w", encoding="utf-8") as writer:
        if index == 0:
            writer.write("{\n")
            writer.write('"version": "1.0",\n')
            writer.write(f'"total_combinations": {total},\n')
            writer.write('"entries": [\n')

        while index < total:
            if time.monotonic() - start > timeout:
                print("⏱ Timeout exceeded. Aborting...", file=sys.stderr)
                break
            if _memory_usage_bytes() > MAX_MEMORY_BYTES:
                print("🧠 Memory usage exceeded 1GB. Aborting...", file=sys.stderr)
                break

            end = min(index + BATCH_SIZE, total)
            for value in range(index, end):
                if value > 0:
                    writer.write(",")
                entry = {"pattern": generate_pattern(value), "value": value}
                writer.write(json.dumps(entry, separators=(",", ":")))
                writer.write("\n")
                if value % CHECKPOINT_INTERVAL == 0:
                    save_checkpoint(checkpoint_path, value)

            index = end
            writer.flush()
            print(f"✅ Progress: {index}/{total}")

        if index < total:
            return None
        writer.write("]\n}\n")

    Path(checkpoint_path).unlink(missing_ok=True)

    hasher = hashlib.sha256()
    with output.open("rb") as handle:
        for block in iter(lambda: handle.read(4096), b""):
            hasher.update(block)
    digest = hasher.hexdigest()
    print(f"🔐 SHA-256: {digest}")
    return digest