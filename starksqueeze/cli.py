"""Command-line interface: compress files, report sizes and build dictionaries."""

from __future__ import annotations

import argparse
import hashlib
import string
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .ascii_converter import ConversionStats, convert_to_printable_ascii
from .codec import encoding_one, encoding_two
from .generator import CHECKPOINT_FILE, DEFAULT_TIMEOUT, OUTPUT_FILE, generate_dictionary
from .metrics import CompressionMetrics

APP_NAME = "StarkSqueeze CLI"
APP_ABOUT = "Interact with StarkSqueeze"

_UPLOAD_ID_BYTES = 16
_UPLOAD_ID_LENGTH = 66
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass
class CompressionResult:
    """Everything produced by compressing one file."""

    path: Path
    upload_id: int
    file_type: str
    metrics: CompressionMetrics
    conversion: ConversionStats
    encoded: str

    @property
    def upload_id_hex(self) -> str:
        return f"0x{self.upload_id:x}"

    @property
    def compression_ratio(self) -> float:
        """Final size as a percentage of the raw input size."""
        return self.metrics.calculate_ratio(self.metrics.final_size, self.metrics.raw_size)


def validate_file_path(path: str | PathLike[str]) -> Path:
    """Return ``path`` as a Path if it names an existing, readable regular file."""
    candidate = Path(path)
    if not candidate.exists():
        raise ValueError(f"File does not exist: {path}")
    if not candidate.is_file():
        raise ValueError(f"Path is not a file: {path}")
    try:
        with candidate.open("rb"):
            pass
    except OSError as exc:
        raise ValueError(f"Cannot read file {path}: {exc}") from exc
    return candidate


def validate_upload_id(upload_id: str) -> str:
    """Check that ``upload_id`` looks like a hex upload identifier and return it.

    The identifier is rejected when it neither starts with ``0x`` nor is 66
    characters long, and when anything after its first two characters is not
    a hexadecimal digit.
    """
    if not upload_id.startswith("0x") and len(upload_id) != _UPLOAD_ID_LENGTH:
        raise ValueError(
            "Invalid upload ID format. Expected 0x-prefixed 64-character hex string, "
            f"got: {upload_id}"
        )
    if not all(c in _HEX_DIGITS for c in upload_id[2:]):
        raise ValueError(f"Upload ID contains non-hexadecimal characters: {upload_id}")
    return upload_id


def _file_type(path: Path) -> str:
    name = path.name
    if name.endswith(".") and name.strip("."):
        raise ValueError("Invalid file type: File extension is empty")
    suffix = path.suffix
    if not suffix:
        raise ValueError("Failed to determine file type: No file extension found")
    return suffix[1:]


def compress_file(path: str | PathLike[str]) -> CompressionResult:
    """Convert a file to printable ASCII and run both encoding stages over it."""
    file_path = validate_file_path(path)
    raw = file_path.read_bytes()

    ascii_data, conversion = convert_to_printable_ascii(raw)
    digest = hashlib.sha256(ascii_data).digest()
    upload_id = int.from_bytes(digest[:_UPLOAD_ID_BYTES], "big")

    if not ascii_data:
        raise ValueError("Invalid file: File is empty after ASCII conversion")
    file_type = _file_type(file_path)

    binary_string = "".join(f"{byte:08b}" for byte in ascii_data)
    encoded_one = encoding_one(binary_string)
    encoded_two = encoding_two(encoded_one)

    metrics = CompressionMetrics(
        raw_size=len(raw),
        ascii_size=len(ascii_data),
        first_encoding_size=len(encoded_one) // 8,
        final_size=len(encoded_two),
    )
    return CompressionResult(
        path=file_path,
        upload_id=upload_id,
        file_type=file_type,
        metrics=metrics,
        conversion=conversion,
        encoded=encoded_two,
    )


def _argparse_type(validator):
    def convert(value: str):
        try:
            return validator(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = validator.__name__
    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="starksqueeze", description=f"{APP_NAME}: {APP_ABOUT}")
    commands = parser.add_subparsers(dest="command")

    upload = commands.add_parser("upload", help="Compress a file and report its sizes")
    upload.add_argument(
        "-f", "--file", type=_argparse_type(validate_file_path), help="Path to the file"
    )
    upload.add_argument(
        "-v", "--verbose", action="store_true", help="Show bit-level analysis in the report"
    )

    generate = commands.add_parser(
        "generate-dictionary", help="Generate dictionary of 5-character ASCII combinations"
    )
    generate.add_argument("--output", default=OUTPUT_FILE, help="Dictionary file to write")
    generate.add_argument("--checkpoint", default=CHECKPOINT_FILE, help="Checkpoint file")
    generate.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Give up after this many seconds"
    )
    return parser


def _print_error(context: str, error: object) -> None:
    print(f"Error {context}: {error}", file=sys.stderr)


def _prompt_path() -> str:
    while True:
        value = input("Enter the file path: ")
        if value.strip():
            return value
        _print_error("Invalid input", "Input cannot be empty")


def _run_upload(file_path: Path | None, verbose: bool) -> int:
    try:
        target = file_path if file_path is not None else _prompt_path()
    except EOFError:
        _print_error("Failed to read input", "no input")
        return 1

    print("\n🔄 Converting file to printable ASCII...")
    try:
        result = compress_file(target)
    except (ValueError, OSError) as exc:
        _print_error("compressing file", exc)
        return 1

    result.conversion.log_summary()
    result.metrics.verbose = verbose
    result.metrics.display_report()
    print("\nUpload Information:")
    print(f"Upload ID: {result.upload_id_hex}")
    print(f"File Type: {result.file_type}")
    return 0


def _run_generate(output: str, checkpoint: str, timeout: float) -> int:
    try:
        generate_dictionary(output, checkpoint, timeout=timeout)
    except OSError as exc:
        print(f"❌ Error generating dictionary: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "upload":
        return _run_upload(args.file, args.verbose)
    if args.command == "generate-dictionary":
        return _run_generate(args.output, args.checkpoint, args.timeout)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())