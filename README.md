# starksqueeze

starksqueeze turns files into a compact symbolic form in three stages:

1. **Printable ASCII**: every byte outside the printable range (32–126) is
   mapped to a printable stand-in, and each replacement is counted.
2. **First encoding**: the bit string of the data is cut into 5-bit chunks,
   and each chunk is replaced by a pattern of dots and spaces.
3. **Second encoding**: runs of dots are replaced by single symbols
   (`!`, `#`, `$`, `%`, `&`, `*`).

It reports how the size changes at each stage. It can also write and read
length-prefixed binary files, draw the bit patterns of characters, and
generate a dictionary of every 5-character base-127 pattern.

## Installing

```
pip install .
```

Python 3.10 or later is required. The package has no third-party
dependencies.

## Command line

```
starksqueeze --help
```

lists the commands. When no command is given, the help text is printed and
the exit status is 2.

### `starksqueeze upload`

```
starksqueeze upload -f notes.txt
starksqueeze upload -f notes.txt -v
```

This command compresses a file and prints a report. It runs these steps:

- converts the file to printable ASCII and prints a conversion summary;
- runs both encoding stages;
- prints a compression report with the size after each stage and the space
  saved. `-v`/`--verbose` adds a bit-level analysis to the report;
- prints an upload ID and the file type. The upload ID is the first 16 bytes
  of the SHA-256 digest of the converted data, in hex. The file type is the
  file's extension.

If `-f`/`--file` is left out, the command asks for a path. The command fails
with exit status 1 in these cases:

- the file is empty;
- the file has no extension;
- the file name ends in a dot.

### `starksqueeze generate-dictionary`

```
starksqueeze generate-dictionary --output dictionary.json --checkpoint checkpoint.txt --timeout 600
```

This command writes a JSON file. The file holds every value below 127⁵,
each with its 5-character base-127 pattern.

- It saves a checkpoint every 100,000 entries. A later run resumes from the
  checkpoint and appends to the output file.
- It stops early once `--timeout` seconds have passed (the default is 600).
  It also stops early when the process uses more than about 1 GB of memory.
- When it finishes, it deletes the checkpoint and prints the SHA-256 digest
  of the file.

The full dictionary is very large.

## Library use

### Converting to printable ASCII

```python
from starksqueeze.ascii_converter import convert_to_printable_ascii, validate_printable_ascii

converted, stats = convert_to_printable_ascii(b"Hello\x00\x09World")
validate_printable_ascii(converted)   # raises NonPrintableError on failure
print(stats.converted_bytes)          # 2
```

Control characters map to fixed stand-ins:

- NUL to `0`;
- TAB, LF and CR to a space;
- ESC to `E`;
- DEL to `D`;
- and so on for the other control characters.

Bytes above 127 are folded into the printable range.

`ConversionStats` has these members:

- `total_bytes` and `converted_bytes`;
- a `character_map` counter of the replaced bytes;
- `summary_lines()`, which returns the summary;
- `log_summary()`, which prints it.

`convert_file_to_ascii(data)` converts the data and prints the summary.

### Encoding and decoding

```python
from starksqueeze.codec import encoding_one, encoding_two, decoding_two

dots = encoding_one("0001000010")   # ".."
symbols = encoding_two(".. ...")    # "%$"
decoding_two("%$")                  # "....."
```

- `encoding_one` left-pads the bit string with zeros to a whole number of
  5-bit chunks.
- `encoding_two` matches the longest dot pattern first. It drops spaces that
  are not part of a pattern.
- `decoding_one` and `decoding_two` map symbols back through the inverse
  dictionaries. These dictionaries are not one-to-one, so decoding does not
  in general restore the exact input.
- Invalid input to these four functions raises `CodecError`.

The `*_with_dict` variants take any mapping, such as a `CustomDictionary`.
They raise `InvalidFormatError` on bad input.

```python
from starksqueeze.dictionary import CustomDictionary
from starksqueeze.codec import encoding_one_with_dict, decoding_one_with_dict

table = CustomDictionary({"00000": "A", "00001": "B", "00010": "C"})
encoded = encoding_one_with_dict("000000000100010", table)   # "ABC"
assert decoding_one_with_dict(encoded, table) == "000000000100010"
```

`CustomDictionary.from_file(path)` loads a dictionary from a text file that
holds one `key=value` pair per line.

- A line without `=` raises `InvalidFormatError`.
- A file with no entries raises `EmptyDictionaryError`.

The built-in tables are `FIRST_DICT` and `SECOND_DICT` in
`starksqueeze.dictionary`.

`validate_ascii_dictionary(fields)` checks a list of 5-character fields:

- every character must be ASCII 0–126;
- no field may appear twice;
- together the fields must cover every code from 0 to 126.

Each failure raises its own error: `LengthMismatchError`,
`InvalidAsciiFieldError`, `DuplicateEntryError` or `MissingCharsError`. All of
them are subclasses of `DictionaryValidationError`.

### Files

`starksqueeze.fileio` provides:

- `file_to_binary(path)` reads a file and converts it to printable ASCII. It
  raises `InvalidAsciiError` at the first byte above 126.
- `binary_to_file(bits, path)` packs a bit string into a file. The file
  starts with a big-endian 16-bit bit count. The default path is
  `output.bin`.
- `read_binary_file(path)` reads such a file back into a bit string.
- `ascii_to_file(text, path)` writes an ASCII string and verifies the
  written file. It raises `InvalidAsciiError` or `FileIntegrityError`.
- `pad_binary_string`, `unpad_binary_string`, `split_by_5` (returns a JSON
  array of 5-bit chunks) and `join_by_5`.

### Visualising characters

```python
from starksqueeze.visualize import ascii_to_dot

print(ascii_to_dot("ABC", 5, False))
```

This prints each character with its code, its bit pattern, its hex value and
a dot picture, five characters to a group. Pass `show_color=True` to colour
the set bits with ANSI codes.

### Reporting and progress

`starksqueeze.metrics` provides:

- `CompressionMetrics`, which holds the stage sizes and has
  `calculate_ratio`, `space_saved`, `report_lines` and `display_report`;
- `format_bytes`, which renders a size in `B`, `KB`, `MB` or `GB`.

`starksqueeze.progress.ProgressBar` draws a one-line progress bar on a
stream. It takes a `ProgressStyle` (`ASCII`, `UNICODE` or `SPINNER`) and a
`Verbosity` (`MINIMAL` or `DETAILED`).

### Helpers

`starksqueeze.utils` provides:

- `short_string_to_felt`: packs a short alphanumeric string into an integer;
- `binary_to_dots`;
- `matches_pattern`;
- `read_file_bytes`.

## What it does not do

The `upload` command only compresses the file on the local machine and
prints a report. It does not send the file or its metadata anywhere, and it
keeps no record of past uploads. Nothing can retrieve a file by its upload
ID, and nothing lists earlier uploads. There is no interactive menu. There is
no way to restore the original file from the encoded output.

## Running the tests

```
pip install .[test]
pytest
```