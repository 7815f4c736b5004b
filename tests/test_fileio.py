import pytest

from starksqueeze.ascii_converter import validate_printable_ascii
from starksqueeze.codec import encoding_one, encoding_two
from starksqueeze.fileio import (
    InvalidAsciiError,
    ascii_to_file,
    binary_to_file,
    file_to_binary,
    join_by_5,
    pad_binary_string,
    read_binary_file,
    split_by_5,
    unpad_binary_string,
)


def test_file_to_binary_ascii_file(tmp_path):
    path = tmp_path / "test_ascii.txt"
    content = b"Hello, ASCII World! 12345"
    path.write_bytes(content)
    assert file_to_binary(path) == content


def test_file_to_binary_non_ascii_file(tmp_path):
    path = tmp_path / "test_non_ascii.txt"
    path.write_bytes(b"Hello\xffWorld")
    with pytest.raises(InvalidAsciiError, match="Non-ASCII byte") as info:
        file_to_binary(path)
    assert "offset 5" in str(info.value)


def test_file_to_binary_converts_control_chars(tmp_path):
    path = tmp_path / "mixed.bin"
    path.write_bytes(bytes([72, 101, 108, 108, 111, 0, 10, 13, 32, 87]))
    result = file_to_binary(path)
    assert result == b"Hello0   W"
    assert validate_printable_ascii(result) is None


def test_already_ascii_file(tmp_path):
    path = tmp_path / "already.txt"
    content = b"This is already ASCII text!"
    path.write_bytes(content)
    assert len(file_to_binary(path)) == len(content)


def test_compression_with_ascii_conversion(tmp_path):
    path = tmp_path / "compress.bin"
    path.write_bytes(bytes([0x00, 0x01, ord("T"), ord("e"), ord("s"), ord("t"), 0x02, 0x03]))
    ascii_data = file_to_binary(path)
    assert validate_printable_ascii(ascii_data) is None
    binary_string = "".join(f"{byte:08b}" for byte in ascii_data)
    encoded = encoding_two(encoding_one(binary_string))
    assert encoded
    assert set(encoded) <= set("!#$%&*")


def test_larger_file_keeps_length(tmp_path):
    path = tmp_path / "large.bin"
    data = bytes(i % 127 for i in range(4096))
    path.write_bytes(data)
    result = file_to_binary(path)
    assert len(result) == len(data)
    assert validate_printable_ascii(result) is None


def test_ascii_to_file_writes_bytes(tmp_path):
    path = tmp_path / "out.txt"
    ascii_to_file("Hello\x7f", path)
    assert path.read_bytes() == b"Hello\x7f"


def test_ascii_to_file_rejects_non_ascii(tmp_path):
    path = tmp_path / "out.txt"
    with pytest.raises(InvalidAsciiError, match="non-ASCII"):
        ascii_to_file("caf\u00e9", path)
    assert not path.exists()


@pytest.mark.parametrize(
    "bits, expected",
    [("101", "10100000"), ("", ""), ("11111111", "11111111"), ("111111111", "1111111110000000")],
)
def test_pad_binary_string(bits, expected):
    assert pad_binary_string(bits) == expected


def test_unpad_binary_string():
    assert unpad_binary_string("10100000", 3) == "101"


def test_binary_to_file_format(tmp_path):
    path = tmp_path / "bits.bin"
    binary_to_file("10110", path)
    assert path.read_bytes() == b"\x00\x05\xb0"


def test_binary_file_round_trip(tmp_path):
    path = tmp_path / "bits.bin"
    binary_to_file("1011 0\n0111", path)
    assert read_binary_file(path) == "101100111"


def test_binary_to_file_rejects_invalid(tmp_path):
    with pytest.raises(ValueError, match="Invalid binary string"):
        binary_to_file("10201", tmp_path / "bad.bin")


def test_read_binary_file_truncated(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x00\x10\xff")
    with pytest.raises(EOFError):
        read_binary_file(path)


def test_split_by_5():
    assert split_by_5("1010111") == '["10101","11"]'


@pytest.mark.parametrize("bad", ["", "10a01"])
def test_split_by_5_invalid(bad):
    assert split_by_5(bad) == "[]"


def test_join_by_5(tmp_path):
    path = tmp_path / "joined.bin"
    data = bytes(range(12))
    result = join_by_5(data, path)
    assert result == path
    assert path.read_bytes() == data