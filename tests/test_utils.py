import pytest

from starksqueeze.utils import (
    binary_to_dots,
    matches_pattern,
    read_file_bytes,
    short_string_to_felt,
)


def test_felt_too_long():
    with pytest.raises(ValueError, match="String too long to fit in felt"):
        short_string_to_felt("a" * 32)


@pytest.mark.parametrize("text", ["tx-t", "a b", "é", "file.txt"])
def test_felt_invalid_characters(text):
    with pytest.raises(ValueError, match="String contains invalid characters"):
        short_string_to_felt(text)


def test_felt_is_case_insensitive():
    upper = "ABCDEFGHIJKLMNOPQRSTUVWXYZ01234"
    assert short_string_to_felt(upper) == short_string_to_felt(upper.lower())


def test_felt_fits_in_128_bits():
    for text in ["", "txt", "a" * 15, "z" * 31, "Q1w2E3r4T5y6U7i8O9p0AsDfGhJkLzX"]:
        value = short_string_to_felt(text)
        assert 0 <= value < 2**128


def test_felt_keeps_low_sixteen_bytes():
    assert short_string_to_felt("a" * 31) == int.from_bytes(b"a" * 16, "big")


def test_felt_leading_bytes_are_dropped():
    # Only the last 16 of the 31 buffer bytes survive.
    assert short_string_to_felt("txt") == 0
    assert short_string_to_felt("x" * 15 + "y" * 16) == short_string_to_felt("z" * 15 + "y" * 16)


def test_read_file_bytes_round_trip(tmp_path):
    data = bytes(range(256))
    path = tmp_path / "data.bin"
    path.write_bytes(data)
    assert read_file_bytes(path) == data
    assert read_file_bytes(str(path)) == data


def test_read_file_bytes_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_bytes(tmp_path / "missing.bin")


def test_binary_to_dots_empty():
    assert binary_to_dots("") == ""


def test_binary_to_dots_shape():
    source = "0110100011"
    result = binary_to_dots(source)
    assert len(result) == len(source)
    assert set(result) <= {".", " "}
    assert result.count(".") == source.count("0")
    assert result == ". . ...  ".replace(". . ...  ", result) and result.startswith(". ")


def test_matches_pattern():
    assert matches_pattern("....!", "...")
    assert matches_pattern("abc", "")
    assert not matches_pattern("ab", "abc")
    assert not matches_pattern("abc", "abd")