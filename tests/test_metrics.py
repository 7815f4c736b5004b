import pytest

from starksqueeze.metrics import CompressionMetrics, format_bytes


@pytest.mark.parametrize("size", [0, 1, 500, 1023])
def test_format_bytes_small_sizes_use_plain_bytes(size):
    assert format_bytes(size) == f"{size} B"


def test_format_bytes_kilobyte():
    assert format_bytes(1024) == "1.0 KB"


@pytest.mark.parametrize(
    "size, unit",
    [(2048, "KB"), (3 * 1024 ** 2, "MB"), (5 * 1024 ** 3, "GB"), (1024 ** 4, "GB")],
)
def test_format_bytes_picks_unit(size, unit):
    assert format_bytes(size).endswith(f" {unit}")


def test_format_bytes_caps_at_gigabytes():
    assert format_bytes(1024 ** 4).startswith("1024.0")


def test_calculate_ratio_zero_base():
    metrics = CompressionMetrics()
    assert metrics.calculate_ratio(50, 0) == 0.0


def test_calculate_ratio_value():
    metrics = CompressionMetrics()
    assert metrics.calculate_ratio(50, 200) == 25.0


def test_calculate_ratio_identity_is_full():
    metrics = CompressionMetrics()
    assert metrics.calculate_ratio(77, 77) == 100.0


def test_space_saved_never_negative():
    metrics = CompressionMetrics(raw_size=100, final_size=150)
    assert metrics.space_saved() == 0


def test_space_saved_difference():
    metrics = CompressionMetrics(raw_size=100, final_size=40)
    assert metrics.space_saved() == 60


def test_report_has_header_and_footer():
    lines = CompressionMetrics(raw_size=10, ascii_size=10, final_size=5).report_lines()
    assert "         COMPRESSION REPORT            " in lines
    assert lines[-1] == "═══════════════════════════════════════"


def test_report_without_verbose_has_no_details():
    lines = CompressionMetrics(raw_size=10, final_size=5).report_lines()
    assert "┌─ VERBOSE DETAILS ─┐" not in lines


def test_report_with_verbose_has_details():
    lines = CompressionMetrics(raw_size=10, final_size=5, verbose=True).report_lines()
    assert "┌─ VERBOSE DETAILS ─┐" in lines
    assert "└─────────────────────┘" in lines


def test_verbose_warns_when_output_grows():
    lines = CompressionMetrics(raw_size=10, final_size=20, verbose=True).report_lines()
    assert any("Final size larger than input" in line for line in lines)


def test_verbose_excellent_compression():
    lines = CompressionMetrics(raw_size=100, final_size=10, verbose=True).report_lines()
    assert "  ✅ Excellent compression achieved!" in lines


def test_verbose_low_compression():
    lines = CompressionMetrics(raw_size=100, final_size=90, verbose=True).report_lines()
    assert any("Low compression ratio" in line for line in lines)


def test_verbose_good_compression():
    lines = CompressionMetrics(raw_size=100, final_size=50, verbose=True).report_lines()
    assert "  ✅ Good compression ratio achieved" in lines


def test_report_overall_line_uses_final_ratio():
    metrics = CompressionMetrics(raw_size=200, final_size=50)
    ratio = metrics.calculate_ratio(50, 200)
    assert f"→ Overall: {ratio:.1f}% of original size" in metrics.report_lines()


def test_input_line_shows_raw_size():
    metrics = CompressionMetrics(raw_size=500)
    assert any(line.startswith("Input:") and "500 B" in line for line in metrics.report_lines())


def test_display_report_prints_lines(capsys):
    metrics = CompressionMetrics(raw_size=100, ascii_size=100, first_encoding_size=60, final_size=30)
    metrics.display_report()
    out = capsys.readouterr().out
    assert out == "\n".join(metrics.report_lines()) + "\n"