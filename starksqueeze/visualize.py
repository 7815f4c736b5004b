"""Dot diagrams of the bit patterns of ASCII characters."""

from __future__ import annotations

_RAINBOW_COLORS = (
    "\x1b[31m",
    "\x1b[33m",
    "\x1b[32m",
    "\x1b[36m",
    "\x1b[35m",
)
_RESET_COLOR = "\x1b[0m"


def _is_control(code_point: int) -> bool:
    return code_point < 32 or 127 <= code_point <= 159


def _display(char: str, code: int) -> str:
    if char == " ":
        return "[SP]"
    if char == "\0":
        return "[NUL]"
    if _is_control(ord(char)):
        if code < 32:
            return f"[CTRL+{chr(code + 64)}]"
        if code == 127:
            return "[DEL]"
        return f"[CTRL+{char}]"
    return char


def ascii_to_dot(input_str: str, group_size: int = 5, show_color: bool = False) -> str:
    """Render each character of ``input_str`` as a row of dots and marks.

    Characters are grouped ``group_size`` at a time; with ``show_color`` the
    set bits are highlighted with ANSI colours.
    """
    if group_size <= 0:
        raise ValueError("group_size must be positive")
    if not input_str:
        return "Empty input string"

    lines = ["Bit: "]
    for index, color in enumerate(_RAINBOW_COLORS):
        lines[0] += f"{color}{index}{_RESET_COLOR} " if show_color else f"{index} "
    out = [lines[0] + "\n", "---------\n"]

    for index, char in enumerate(input_str):
        if index % group_size == 0:
            if index > 0:
                out.append("\n")
            out.append(f"[Group {index // group_size + 1}]\n")

        code = ord(char) & 0xFF
        display = _display(char, code)
        mark = display[0] if display else "."
        binary = f"{code:08b}"

        dots = []
        for bit_index, bit in enumerate(binary):
            if bit == "1":
                if show_color:
                    color = _RAINBOW_COLORS[bit_index % len(_RAINBOW_COLORS)]
                    dots.append(f"{color}{mark}{_RESET_COLOR}")
                else:
                    dots.append(mark)
            else:
                dots.append(".")

        out.append(f"{''.join(dots)} {display} [{code}] = {binary} (0x{code:02X})\n")

    return "".join(out)