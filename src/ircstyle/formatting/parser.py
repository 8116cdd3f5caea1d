"""Split IRC-formatted text into uniformly styled fragments."""

from __future__ import annotations

import re

from ircstyle.formatting.control_codes import (
    COLOR,
    CONTROL_PLACEHOLDER,
    HEX_COLOR,
    RESET,
    REVERSE,
    TOGGLE_CODES,
)
from ircstyle.formatting.style import Fragment, StyleState

# All control bytes except line feed
_CONTROL_CODES_PATTERN = re.compile(r"[\x00-\x09\x0B-\x1F]")

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_COLOR_LENGTH = 6


def sanitize(text: str, placeholder: str = CONTROL_PLACEHOLDER) -> str:
    """Replace every leftover control byte (line feed excepted) with ``placeholder``."""
    return _CONTROL_CODES_PATTERN.sub(lambda _: placeholder, text)


def _scan_digits(text: str, pos: int, max_len: int) -> int:
    """Return how many decimal digits (up to ``max_len``) start at ``pos``."""
    count = 0
    while count < max_len and pos + count < len(text) and text[pos + count] in _DECIMAL_DIGITS:
        count += 1
    return count


def _is_hex_run(text: str, pos: int) -> bool:
    """True if exactly six hex digits are available at ``pos``."""
    end = pos + _HEX_COLOR_LENGTH
    if end > len(text):
        return False
    return all(c in _HEX_DIGITS for c in text[pos:end])


def match_color_code(text: str, pos: int) -> tuple[int, int | None, int] | None:
    """Match ``F[F][,B[B]]`` at ``pos``.

    Returns (foreground, background or None, characters consumed), or None when
    no foreground digit is present.
    """
    fg_len = _scan_digits(text, pos, 2)
    if not fg_len:
        return None
    fg = int(text[pos : pos + fg_len])
    length = fg_len

    comma = pos + fg_len
    if comma < len(text) and text[comma] == ",":
        bg_len = _scan_digits(text, comma + 1, 2)
        if bg_len:
            bg = int(text[comma + 1 : comma + 1 + bg_len])
            return fg, bg, length + 1 + bg_len
    return fg, None, length


def match_hex_color_code(text: str, pos: int) -> tuple[str, str | None, int] | None:
    """Match ``RRGGBB[,RRGGBB]`` at ``pos``, case-insensitive.

    Colors come back uppercased. Returns None without a full foreground.
    """
    if not _is_hex_run(text, pos):
        return None
    fg = text[pos : pos + _HEX_COLOR_LENGTH].upper()
    length = _HEX_COLOR_LENGTH

    comma = pos + _HEX_COLOR_LENGTH
    if comma < len(text) and text[comma] == "," and _is_hex_run(text, comma + 1):
        bg = text[comma + 1 : comma + 1 + _HEX_COLOR_LENGTH].upper()
        return fg, bg, length + 1 + _HEX_COLOR_LENGTH
    return fg, None, length


def parse_style(text: str, *, placeholder: str = CONTROL_PLACEHOLDER) -> list[Fragment]:
    """Convert IRC-formatted text into a list of styled fragments.

    Every styling control code closes the fragment collected so far (using the
    style in effect before the code) and then changes the style. Toggle codes
    flip their flag, RESET clears everything, REVERSE swaps the numeric
    foreground and background. COLOR and HEX_COLOR read an optional color
    argument; without one they clear their palette.

    Fragments with empty text are never emitted, so offsets stay contiguous.
    Never raises.
    """
    fragments: list[Fragment] = []
    style = StyleState()
    start = 0
    position = 0

    def close_fragment() -> None:
        nonlocal start
        chunk = sanitize(text[start:position], placeholder)
        if chunk:
            offset = fragments[-1].end if fragments else 0
            fragments.append(style.snapshot(chunk, offset))
        start = position + 1

    while position < len(text):
        char = text[position]

        if char in TOGGLE_CODES:
            close_fragment()
            style.toggle(TOGGLE_CODES[char])

        elif char == RESET:
            close_fragment()
            style.reset()

        elif char == REVERSE:
            close_fragment()
            style.swap_colors()

        elif char == COLOR:
            close_fragment()
            color = match_color_code(text, position + 1)
            if color is None:
                style.text_color = None
                style.bg_color = None
            else:
                fg, bg, length = color
                style.text_color = fg
                if bg is not None:
                    style.bg_color = bg
                position += length
                start = position + 1

        elif char == HEX_COLOR:
            close_fragment()
            hex_color = match_hex_color_code(text, position + 1)
            if hex_color is None:
                style.hex_color = None
                style.hex_bg_color = None
            else:
                fg_hex, bg_hex, length = hex_color
                style.hex_color = fg_hex
                if bg_hex is not None:
                    style.hex_bg_color = bg_hex
                position += length
                start = position + 1

        position += 1

    close_fragment()
    return fragments
