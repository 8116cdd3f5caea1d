"""IRC control codes understood by the style parser."""

from __future__ import annotations

BOLD = "\x02"
COLOR = "\x03"
HEX_COLOR = "\x04"
RESET = "\x0F"
REVERSE = "\x16"
ITALIC = "\x1D"
UNDERLINE = "\x1F"
STRIKETHROUGH = "\x1E"
MONOSPACE = "\x11"

# Toggle codes map to the StyleState flag they flip
TOGGLE_CODES: dict[str, str] = {
    BOLD: "bold",
    ITALIC: "italic",
    UNDERLINE: "underline",
    STRIKETHROUGH: "strikethrough",
    MONOSPACE: "monospace",
}

STYLE_CODES: frozenset[str] = frozenset(
    {BOLD, COLOR, HEX_COLOR, RESET, REVERSE, ITALIC, UNDERLINE, STRIKETHROUGH, MONOSPACE}
)

# Leftover control bytes (everything below 0x20 except line feed) become this
CONTROL_PLACEHOLDER = "&nbsp;"
