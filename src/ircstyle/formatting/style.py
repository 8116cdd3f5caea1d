"""Style state and styled text fragments."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class StyleState:
    """Formatting active at the current scan position.

    Owned by a single parse call and mutated in place as control codes are met.
    """

    bold: bool = False
    text_color: int | None = None
    bg_color: int | None = None
    hex_color: str | None = None
    hex_bg_color: str | None = None
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    monospace: bool = False

    def reset(self) -> None:
        """Drop all formatting (RESET code)."""
        self.bold = False
        self.text_color = None
        self.bg_color = None
        self.hex_color = None
        self.hex_bg_color = None
        self.italic = False
        self.underline = False
        self.strikethrough = False
        self.monospace = False

    def toggle(self, flag: str) -> None:
        """Flip a boolean flag by name (toggle codes have no separate on/off)."""
        setattr(self, flag, not getattr(self, flag))

    def swap_colors(self) -> None:
        """Exchange foreground and background (REVERSE code). Hex colors stay put."""
        self.text_color, self.bg_color = self.bg_color, self.text_color

    def snapshot(self, text: str, start: int) -> Fragment:
        """Freeze the current state into a fragment covering ``text``."""
        return Fragment(text=text, start=start, end=start + len(text), **asdict(self))


@dataclass(frozen=True)
class Fragment:
    """Contiguous run of uniformly styled text.

    ``start``/``end`` are offsets into the sanitized output, not the raw input.
    """

    text: str
    start: int
    end: int
    bold: bool = False
    text_color: int | None = None
    bg_color: int | None = None
    hex_color: str | None = None
    hex_bg_color: str | None = None
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    monospace: bool = False

    @property
    def has_style(self) -> bool:
        """True if any flag is set or any color is present."""
        return (
            self.bold
            or self.italic
            or self.underline
            or self.strikethrough
            or self.monospace
            or self.text_color is not None
            or self.bg_color is not None
            or self.hex_color is not None
            or self.hex_bg_color is not None
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
