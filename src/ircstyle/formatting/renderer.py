"""Render styled fragments as HTML spans with CSS classes."""

from __future__ import annotations

from collections.abc import Iterable

from ircstyle.formatting.control_codes import CONTROL_PLACEHOLDER
from ircstyle.formatting.parser import parse_style
from ircstyle.formatting.style import Fragment

DEFAULT_CLASS_PREFIX = "irc-"


def fragment_classes(fragment: Fragment, prefix: str = DEFAULT_CLASS_PREFIX) -> list[str]:
    """CSS class names for a fragment's style, in a stable order."""
    classes: list[str] = []
    if fragment.bold:
        classes.append(f"{prefix}bold")
    if fragment.text_color is not None:
        classes.append(f"{prefix}{fragment.text_color}")
    if fragment.bg_color is not None:
        classes.append(f"{prefix}bg{fragment.bg_color}")
    if fragment.hex_color is not None:
        classes.append(f"{prefix}hex-{fragment.hex_color}")
    if fragment.hex_bg_color is not None:
        classes.append(f"{prefix}hexbg-{fragment.hex_bg_color}")
    if fragment.italic:
        classes.append(f"{prefix}italic")
    if fragment.underline:
        classes.append(f"{prefix}underline")
    if fragment.strikethrough:
        classes.append(f"{prefix}strikethrough")
    if fragment.monospace:
        classes.append(f"{prefix}monospace")
    return classes


def render_fragments(fragments: Iterable[Fragment], *, prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """Join fragments, wrapping styled ones in ``<span class="...">``.

    Fragment text is emitted as-is; unstyled fragments are not wrapped.
    """
    parts: list[str] = []
    for fragment in fragments:
        classes = fragment_classes(fragment, prefix)
        if classes:
            parts.append(f'<span class="{" ".join(classes)}">{fragment.text}</span>')
        else:
            parts.append(fragment.text)
    return "".join(parts)


def irc_to_html(
    text: str,
    *,
    prefix: str = DEFAULT_CLASS_PREFIX,
    placeholder: str = CONTROL_PLACEHOLDER,
) -> str:
    """Convert IRC-formatted text straight to HTML markup."""
    return render_fragments(parse_style(text, placeholder=placeholder), prefix=prefix)


def strip_formatting(text: str, *, placeholder: str = CONTROL_PLACEHOLDER) -> str:
    """Drop styling codes, keeping text and placeholders for stray control bytes."""
    return "".join(fragment.text for fragment in parse_style(text, placeholder=placeholder))
