"""IRC control code parsing and rendering."""

from ircstyle.formatting.control_codes import CONTROL_PLACEHOLDER
from ircstyle.formatting.parser import parse_style, sanitize
from ircstyle.formatting.renderer import (
    fragment_classes,
    irc_to_html,
    render_fragments,
    strip_formatting,
)
from ircstyle.formatting.style import Fragment, StyleState

__all__ = [
    "CONTROL_PLACEHOLDER",
    "Fragment",
    "StyleState",
    "fragment_classes",
    "irc_to_html",
    "parse_style",
    "render_fragments",
    "sanitize",
    "strip_formatting",
]
