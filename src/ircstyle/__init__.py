"""mIRC-style control code parsing and HTML rendering."""

__version__ = "0.1.0"
