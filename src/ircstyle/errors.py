"""Re-export from core.errors."""

from ircstyle.core.errors import IrcStyleConfigurationError, IrcStyleError

__all__ = ["IrcStyleConfigurationError", "IrcStyleError"]
