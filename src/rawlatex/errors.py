"""Exception classes for rawlatex.

Parsing itself never raises: invalid or unterminated math degrades to
literal text. Exceptions are reserved for setup mistakes.
"""

from __future__ import annotations


class RawLatexError(Exception):
    """Base exception for all rawlatex errors.
    
    Subclass this for specific error categories.
    """

    pass


class PluginError(RawLatexError):
    """Error in plugin registration.
    
    Raised when the host parser lacks a rule the math rules anchor to,
    or when the plugin is applied twice to one parser.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.
        
        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
