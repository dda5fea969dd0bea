"""Loggers for rawlatex, kept under the ``rawlatex`` namespace.

The plugin logs at DEBUG when it registers its rules, and the block rule
logs when an unclosed ``$$`` runs to the end of its range. Enable them with
``logging.getLogger("rawlatex").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, under the ``rawlatex.`` prefix.

    Names already inside the package namespace are used as-is.

    Example:
        >>> get_logger("mymodule").name
        'rawlatex.mymodule'
    """
    if not (name == "rawlatex" or name.startswith("rawlatex.")):
        name = f"rawlatex.{name}"
    return logging.getLogger(name)
