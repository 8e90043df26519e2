"""Shorthand naming rules.

A shorthand is derived from a decorator type's name by lower-casing its
first character. Derived names are registered only if they match the
identifier grammar: first character a letter or underscore, remaining
characters alphanumeric or underscore (ASCII only).
"""

from __future__ import annotations

import re

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][0-9A-Za-z_]*")


def is_identifier(name: str) -> bool:
    """Check name against the shorthand identifier grammar."""
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def derive_shorthand(type_name: str) -> str | None:
    """Derive default shorthand from a type name.

    Args:
        type_name: Qualified type name (e.g., "ExtraParams", "Omg.Wrapper").

    Returns:
        Name with first character lower-cased, or None if the result
        violates the identifier grammar. Not an error: caller skips
        registration silently.

    Example:
        derive_shorthand("ExtraParams") -> "extraParams"
        derive_shorthand("Omg.Wrapper") -> None
    """
    if not type_name:
        return None
    name = type_name[0].lower() + type_name[1:]
    if not is_identifier(name):
        return None
    return name
