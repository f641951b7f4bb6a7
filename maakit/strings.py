"""Small string helpers: replacement, trimming, case folding and splitting.

Every helper accepts either ``str`` or ``bytes`` and returns the same type.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping
from typing import TypeVar, Union

AnyStr = TypeVar("AnyStr", str, bytes)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

Replacements = Union[Mapping[AnyStr, AnyStr], Iterable[tuple[AnyStr, AnyStr]]]


def replace_all(text: AnyStr, old: AnyStr, new: AnyStr) -> AnyStr:
    """Replace every non-overlapping occurrence of *old*, scanning left to right.

    Text that has just been inserted is never searched again.
    """
    if not old:
        raise ValueError("the text to replace must not be empty")
    return text.replace(old, new)


def replace_all_map(text: AnyStr, replacements: Replacements) -> AnyStr:
    """Apply each ``old -> new`` pair in turn, in the order given."""
    pairs = replacements.items() if isinstance(replacements, Mapping) else replacements
    for old, new in pairs:
        text = replace_all(text, old, new)
    return text


def trim(text: AnyStr) -> AnyStr:
    """Strip leading and trailing space characters (only ``' '``, not tabs)."""
    return text.strip(b" " if isinstance(text, bytes) else " ")


def to_lower(text: AnyStr) -> AnyStr:
    """Lower-case ASCII letters; all other characters are left alone."""
    if isinstance(text, bytes):
        return text.lower()
    return text.translate(_ASCII_LOWER)


def to_upper(text: AnyStr) -> AnyStr:
    """Upper-case ASCII letters; all other characters are left alone."""
    if isinstance(text, bytes):
        return text.upper()
    return text.translate(_ASCII_UPPER)


def split(text: AnyStr, delim: AnyStr) -> list[AnyStr]:
    """Split *text* on *delim*.

    An empty text gives no pieces at all, a trailing delimiter gives a
    trailing empty piece, and an empty delimiter splits into single
    characters.
    """
    if not text:
        return []
    if not delim:
        if isinstance(text, bytes):
            return [bytes([value]) for value in text]
        return list(text)
    return text.split(delim)