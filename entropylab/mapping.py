"""
Mapping logic: resolve character-class flags into an alphabet and turn
random values into characters from it.
"""

from __future__ import annotations

from typing import Iterable

from .config import (
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    CharacterSetConfig,
)

_CLASS_STRINGS = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("numbers", NUMBERS),
    ("symbols", SYMBOLS),
)


def build_alphabet(config: CharacterSetConfig) -> tuple[str, int]:
    """
    Concatenate the enabled class strings in fixed order
    (lowercase, uppercase, numbers, symbols).

    An all-false config gives ("", 0); generators treat that as
    "nothing to draw from" and return an empty password.
    """
    alphabet = "".join(
        chars for name, chars in _CLASS_STRINGS if getattr(config, name)
    )
    return alphabet, len(alphabet)


def values_to_password(values: Iterable[int], alphabet: str) -> str:
    """
    Map each integer into the alphabet with modulo.
    """
    if not alphabet:
        return ""
    size = len(alphabet)
    return "".join(alphabet[v % size] for v in values)
