from __future__ import annotations

from types import MappingProxyType

from .errors import InvalidInput

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)

# Letter -> position, read-only.
ALPHA_MAP = MappingProxyType({ch: i for i, ch in enumerate(ALPHABET)})


def is_letter(ch: str) -> bool:
    return ch in ALPHA_MAP


def index_of(letter: str) -> int:
    """Position 0..25 of an uppercase A-Z letter."""
    try:
        return ALPHA_MAP[letter]
    except (KeyError, TypeError) as e:
        raise InvalidInput(f"Not an uppercase A-Z letter: {letter!r}") from e


def letter_of(index: int) -> str:
    """Uppercase letter at position 0..25."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SIZE:
        raise InvalidInput(f"Alphabet index must be an integer in [0, {SIZE}), got {index!r}")
    return ALPHABET[index]
