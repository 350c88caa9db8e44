from __future__ import annotations

from typing import Tuple

from xypher.core.alphabet import SIZE
from xypher.core.errors import InvalidConfiguration


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    if a == 0:
        return (b, 0, 1)
    g, y, x = egcd(b % a, a)
    return (g, x - (b // a) * y, y)


def modinv(a: int, m: int = SIZE) -> int:
    """Modular inverse of a under mod m; raises InvalidConfiguration if none."""
    a %= m
    g, x, _ = egcd(a, m)
    if g != 1:
        raise InvalidConfiguration(f"No modular inverse for a={a} mod {m}.")
    return x % m


def shift_index(index: int, shift: int) -> int:
    """Shift an alphabet position, wrapping into [0, 26)."""
    return (index + shift) % SIZE


def parse_int_param(value, label: str) -> int:
    """
    Accept an int or a string like "5" / " -3 ".
    Anything else is a configuration error.
    """
    if isinstance(value, bool):
        raise InvalidConfiguration(f"{label} must be an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidConfiguration(f"{label} must be an integer, got {value!r}.")
