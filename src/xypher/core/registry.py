from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Union

from .errors import InvalidConfiguration, UnknownType

if TYPE_CHECKING:
    from xypher.classical.cipher import Cipher

log = logging.getLogger(__name__)

ARG_DELIM = "-"

Param = Union[int, str]

_CIPHERS: dict[str, type["Cipher"]] = {}


def register_cipher(cipher_cls: type["Cipher"]) -> type["Cipher"]:
    """Make a cipher class constructible by its type name.

    Usable as a class decorator.
    """
    key = getattr(cipher_cls, "type_name", "").strip()
    if not key:
        raise ValueError("Cipher class must define a non-empty type_name.")
    if ARG_DELIM in key:
        raise ValueError(f"Cipher type name may not contain {ARG_DELIM!r}: {key}")
    _CIPHERS[key] = cipher_cls
    return cipher_cls


def _ensure_loaded() -> None:
    # Built-in ciphers register themselves on import.
    from xypher.classical import register_all

    register_all()


def list_cipher_types() -> list[str]:
    _ensure_loaded()
    return sorted(_CIPHERS.keys())


def get_cipher_type(type_name: str) -> type["Cipher"]:
    _ensure_loaded()
    try:
        return _CIPHERS[type_name]
    except (KeyError, TypeError):
        raise UnknownType(
            f"Unknown cipher type {type_name!r}. Available: {', '.join(list_cipher_types())}"
        ) from None


def split_canonical_name(name: str) -> tuple[str, list[str]]:
    """'AffineCipher-5-8' -> ('AffineCipher', ['5', '8'])."""
    parts = name.strip().split(ARG_DELIM)
    type_name, params = parts[0], parts[1:]
    if not type_name or any(p == "" for p in params):
        raise InvalidConfiguration(f"Malformed cipher name: {name!r}")
    return type_name, params


def cipher_from_parameters(type_name: str, params: Iterable[Param] = ()) -> "Cipher":
    """Rebuild a cipher from its type name and ordered parameters."""
    cipher_cls = get_cipher_type(type_name)
    cipher = cipher_cls.from_parameters(*params)
    log.debug("Built %s", cipher.name)
    return cipher


def cipher_from_canonical_name(name: str) -> "Cipher":
    type_name, params = split_canonical_name(name)
    return cipher_from_parameters(type_name, params)
