from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from xypher.classical.cipher import Cipher
from xypher.core.errors import IndexOutOfRange, InvalidConfiguration, PersistenceError
from xypher.core.registry import get_cipher_type

log = logging.getLogger(__name__)

SEQUENCE_SUFFIX = "Sequence"
SEQUENCE_TYPE = "CipherSequence"


def sequence_name(base: str) -> str:
    """Apply the naming convention that marks an encoder as a sequence."""
    base = base.strip()
    if not base:
        raise InvalidConfiguration("Sequence name must not be empty.")
    if "Cipher" in base:
        # saved files named *Cipher* are loaded back as single ciphers
        raise InvalidConfiguration(f"Sequence name may not contain 'Cipher': {base}")
    return base if base.endswith(SEQUENCE_SUFFIX) else base + SEQUENCE_SUFFIX


def is_sequence_name(name: str) -> bool:
    return "Cipher" not in name


class CipherSequence:
    """
    An ordered chain of ciphers that behaves as a single encoder.

    encode() runs the ciphers first to last; decode() runs their inverses
    last to first. Ciphers are immutable, so the same instance may sit in
    several sequences (or several times in one) without surprises.
    """

    def __init__(self, name: str, ciphers: Optional[Iterable[Cipher]] = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfiguration("Sequence name must not be empty.")
        if not is_sequence_name(name):
            raise InvalidConfiguration(f"Sequence name may not contain 'Cipher': {name}")
        self._name = name
        self._ciphers: list[Cipher] = []
        for c in ciphers or ():
            self.push_cipher(c)

    @property
    def name(self) -> str:
        return self._name

    def push_cipher(self, cipher: Cipher) -> None:
        if not isinstance(cipher, Cipher):
            raise InvalidConfiguration(f"Only single ciphers can be added to a sequence, got {cipher!r}")
        self._ciphers.append(cipher)
        log.debug("%s: pushed %s (len=%d)", self._name, cipher.name, len(self._ciphers))

    def remove_cipher(self, index: int) -> Cipher:
        """Remove and return the cipher at a zero-based position."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(f"Sequence index must be an integer, got {index!r}")
        if not 0 <= index < len(self._ciphers):
            raise IndexOutOfRange(
                f"Index {index} out of range for {self._name} with {len(self._ciphers)} cipher(s)."
            )
        removed = self._ciphers.pop(index)
        log.debug("%s: removed %s at %d", self._name, removed.name, index)
        return removed

    def get_cipher_list(self) -> tuple[Cipher, ...]:
        return tuple(self._ciphers)

    def encode(self, text: str) -> str:
        for cipher in self._ciphers:
            text = cipher.encode(text)
        return text

    def decode(self, text: str) -> str:
        for cipher in reversed(self._ciphers):
            text = cipher.decode(text)
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": SEQUENCE_TYPE,
            "name": self._name,
            "ciphers": [c.to_dict() for c in self._ciphers],
        }

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> "CipherSequence":
        name = doc.get("name")
        members = doc.get("ciphers", [])
        if not isinstance(name, str) or not isinstance(members, list):
            raise PersistenceError("Sequence document needs a string 'name' and a list 'ciphers'.")
        ciphers = []
        for member in members:
            if not isinstance(member, dict) or not isinstance(member.get("type"), str):
                raise PersistenceError(f"Bad cipher entry in {name}: {member!r}")
            ciphers.append(get_cipher_type(member["type"]).from_dict(member))
        return cls(name, ciphers)

    def __len__(self) -> int:
        return len(self._ciphers)

    def __iter__(self):
        return iter(self._ciphers)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"CipherSequence({self._name!r}, {[c.name for c in self._ciphers]!r})"
