from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar

from xypher.classical.common import parse_int_param
from xypher.core.alphabet import ALPHA_MAP, SIZE, index_of, letter_of
from xypher.core.errors import InvalidConfiguration, PersistenceError
from xypher.core.registry import ARG_DELIM

log = logging.getLogger(__name__)


class Cipher(ABC):
    """
    A single letter-substitution transformation.

    Subclasses set ``type_name`` and ``param_names`` and implement the two
    position hooks; everything else (uppercasing, pass-through of anything
    that is not A-Z, naming, serialisation) lives here.

    Characters outside A-Z (spaces, digits, punctuation) are copied through
    unchanged by both encode and decode.
    """

    type_name: ClassVar[str] = ""
    param_names: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def _encode_index(self, index: int) -> int:
        ...

    @abstractmethod
    def _decode_index(self, index: int) -> int:
        ...

    def encode_letter(self, letter: str) -> str:
        return letter_of(self._encode_index(index_of(letter)) % SIZE)

    def decode_letter(self, letter: str) -> str:
        return letter_of(self._decode_index(index_of(letter)) % SIZE)

    def encode(self, text: str) -> str:
        return self._transform(text, self.encode_letter)

    def decode(self, text: str) -> str:
        """Invert encode(); only meaningful for text encoded with the same parameters."""
        return self._transform(text, self.decode_letter)

    def _transform(self, text: str, letter_fn: Callable[[str], str]) -> str:
        out = []
        for ch in text.upper():
            out.append(letter_fn(ch) if ch in ALPHA_MAP else ch)
        return "".join(out)

    def serializable_parameters(self) -> tuple[int, ...]:
        return tuple(getattr(self, p) for p in self.param_names)

    @property
    def name(self) -> str:
        return ARG_DELIM.join([self.type_name, *(str(p) for p in self.serializable_parameters())])

    def to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": self.type_name}
        doc.update(zip(self.param_names, self.serializable_parameters()))
        return doc

    @classmethod
    def from_parameters(cls, *params: Any) -> "Cipher":
        if len(params) != len(cls.param_names):
            expected = ", ".join(cls.param_names) or "no parameters"
            raise InvalidConfiguration(
                f"{cls.type_name} takes {len(cls.param_names)} parameter(s) ({expected}), got {len(params)}."
            )
        values = [parse_int_param(v, f"{cls.type_name} {n}") for n, v in zip(cls.param_names, params)]
        return cls(*values)

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> "Cipher":
        missing = [n for n in cls.param_names if n not in doc]
        if missing:
            raise PersistenceError(f"{cls.type_name} document is missing: {', '.join(missing)}")
        return cls.from_parameters(*(doc[n] for n in cls.param_names))

    def __str__(self) -> str:
        return self.name
