from __future__ import annotations

from dataclasses import dataclass

from xypher.classical.cipher import Cipher
from xypher.classical.common import shift_index
from xypher.core.registry import register_cipher


@register_cipher
@dataclass(frozen=True)
class Rot13Cipher(Cipher):
    """Caesar with a fixed shift of 13; applying it twice is the identity."""

    type_name = "Rot13Cipher"

    def _encode_index(self, index: int) -> int:
        return shift_index(index, 13)

    _decode_index = _encode_index
