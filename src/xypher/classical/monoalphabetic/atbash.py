from __future__ import annotations

from dataclasses import dataclass

from xypher.classical.cipher import Cipher
from xypher.core.alphabet import SIZE
from xypher.core.registry import register_cipher


@register_cipher
@dataclass(frozen=True)
class AtbashCipher(Cipher):
    type_name = "AtbashCipher"

    def _encode_index(self, index: int) -> int:
        return SIZE - 1 - index

    # self-inverse
    _decode_index = _encode_index
