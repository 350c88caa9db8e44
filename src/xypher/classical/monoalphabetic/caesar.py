from __future__ import annotations

from dataclasses import dataclass

from xypher.classical.cipher import Cipher
from xypher.classical.common import parse_int_param, shift_index
from xypher.core.alphabet import SIZE
from xypher.core.registry import register_cipher


@register_cipher
@dataclass(frozen=True)
class CaesarCipher(Cipher):
    type_name = "CaesarCipher"
    param_names = ("shift",)

    shift: int

    def __post_init__(self) -> None:
        # Keep the shift in [0, 26) so the canonical name never carries a '-'.
        k = parse_int_param(self.shift, "Caesar shift") % SIZE
        object.__setattr__(self, "shift", k)

    def _encode_index(self, index: int) -> int:
        return shift_index(index, self.shift)

    def _decode_index(self, index: int) -> int:
        return shift_index(index, -self.shift)
