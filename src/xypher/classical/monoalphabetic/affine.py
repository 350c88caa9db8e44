from __future__ import annotations

import math
from dataclasses import dataclass, field

from xypher.classical.cipher import Cipher
from xypher.classical.common import modinv, parse_int_param
from xypher.core.alphabet import SIZE
from xypher.core.errors import InvalidConfiguration
from xypher.core.registry import register_cipher


@register_cipher
@dataclass(frozen=True)
class AffineCipher(Cipher):
    """E(p) = a*p + b, D(c) = a^-1 * (c - b), all mod 26."""

    type_name = "AffineCipher"
    param_names = ("a", "b")

    a: int
    b: int
    _a_inv: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        a = parse_int_param(self.a, "Affine a") % SIZE
        b = parse_int_param(self.b, "Affine b") % SIZE
        if math.gcd(a, SIZE) != 1:
            raise InvalidConfiguration(
                "Affine key 'a' must be coprime with 26 (e.g., 1,3,5,7,9,11,15,17,19,21,23,25)."
            )
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "_a_inv", modinv(a, SIZE))

    def _encode_index(self, index: int) -> int:
        return (self.a * index + self.b) % SIZE

    def _decode_index(self, index: int) -> int:
        return (self._a_inv * (index - self.b)) % SIZE
