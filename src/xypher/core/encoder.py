from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Encoder(Protocol):
    """Anything that can encode/decode text and has a stable canonical name.

    Both a single cipher and a cipher sequence satisfy this; the workspace
    and the file handler only depend on it.
    """

    @property
    def name(self) -> str:
        ...

    def encode(self, text: str) -> str:
        ...

    def decode(self, text: str) -> str:
        ...
