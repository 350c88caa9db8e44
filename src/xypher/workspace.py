from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from xypher.classical.cipher import Cipher
from xypher.classical.sequence import CipherSequence
from xypher.core.encoder import Encoder
from xypher.core.errors import NotFound
from xypher.core.registry import cipher_from_canonical_name
from xypher.persistence import FileHandler

log = logging.getLogger(__name__)


class Workspace:
    """
    The set of encoders a user is working with, keyed by canonical name.

    Not thread-safe: callers sharing one workspace across threads must lock
    around add/delete and around sequence push/remove.
    """

    def __init__(self, files: Optional[FileHandler] = None) -> None:
        self._files = files if files is not None else FileHandler()
        self._encoders: dict[str, Encoder] = {}

    @property
    def files(self) -> FileHandler:
        return self._files

    @property
    def encoders(self) -> Mapping[str, Encoder]:
        return MappingProxyType(self._encoders)

    def add_encoder(self, encoder: Encoder) -> Encoder:
        if encoder.name in self._encoders:
            log.info("Replacing encoder %s", encoder.name)
        self._encoders[encoder.name] = encoder
        return encoder

    def delete_encoder(self, name: str) -> Encoder:
        try:
            return self._encoders.pop(name)
        except KeyError:
            raise NotFound(f"No encoder named '{name}'.") from None

    def get_encoder(self, name: str) -> Encoder:
        try:
            return self._encoders[name]
        except KeyError:
            raise NotFound(f"No encoder named '{name}'.") from None

    def get_sequence(self, name: str) -> CipherSequence:
        encoder = self.get_encoder(name)
        if not isinstance(encoder, CipherSequence):
            raise NotFound(f"'{name}' is not a sequence.")
        return encoder

    def sequences(self) -> list[str]:
        return sorted(n for n, e in self._encoders.items() if isinstance(e, CipherSequence))

    def resolve(self, name: str) -> Encoder:
        """A registered encoder, or a cipher built straight from a canonical name."""
        if name in self._encoders:
            return self._encoders[name]
        if "Cipher" in name:
            return cipher_from_canonical_name(name)
        raise NotFound(f"No encoder named '{name}'.")

    def resolve_cipher(self, name: str) -> Cipher:
        encoder = self.resolve(name)
        if not isinstance(encoder, Cipher):
            raise NotFound(f"'{name}' is not a single cipher.")
        return encoder

    def save_encoder(self, name: str) -> None:
        self._files.save_encoder(self.get_encoder(name))

    def load_encoder(self, name: str) -> Encoder:
        return self.add_encoder(self._files.load_encoder(name))

    def load_all(self) -> list[str]:
        loaded = []
        for name in self._files.list_saved():
            loaded.append(self.load_encoder(name).name)
        log.debug("Loaded %d encoder(s) from %s", len(loaded), self._files.data_dir)
        return loaded
