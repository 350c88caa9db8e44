from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from xypher.classical.cipher import Cipher
from xypher.classical.sequence import CipherSequence, is_sequence_name
from xypher.core.encoder import Encoder
from xypher.core.errors import InvalidConfiguration, NotFound, PersistenceError
from xypher.core.registry import ARG_DELIM, get_cipher_type

log = logging.getLogger(__name__)

FILE_EXT = ".json"


class FileHandler:
    """
    Stores one JSON document per encoder under ``data_dir``.

    The file name is the encoder's canonical name plus ``.json``. On load the
    name alone decides what to rebuild: names containing ``Cipher`` are single
    ciphers whose type is the text before the first ``-``; everything else is
    a sequence.
    """

    def __init__(self, data_dir: Union[str, Path] = "data", *, indent: int = 2) -> None:
        self.data_dir = Path(data_dir)
        self.indent = indent

    def path_for(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise InvalidConfiguration(f"Not a valid encoder name: {name!r}")
        return self.data_dir / f"{name}{FILE_EXT}"

    def save_encoder(self, encoder: Encoder) -> Path:
        path = self.path_for(encoder.name)
        text = json.dumps(encoder_to_dict(encoder), indent=self.indent)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Could not write {path}: {e}") from e
        log.info("Saved %s to %s", encoder.name, path)
        return path

    def load_encoder(self, name: str) -> Encoder:
        doc = self._read(name)
        path = self.path_for(name)
        try:
            if is_sequence_name(name):
                encoder: Encoder = CipherSequence.from_dict(doc)
            else:
                type_name = name.split(ARG_DELIM, 1)[0]
                encoder = get_cipher_type(type_name).from_dict(doc)
        except (TypeError, KeyError, AttributeError) as e:
            raise PersistenceError(f"{path} is malformed: {e}") from e
        if encoder.name != name:
            raise PersistenceError(f"{path} holds '{encoder.name}', not '{name}'.")
        log.info("Loaded %s", encoder.name)
        return encoder

    def list_saved(self) -> list[str]:
        if not self.data_dir.is_dir():
            return []
        return sorted(p.stem for p in self.data_dir.glob(f"*{FILE_EXT}") if p.is_file())

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def delete(self, name: str) -> None:
        path = self.path_for(name)
        if not path.is_file():
            raise NotFound(f"No saved encoder named '{name}' in {self.data_dir}")
        try:
            path.unlink()
        except OSError as e:
            raise PersistenceError(f"Could not delete {path}: {e}") from e
        log.info("Deleted %s", path)

    def _read(self, name: str) -> dict[str, Any]:
        path = self.path_for(name)
        if not path.is_file():
            raise NotFound(f"No saved encoder named '{name}' in {self.data_dir}")
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise PersistenceError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(doc, dict):
            raise PersistenceError(f"{path} does not hold a JSON object.")
        return doc


def encoder_to_dict(encoder: Encoder) -> dict[str, Any]:
    if isinstance(encoder, (Cipher, CipherSequence)):
        return encoder.to_dict()
    raise InvalidConfiguration(f"Cannot serialise {encoder!r}")
