"""
Xypher configuration.

Values come from, in increasing priority: dataclass defaults, the
``[xypher]`` table of a TOML file, ``XYPHER_*`` environment variables, and
finally whatever the CLI passes explicitly.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

_DEFAULT_CONFIG_PATH = Path("xypher.toml")

_ENV_PREFIX = "XYPHER_"


@dataclass(frozen=True)
class XypherConfig:
    data_dir: Path = Path("data")
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    json_indent: int = 2

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "XypherConfig":
        """Build a config from an optional TOML file plus the environment.

        A missing file is only an error when *path* was given explicitly.
        Unknown keys in the file are ignored.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
        raw: dict[str, Any] = {}
        if config_path.is_file():
            with open(config_path, "rb") as fh:
                raw = tomllib.load(fh).get("xypher", {})
        elif path is not None:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        env = os.environ if env is None else env
        for f in fields(cls):
            val = env.get(_ENV_PREFIX + f.name.upper())
            if val:
                raw[f.name] = val

        return cls._build(raw)

    @classmethod
    def _build(cls, data: Mapping[str, Any]) -> "XypherConfig":
        valid = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in valid}
        if "data_dir" in kwargs:
            kwargs["data_dir"] = Path(kwargs["data_dir"])
        if kwargs.get("log_file"):
            kwargs["log_file"] = Path(kwargs["log_file"])
        if "json_indent" in kwargs:
            kwargs["json_indent"] = int(kwargs["json_indent"])
        if "log_level" in kwargs:
            kwargs["log_level"] = str(kwargs["log_level"]).upper()
        return cls(**kwargs)

    def override(self, **changes: Any) -> "XypherConfig":
        """Copy with the non-None *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
