from pathlib import Path

import pytest

from xypher.config import XypherConfig


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = XypherConfig.load(env={})
    assert cfg.data_dir == Path("data")
    assert cfg.log_level == "WARNING"
    assert cfg.log_file is None
    assert cfg.json_indent == 2


def test_toml_then_env(tmp_path):
    path = tmp_path / "xypher.toml"
    path.write_text('[xypher]\ndata_dir = "saved"\nlog_level = "info"\njson_indent = 4\nunknown = 1\n')
    cfg = XypherConfig.load(path, env={})
    assert cfg.data_dir == Path("saved")
    assert cfg.log_level == "INFO"
    assert cfg.json_indent == 4

    cfg = XypherConfig.load(path, env={"XYPHER_DATA_DIR": "/tmp/other", "XYPHER_JSON_INDENT": "0"})
    assert cfg.data_dir == Path("/tmp/other")
    assert cfg.json_indent == 0


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        XypherConfig.load(tmp_path / "nope.toml", env={})


def test_override_skips_none():
    cfg = XypherConfig().override(data_dir=Path("x"), log_level=None)
    assert cfg.data_dir == Path("x")
    assert cfg.log_level == "WARNING"
