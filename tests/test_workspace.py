import pytest

from xypher.classical.monoalphabetic.atbash import AtbashCipher
from xypher.classical.monoalphabetic.caesar import CaesarCipher
from xypher.classical.sequence import CipherSequence
from xypher.core.errors import NotFound
from xypher.persistence import FileHandler
from xypher.workspace import Workspace


@pytest.fixture
def ws(tmp_path):
    return Workspace(FileHandler(tmp_path))


def test_add_get_delete(ws):
    c = ws.add_encoder(CaesarCipher(3))
    assert ws.get_encoder("CaesarCipher-3") is c
    assert "CaesarCipher-3" in ws.encoders
    ws.delete_encoder("CaesarCipher-3")
    with pytest.raises(NotFound):
        ws.get_encoder("CaesarCipher-3")
    with pytest.raises(NotFound):
        ws.delete_encoder("CaesarCipher-3")


def test_get_sequence(ws):
    ws.add_encoder(CipherSequence("DemoSequence"))
    ws.add_encoder(AtbashCipher())
    assert ws.get_sequence("DemoSequence").name == "DemoSequence"
    with pytest.raises(NotFound):
        ws.get_sequence("AtbashCipher")
    with pytest.raises(NotFound):
        ws.get_sequence("MissingSequence")
    assert ws.sequences() == ["DemoSequence"]


def test_encoders_view_is_read_only(ws):
    with pytest.raises(TypeError):
        ws.encoders["x"] = AtbashCipher()


def test_resolve_falls_back_to_canonical_name(ws):
    assert ws.resolve("CaesarCipher-4") == CaesarCipher(4)
    with pytest.raises(NotFound):
        ws.resolve("NopeSequence")
    with pytest.raises(NotFound):
        ws.resolve_cipher("NopeSequence")


def test_save_and_load_all(tmp_path, ws):
    seq = ws.add_encoder(CipherSequence("DemoSequence", [CaesarCipher(1), AtbashCipher()]))
    ws.add_encoder(CaesarCipher(1))
    ws.save_encoder("DemoSequence")
    ws.save_encoder("CaesarCipher-1")

    fresh = Workspace(FileHandler(tmp_path))
    assert fresh.load_all() == ["CaesarCipher-1", "DemoSequence"]
    assert fresh.get_sequence("DemoSequence").encode("AB") == seq.encode("AB") == "YX"


def test_save_unknown_name(ws):
    with pytest.raises(NotFound):
        ws.save_encoder("GhostSequence")
