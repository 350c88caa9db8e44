import json

import pytest

from xypher.classical.monoalphabetic.affine import AffineCipher
from xypher.classical.monoalphabetic.atbash import AtbashCipher
from xypher.classical.monoalphabetic.caesar import CaesarCipher
from xypher.classical.sequence import CipherSequence
from xypher.core.errors import InvalidConfiguration, NotFound, PersistenceError, UnknownType
from xypher.persistence import FileHandler


@pytest.fixture
def files(tmp_path):
    return FileHandler(tmp_path / "data")


def test_save_cipher_writes_named_file(files):
    path = files.save_encoder(AffineCipher(5, 8))
    assert path.name == "AffineCipher-5-8.json"
    assert json.loads(path.read_text()) == {"type": "AffineCipher", "a": 5, "b": 8}


@pytest.mark.parametrize("cipher", [CaesarCipher(3), AffineCipher(5, 8), AtbashCipher()])
def test_cipher_save_load(files, cipher):
    files.save_encoder(cipher)
    assert files.load_encoder(cipher.name) == cipher


def test_sequence_save_load_preserves_order(files):
    seq = CipherSequence("DemoSequence", [CaesarCipher(1), AtbashCipher(), AffineCipher(3, 2)])
    files.save_encoder(seq)
    loaded = files.load_encoder("DemoSequence")
    assert isinstance(loaded, CipherSequence)
    assert loaded.name == "DemoSequence"
    assert loaded.get_cipher_list() == seq.get_cipher_list()
    assert loaded.encode("Hello World") == seq.encode("Hello World")


def test_list_and_delete(files):
    assert files.list_saved() == []
    files.save_encoder(CaesarCipher(2))
    files.save_encoder(CipherSequence("XSequence"))
    assert files.list_saved() == ["CaesarCipher-2", "XSequence"]
    files.delete("XSequence")
    assert files.list_saved() == ["CaesarCipher-2"]
    with pytest.raises(NotFound):
        files.delete("XSequence")


def test_missing_file(files):
    with pytest.raises(NotFound):
        files.load_encoder("CaesarCipher-9")


def test_bad_json(files):
    files.data_dir.mkdir(parents=True)
    (files.data_dir / "BrokenSequence.json").write_text("{not json")
    with pytest.raises(PersistenceError):
        files.load_encoder("BrokenSequence")


def test_unknown_type_in_name(files):
    files.data_dir.mkdir(parents=True)
    (files.data_dir / "PlayfairCipher-X.json").write_text("{}")
    with pytest.raises(UnknownType):
        files.load_encoder("PlayfairCipher-X")


def test_invalid_parameters_on_load(files):
    files.data_dir.mkdir(parents=True)
    (files.data_dir / "AffineCipher-2-1.json").write_text('{"type": "AffineCipher", "a": 2, "b": 1}')
    with pytest.raises(InvalidConfiguration):
        files.load_encoder("AffineCipher-2-1")


def test_rejects_path_like_names(files):
    with pytest.raises(InvalidConfiguration):
        files.load_encoder("../etc/passwd")


@pytest.mark.parametrize(
    "name, doc",
    [
        ("XSequence", {"type": "CipherSequence", "ciphers": []}),
        ("XSequence", {"type": "CipherSequence", "name": "XSequence", "ciphers": {"type": "AtbashCipher"}}),
        ("XSequence", {"type": "CipherSequence", "name": "XSequence", "ciphers": [{"shift": 3}]}),
        ("XSequence", {"type": "CipherSequence", "name": "XSequence", "ciphers": [{"type": ["CaesarCipher"]}]}),
        ("XSequence", {"type": "CipherSequence", "name": "XSequence", "ciphers": ["AtbashCipher"]}),
        ("XSequence", {"type": "CipherSequence", "name": "XSequence", "ciphers": [{"type": "CaesarCipher"}]}),
        ("CaesarCipher-3", {"type": "CaesarCipher"}),
        ("AffineCipher-5-8", {"type": "AffineCipher", "a": 5}),
    ],
)
def test_wrongly_shaped_documents(files, name, doc):
    files.data_dir.mkdir(parents=True)
    (files.data_dir / f"{name}.json").write_text(json.dumps(doc))
    with pytest.raises(PersistenceError):
        files.load_encoder(name)


def test_document_name_must_match_file(files):
    files.data_dir.mkdir(parents=True)
    (files.data_dir / "ASequence.json").write_text(
        json.dumps({"type": "CipherSequence", "name": "BSequence", "ciphers": []})
    )
    (files.data_dir / "CaesarCipher-3.json").write_text(json.dumps({"type": "CaesarCipher", "shift": 5}))
    with pytest.raises(PersistenceError):
        files.load_encoder("ASequence")
    with pytest.raises(PersistenceError):
        files.load_encoder("CaesarCipher-3")
