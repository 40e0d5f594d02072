# --------------------------------------------------------------
# File: test_content.py
# Description: Pruebas sobre la lectura de fuentes y la escritura de artefactos.
# --------------------------------------------------------------

import io
import sys

import pytest

from cipherkit.content import get_content, open_source, write_artifacts
from cipherkit.errors import SourceNotFound


def test_get_content_reads_file(tmp_path):
    """Comprueba que get_content devuelva los bytes exactos del archivo.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
    """
    path = tmp_path / "key.bin"
    path.write_bytes(b"\x00\x01clave\xff")
    assert get_content(str(path)) == b"\x00\x01clave\xff"


def test_get_content_missing_file(tmp_path):
    """Valida que un archivo inexistente produzca SourceNotFound.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
    """
    missing = str(tmp_path / "nope")
    with pytest.raises(SourceNotFound):
        get_content(missing)
    with pytest.raises(FileNotFoundError):
        get_content(missing)


def test_dash_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"desde stdin")))
    assert get_content("-") == b"desde stdin"


def test_open_source_closes_files(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"hola")
    with open_source(str(path)) as reader:
        assert reader.read() == b"hola"
    assert reader.closed


def test_write_artifacts_creates_each_file(key_dir):
    """Verifica que cada artefacto se escriba con su nombre y contenido.

    Args:
        key_dir (Path): Directorio temporal de claves.
    """
    artifacts = {"chacha20.key": b"k" * 32, "chacha20.nonce": b"n" * 12}
    written = write_artifacts(artifacts, str(key_dir))
    assert written == [str(key_dir / "chacha20.key"), str(key_dir / "chacha20.nonce")]
    assert (key_dir / "chacha20.key").read_bytes() == b"k" * 32
    assert (key_dir / "chacha20.nonce").read_bytes() == b"n" * 12


def test_write_artifacts_is_atomic(key_dir):
    """Garantiza que no queden archivos temporales tras la escritura.

    Args:
        key_dir (Path): Directorio temporal de claves.
    """
    write_artifacts({"blake3.txt": b"x" * 32}, str(key_dir))
    write_artifacts({"blake3.txt": b"y" * 32}, str(key_dir))
    assert (key_dir / "blake3.txt").read_bytes() == b"y" * 32
    assert not (key_dir / "blake3.txt.tmp").exists()
