# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con material de claves y archivos temporales.
# --------------------------------------------------------------

from typing import Dict

import pytest

from cipherkit.crypto_sign import Ed25519Signer
from cipherkit.crypto_sym import Chacha20

BLAKE3_KEY = b"0123456789abcdefghijklmnopqrstuv"


@pytest.fixture
def blake3_key() -> bytes:
    """Clave BLAKE3 fija de 32 bytes.

    Returns:
        bytes: Material de clave determinista.
    """
    return BLAKE3_KEY


@pytest.fixture
def ed25519_keys() -> Dict[str, bytes]:
    """Par Ed25519 recién generado con los nombres de artefacto estables.

    Returns:
        Dict[str, bytes]: ``ed25519.sk`` y ``ed25519.pk``.
    """
    return Ed25519Signer.generate()


@pytest.fixture
def chacha_material() -> Dict[str, bytes]:
    """Clave y nonce ChaCha20-Poly1305 recién generados.

    Returns:
        Dict[str, bytes]: ``chacha20.key`` y ``chacha20.nonce``.
    """
    return Chacha20.generate()


@pytest.fixture
def key_dir(tmp_path):
    """Directorio temporal donde los tests escriben artefactos.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        Path: Subdirectorio vacío ``keys``.
    """
    path = tmp_path / "keys"
    path.mkdir()
    return path
