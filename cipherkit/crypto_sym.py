# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado autenticado ChaCha20-Poly1305 con clave y nonce externos.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado para proteger textos.

El nonce no se genera por mensaje: se lee del artefacto ``chacha20.nonce``
generado junto a la clave, y el texto cifrado no lo incluye. Cifrar dos
mensajes distintos con la misma clave y el mismo nonce rompe la
confidencialidad y la integridad de ChaCha20-Poly1305; rota la pareja
clave/nonce tras cada uso si los datos importan.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Dict

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from cipherkit.errors import (
    AuthenticationFailed,
    EncryptionFailed,
    KeyMaterialTooShort,
    MalformedKey,
)

KEY_LEN = 32
NONCE_LEN = 12
TAG_LEN = 16
ARTIFACT_KEY = "chacha20.key"
ARTIFACT_NONCE = "chacha20.nonce"


class Chacha20:
    """Cifrador/descifrador ChaCha20-Poly1305 ligado a una clave y un nonce."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        self._cipher = ChaCha20Poly1305(key)
        self._nonce = nonce

    @classmethod
    def try_new(cls, key: bytes, nonce: bytes) -> "Chacha20":
        """Valida el material y construye la capacidad de cifrado.

        Args:
            key (bytes): Clave simétrica de 256 bits.
            nonce (bytes): Nonce de 96 bits leído del artefacto de nonce.

        Returns:
            Chacha20: Instancia lista para cifrar o descifrar.

        Raises:
            KeyMaterialTooShort: Si la clave tiene menos de 32 bytes.
            MalformedKey: Si la clave excede 32 bytes o el nonce no mide 12.

        """

        if len(key) < KEY_LEN:
            raise KeyMaterialTooShort(
                f"la clave ChaCha20 necesita {KEY_LEN} bytes, recibidos {len(key)}"
            )
        if len(key) != KEY_LEN:
            raise MalformedKey(f"la clave ChaCha20 debe tener {KEY_LEN} bytes, recibidos {len(key)}")
        if len(nonce) != NONCE_LEN:
            raise MalformedKey(f"el nonce debe tener {NONCE_LEN} bytes, recibidos {len(nonce)}")
        return cls(bytes(key), bytes(nonce))

    def encrypt(self, reader: BinaryIO) -> bytes:
        """Cifra el flujo completo.

        Returns:
            bytes: Ciphertext seguido de la etiqueta Poly1305 de 16 bytes.

        Raises:
            EncryptionFailed: Si la librería rechaza la operación.

        """

        plaintext = reader.read()
        try:
            return self._cipher.encrypt(self._nonce, plaintext, None)
        except (OverflowError, ValueError) as exc:
            raise EncryptionFailed(f"no se pudo cifrar: {exc}") from exc

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Descifra y autentica `ciphertext` (incluida la etiqueta).

        Raises:
            AuthenticationFailed: Si la etiqueta no verifica (datos alterados,
                clave o nonce incorrectos).

        """

        try:
            return self._cipher.decrypt(self._nonce, bytes(ciphertext), None)
        except InvalidTag as exc:
            raise AuthenticationFailed("la etiqueta de autenticación no es válida") from exc

    @staticmethod
    def generate() -> Dict[str, bytes]:
        """Genera una clave de 32 bytes y un nonce de 12 bytes aleatorios."""

        return {
            ARTIFACT_KEY: ChaCha20Poly1305.generate_key(),
            ARTIFACT_NONCE: os.urandom(NONCE_LEN),
        }
