# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Firmante y verificador Ed25519 con claves en bruto de 32 bytes.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación y validación Ed25519."""

from __future__ import annotations

from typing import BinaryIO, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from cipherkit.errors import KeyMaterialTooShort, MalformedKey, MalformedSignature

KEY_LEN = 32
SIGNATURE_LEN = 64
ARTIFACT_SECRET = "ed25519.sk"
ARTIFACT_PUBLIC = "ed25519.pk"


def _key_prefix(key: bytes, kind: str) -> bytes:
    if len(key) < KEY_LEN:
        raise KeyMaterialTooShort(
            f"la clave {kind} Ed25519 necesita {KEY_LEN} bytes, recibidos {len(key)}"
        )
    return bytes(key[:KEY_LEN])


class Ed25519Signer:
    """Firma flujos con una clave privada Ed25519."""

    def __init__(self, key: ed25519.Ed25519PrivateKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Signer":
        """Carga la clave privada desde los primeros 32 bytes del material.

        Args:
            key (bytes): Semilla privada Ed25519 en bruto.

        Returns:
            Ed25519Signer: Firmante listo para usar.

        Raises:
            KeyMaterialTooShort: Si hay menos de 32 bytes.

        """

        seed = _key_prefix(key, "privada")
        return cls(ed25519.Ed25519PrivateKey.from_private_bytes(seed))

    def sign(self, reader: BinaryIO) -> bytes:
        """Firma el contenido completo del flujo.

        Args:
            reader (BinaryIO): Flujo con el mensaje en claro.

        Returns:
            bytes: Firma Ed25519 de 64 bytes (determinista).

        """

        return self._key.sign(reader.read())

    def verifying_key_bytes(self) -> bytes:
        """Devuelve la clave pública derivada en bruto (32 bytes)."""

        return self._key.public_key().public_bytes_raw()

    @staticmethod
    def generate() -> Dict[str, bytes]:
        """Genera un par de claves Ed25519 nuevo en formato bruto.

        Returns:
            Dict[str, bytes]: ``ed25519.sk`` (privada) y ``ed25519.pk`` (pública).

        """

        private_key = ed25519.Ed25519PrivateKey.generate()
        public_key = private_key.public_key()
        return {
            ARTIFACT_SECRET: private_key.private_bytes_raw(),
            ARTIFACT_PUBLIC: public_key.public_bytes_raw(),
        }


class Ed25519Verifier:
    """Verifica firmas Ed25519 con una clave pública."""

    def __init__(self, key: ed25519.Ed25519PublicKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Verifier":
        """Carga la clave pública desde los primeros 32 bytes del material.

        Raises:
            KeyMaterialTooShort: Si hay menos de 32 bytes.
            MalformedKey: Si la librería rechaza los bytes como clave pública.

        """

        raw = _key_prefix(key, "pública")
        try:
            public_key = ed25519.Ed25519PublicKey.from_public_bytes(raw)
        except ValueError as exc:
            raise MalformedKey(f"clave pública Ed25519 inválida: {exc}") from exc
        return cls(public_key)

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        """Comprueba la firma sobre el contenido completo del flujo.

        Args:
            reader (BinaryIO): Flujo con el mensaje firmado.
            sig (bytes): Firma en bruto, exactamente 64 bytes.

        Returns:
            bool: ``True`` si la firma es válida; ``False`` en caso contrario.

        Raises:
            MalformedSignature: Si la firma no mide 64 bytes.

        """

        if len(sig) != SIGNATURE_LEN:
            raise MalformedSignature(
                f"la firma Ed25519 debe tener {SIGNATURE_LEN} bytes, recibidos {len(sig)}"
            )
        data = reader.read()
        try:
            self._key.verify(bytes(sig), data)
        except InvalidSignature:
            return False
        return True
