# --------------------------------------------------------------
# File: crypto_hash.py
# Description: Firma simétrica de integridad mediante hash BLAKE3 con clave.
# --------------------------------------------------------------
"""Capacidad de hash con clave (BLAKE3) para firmar y verificar flujos."""

from __future__ import annotations

import hmac
from typing import BinaryIO, Dict

from blake3 import blake3

from cipherkit.errors import KeyMaterialTooShort, MalformedKey
from cipherkit.genpass import process_genpass

KEY_LEN = 32
ARTIFACT_KEY = "blake3.txt"


class Blake3:
    """Firmante/verificador BLAKE3 con una clave de 32 bytes."""

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LEN:
            raise MalformedKey(f"la clave BLAKE3 debe tener {KEY_LEN} bytes")
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key: bytes) -> "Blake3":
        """Construye la capacidad a partir del material de clave suministrado.

        Solo se usan los primeros 32 bytes; el resto se descarta sin aviso
        para seguir aceptando archivos de clave con contenido adicional.

        Args:
            key (bytes): Material de clave de al menos 32 bytes.

        Returns:
            Blake3: Instancia lista para firmar o verificar.

        Raises:
            KeyMaterialTooShort: Si hay menos de 32 bytes.

        """

        if len(key) < KEY_LEN:
            raise KeyMaterialTooShort(
                f"la clave BLAKE3 necesita {KEY_LEN} bytes, recibidos {len(key)}"
            )
        return cls(key[:KEY_LEN])

    def _digest(self, data: bytes) -> bytes:
        return blake3(data, key=self._key).digest()

    def sign(self, reader: BinaryIO) -> bytes:
        """Lee el flujo completo y devuelve el digest de 32 bytes como firma."""

        return self._digest(reader.read())

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        """Recalcula el digest y lo compara en tiempo constante con `sig`."""

        return hmac.compare_digest(self._digest(reader.read()), bytes(sig))

    @staticmethod
    def generate() -> Dict[str, bytes]:
        """Genera una clave BLAKE3 nueva.

        La clave sale del generador de contraseñas, así que es ASCII imprimible
        y no 32 bytes de entropía completa.

        Returns:
            Dict[str, bytes]: ``{"blake3.txt": clave}``.

        """

        key = process_genpass(KEY_LEN, True, True, True, True)
        return {ARTIFACT_KEY: key.encode("ascii")}
