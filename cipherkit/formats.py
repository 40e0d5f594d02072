# --------------------------------------------------------------
# File: formats.py
# Description: Formatos de algoritmo soportados por las operaciones de texto.
# --------------------------------------------------------------
"""Resolución del formato criptográfico a partir del token de usuario."""

from __future__ import annotations

from enum import Enum

from cipherkit.errors import InvalidFormat


class TextSignFormat(str, Enum):
    """Familias de algoritmos disponibles.

    Attributes:
        BLAKE3: Hash con clave (solo integridad, simétrico).
        ED25519: Firma asimétrica.
        CHACHA20POLY1305: Cifrado autenticado simétrico.

    """

    BLAKE3 = "blake3"
    ED25519 = "ed25519"
    CHACHA20POLY1305 = "chacha20poly1305"


def parse_text_sign_format(token: str) -> TextSignFormat:
    """Convierte un token sensible a mayúsculas en un `TextSignFormat`.

    Args:
        token (str): Texto introducido por el usuario, p. ej. ``"blake3"``.

    Returns:
        TextSignFormat: Formato reconocido.

    Raises:
        InvalidFormat: Si el token no coincide exactamente con ningún formato.

    """

    if isinstance(token, TextSignFormat):
        return token
    for fmt in TextSignFormat:
        if fmt.value == token:
            return fmt
    raise InvalidFormat(f"formato inválido: {token!r}")
