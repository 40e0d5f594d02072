# --------------------------------------------------------------
# File: text.py
# Description: Puntos de entrada que despachan cada operación según el formato.
# --------------------------------------------------------------
"""Despacho de firma, verificación, cifrado, descifrado y generación de claves.

Cada función es pura respecto a (formato, material de clave, entrada): el
material se convierte en una capacidad concreta justo antes de la operación
y se descarta al terminar.
"""

from __future__ import annotations

from typing import BinaryIO, Dict, Union

from cipherkit.crypto_hash import Blake3
from cipherkit.crypto_sign import Ed25519Signer, Ed25519Verifier
from cipherkit.crypto_sym import Chacha20
from cipherkit.errors import UnsupportedOperation
from cipherkit.formats import TextSignFormat, parse_text_sign_format

FormatLike = Union[TextSignFormat, str]


def _unsupported(operation: str, fmt: TextSignFormat) -> UnsupportedOperation:
    return UnsupportedOperation(f"el formato {fmt.value} no admite la operación {operation}")


def process_text_sign(reader: BinaryIO, key: bytes, fmt: FormatLike) -> bytes:
    """Firma el flujo con la clave de sesión (BLAKE3) o privada (Ed25519).

    Args:
        reader (BinaryIO): Flujo con el texto en claro.
        key (bytes): Material de clave en bruto.
        fmt (FormatLike): ``blake3`` o ``ed25519``.

    Returns:
        bytes: Firma en bruto (32 bytes BLAKE3, 64 bytes Ed25519).

    Raises:
        UnsupportedOperation: Para ``chacha20poly1305``.

    """

    fmt = parse_text_sign_format(fmt)
    if fmt is TextSignFormat.BLAKE3:
        signer = Blake3.try_new(key)
    elif fmt is TextSignFormat.ED25519:
        signer = Ed25519Signer.try_new(key)
    else:
        raise _unsupported("sign", fmt)
    return signer.sign(reader)


def process_text_verify(reader: BinaryIO, key: bytes, sig: bytes, fmt: FormatLike) -> bool:
    """Verifica una firma con la clave de sesión (BLAKE3) o pública (Ed25519).

    Args:
        reader (BinaryIO): Flujo con el texto firmado.
        key (bytes): Material de clave en bruto.
        sig (bytes): Firma ya decodificada a bytes.
        fmt (FormatLike): ``blake3`` o ``ed25519``.

    Returns:
        bool: ``True`` si la firma corresponde; ``False`` si no.

    Raises:
        UnsupportedOperation: Para ``chacha20poly1305``.
        MalformedSignature: Si una firma Ed25519 no mide 64 bytes.

    """

    fmt = parse_text_sign_format(fmt)
    if fmt is TextSignFormat.BLAKE3:
        verifier = Blake3.try_new(key)
    elif fmt is TextSignFormat.ED25519:
        verifier = Ed25519Verifier.try_new(key)
    else:
        raise _unsupported("verify", fmt)
    return verifier.verify(reader, sig)


def process_text_encrypt(
    reader: BinaryIO, key: bytes, nonce: bytes, fmt: FormatLike = TextSignFormat.CHACHA20POLY1305
) -> bytes:
    """Cifra el flujo con ChaCha20-Poly1305 usando la pareja clave/nonce dada."""

    fmt = parse_text_sign_format(fmt)
    if fmt is not TextSignFormat.CHACHA20POLY1305:
        raise _unsupported("encrypt", fmt)
    return Chacha20.try_new(key, nonce).encrypt(reader)


def process_text_decrypt(
    ciphertext: bytes, key: bytes, nonce: bytes, fmt: FormatLike = TextSignFormat.CHACHA20POLY1305
) -> bytes:
    """Descifra `ciphertext` (con etiqueta) usando la pareja clave/nonce dada."""

    fmt = parse_text_sign_format(fmt)
    if fmt is not TextSignFormat.CHACHA20POLY1305:
        raise _unsupported("decrypt", fmt)
    return Chacha20.try_new(key, nonce).decrypt(ciphertext)


def process_text_key_generate(fmt: FormatLike) -> Dict[str, bytes]:
    """Genera los artefactos de clave del formato pedido.

    Returns:
        Dict[str, bytes]: Nombre estable del artefacto y su contenido en bruto.

    """

    fmt = parse_text_sign_format(fmt)
    if fmt is TextSignFormat.BLAKE3:
        return Blake3.generate()
    if fmt is TextSignFormat.ED25519:
        return Ed25519Signer.generate()
    return Chacha20.generate()
