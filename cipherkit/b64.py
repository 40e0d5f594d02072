# --------------------------------------------------------------
# File: b64.py
# Description: Codificación y decodificación Base64 estándar y URL-safe.
# --------------------------------------------------------------
"""Códec Base64 usado por la CLI para representar bytes como texto."""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum
from typing import BinaryIO

from cipherkit.errors import ConversionError, InvalidFormat

URLSAFE_RE = re.compile(r"[A-Za-z0-9_-]*")


class Base64Format(str, Enum):
    STANDARD = "standard"
    URLSAFE = "urlsafe"


def parse_base64_format(token: str) -> Base64Format:
    """Convierte el token de usuario en un `Base64Format`."""

    try:
        return Base64Format(token)
    except ValueError as exc:
        raise InvalidFormat(f"formato base64 inválido: {token!r}") from exc


def b64u_encode(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64u_decode(value: str) -> bytes:
    """Decodifica Base64 URL-safe gestionando el relleno y los espacios.

    Args:
        value (str): Texto codificado, con o sin relleno.

    Returns:
        bytes: Datos originales.

    Raises:
        ConversionError: Si el texto no es Base64 URL-safe válido.

    """

    value = value.strip().rstrip("=")
    if not URLSAFE_RE.fullmatch(value):
        raise ConversionError("base64 url-safe inválido: caracteres fuera de [A-Za-z0-9_-]")
    pad = "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(value + pad)
    except (binascii.Error, ValueError) as exc:
        raise ConversionError(f"base64 url-safe inválido: {exc}") from exc


def process_encode(reader: BinaryIO, fmt: Base64Format) -> str:
    """Lee el flujo completo y lo devuelve codificado.

    Args:
        reader (BinaryIO): Archivo o entrada estándar en binario.
        fmt (Base64Format): ``standard`` (con relleno) o ``urlsafe`` (sin relleno).

    Returns:
        str: Texto Base64.

    """

    data = reader.read()
    if fmt is Base64Format.STANDARD:
        return base64.b64encode(data).decode("ascii")
    return b64u_encode(data)


def process_decode(reader: BinaryIO, fmt: Base64Format) -> bytes:
    """Lee el texto Base64 del flujo (sin espacios laterales) y lo decodifica.

    Raises:
        ConversionError: Si el contenido no es texto Base64 válido.

    """

    try:
        text = reader.read().decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise ConversionError("la entrada base64 no es texto ASCII") from exc
    if fmt is Base64Format.URLSAFE:
        return b64u_decode(text)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConversionError(f"base64 estándar inválido: {exc}") from exc
