# --------------------------------------------------------------
# File: test_b64.py
# Description: Pruebas del códec Base64 estándar y URL-safe.
# --------------------------------------------------------------

import io

import pytest

from cipherkit.b64 import (
    Base64Format,
    b64u_decode,
    b64u_encode,
    parse_base64_format,
    process_decode,
    process_encode,
)
from cipherkit.errors import ConversionError, InvalidFormat


def test_encode_standard_and_urlsafe():
    """Comprueba la codificación con y sin relleno sobre caracteres conflictivos.

    Returns:
        None: Las aserciones comparan con valores conocidos.
    """
    assert process_encode(io.BytesIO(b"hello?>"), Base64Format.STANDARD) == "aGVsbG8/Pg=="
    assert process_encode(io.BytesIO(b"hello?>"), Base64Format.URLSAFE) == "aGVsbG8_Pg"


def test_decode_strips_whitespace():
    assert process_decode(io.BytesIO(b"  aGVsbG8/Pg==\n"), Base64Format.STANDARD) == b"hello?>"
    assert process_decode(io.BytesIO(b"aGVsbG8_Pg\n"), Base64Format.URLSAFE) == b"hello?>"


@pytest.mark.parametrize("fmt", list(Base64Format))
def test_decode_rejects_garbage(fmt):
    with pytest.raises(ConversionError):
        process_decode(io.BytesIO(b"no es base64 !!"), fmt)


def test_b64u_helpers_tolerate_padding():
    """Valida que el decodificador acepte la forma con y sin relleno.

    Returns:
        None: Las aserciones comparan los bytes recuperados.
    """
    encoded = b64u_encode(b"\xfb\xff")
    assert encoded == "-_8"
    assert b64u_decode(encoded) == b"\xfb\xff"
    assert b64u_decode(encoded + "=") == b"\xfb\xff"


@pytest.mark.parametrize("value", ["+/+/", "ab+c", "ab/c", "A"])
def test_b64u_decode_rejects_standard_alphabet(value):
    with pytest.raises(ConversionError):
        b64u_decode(value)


def test_parse_base64_format():
    assert parse_base64_format("urlsafe") is Base64Format.URLSAFE
    with pytest.raises(InvalidFormat):
        parse_base64_format("URLSAFE")
