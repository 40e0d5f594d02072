# --------------------------------------------------------------
# File: test_formats.py
# Description: Pruebas de la resolución de formatos de algoritmo.
# --------------------------------------------------------------

import pytest

from cipherkit.errors import InvalidFormat
from cipherkit.formats import TextSignFormat, parse_text_sign_format


@pytest.mark.parametrize(
    "token, expected",
    [
        ("blake3", TextSignFormat.BLAKE3),
        ("ed25519", TextSignFormat.ED25519),
        ("chacha20poly1305", TextSignFormat.CHACHA20POLY1305),
    ],
)
def test_parse_known_tokens(token, expected):
    """Comprueba que cada token reconocido resuelva su formato.

    Args:
        token (str): Token de entrada.
        expected (TextSignFormat): Formato esperado.
    """
    assert parse_text_sign_format(token) is expected


@pytest.mark.parametrize("token", ["BLAKE3", "Ed25519", "", "aes-gcm", "chacha20"])
def test_parse_rejects_unknown_tokens(token):
    """Verifica que los tokens desconocidos o con otra capitalización fallen."""
    with pytest.raises(InvalidFormat):
        parse_text_sign_format(token)


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_text_sign_format("rsa")
