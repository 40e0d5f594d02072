# --------------------------------------------------------------
# File: test_jwt_token.py
# Description: Pruebas de emisión y verificación de tokens JWT.
# --------------------------------------------------------------

import time
from datetime import timedelta

import jwt
import pytest

from cipherkit.errors import InvalidToken
from cipherkit.jwt_token import parse_duration, process_jwt_sign, process_jwt_verify

SECRET = b"s" * 32
AUDIENCES = ["tencent", "alibaba", "netease"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("14d", timedelta(days=14)),
        ("12h", timedelta(hours=12)),
        ("30m", timedelta(minutes=30)),
        ("45s", timedelta(seconds=45)),
        ("1d2h", timedelta(hours=2)),  # gana la última
        ("mañana", timedelta(days=14)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


def test_sign_and_verify_roundtrip():
    """Comprueba que un token recién emitido se valide con sus reclamaciones.

    Returns:
        None: Las aserciones comparan sujeto, audiencia y caducidad.
    """
    token = process_jwt_sign("mariana", "tencent", "1h", SECRET)
    claims = process_jwt_verify(token, SECRET, AUDIENCES)
    assert claims.sub == "mariana"
    assert claims.aud == "tencent"
    assert 3500 <= claims.exp - time.time() <= 3600
    assert str(claims).startswith("Claims(sub=mariana, aud=tencent, exp=")


def test_verify_rejects_unknown_audience():
    token = process_jwt_sign("mariana", "acme", "14d", SECRET)
    with pytest.raises(InvalidToken):
        process_jwt_verify(token, SECRET, AUDIENCES)


def test_verify_rejects_other_secret():
    token = process_jwt_sign("mariana", "tencent", "14d", SECRET)
    with pytest.raises(InvalidToken):
        process_jwt_verify(token, b"o" * 32, AUDIENCES)


def test_verify_rejects_expired_and_garbage():
    """Verifica el rechazo de tokens caducados o mal formados.

    Returns:
        None: Se espera InvalidToken en ambos casos.
    """
    expired = jwt.encode(
        {"sub": "mariana", "aud": "tencent", "exp": int(time.time()) - 120},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        process_jwt_verify(expired, SECRET, AUDIENCES)
    with pytest.raises(InvalidToken):
        process_jwt_verify("no.es.jwt", SECRET, AUDIENCES)
