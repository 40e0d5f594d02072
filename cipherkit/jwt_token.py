# --------------------------------------------------------------
# File: jwt_token.py
# Description: Emisión y verificación de tokens JWT HS256.
# --------------------------------------------------------------
"""Tokens JWT firmados con un secreto compartido."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Iterable

import jwt
from pydantic import ValidationError

from cipherkit.errors import InvalidToken
from cipherkit.models import Claims

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=14)
DURATION_RE = re.compile(r"(?P<value>\d+)(?P<unit>[dhms])")
_UNITS = {"d": "days", "h": "hours", "m": "minutes", "s": "seconds"}


def parse_duration(value: str) -> timedelta:
    """Interpreta duraciones como ``14d``, ``12h``, ``30m`` o ``45s``.

    Si aparecen varias, gana la última; sin coincidencias se usan 14 días.
    """

    duration = DEFAULT_TTL
    for match in DURATION_RE.finditer(value):
        duration = timedelta(**{_UNITS[match["unit"]]: int(match["value"])})
    return duration


def process_jwt_sign(sub: str, aud: str, exp: str, secret: bytes) -> str:
    """Emite un token HS256 para `sub` y `aud` que caduca tras `exp`.

    Args:
        sub (str): Sujeto del token.
        aud (str): Audiencia.
        exp (str): Duración de validez, p. ej. ``"14d"``.
        secret (bytes): Secreto HMAC compartido.

    Returns:
        str: Token JWT compacto.

    """

    expires_at = datetime.now(UTC) + parse_duration(exp)
    claims = Claims(sub=sub, aud=aud, exp=int(expires_at.timestamp()))
    return jwt.encode(claims.model_dump(), secret, algorithm=ALGORITHM)


def process_jwt_verify(token: str, secret: bytes, audiences: Iterable[str]) -> Claims:
    """Valida firma, caducidad y audiencia del token.

    Args:
        token (str): Token JWT compacto.
        secret (bytes): Secreto HMAC compartido.
        audiences (Iterable[str]): Audiencias aceptadas.

    Returns:
        Claims: Reclamaciones validadas.

    Raises:
        InvalidToken: Si el token no supera cualquiera de las comprobaciones.

    """

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=list(audiences),
            options={"require": ["exp", "aud", "sub"]},
        )
        return Claims(**payload)
    except (jwt.PyJWTError, ValidationError) as exc:
        raise InvalidToken(f"token no válido: {exc}") from exc
