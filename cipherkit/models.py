# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por cipherkit.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio."""

from pydantic import BaseModel


class Claims(BaseModel):
    """Representa las reclamaciones de un token JWT.

    Attributes:
        sub (str): Sujeto del token.
        aud (str): Audiencia a la que va dirigido.
        exp (int): Expiración en segundos Unix.

    """

    sub: str
    aud: str
    exp: int

    def __str__(self) -> str:
        return f"Claims(sub={self.sub}, aud={self.aud}, exp={self.exp})"
