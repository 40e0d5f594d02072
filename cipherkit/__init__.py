# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cipherkit.
# --------------------------------------------------------------
"""Inicializa el paquete `cipherkit` y documenta sus módulos principales."""

__all__ = [
    "b64",
    "config",
    "content",
    "crypto_hash",
    "crypto_sign",
    "crypto_sym",
    "csv_convert",
    "errors",
    "formats",
    "genpass",
    "http_serve",
    "jwt_token",
    "models",
    "text",
]
