# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de línea de comandos sobre el paquete cipherkit.
# --------------------------------------------------------------
"""Inicializa el paquete `cipherkit_cli`."""

__all__ = ["logger", "main"]
