# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del motor criptográfico y utilidades.
# --------------------------------------------------------------
"""Excepciones de dominio de cipherkit."""

from __future__ import annotations


class CipherKitError(Exception):
    pass


class InvalidFormat(CipherKitError, ValueError):
    pass


class MalformedKey(CipherKitError, ValueError):
    pass


class KeyMaterialTooShort(MalformedKey):
    pass


class MalformedSignature(CipherKitError, ValueError):
    pass


class UnsupportedOperation(CipherKitError):
    pass


class EncryptionFailed(CipherKitError):
    pass


class AuthenticationFailed(CipherKitError):
    pass


class SourceNotFound(CipherKitError, FileNotFoundError):
    pass


class InvalidToken(CipherKitError):
    pass


class ConversionError(CipherKitError, ValueError):
    pass
