# --------------------------------------------------------------
# File: genpass.py
# Description: Generador de contraseñas aleatorias y estimación de robustez.
# --------------------------------------------------------------
"""Utilidades para generar contraseñas y evaluar su robustez."""

from __future__ import annotations

import re
import secrets
from typing import List, Tuple

from zxcvbn import zxcvbn

UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghjklmnpqrstuvwxyz"
NUMBER = "23456789"
SYMBOL = "!@#$%^&*_"

COMMON = {
    "123456",
    "123456789",
    "12345678",
    "qwerty",
    "password",
    "111111",
    "123123",
    "000000",
    "abc123",
    "letmein",
    "iloveyou",
    "admin",
    "welcome",
    "monkey",
    "dragon",
    "football",
    "baseball",
    "princess",
    "qwertyuiop",
    "passw0rd",
}

LOWER_RE = re.compile(r"[a-z]")
UPPER_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"\d")
SYMBOL_RE = re.compile(r"[^\w\s]|_")


def process_genpass(
    length: int = 16,
    upper: bool = True,
    lower: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    """Genera una contraseña aleatoria con las clases de caracteres pedidas.

    Se garantiza al menos un carácter de cada clase activada; el resto se
    extrae de la unión de alfabetos y el resultado se baraja.

    Args:
        length (int): Longitud total de la contraseña.
        upper (bool): Incluir mayúsculas.
        lower (bool): Incluir minúsculas.
        number (bool): Incluir dígitos.
        symbol (bool): Incluir símbolos.

    Returns:
        str: Contraseña generada (solo caracteres ASCII imprimibles).

    Raises:
        ValueError: Si no hay clases activas o la longitud no alcanza.

    """

    classes = [
        alphabet
        for alphabet, enabled in ((UPPER, upper), (LOWER, lower), (NUMBER, number), (SYMBOL, symbol))
        if enabled
    ]
    if not classes:
        raise ValueError("Activa al menos una clase de caracteres.")
    if length < len(classes):
        raise ValueError(f"La longitud mínima para {len(classes)} clases es {len(classes)}.")

    rng = secrets.SystemRandom()
    chars = "".join(classes)
    password = [rng.choice(alphabet) for alphabet in classes]
    password.extend(rng.choice(chars) for _ in range(length - len(password)))
    rng.shuffle(password)
    return "".join(password)


def class_count(password: str) -> int:
    """Cuenta los grupos de caracteres presentes en la contraseña."""

    return sum(
        [
            1 if LOWER_RE.search(password) else 0,
            1 if UPPER_RE.search(password) else 0,
            1 if DIGIT_RE.search(password) else 0,
            1 if SYMBOL_RE.search(password) else 0,
        ]
    )


def has_long_repetition(password: str, max_run: int = 3) -> bool:
    """Detecta repeticiones largas de un mismo carácter."""

    pattern = rf"(.)\1{{{max_run},}}"
    return re.search(pattern, password) is not None


def check_password_strength(password: str) -> Tuple[bool, List[str], int]:
    """Evalúa la contraseña y devuelve cumplimiento, motivos y puntuación.

    Args:
        password (str): Contraseña a evaluar.

    Returns:
        Tuple[bool, List[str], int]: Resultado de validación, motivos de rechazo y
        puntuación acumulada entre 0 y 100.

    """

    reasons: List[str] = []
    score = 0

    length = len(password)
    if length < 12:
        reasons.append("Longitud mínima 12.")
    else:
        score += min(40, (length - 11) * 4)

    classes = class_count(password)
    if classes < 3:
        reasons.append("Usa al menos 3 de: minúsculas, mayúsculas, dígitos, símbolos.")
    else:
        score += 30

    has_space = any(char.isspace() for char in password)
    if has_space:
        reasons.append("No se permiten espacios en blanco.")
    else:
        score += 5

    common = password.lower() in COMMON
    if common:
        reasons.append("Contraseña demasiado común.")
    else:
        score += 15

    repeated = has_long_repetition(password)
    if repeated:
        reasons.append("Evita repeticiones largas del mismo carácter.")
    else:
        score += 10

    score = max(0, min(100, score))
    ok = length >= 12 and classes >= 3 and not has_space and not common and not repeated
    return ok, reasons, score


def estimate_strength(password: str) -> int:
    """Estima la robustez con zxcvbn.

    A diferencia de `check_password_strength`, que aplica la política local,
    esta estimación tiene en cuenta diccionarios, sustituciones y patrones de
    teclado.

    Args:
        password (str): Contraseña a evaluar.

    Returns:
        int: Banda de 0 (muy débil) a 4 (muy fuerte).

    """

    return zxcvbn(password)["score"]
