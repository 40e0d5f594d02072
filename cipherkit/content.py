# --------------------------------------------------------------
# File: content.py
# Description: Lectura de claves y entradas, y escritura atómica de artefactos.
# --------------------------------------------------------------
"""Utilidades de entrada/salida para el material de claves y los artefactos."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Mapping

from cipherkit.errors import SourceNotFound

__all__ = ["get_reader", "open_source", "get_content", "write_artifacts", "STDIN_TOKEN"]

STDIN_TOKEN = "-"


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def get_reader(path: str) -> BinaryIO:
    """Abre la fuente indicada como flujo binario.

    Args:
        path (str): ``"-"`` para la entrada estándar o una ruta de archivo.

    Returns:
        BinaryIO: Flujo binario listo para leerse. El llamante lo cierra.

    Raises:
        SourceNotFound: Si la ruta no existe.

    """

    if path == STDIN_TOKEN:
        return sys.stdin.buffer
    try:
        return open(path, "rb")
    except FileNotFoundError as exc:
        raise SourceNotFound(f"no existe el archivo: {path}") from exc


@contextmanager
def open_source(path: str) -> Iterator[BinaryIO]:
    """Abre la fuente y la cierra al salir, salvo la entrada estándar."""

    reader = get_reader(path)
    try:
        yield reader
    finally:
        if path != STDIN_TOKEN:
            reader.close()


def get_content(path: str) -> bytes:
    """Lee por completo la fuente indicada y devuelve sus bytes."""

    with open_source(path) as reader:
        return reader.read()


def write_artifacts(artifacts: Mapping[str, bytes], output_dir: str) -> list[str]:
    """Guarda cada artefacto con su nombre dentro de `output_dir`.

    La escritura es atómica: primero a `<nombre>.tmp` y luego `os.replace`.

    Args:
        artifacts (Mapping[str, bytes]): Nombre del artefacto y contenido.
        output_dir (str): Directorio de destino.

    Returns:
        list[str]: Rutas escritas, en el orden del mapeo.

    """

    written = []
    for name, data in artifacts.items():
        path = os.path.join(output_dir, name)
        _ensure_parent_dir(path)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "wb") as handler:
            handler.write(data)
        os.replace(tmp_path, path)
        written.append(path)
    return written
