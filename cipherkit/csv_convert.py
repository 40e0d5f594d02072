# --------------------------------------------------------------
# File: csv_convert.py
# Description: Conversión de archivos CSV a JSON o YAML.
# --------------------------------------------------------------
"""Convierte tablas CSV en listas de registros serializados."""

from __future__ import annotations

import csv
import json
import os
from enum import Enum
from typing import Any, List

import yaml

from cipherkit.errors import ConversionError, InvalidFormat, SourceNotFound


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


def parse_output_format(token: str) -> OutputFormat:
    """Convierte el token de usuario en un `OutputFormat`."""

    try:
        return OutputFormat(token)
    except ValueError as exc:
        raise InvalidFormat(f"formato de salida inválido: {token!r}") from exc


def default_output(fmt: OutputFormat) -> str:
    return f"output.{fmt.value}"


def read_records(input_path: str, delimiter: str = ",", header: bool = True) -> List[Any]:
    """Lee el CSV y devuelve una lista de registros.

    Args:
        input_path (str): Ruta del archivo CSV.
        delimiter (str): Separador de un solo carácter.
        header (bool): Si la primera fila contiene los nombres de columna.

    Returns:
        List[Any]: Diccionarios columna→valor con cabecera, o listas sin ella.

    Raises:
        SourceNotFound: Si el archivo no existe.
        ConversionError: Si el separador o el contenido no son válidos.

    """

    if len(delimiter) != 1:
        raise ConversionError("el separador debe ser un único carácter")
    try:
        with open(input_path, "r", encoding="utf-8", newline="") as handler:
            if header:
                reader = csv.DictReader(handler, delimiter=delimiter)
                records = []
                for row in reader:
                    if None in row:
                        raise ConversionError(
                            f"la fila {reader.line_num} tiene más campos que la cabecera"
                        )
                    records.append(dict(row))
                return records
            return [row for row in csv.reader(handler, delimiter=delimiter)]
    except FileNotFoundError as exc:
        raise SourceNotFound(f"no existe el archivo: {input_path}") from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise ConversionError(f"CSV inválido: {exc}") from exc


def serialize_records(records: List[Any], fmt: OutputFormat) -> str:
    if fmt is OutputFormat.JSON:
        return json.dumps(records, indent=2, ensure_ascii=False)
    return yaml.safe_dump(records, allow_unicode=True, sort_keys=False)


def process_csv(
    input_path: str,
    output_path: str,
    fmt: OutputFormat,
    delimiter: str = ",",
    header: bool = True,
) -> int:
    """Convierte `input_path` y escribe el resultado en `output_path`.

    Returns:
        int: Número de registros escritos.

    """

    records = read_records(input_path, delimiter=delimiter, header=header)
    content = serialize_records(records, fmt)

    parent = os.path.dirname(output_path) or "."
    os.makedirs(parent, exist_ok=True)
    tmp_path = f"{output_path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as handler:
        handler.write(content)
    os.replace(tmp_path, output_path)
    return len(records)
