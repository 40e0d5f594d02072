# --------------------------------------------------------------
# File: http_serve.py
# Description: Servidor HTTP de archivos estáticos sobre un directorio.
# --------------------------------------------------------------
"""Sirve un directorio por HTTP.

Dos rutas conviven en la misma aplicación:

* ``/tower/...`` delega en ``StaticFiles`` de Starlette.
* ``/{ruta}`` resuelve ``directorio / ruta`` a mano: devuelve el archivo, un
  listado HTML si es un directorio o 404 si no existe.

Las rutas que escapan del directorio servido se tratan como inexistentes.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

__all__ = ["create_app", "process_http_serve", "DEFAULT_HOST", "DEFAULT_PORT"]

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _resolve(root: Path, path: str) -> Path | None:
    target = (root / path).resolve()
    if target != root and root not in target.parents:
        return None
    return target


def _render_listing(root: Path, directory: Path) -> str:
    items = []
    for entry in sorted(directory.iterdir()):
        href = "/" + entry.relative_to(root).as_posix()
        name = html.escape(entry.name)
        items.append(f'<li><a href="{html.escape(href)}">{name}</a></li>')
    return "<html><body><ul>" + "".join(items) + "</ul></body></html>"


def create_app(directory: str) -> FastAPI:
    """Construye la aplicación FastAPI que sirve `directory`.

    Args:
        directory (str): Directorio raíz a servir.

    Returns:
        FastAPI: Aplicación lista para uvicorn o para ``TestClient``.

    """

    root = Path(directory).resolve()
    app = FastAPI(title="cipherkit http serve")

    # El montaje va antes que la ruta comodín para que /tower tenga prioridad.
    app.mount("/tower", StaticFiles(directory=str(root)), name="tower")

    @app.get("/{path:path}")
    def file_handler(path: str) -> Response:
        target = _resolve(root, path)
        logger.info("Leyendo archivo %s", target if target is not None else path)
        if target is None or not target.exists():
            return PlainTextResponse(f"File {path} not found", status_code=404)
        if target.is_dir():
            return HTMLResponse(_render_listing(root, target))
        return FileResponse(target)

    return app


def process_http_serve(directory: str, port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> None:
    """Arranca uvicorn con la aplicación de `create_app` (bloqueante)."""

    import uvicorn

    logger.info("Sirviendo %s en %s:%d", directory, host, port)
    uvicorn.run(create_app(directory), host=host, port=port)
