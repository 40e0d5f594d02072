# --------------------------------------------------------------
# File: test_http_serve.py
# Description: Pruebas del servidor HTTP de archivos estáticos.
# --------------------------------------------------------------

import pytest
from fastapi.testclient import TestClient

from cipherkit.http_serve import create_app


@pytest.fixture
def client(tmp_path):
    """Cliente de pruebas sobre un directorio con un archivo y una subcarpeta.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        TestClient: Cliente enlazado a la aplicación.
    """
    (tmp_path / "hello.txt").write_text("hola mundo", encoding="utf-8")
    sub = tmp_path / "docs"
    sub.mkdir()
    (sub / "a.md").write_text("# a", encoding="utf-8")
    return TestClient(create_app(str(tmp_path)))


def test_serves_existing_file(client):
    response = client.get("/hello.txt")
    assert response.status_code == 200
    assert response.text == "hola mundo"


def test_missing_file_is_404(client):
    response = client.get("/nope.txt")
    assert response.status_code == 404
    assert response.text == "File nope.txt not found"


def test_directory_lists_entries(client):
    response = client.get("/docs")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<a href="/docs/a.md">a.md</a>' in response.text

    root = client.get("/")
    assert root.status_code == 200
    assert "hello.txt" in root.text


def test_tower_mount_serves_files(client):
    assert client.get("/tower/docs/a.md").text == "# a"
    assert client.get("/tower/missing.txt").status_code == 404


def test_path_outside_root_is_404(tmp_path):
    served = tmp_path / "public"
    served.mkdir()
    (tmp_path / "secret.txt").write_text("no", encoding="utf-8")
    client = TestClient(create_app(str(served)))

    response = client.get("/%2E%2E/secret.txt")
    assert response.status_code == 404
