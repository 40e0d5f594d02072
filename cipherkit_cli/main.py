# --------------------------------------------------------------
# File: main.py
# Description: Aplicación Typer con los subcomandos de cipherkit.
# --------------------------------------------------------------
"""Punto de entrada de la línea de comandos `cipherkit`."""

import os
from contextlib import contextmanager
from typing import Optional

import typer

from cipherkit import config
from cipherkit.b64 import (
    b64u_decode,
    b64u_encode,
    parse_base64_format,
    process_decode,
    process_encode,
)
from cipherkit.content import STDIN_TOKEN, get_content, open_source, write_artifacts
from cipherkit.csv_convert import default_output, parse_output_format, process_csv
from cipherkit.errors import CipherKitError, InvalidToken
from cipherkit.formats import parse_text_sign_format
from cipherkit.genpass import check_password_strength, estimate_strength, process_genpass
from cipherkit.http_serve import DEFAULT_PORT, process_http_serve
from cipherkit.jwt_token import process_jwt_sign, process_jwt_verify
from cipherkit.text import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_key_generate,
    process_text_sign,
    process_text_verify,
)
from cipherkit_cli.logger import Logger

logger = Logger("cipherkit").get_logger()

app = typer.Typer(add_completion=False, help="Caja de herramientas criptográficas y de texto.")
base64_app = typer.Typer(help="Codifica o decodifica Base64.")
text_app = typer.Typer(help="Firma, verifica, cifra o descifra textos y genera claves.")
jwt_app = typer.Typer(help="Emite o verifica tokens JWT.")
http_app = typer.Typer(help="Sirve un directorio por HTTP.")
app.add_typer(base64_app, name="base64")
app.add_typer(text_app, name="text")
app.add_typer(jwt_app, name="jwt")
app.add_typer(http_app, name="http")


def verify_file(value: str) -> str:
    """Acepta ``-`` (entrada estándar) o un archivo existente."""
    if value == STDIN_TOKEN or os.path.isfile(value):
        return value
    raise typer.BadParameter("El archivo no existe.")


def verify_input_file(value: str) -> str:
    if os.path.isfile(value):
        return value
    raise typer.BadParameter("El archivo no existe.")


def verify_path(value: str) -> str:
    if os.path.isdir(value):
        return value
    raise typer.BadParameter("La ruta no existe o no es un directorio.")


@contextmanager
def _fail_on_errors(action: str):
    """Convierte los errores de dominio y de E/S en un mensaje y código 1."""
    try:
        yield
    except (CipherKitError, OSError, ValueError) as exc:
        logger.debug("%s falló", action, exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("csv")
def csv_command(
    input_path: str = typer.Option(..., "-i", "--input", callback=verify_input_file, help="CSV de entrada."),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Archivo de salida (output.<formato>)."),
    fmt: str = typer.Option("json", "--format", help="json o yaml."),
    delimiter: str = typer.Option(",", "-d", "--delimiter"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Convierte un CSV a JSON o YAML."""
    with _fail_on_errors("csv"):
        out_fmt = parse_output_format(fmt)
        output = output or default_output(out_fmt)
        count = process_csv(input_path, output, out_fmt, delimiter=delimiter, header=header)
    logger.info("CSV convertido: %s -> %s (%d registros)", input_path, output, count)
    typer.echo(f"{count} registros escritos en {output}")


@app.command("genpass")
def genpass_command(
    length: int = typer.Option(16, "-l", "--length"),
    uppercase: bool = typer.Option(True, "--uppercase/--no-uppercase"),
    lowercase: bool = typer.Option(True, "--lowercase/--no-lowercase"),
    number: bool = typer.Option(True, "--number/--no-number"),
    symbols: bool = typer.Option(True, "--symbols/--no-symbols"),
) -> None:
    """Genera una contraseña aleatoria."""
    with _fail_on_errors("genpass"):
        password = process_genpass(length, uppercase, lowercase, number, symbols)
    typer.echo(password)

    # La robustez va a stderr para no contaminar tuberías.
    typer.echo(f"Robustez de la contraseña: {estimate_strength(password)}", err=True)
    _, reasons, _ = check_password_strength(password)
    for reason in reasons:
        typer.echo(f"  - {reason}", err=True)


@base64_app.command("encode")
def base64_encode(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    fmt: str = typer.Option("standard", "--format", help="standard o urlsafe."),
) -> None:
    with _fail_on_errors("base64 encode"):
        b64_fmt = parse_base64_format(fmt)
        with open_source(input_path) as reader:
            encoded = process_encode(reader, b64_fmt)
    typer.echo(encoded)


@base64_app.command("decode")
def base64_decode(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    fmt: str = typer.Option("standard", "--format", help="standard o urlsafe."),
) -> None:
    with _fail_on_errors("base64 decode"):
        b64_fmt = parse_base64_format(fmt)
        with open_source(input_path) as reader:
            decoded = process_decode(reader, b64_fmt)
    typer.echo(decoded, nl=False)


@text_app.command("sign")
def text_sign(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    key: str = typer.Option(..., "-k", "--key", callback=verify_file, help="Clave de sesión o privada."),
    fmt: str = typer.Option("blake3", "--format", help="blake3 o ed25519."),
) -> None:
    """Firma un texto y muestra la firma en Base64 URL-safe."""
    with _fail_on_errors("text sign"):
        sign_fmt = parse_text_sign_format(fmt)
        key_bytes = get_content(key)
        with open_source(input_path) as reader:
            sig = process_text_sign(reader, key_bytes, sign_fmt)
    logger.info("Texto firmado con %s", sign_fmt.value)
    typer.echo(b64u_encode(sig))


@text_app.command("verify")
def text_verify(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    key: str = typer.Option(..., "-k", "--key", callback=verify_file, help="Clave de sesión o pública."),
    sig: str = typer.Option(..., "--sig", help="Firma en Base64 URL-safe."),
    fmt: str = typer.Option("blake3", "--format", help="blake3 o ed25519."),
) -> None:
    """Verifica una firma."""
    with _fail_on_errors("text verify"):
        sign_fmt = parse_text_sign_format(fmt)
        key_bytes = get_content(key)
        sig_bytes = b64u_decode(sig)
        with open_source(input_path) as reader:
            verified = process_text_verify(reader, key_bytes, sig_bytes, sign_fmt)
    if verified:
        typer.echo("✓ Firma verificada")
        return
    logger.warning("La firma %s no corresponde al texto", sign_fmt.value)
    typer.echo("⚠ Firma no verificada")
    raise typer.Exit(code=1)


@text_app.command("generate")
def text_generate(
    fmt: str = typer.Option("blake3", "--format", help="blake3, ed25519 o chacha20poly1305."),
    output_path: str = typer.Option(..., "-o", "--output-path", callback=verify_path),
) -> None:
    """Genera las claves del formato indicado en el directorio de salida."""
    with _fail_on_errors("text generate"):
        sign_fmt = parse_text_sign_format(fmt)
        written = write_artifacts(process_text_key_generate(sign_fmt), output_path)
    for path in written:
        logger.info("Artefacto escrito: %s", path)
        typer.echo(path)


@text_app.command("encrypt")
def text_encrypt(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    key: str = typer.Option(..., "-k", "--key", callback=verify_file),
    nonce: str = typer.Option(config.NONCE_PATH, "--nonce", help="Artefacto chacha20.nonce."),
    fmt: str = typer.Option("chacha20poly1305", "--format"),
) -> None:
    """Cifra un texto y muestra el resultado en Base64 URL-safe."""
    with _fail_on_errors("text encrypt"):
        sign_fmt = parse_text_sign_format(fmt)
        key_bytes = get_content(key)
        nonce_bytes = get_content(nonce)
        with open_source(input_path) as reader:
            ciphertext = process_text_encrypt(reader, key_bytes, nonce_bytes, sign_fmt)
    logger.info("Texto cifrado con %s (nonce %s)", sign_fmt.value, nonce)
    typer.echo(b64u_encode(ciphertext))


@text_app.command("decrypt")
def text_decrypt(
    input_path: str = typer.Option(STDIN_TOKEN, "-i", "--input", callback=verify_file),
    key: str = typer.Option(..., "-k", "--key", callback=verify_file),
    nonce: str = typer.Option(config.NONCE_PATH, "--nonce", help="Artefacto chacha20.nonce."),
    fmt: str = typer.Option("chacha20poly1305", "--format"),
) -> None:
    """Descifra un texto cifrado en Base64 URL-safe."""
    with _fail_on_errors("text decrypt"):
        sign_fmt = parse_text_sign_format(fmt)
        key_bytes = get_content(key)
        nonce_bytes = get_content(nonce)
        ciphertext = b64u_decode(get_content(input_path).decode("ascii"))
        plaintext = process_text_decrypt(ciphertext, key_bytes, nonce_bytes, sign_fmt)
    typer.echo(plaintext, nl=False)


@jwt_app.command("sign")
def jwt_sign(
    sub: str = typer.Option(..., "-s", "--sub"),
    aud: str = typer.Option(..., "-a", "--aud"),
    exp: str = typer.Option("14d", "-e", "--exp", help="Validez: 14d, 12h, 30m, 45s."),
    secret_file: str = typer.Option(config.JWT_SECRET_PATH, "--secret-file"),
) -> None:
    """Emite un token JWT HS256."""
    with _fail_on_errors("jwt sign"):
        token = process_jwt_sign(sub, aud, exp, get_content(secret_file))
    typer.echo(token)


@jwt_app.command("verify")
def jwt_verify(
    token: str = typer.Option(..., "-t", "--token"),
    secret_file: str = typer.Option(config.JWT_SECRET_PATH, "--secret-file"),
) -> None:
    """Verifica un token JWT HS256."""
    with _fail_on_errors("jwt verify"):
        secret = get_content(secret_file)
        try:
            claims = process_jwt_verify(token, secret, config.JWT_AUDIENCES)
        except InvalidToken as exc:
            logger.warning("Token rechazado: %s", exc)
            typer.echo(f"⚠ Token no verificado: {exc}")
            raise typer.Exit(code=1) from exc
    typer.echo(f"✓ Token verificado: {claims}")


@http_app.command("serve")
def http_serve(
    directory: str = typer.Option(".", "-d", "--dir", callback=verify_path, help="Directorio a servir."),
    port: int = typer.Option(DEFAULT_PORT, "-p", "--port"),
) -> None:
    """Sirve un directorio como archivos estáticos."""
    process_http_serve(directory, port)


def app_main():
    app()


if __name__ == "__main__":
    app_main()
