# --------------------------------------------------------------
# File: logger.py
# Description: Registro coloreado en consola y opcionalmente en archivo.
# --------------------------------------------------------------
import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from colorama import Fore, Style, init

from cipherkit import config

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def convert_log_level(value: str) -> int:
    return LOG_LEVELS.get(str(value).upper(), logging.WARNING)


class ColorFormatter(logging.Formatter):
    color_map = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


class Logger:
    def __init__(self, name, log_dir=config.LOG_DIR, level=config.LOG_LEVEL):
        init()

        self.logger = logging.getLogger(name)
        self.logger.setLevel(convert_log_level(level))
        # Evita handlers duplicados si el módulo se importa varias veces.
        if self.logger.handlers:
            return

        format_string_console = (
            f"{Style.BRIGHT}%(levelname)-10s "
            + f"{Style.DIM}%(name)-20s "
            + f"{Style.RESET_ALL}%(message)s"
        )

        # stdout queda reservado para los resultados de los comandos.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColorFormatter(format_string_console))
        self.logger.addHandler(console_handler)

        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)
            format_string_file = re.sub(
                r"\x1b\[[0-9;]*m", "", "%(asctime)s - " + format_string_console
            )
            file_handler = logging.FileHandler(
                Path(log_dir) / f"{datetime.now().strftime('%Y-%m-%d')}.log"
            )
            file_handler.setFormatter(logging.Formatter(format_string_file))
            self.logger.addHandler(file_handler)

    def get_logger(self):
        return self.logger
