"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Logger condiviso del generatore di documentazione.
     Output a console tramite Rich (stderr) e, se configurata
     una cartella di log, scrittura su file con timestamp.
============================================================
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from scriptwiki.config import settings

logger = logging.getLogger(settings.LOGGER_NAME)
logger.addHandler(logging.NullHandler())

CONSOLE_HANDLER_NAME = "scriptwiki-console"
FILE_HANDLER_NAME = "scriptwiki-file"


def setup_logging(debug=False, log_dir=None):
    """Configura gli handler del logger (idempotente)"""
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            logger.removeHandler(handler)
            handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    logger.addHandler(console_handler)

    if log_dir:
        # Assicura che la cartella logs esista
        log_file_path = Path(log_dir) / settings.LOG_FILE_NAME
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.set_name(FILE_HANDLER_NAME)
        logger.addHandler(file_handler)

    return logger
