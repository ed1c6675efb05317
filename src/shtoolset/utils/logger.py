"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Logger dell'applicazione. Scrive tutto su file nella
     cartella dei log e mostra a console solo avvisi ed
     errori (tutto in modalità debug) tramite Rich.
============================================================
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "toolset.log"

logger = logging.getLogger("shtoolset")


def setup_logging(log_dir=None, debug=False):
    """
    Configura gli handler del logger.

    Se la cartella dei log non può essere creata si continua
    con il solo output a console.
    """
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True), show_path=False, markup=False, rich_tracebacks=True
    )
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.addHandler(console_handler)

    log_file_path = None
    if log_dir is not None:
        try:
            # Assicura che la cartella logs esista
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / LOG_FILE_NAME
            file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
            ))
            logger.addHandler(file_handler)
        except OSError as e:
            log_file_path = None
            logger.warning(f"Log file non disponibile in {log_dir}: {e}")

    return log_file_path
