"""Configuración centralizada del logging."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from core.config import LOG_LEVEL, LOG_FILE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Configura el logging global de la aplicación."""
    level = (level or LOG_LEVEL).upper()
    log_file = log_file if log_file is not None else LOG_FILE

    handlers = [logging.StreamHandler()]
    if log_file:
        # Crear la carpeta de logs si no existe
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
        )

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )

    # Reducir el ruido de Pillow
    logging.getLogger("PIL").setLevel(logging.WARNING)
