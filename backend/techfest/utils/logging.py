"""Logging configuration — console plus an append-only file under LOG_DIR."""
import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings) -> logging.Logger:
    """Attach console and ``server.log`` handlers to the ``techfest`` logger."""
    logger = logging.getLogger("techfest")
    logger.setLevel(settings.LOG_LEVEL.upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    file_handler = logging.FileHandler(os.path.join(settings.LOG_DIR, "server.log"), encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # SQL echo is only wanted when DEBUG is on
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)

    return logger
