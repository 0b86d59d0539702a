from __future__ import annotations

import logging
import sys
from pathlib import Path


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def init_logger(name: str = "algoevo", log_dir: str | Path | None = None, level: str = "INFO") -> logging.Logger:
    """
    Initialize a console (+ optional file) logger for the API process or a CLI
    command. With log_dir set, records also go to log_dir/<name>.log.
    Returns the configured logger.
    """
    logger = logging.getLogger(name)
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid duplicating handlers when re-initializing the same name
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir is not None:
            log_directory = Path(log_dir)
            log_directory.mkdir(parents=True, exist_ok=True)
            log_path = log_directory / f"{name}.log"
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            setattr(logger, "log_path", log_path)

    return logger


__all__ = ["init_logger", "LOG_FORMAT"]
