import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import HTTPException, status

import config

# --- LOGGING SETUP ---

def setup_logging(level_name: str | None = None) -> logging.Logger:
    """Configure structured logging with optional rotation"""
    level = config.Config.log_level(level_name)
    logger = logging.getLogger("obfuscated_id")
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_DIR:
            os.makedirs(config.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(config.LOG_DIR, "app.log"),
                maxBytes=10_485_760,
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging()

# --- CUSTOM EXCEPTIONS ---

class ValidationException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
