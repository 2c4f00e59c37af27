"""
Logging configuration
"""

import logging
import logging.handlers

from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingConfig:
    """Root and access logger setup"""
    def __init__(self, level: str = "INFO", log_file: Optional[str] = None):
        self.level = level
        self.log_file = Path(log_file) if log_file else None

    def setup_logging(self) -> logging.Logger:
        """Install handlers on the root logger, replacing any existing ones"""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=10*1024*1024,
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(self.level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False
        for handler in access_logger.handlers[:]:
            access_logger.removeHandler(handler)

        access_handler = logging.StreamHandler()
        access_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | ACCESS | %(message)s',
            datefmt=DATE_FORMAT
        ))
        access_logger.addHandler(access_handler)

        return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_api_access(method: str, path: str, status_code: int = None,
                   response_time: float = None, error: str = None):
    access_logger = logging.getLogger("access")

    log_parts = [
        f"method={method}",
        f"path={path}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    access_logger.info(" | ".join(log_parts))
