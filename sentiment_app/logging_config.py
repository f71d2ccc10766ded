import logging
import os
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    file_path: Optional[str] = None,
) -> None:
    level_name = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, str(level_name).upper(), logging.INFO)
    fmt = fmt or os.getenv("LOG_FORMAT", DEFAULT_FORMAT)
    file_path = file_path or os.getenv("LOG_FILE")

    handlers = [logging.StreamHandler()]
    if file_path:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    logging.basicConfig(level=log_level, format=fmt, handlers=handlers)
