# backend/config/logging_config.py
import logging

from backend.config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: str = None) -> None:
    """Configure the root logger once; uvicorn keeps its own handlers."""
    level = level or get_settings().log_level
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQL echo is noisy; enable explicitly with LOG_LEVEL=DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level == "DEBUG" else logging.WARNING
    )
