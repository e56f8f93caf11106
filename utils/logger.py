# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from config import settings


def setup_logger(log_dir: str | None = None, level: str | None = None):
    """
    Configure the global logger for the shopping cart.

    Features:
    - Daily rotating log files (one file per day)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates directories automatically

    Module loggers (e.g. "shopping_cart.cart") propagate
    to the logger returned here.
    """

    level = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # Create log directory if not exists
    log_path = Path(log_dir or settings.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    log_file = log_path / "shopping_cart.log"

    logger = logging.getLogger("shopping_cart")
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.log_backup_count,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
