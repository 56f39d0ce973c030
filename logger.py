import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "JOINT_METRICS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    level: Optional[int] = None,
    log_dir: Optional[str] = None,
    max_size_mb: int = 10,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the root logger for the desktop drivers.

    Level priority: JOINT_METRICS_LOG_LEVEL, then ``level``, then INFO.
    A rotating file handler is added only when ``log_dir`` is given.
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        level = getattr(logging, env_level.upper(), logging.INFO)
    elif level is None:
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    # Repeated calls (e.g. GUI restarts) must not stack handlers.
    if root.handlers:
        return root

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / "joint_metrics.log",
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
