"""Logging setup for the points service"""

import logging
import os
from datetime import date
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_filename() -> str:
    return f"points_{date.today().isoformat()}.log"


def resolve_log_file(log_path: Optional[str]) -> Optional[str]:
    """
    Resolve the configured log path to a file

    None disables file logging. An empty string or an existing directory
    gets the dated default file name.
    """
    if log_path is None:
        return None
    if log_path == "" or os.path.isdir(log_path):
        return os.path.join(log_path, default_log_filename())
    return log_path


def configure_logging(level: str = "INFO", log_path: Optional[str] = None) -> None:
    """
    Configure root logging to stderr and, optionally, an append-mode file

    Leaves an already configured root logger alone apart from its level.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]

    log_file = resolve_log_file(log_path)
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
