from __future__ import annotations

import logging
import sys

LOGGER_NAME = "unique_link"

def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Package logger; directive registration and per-page activity log at
    DEBUG, run summaries at INFO. Children ("unique_link.x") share the
    package handler.
    """
    log = logging.getLogger(name)
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    return log

def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
