from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import AppConfig

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Streamlit re-executes app.py on every interaction; handlers must only be attached once.
_HANDLER_MARK = "_honeypot_dashboard"


def setup_logging(cfg: AppConfig, app_name: str = "honeypot_dashboard") -> Optional[str]:
    """
    Configure the root logger from config.
    Returns the log file path when file logging is enabled.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, cfg.log_level, logging.INFO))

    if any(getattr(h, _HANDLER_MARK, False) for h in root.handlers):
        return None

    fmt = logging.Formatter(_FORMAT)

    # console handler (container / dev)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    setattr(ch, _HANDLER_MARK, True)
    root.addHandler(ch)

    if not cfg.log_path:
        return None

    os.makedirs(cfg.log_path, exist_ok=True)
    log_file = os.path.join(cfg.log_path, f"{app_name}.log")

    # rotating file handler
    fh = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    fh.setFormatter(fmt)
    setattr(fh, _HANDLER_MARK, True)
    root.addHandler(fh)

    return log_file
