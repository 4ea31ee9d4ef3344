#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging-Konfiguration fuer den Kartenleser.

Console-Output plus rotierende Logdatei, analog zur Desktop-App.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "logs")
LOG_FILE_NAME = "kartenleser.log"


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Konfiguriert Logging mit Console + File Output.

    Mehrfacher Aufruf fuegt keine doppelten Handler hinzu.

    Args:
        log_dir: Verzeichnis fuer die Logdatei (Standard: logs/ im Projekt)
        level: Log-Level des Root-Loggers

    Returns:
        Der konfigurierte Root-Logger
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_file = os.path.join(log_dir, LOG_FILE_NAME)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Bereits eingerichtete Handler nicht erneut anhaengen
    if not any(getattr(h, "_kartenleser", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._kartenleser = True
        root_logger.addHandler(console_handler)

    if any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(log_file)
        for h in root_logger.handlers
    ):
        return root_logger

    # File Handler mit Rotation (5 MB, 3 Backups)
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.info(f"File-Logging aktiviert: {log_file}")
    except (OSError, PermissionError) as e:
        root_logger.warning(f"File-Logging nicht moeglich, nur Console: {e}")

    return root_logger
