"""
Logging setup for the SplitBill command line tool
"""
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter


def setup_json_logger(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure the root logger with one JSON-formatted stream handler"""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        json_ensure_ascii=False,
    ))

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
