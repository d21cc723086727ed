"""Structured JSON logging."""
from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from core.settings import settings


class LoanJsonFormatter(JsonFormatter):
    """JSON formatter adding timestamp, level and service name."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Send JSON log lines for the whole process to stdout.

    Streamlit reruns the script on every interaction, so existing handlers are
    replaced rather than stacked.
    """
    logger = logging.getLogger()
    logger.setLevel((level or settings.log_level).upper())
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LoanJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
