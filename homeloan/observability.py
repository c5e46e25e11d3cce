"""Structured JSON logging for the calculator front-end"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


class CalculatorJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding timestamp, level and service name"""

    def __init__(self, *args: Any, service_name: str = "homeloan-calculators", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "homeloan-calculators") -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Streamlit reruns the script; replace rather than stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CalculatorJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    ))
    logger.addHandler(handler)
