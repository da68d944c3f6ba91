"""Structured JSON logging for production observability"""

import logging
import sys
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from finhealth_gateway.config import settings
from finhealth_gateway.utils.clock import utc_now


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = utc_now().isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_report(
    request_id: str,
    user_id: str | None,
    session_id: str | None,
    grade_letter: str,
    score: int,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log structured report outcome for analysis (never the profile itself)"""
    logging.info(
        "Report generated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "session_id": session_id,
            "step": "report_complete",
            "health_grade": grade_letter,
            "health_score": score,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )
