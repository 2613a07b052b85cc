"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from loan_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_eligibility_decision(
    request_id: str,
    loan_purpose: str,
    is_eligible: bool,
    approval_likelihood: int,
    risk_category: str,
    duration_ms: float,
) -> None:
    """Log structured eligibility outcome for analysis"""
    logging.info(
        "Eligibility evaluated",
        extra={
            "request_id": request_id,
            "step": "eligibility_complete",
            "loan_purpose": loan_purpose,
            "approval_outcome": "eligible" if is_eligible else "ineligible",
            "approval_likelihood": approval_likelihood,
            "risk_category": risk_category,
            "duration_ms": duration_ms,
        },
    )


def log_rate_quote(
    request_id: str,
    loan_type: str,
    interest_rate: float,
    term_months: int,
    duration_ms: float,
) -> None:
    """Log structured rate quote for analysis"""
    logging.info(
        "Rate calculated",
        extra={
            "request_id": request_id,
            "step": "rate_quote_complete",
            "loan_type": loan_type,
            "interest_rate": interest_rate,
            "term_months": term_months,
            "duration_ms": duration_ms,
        },
    )
