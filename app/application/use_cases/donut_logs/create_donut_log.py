"""Use case for storing a validated donut log."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import DonutLog, DonutLogEntry, ValidationResult
from app.infrastructure.repositories import DonutLogRepository

from .validate_donut_log import validate_donut_log

logger = logging.getLogger(__name__)


class DonutLogValidationError(ValueError):
    """Raised when an entry is rejected before it reaches storage."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__("; ".join(result.full_messages()) or "Donut log is invalid")


def create_donut_log(
    session: Session,
    entry: DonutLogEntry,
    *,
    now: datetime | None = None,
) -> DonutLog:
    """Validate ``entry`` and persist it, raising when any rule fails."""

    result = validate_donut_log(entry, now=now)
    if not result.is_valid:
        logger.info("Rejected donut log for user %s: %s", entry.user_id, result.as_dict())
        raise DonutLogValidationError(result)

    repository = DonutLogRepository(session)
    return repository.create(entry)


__all__ = ["DonutLogValidationError", "create_donut_log"]
