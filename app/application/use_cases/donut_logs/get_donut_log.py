"""Use case for retrieving a single donut log."""

from sqlalchemy.orm import Session

from app.domain.entities import DonutLog
from app.infrastructure.repositories import DonutLogRepository


def get_donut_log(session: Session, donut_log_id: int) -> DonutLog:
    """Return the donut log identified by ``donut_log_id`` or raise an error."""

    repository = DonutLogRepository(session)
    donut_log = repository.get(donut_log_id)
    if donut_log is None:
        raise ValueError("Donut log not found")
    return donut_log
