"""Persistence layer for donut logs."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import DonutLog, DonutLogEntry
from app.infrastructure.models import DonutLogModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, parse_timestamp


class DonutLogRepository:
    """Store and load donut logs. Callers validate entries beforehand."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, donut_log_id: int) -> DonutLog | None:
        model = self.session.get(DonutLogModel, donut_log_id)
        return self._to_entity(model) if model else None

    def create(self, entry: DonutLogEntry) -> DonutLog:
        model = DonutLogModel()
        self._apply_entry_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: DonutLogModel) -> DonutLog:
        return DonutLog(
            id=model.id,
            entry=DonutLogEntry(
                user_id=model.user_id,
                amount=model.amount,
                ate_at=ensure_app_timezone(model.ate_at),
                donut_type=model.donut_type,
                flavor=model.flavor,
                glaze=model.glaze,
                filling=model.filling,
                location=model.location,
                note=model.note,
            ),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entry_to_model(model: DonutLogModel, entry: DonutLogEntry) -> None:
        user_id = DonutLogRepository._coerce_decimal(entry.user_id)
        model.user_id = int(user_id) if user_id is not None else None
        model.amount = DonutLogRepository._coerce_decimal(entry.amount)
        model.ate_at = ensure_app_naive_datetime(parse_timestamp(entry.ate_at))
        model.donut_type = entry.donut_type
        model.flavor = entry.flavor
        model.glaze = entry.glaze
        model.filling = entry.filling
        model.location = entry.location
        model.note = entry.note

    @staticmethod
    def _coerce_decimal(value: Any) -> Decimal | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None


__all__ = ["DonutLogRepository"]
