"""Tests for storing donut logs through the validation gate."""

from __future__ import annotations

import os
import pathlib
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.application.use_cases.donut_logs import (
    DonutLogValidationError,
    create_donut_log,
    get_donut_log,
)
from app.domain.entities import DonutLogEntry
from app.infrastructure.database import Base
from app.infrastructure.models import DonutLogModel

NOW = datetime(2025, 8, 16, 19, 0, tzinfo=timezone.utc)


@pytest.fixture()
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def _build_entry(**overrides):
    base = {
        "user_id": 1,
        "amount": "3.50",
        "ate_at": NOW - timedelta(days=1),
        "donut_type": "filled",
        "flavor": "chocolate",
        "glaze": "chocolate",
        "filling": "vanilla-cream",
        "location": "Corner bakery",
    }
    base.update(overrides)
    return DonutLogEntry(**base)


def test_create_donut_log_persists_valid_entry(session):
    donut_log = create_donut_log(session, _build_entry(), now=NOW)

    assert donut_log.id is not None
    assert donut_log.created_at is not None
    assert donut_log.entry.amount == Decimal("3.50")
    assert donut_log.entry.ate_at == NOW - timedelta(days=1)
    assert donut_log.entry.filling == "vanilla-cream"
    assert session.query(DonutLogModel).count() == 1


def test_create_donut_log_rejects_invalid_entry(session):
    with pytest.raises(DonutLogValidationError) as exc_info:
        create_donut_log(session, _build_entry(donut_type="cake"), now=NOW)

    assert exc_info.value.result["filling"] == ["must be blank when donutType = cake."]
    assert "Filling must be blank when donutType = cake." in str(exc_info.value)
    assert session.query(DonutLogModel).count() == 0


def test_get_donut_log_round_trips_stored_values(session):
    created = create_donut_log(session, _build_entry(note="after lunch"), now=NOW)

    loaded = get_donut_log(session, created.id)

    assert loaded.entry.note == "after lunch"
    assert loaded.entry.user_id == 1
    assert loaded.entry.donut_type == "filled"


def test_get_donut_log_raises_when_missing(session):
    with pytest.raises(ValueError, match="not found"):
        get_donut_log(session, 999)


def test_create_donut_log_checks_against_current_time_by_default(session):
    current = datetime.now(timezone.utc)

    created = create_donut_log(session, _build_entry(ate_at=current - timedelta(days=1)))

    assert created.id is not None
    with pytest.raises(DonutLogValidationError) as exc_info:
        create_donut_log(session, _build_entry(ate_at=current + timedelta(days=1)))
    assert exc_info.value.result["ateAt"] == ["must be in the past"]
