import os
import pathlib
import sys
from datetime import date, datetime, timedelta, timezone

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pandas as pd
import pytest

from app.utils.datetime import _resolve_timezone, ensure_app_naive_datetime, parse_timestamp


def test_resolve_timezone_accepts_offsets_and_falls_back_to_utc():
    assert _resolve_timezone("UTC-05:00") == timezone(-timedelta(hours=5))
    assert _resolve_timezone("UTC+0330") == timezone(timedelta(hours=3, minutes=30))
    assert _resolve_timezone("Not/AZone") == timezone.utc


def test_parse_timestamp_handles_supported_inputs():
    aware = datetime(2025, 1, 2, 3, 4, tzinfo=timezone.utc)

    assert parse_timestamp(aware) == aware
    assert parse_timestamp(pd.Timestamp(aware)) == aware
    assert parse_timestamp("2025-01-02T03:04:00+00:00") == aware
    assert parse_timestamp(date(2025, 1, 2)).date() == date(2025, 1, 2)


@pytest.mark.parametrize("value", [None, "", "  ", "someday", 1700000000, 1.5, True, pd.NaT])
def test_parse_timestamp_rejects_non_timestamps(value):
    assert parse_timestamp(value) is None


def test_ensure_app_naive_datetime_drops_offset():
    aware = datetime(2025, 1, 2, 3, 4, tzinfo=timezone.utc)

    naive = ensure_app_naive_datetime(aware)

    assert naive.tzinfo is None
    assert ensure_app_naive_datetime(None) is None
