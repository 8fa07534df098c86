"""Aggregate application use cases."""

from .donut_logs import (
    create_donut_log,
    describe_donut_log_validations,
    get_donut_log,
    validate_donut_log,
)

__all__ = [
    "create_donut_log",
    "describe_donut_log_validations",
    "get_donut_log",
    "validate_donut_log",
]
