"""Predicates backing each donut log rule kind.

Every checker receives the field value plus the rule parameters as keyword
arguments and returns ``(ok, message)``. The message is always rendered so the
engine only has to decide whether to keep it.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from app.domain.entities import (
    RULE_KIND_BEFORE_NOW,
    RULE_KIND_ENUM_MEMBERSHIP,
    RULE_KIND_GREATER_THAN,
    RULE_KIND_LESS_OR_EQUAL_TO,
    RULE_KIND_MUST_BE_BLANK,
    RULE_KIND_MUST_BE_PRESENT,
)
from app.utils import ensure_app_timezone, now_in_app_timezone, parse_timestamp

RuleChecker = Callable[..., tuple[bool, str]]

_DEFAULT_MESSAGES: dict[str, str] = {
    RULE_KIND_GREATER_THAN: "must be greater than {threshold}.",
    RULE_KIND_LESS_OR_EQUAL_TO: "must be less or equal to {threshold}.",
    RULE_KIND_ENUM_MEMBERSHIP: ": '{value}' is not a valid value. Valid values: {values}.",
    RULE_KIND_BEFORE_NOW: "must be in the past",
    RULE_KIND_MUST_BE_BLANK: "must be blank when {condition_field} = {condition_value}.",
    RULE_KIND_MUST_BE_PRESENT: "must be present",
}


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None`` and for strings holding only whitespace."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        numeric_value = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not numeric_value.is_finite():
        return None
    return numeric_value


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def _render(kind: str, message: str | None, **context: Any) -> str:
    template = message or _DEFAULT_MESSAGES[kind]
    return template.format(**context)


def check_greater_than(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    **_: Any,
) -> tuple[bool, str]:
    threshold = parameters["threshold"]
    rendered = _render(RULE_KIND_GREATER_THAN, message, threshold=threshold, value=_display(value))
    numeric_value = _to_decimal(value)
    if numeric_value is None:
        return False, rendered
    return numeric_value > Decimal(str(threshold)), rendered


def check_less_or_equal_to(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    **_: Any,
) -> tuple[bool, str]:
    threshold = parameters["threshold"]
    rendered = _render(
        RULE_KIND_LESS_OR_EQUAL_TO, message, threshold=threshold, value=_display(value)
    )
    numeric_value = _to_decimal(value)
    if numeric_value is None:
        return False, rendered
    return numeric_value <= Decimal(str(threshold)), rendered


def check_enum_membership(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    **_: Any,
) -> tuple[bool, str]:
    allowed_values = tuple(parameters["values"])
    rendered = _render(
        RULE_KIND_ENUM_MEMBERSHIP,
        message,
        value=_display(value),
        values=", ".join(allowed_values),
    )
    if not isinstance(value, str):
        return False, rendered
    return value in allowed_values, rendered


def check_before_now(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    now: datetime | None = None,
    **_: Any,
) -> tuple[bool, str]:
    """Accept timestamps up to ``now + leniencySeconds``, boundary included."""

    rendered = _render(RULE_KIND_BEFORE_NOW, message, value=_display(value))
    timestamp = parse_timestamp(value)
    if timestamp is None:
        return False, rendered
    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    leniency = timedelta(seconds=parameters.get("leniencySeconds", 0))
    return timestamp <= reference + leniency, rendered


def check_must_be_blank(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    dependent_field: str | None = None,
    dependent_value: Any | None = None,
    **_: Any,
) -> tuple[bool, str]:
    rendered = _render(
        RULE_KIND_MUST_BE_BLANK,
        message,
        value=_display(value),
        condition_field=dependent_field or "",
        condition_value=_display(dependent_value),
    )
    return is_blank(value), rendered


def check_must_be_present(
    *,
    value: Any,
    parameters: Mapping[str, Any],
    message: str | None = None,
    **_: Any,
) -> tuple[bool, str]:
    rendered = _render(RULE_KIND_MUST_BE_PRESENT, message, value=_display(value))
    return not is_blank(value), rendered


_RULE_CHECKERS: dict[str, RuleChecker] = {
    RULE_KIND_GREATER_THAN: check_greater_than,
    RULE_KIND_LESS_OR_EQUAL_TO: check_less_or_equal_to,
    RULE_KIND_ENUM_MEMBERSHIP: check_enum_membership,
    RULE_KIND_BEFORE_NOW: check_before_now,
    RULE_KIND_MUST_BE_BLANK: check_must_be_blank,
    RULE_KIND_MUST_BE_PRESENT: check_must_be_present,
}


def get_rule_checker(kind: str) -> RuleChecker:
    """Return the checker registered for ``kind``."""

    try:
        return _RULE_CHECKERS[kind]
    except KeyError:
        raise KeyError(f"No checker registered for rule kind '{kind}'") from None


__all__ = [
    "RuleChecker",
    "check_before_now",
    "check_enum_membership",
    "check_greater_than",
    "check_less_or_equal_to",
    "check_must_be_blank",
    "check_must_be_present",
    "get_rule_checker",
    "is_blank",
]
