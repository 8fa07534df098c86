"""Use case for validating a donut log entry against the rule catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from app.domain.entities import DonutLogEntry, RuleDefinition, ValidationResult
from app.utils import now_in_app_timezone

from .checkers import get_rule_checker, is_blank
from .conditions import rule_applies
from .rule_catalog import get_rule_catalog

logger = logging.getLogger(__name__)


def validate_donut_log(
    entry: DonutLogEntry,
    *,
    now: datetime | None = None,
    catalog: Sequence[RuleDefinition] | None = None,
) -> ValidationResult:
    """Evaluate every applicable rule and collect all failures per field.

    ``now`` pins the reference time for temporal rules; it defaults to the
    current time in the application timezone, read once per call.
    """

    rules = get_rule_catalog() if catalog is None else catalog
    reference_time = now if now is not None else now_in_app_timezone()
    result = ValidationResult()

    for rule in rules:
        if not rule_applies(rule, entry):
            continue

        value = entry.value_for(rule.field)
        if rule.allow_blank and is_blank(value):
            continue

        dependent_field = rule.condition.field if rule.condition else None
        checker = get_rule_checker(rule.kind)
        ok, message = checker(
            value=value,
            parameters=rule.parameters,
            message=rule.message,
            now=reference_time,
            dependent_field=dependent_field,
            dependent_value=entry.value_for(dependent_field) if dependent_field else None,
        )
        if not ok:
            logger.debug("Rule %s failed for %s=%r", rule.name, rule.field, value)
            result.add(rule.field, message)

    return result


__all__ = ["validate_donut_log"]
