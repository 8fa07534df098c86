"""Domain entities exposed by the application."""

from .donut_log import DONUT_LOG_FIELDS, DonutLog, DonutLogEntry
from .validation_result import ValidationResult
from .validation_rule import (
    RULE_KIND_BEFORE_NOW,
    RULE_KIND_ENUM_MEMBERSHIP,
    RULE_KIND_GREATER_THAN,
    RULE_KIND_LESS_OR_EQUAL_TO,
    RULE_KIND_MUST_BE_BLANK,
    RULE_KIND_MUST_BE_PRESENT,
    RULE_KINDS,
    RuleCondition,
    RuleDefinition,
)

__all__ = [
    "DONUT_LOG_FIELDS",
    "DonutLog",
    "DonutLogEntry",
    "RULE_KINDS",
    "RULE_KIND_BEFORE_NOW",
    "RULE_KIND_ENUM_MEMBERSHIP",
    "RULE_KIND_GREATER_THAN",
    "RULE_KIND_LESS_OR_EQUAL_TO",
    "RULE_KIND_MUST_BE_BLANK",
    "RULE_KIND_MUST_BE_PRESENT",
    "RuleCondition",
    "RuleDefinition",
    "ValidationResult",
]
