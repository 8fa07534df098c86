"""Reusable schemas for payloads handed to external callers."""

from .donut_log_validations import (
    DonutLogValidationsError,
    DonutLogValidationsResponse,
    RuleConditionRead,
    RuleDefinitionRead,
    RuleKindEnum,
)

__all__ = [
    "DonutLogValidationsError",
    "DonutLogValidationsResponse",
    "RuleConditionRead",
    "RuleDefinitionRead",
    "RuleKindEnum",
]
