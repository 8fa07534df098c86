"""Use cases for validating, describing and storing donut logs."""

from .create_donut_log import DonutLogValidationError, create_donut_log
from .describe_validations import VALIDATION_NOTES, describe_donut_log_validations
from .get_donut_log import get_donut_log
from .rule_catalog import ENTITY_NAME, get_rule_catalog
from .validate_donut_log import validate_donut_log

__all__ = [
    "DonutLogValidationError",
    "ENTITY_NAME",
    "VALIDATION_NOTES",
    "create_donut_log",
    "describe_donut_log_validations",
    "get_donut_log",
    "get_rule_catalog",
    "validate_donut_log",
]
