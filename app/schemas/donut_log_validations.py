"""Pydantic models describing the donut log validations payload."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RuleKindEnum(str, Enum):
    """Predicate families a rule can use."""

    GREATER_THAN = "greaterThan"
    LESS_OR_EQUAL_TO = "lessOrEqualTo"
    ENUM_MEMBERSHIP = "enumMembership"
    BEFORE_NOW = "beforeNow"
    MUST_BE_BLANK = "mustBeBlank"
    MUST_BE_PRESENT = "mustBePresent"


class RuleConditionRead(BaseModel):
    field: str = Field(..., min_length=1, description="Field whose value gates the rule")
    values: list[str] = Field(
        ..., min_length=1, description="Values of the gating field that activate the rule"
    )


class RuleDefinitionRead(BaseModel):
    """A single catalog rule, exposed as data."""

    name: str = Field(..., min_length=1, description="Unique rule identifier")
    field: str = Field(..., min_length=1, description="Donut log field constrained by the rule")
    kind: RuleKindEnum = Field(..., description="Predicate family applied to the field")
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Kind specific settings (threshold, values, leniency)"
    )
    condition: RuleConditionRead | None = Field(
        default=None, description="Activation condition; null means always active"
    )
    allow_blank: bool = Field(
        default=False,
        alias="allowBlank",
        description="Blank values skip the rule instead of failing it",
    )
    message: str | None = Field(default=None, description="Custom failure message, if any")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class DonutLogValidationsResponse(BaseModel):
    """Payload returned to callers asking for the active donut log rules."""

    entity_name: str = Field(..., alias="entityName", min_length=1)
    rules: list[RuleDefinitionRead] = Field(default_factory=list)
    notes: str = Field(..., min_length=1, description="Semantic clarifications for the rules")

    model_config = ConfigDict(populate_by_name=True)


class DonutLogValidationsError(BaseModel):
    error: str


__all__ = [
    "DonutLogValidationsError",
    "DonutLogValidationsResponse",
    "RuleConditionRead",
    "RuleDefinitionRead",
    "RuleKindEnum",
]
