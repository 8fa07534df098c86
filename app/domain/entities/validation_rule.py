"""Domain entities representing declarative donut log validation rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from types import MappingProxyType
from typing import Any, Final

RULE_KIND_GREATER_THAN: Final[str] = "greaterThan"
RULE_KIND_LESS_OR_EQUAL_TO: Final[str] = "lessOrEqualTo"
RULE_KIND_ENUM_MEMBERSHIP: Final[str] = "enumMembership"
RULE_KIND_BEFORE_NOW: Final[str] = "beforeNow"
RULE_KIND_MUST_BE_BLANK: Final[str] = "mustBeBlank"
RULE_KIND_MUST_BE_PRESENT: Final[str] = "mustBePresent"

RULE_KINDS: Final[tuple[str, ...]] = (
    RULE_KIND_GREATER_THAN,
    RULE_KIND_LESS_OR_EQUAL_TO,
    RULE_KIND_ENUM_MEMBERSHIP,
    RULE_KIND_BEFORE_NOW,
    RULE_KIND_MUST_BE_BLANK,
    RULE_KIND_MUST_BE_PRESENT,
)


@dataclass(frozen=True)
class RuleCondition:
    """Gate activating a rule only when ``field`` holds one of ``values``."""

    field: str
    values: tuple[str, ...]

    def as_dict(self) -> dict[str, Any]:
        return {"field": self.field, "values": list(self.values)}


@dataclass(frozen=True)
class RuleDefinition:
    """Core attributes describing a single validation rule."""

    name: str
    field: str
    kind: str
    parameters: Mapping[str, Any] = dataclass_field(default_factory=dict, hash=False)
    condition: RuleCondition | None = None
    allow_blank: bool = False
    message: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in RULE_KINDS:
            raise ValueError(f"Unsupported rule kind '{self.kind}' for rule '{self.name}'")
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def as_dict(self) -> dict[str, Any]:
        """Return the rule as plain data, tuples converted to lists."""

        return {
            "name": self.name,
            "field": self.field,
            "kind": self.kind,
            "parameters": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in self.parameters.items()
            },
            "condition": self.condition.as_dict() if self.condition else None,
            "allowBlank": self.allow_blank,
            "message": self.message,
        }


__all__ = [
    "RULE_KINDS",
    "RULE_KIND_BEFORE_NOW",
    "RULE_KIND_ENUM_MEMBERSHIP",
    "RULE_KIND_GREATER_THAN",
    "RULE_KIND_LESS_OR_EQUAL_TO",
    "RULE_KIND_MUST_BE_BLANK",
    "RULE_KIND_MUST_BE_PRESENT",
    "RuleCondition",
    "RuleDefinition",
]
