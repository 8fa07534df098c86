"""Fixed catalog of validation rules applied to donut logs."""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from app.domain.entities import (
    RULE_KIND_BEFORE_NOW,
    RULE_KIND_ENUM_MEMBERSHIP,
    RULE_KIND_GREATER_THAN,
    RULE_KIND_LESS_OR_EQUAL_TO,
    RULE_KIND_MUST_BE_BLANK,
    RuleCondition,
    RuleDefinition,
)

ENTITY_NAME: Final[str] = "DonutLog"

# Seconds added to "now" to absorb clock skew between caller and server.
ATE_AT_LENIENCY_SECONDS: Final[int] = 60

DONUT_TYPES: Final[tuple[str, ...]] = ("plain", "glazed", "filled", "hole", "cake", "fritter")
RING_DONUT_TYPES: Final[tuple[str, ...]] = ("plain", "glazed", "filled", "hole", "cake")
UNFILLED_DONUT_TYPES: Final[tuple[str, ...]] = ("plain", "glazed", "hole", "cake", "fritter")

DONUT_FLAVORS: Final[tuple[str, ...]] = ("plain", "chocolate", "strawberry", "blueberry")
FRITTER_FLAVORS: Final[tuple[str, ...]] = ("cinnamon", "apple")
DONUT_GLAZES: Final[tuple[str, ...]] = ("plain", "chocolate", "strawberry", "maple")
FRITTER_GLAZES: Final[tuple[str, ...]] = ("plain",)
FILLINGS: Final[tuple[str, ...]] = (
    "vanilla-pudding",
    "vanilla-cream",
    "chocolate-pudding",
    "raspberry",
    "blueberry",
    "apple",
)

_RULE_TABLE: Final[tuple[RuleDefinition, ...]] = (
    RuleDefinition(
        name="ateInPast",
        field="ateAt",
        kind=RULE_KIND_BEFORE_NOW,
        parameters={"leniencySeconds": ATE_AT_LENIENCY_SECONDS},
        message="must be in the past",
    ),
    RuleDefinition(
        name="userIdPresent",
        field="userId",
        kind=RULE_KIND_GREATER_THAN,
        parameters={"threshold": 0},
    ),
    RuleDefinition(
        name="amountMin",
        field="amount",
        kind=RULE_KIND_GREATER_THAN,
        parameters={"threshold": 0},
    ),
    RuleDefinition(
        name="amountMax",
        field="amount",
        kind=RULE_KIND_LESS_OR_EQUAL_TO,
        parameters={"threshold": 12},
    ),
    RuleDefinition(
        name="donutTypeValid",
        field="donutType",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": DONUT_TYPES},
    ),
    RuleDefinition(
        name="donutFlavorValid",
        field="flavor",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": DONUT_FLAVORS},
        condition=RuleCondition(field="donutType", values=RING_DONUT_TYPES),
    ),
    RuleDefinition(
        name="fritterFlavorValid",
        field="flavor",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": FRITTER_FLAVORS},
        condition=RuleCondition(field="donutType", values=("fritter",)),
    ),
    RuleDefinition(
        name="donutGlazeValid",
        field="glaze",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": DONUT_GLAZES},
        condition=RuleCondition(field="donutType", values=RING_DONUT_TYPES),
        allow_blank=True,
    ),
    RuleDefinition(
        name="fritterGlazeValid",
        field="glaze",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": FRITTER_GLAZES},
        condition=RuleCondition(field="donutType", values=("fritter",)),
        allow_blank=True,
    ),
    RuleDefinition(
        name="fillingValid",
        field="filling",
        kind=RULE_KIND_ENUM_MEMBERSHIP,
        parameters={"values": FILLINGS},
        condition=RuleCondition(field="donutType", values=("filled",)),
        allow_blank=True,
    ),
    RuleDefinition(
        name="unfilledNotFilled",
        field="filling",
        kind=RULE_KIND_MUST_BE_BLANK,
        parameters={"blank": True},
        condition=RuleCondition(field="donutType", values=UNFILLED_DONUT_TYPES),
    ),
)


@lru_cache(maxsize=1)
def get_rule_catalog() -> tuple[RuleDefinition, ...]:
    """Return the process-wide, read-only rule catalog in declaration order."""

    names = [rule.name for rule in _RULE_TABLE]
    if len(names) != len(set(names)):
        raise RuntimeError("Donut log rule names must be unique")
    return _RULE_TABLE


__all__ = [
    "ATE_AT_LENIENCY_SECONDS",
    "DONUT_FLAVORS",
    "DONUT_GLAZES",
    "DONUT_TYPES",
    "ENTITY_NAME",
    "FILLINGS",
    "FRITTER_FLAVORS",
    "FRITTER_GLAZES",
    "get_rule_catalog",
]
