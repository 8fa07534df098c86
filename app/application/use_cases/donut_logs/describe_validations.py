"""Use case exposing the donut log rule catalog to external callers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from app.domain.entities import RuleDefinition
from app.schemas import DonutLogValidationsError, DonutLogValidationsResponse

from .rule_catalog import ENTITY_NAME, get_rule_catalog

logger = logging.getLogger(__name__)

VALIDATION_NOTES = """\
now means the current date and time

allowBlank: true means that the field can be blank
blank: true means that the field must be blank
present: true means that the field must be present

do not confuse flavor, filling and glaze.
vanilla-pudding is a filling and not a flavor
"""


def describe_donut_log_validations(
    catalog_provider: Callable[[], Sequence[RuleDefinition] | None] = get_rule_catalog,
) -> dict[str, Any]:
    """Return the active rules and their semantics as a plain payload.

    Errors never reach the caller: any failure is reported as ``{"error": ...}``.
    """

    try:
        catalog = catalog_provider()
        if catalog is None:
            raise RuntimeError("Donut log rule catalog is not initialized")
        response = DonutLogValidationsResponse(
            entity_name=ENTITY_NAME,
            rules=[rule.as_dict() for rule in catalog],
            notes=VALIDATION_NOTES,
        )
        return response.model_dump(by_alias=True, mode="json")
    except Exception as exc:
        logger.exception("Could not describe donut log validations: %s", exc)
        return DonutLogValidationsError(error=str(exc) or exc.__class__.__name__).model_dump()


__all__ = ["VALIDATION_NOTES", "describe_donut_log_validations"]
