"""Agent tool exposing the donut log validation rules."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from app.application.use_cases.donut_logs import describe_donut_log_validations

logger = logging.getLogger(__name__)

TOOL_NAME = "donut_log_validations"
TOOL_DESCRIPTION = "Gets current validations for the DonutLog model"


def tool_definition() -> dict[str, Any]:
    """Return the function tool definition announced to the model."""

    return {
        "type": "function",
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "parameters": {
            "type": "object",
            "properties": {},
            "additionalProperties": False,
        },
        "strict": True,
    }


def execute_tool(arguments: str | Mapping[str, Any] | None = None) -> str:
    """Run the tool and return its JSON output.

    The tool takes no arguments; whatever the model sends is ignored.
    """

    if arguments:
        logger.debug("Ignoring arguments passed to %s: %s", TOOL_NAME, arguments)
    payload = describe_donut_log_validations()
    return json.dumps(payload, ensure_ascii=False)


__all__ = ["TOOL_DESCRIPTION", "TOOL_NAME", "execute_tool", "tool_definition"]
