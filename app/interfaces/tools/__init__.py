"""Tools callable by automated agents."""

from .donut_log_validations import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    execute_tool,
    tool_definition,
)

__all__ = ["TOOL_DESCRIPTION", "TOOL_NAME", "execute_tool", "tool_definition"]
