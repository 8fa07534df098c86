"""Activation conditions for donut log rules."""

from __future__ import annotations

from app.domain.entities import DonutLogEntry, RuleDefinition

from .checkers import is_blank


def rule_applies(rule: RuleDefinition, entry: DonutLogEntry) -> bool:
    """Return whether ``rule`` is active for ``entry``.

    Unconditional rules always apply. Conditional rules apply only when the
    discriminator holds one of the listed values; a blank discriminator
    deactivates them.
    """

    condition = rule.condition
    if condition is None:
        return True

    current = entry.value_for(condition.field)
    if is_blank(current):
        return False
    return str(current) in condition.values


__all__ = ["rule_applies"]
