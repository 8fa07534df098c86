"""Domain entity holding the outcome of a donut log validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field as dataclass_field


def _humanize_field(name: str) -> str:
    name = re.sub(r"(?:_id|(?<=[a-z])Id)$", "", name)
    spaced = re.sub(r"(?<!^)(?=[A-Z])", " ", name).replace("_", " ")
    return spaced.lower().capitalize()


@dataclass
class ValidationResult:
    """Failure messages grouped per field, in rule declaration order."""

    errors: dict[str, list[str]] = dataclass_field(default_factory=dict)

    def add(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def __getitem__(self, field_name: str) -> list[str]:
        return list(self.errors.get(field_name, ()))

    def __contains__(self, field_name: object) -> bool:
        return bool(self.errors.get(field_name))  # type: ignore[arg-type]

    @property
    def is_valid(self) -> bool:
        """Return ``True`` when no field collected a failure."""

        return not any(self.errors.values())

    def as_dict(self) -> dict[str, list[str]]:
        """Return failing fields mapped to a copy of their messages."""

        return {name: list(messages) for name, messages in self.errors.items() if messages}

    def full_messages(self) -> list[str]:
        """Return every message prefixed with its humanized field name.

        ``donutType`` failures read ``"Donut type : 'x' is not a valid value..."``.
        """

        return [
            f"{_humanize_field(name)} {message}"
            for name, messages in self.errors.items()
            for message in messages
        ]


__all__ = ["ValidationResult"]
