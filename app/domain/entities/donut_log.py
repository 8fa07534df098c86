"""Domain entities describing donut consumption logs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

# External field names mapped to the attribute holding their value.
DONUT_LOG_FIELDS: dict[str, str] = {
    "userId": "user_id",
    "amount": "amount",
    "ateAt": "ate_at",
    "donutType": "donut_type",
    "flavor": "flavor",
    "glaze": "glaze",
    "filling": "filling",
    "location": "location",
    "note": "note",
}


@dataclass(frozen=True)
class DonutLogEntry:
    """Candidate donut log as supplied by a caller.

    Values are kept exactly as received. A non numeric ``amount`` or an
    unparseable ``ate_at`` is not rejected here; it fails the rule that
    consumes the field.
    """

    user_id: Any = None
    amount: Any = None
    ate_at: Any = None
    donut_type: Any = None
    flavor: Any = None
    glaze: Any = None
    filling: Any = None
    location: Any = None
    note: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DonutLogEntry":
        """Build an entry from external (``donutType``) or attribute (``donut_type``) keys."""

        attributes = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            attribute = DONUT_LOG_FIELDS.get(key, key)
            if attribute in attributes:
                values[attribute] = value
        return cls(**values)

    def value_for(self, field_name: str) -> Any:
        """Return the value stored for ``field_name`` (external or attribute name)."""

        attribute = DONUT_LOG_FIELDS.get(field_name, field_name)
        if attribute not in DONUT_LOG_FIELDS.values():
            raise KeyError(f"Unknown donut log field '{field_name}'")
        return getattr(self, attribute)


@dataclass
class DonutLog:
    """Persisted donut log: a validated entry plus storage metadata."""

    id: int | None
    entry: DonutLogEntry
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["DONUT_LOG_FIELDS", "DonutLog", "DonutLogEntry"]
