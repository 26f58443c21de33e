"""Change-feed events pushed by a backend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from combostore.domain.exceptions import ValidationError


class EventType(Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ChangeEvent:
    """One row-level change.

    ``new`` is the storage-shaped row (absent on DELETE); ``old_id`` is
    the id of the affected row as reported in ``old``.
    """

    event_type: EventType
    new: dict[str, Any] | None = None
    old_id: str | None = None

    @property
    def record_id(self) -> str | None:
        if self.new is not None and self.new.get("id") is not None:
            return str(self.new["id"])
        return self.old_id

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> ChangeEvent:
        """Normalize a feed payload.

        Accepts the flat ``{eventType, new, old}`` shape as well as the
        realtime client's ``{data: {type, record, old_record}}`` envelope.
        """
        data = payload.get("data")
        if isinstance(data, dict) and "type" in data:
            raw_type = data.get("type")
            new = data.get("record")
            old = data.get("old_record")
        else:
            raw_type = payload.get("eventType")
            new = payload.get("new")
            old = payload.get("old")

        try:
            event_type = EventType(str(raw_type).upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown change event type: {raw_type!r}") from exc

        old_id = None
        if old and old.get("id") is not None:
            old_id = str(old["id"])

        # realtime sends an empty dict for "new" on DELETE
        return ChangeEvent(event_type=event_type, new=new or None, old_id=old_id)
