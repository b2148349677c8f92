from __future__ import annotations

import enum


class HolidayStatus(enum.StrEnum):
    """Lifecycle state of a holiday booking. Stored as given, never derived."""

    DRAFT = "DRAFT"
    REQUESTED = "REQUESTED"
    SCHEDULED = "SCHEDULED"
    ARCHIVED = "ARCHIVED"
