"""Validation rules for ND/NE (dynamic / static water level) records.

Pure functions over raw field values as they arrive from a form or an API
payload. Every problem is collected so the caller can show all of them at once.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from outorga.domain.enums import Period
from outorga.domain.exceptions import ValidationError
from outorga.domain.seasons import month_in_period

REQUIRED_LABELS = {
    "period": "period",
    "technician_id": "technician",
    "measured_on": "measurement date",
    "static_level": "static level (NE)",
    "dynamic_level": "dynamic level (ND)",
}

MSG_POSITIVE = "must be a positive number"
MSG_PERIOD = "must be one of: wet, dry"
MSG_DATE = "must be a valid date"
MSG_ND_BELOW_NE = "dynamic level must be greater than or equal to static level"
MSG_SEASON = "date does not correspond to the measurement period"


@dataclass(frozen=True)
class NDNEFields:
    """Raw, unparsed field values of an ND/NE record."""

    period: Any = None
    technician_id: Any = None
    measured_on: Any = None
    static_level: Any = None
    dynamic_level: Any = None
    responsible_name: str | None = None


@dataclass
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_level(value: Any) -> float | None:
    """Parse a level in metres; None when it is not a finite non-negative number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def validate_ndne(fields: NDNEFields) -> ValidationResult:
    result = ValidationResult()
    errors, values = result.errors, result.values

    for name, label in REQUIRED_LABELS.items():
        if _is_blank(getattr(fields, name)):
            errors[name] = f"{label} is required"

    if "period" not in errors:
        try:
            values["period"] = Period(str(fields.period).strip().lower())
        except ValueError:
            errors["period"] = MSG_PERIOD

    if "technician_id" not in errors:
        values["technician_id"] = str(fields.technician_id).strip()

    if "measured_on" not in errors:
        measured_on = parse_date(fields.measured_on)
        if measured_on is None:
            errors["measured_on"] = MSG_DATE
        else:
            values["measured_on"] = measured_on

    for name in ("static_level", "dynamic_level"):
        if name in errors:
            continue
        level = parse_level(getattr(fields, name))
        if level is None:
            errors[name] = MSG_POSITIVE
        else:
            values[name] = level

    if "static_level" in values and "dynamic_level" in values:
        if values["dynamic_level"] < values["static_level"]:
            errors["dynamic_level"] = MSG_ND_BELOW_NE

    if "period" in values and "measured_on" in values:
        if not month_in_period(values["measured_on"].month, values["period"]):
            errors["measured_on"] = MSG_SEASON

    if not _is_blank(fields.responsible_name):
        values["responsible_name"] = fields.responsible_name.strip()

    if errors:
        result.values = {}
    return result
