"""Domain enumerations shared by the ORM, DTOs and validation rules."""
from __future__ import annotations
from enum import Enum


class Period(str, Enum):
    WET = "wet"
    DRY = "dry"


class Origin(str, Enum):
    AUTOMATED = "automated"
    MANUAL = "manual"


class ReadingStatus(str, Enum):
    DRAFT = "draft"
    FINALIZED = "finalized"


class Priority(str, Enum):
    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class CollectionType(str, Enum):
    SIMPLE = "simple"
    COMPOSITE = "composite"
    SPOT = "spot"
    INTEGRATED = "integrated"
    MANUAL = "manual"
    AUTOMATIC = "automatic"
