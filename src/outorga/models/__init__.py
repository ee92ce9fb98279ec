"""ORM table models. Importing this package registers every mapper."""
from outorga.models.core import Contract, License
from outorga.models.monitoring import MeterReading
from outorga.models.ndne import NDNERecord
from outorga.models.analysis import WaterAnalysis

__all__ = ["Contract", "License", "MeterReading", "NDNERecord", "WaterAnalysis"]
