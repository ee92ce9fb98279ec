"""Water-quality analysis parameters and the rules for reported results.

The catalogue is grouped the way laboratory reports are laid out:
physical-chemical, bacteriological, BTEX and oils/diesel. Reference values
are kept as printed on the report ("-" when the licence sets none).
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnalysisParameter:
    key: str
    name: str
    reference_value: str
    method: str
    unit: str


PHYSICAL_CHEMICAL = (
    AnalysisParameter("water_temperature", "Water temperature", "-", "SM 2580 B", "°C"),
    AnalysisParameter("color", "Color", "15", "SM 2120 B/C", "Hazen"),
    AnalysisParameter("turbidity", "Turbidity", "5", "SM 2130 B", "NTU"),
    AnalysisParameter("ph", "pH", "6.0 to 9.0", "SM 4500 H+ B", "pH"),
    AnalysisParameter("total_dissolved_solids", "Total dissolved solids", "1000", "SM 23rd Ed. 2540 C", "mg/L"),
    AnalysisParameter("total_hardness", "Total hardness", "300", "SM 23rd Ed. 2340 C", "mg/L"),
    AnalysisParameter("total_alkalinity", "Total alkalinity", "-", "SM 23rd Ed. 2320 B", "mg/L"),
    AnalysisParameter("nitrate", "Nitrate (NO3)", "10", "TC-PS-055", "mg/L"),
    AnalysisParameter("nitrite", "Nitrite", "1", "SM 23rd Ed. 4500 NO2 B", "mg/L"),
    AnalysisParameter("fluoride", "Fluoride", "1.5", "SM 4500 F- D", "mg/L"),
    AnalysisParameter("sulfate", "Sulfate", "250", "SM 4500 SO42- E", "mg/L"),
    AnalysisParameter("free_residual_chlorine", "Free residual chlorine", "-", "-", "mg/L"),
    AnalysisParameter("chloramine", "Chloramine", "-", "-", "mg/L"),
    AnalysisParameter("chlorine_dioxide", "Chlorine dioxide", "-", "-", "mg/L"),
    AnalysisParameter("sodium", "Sodium", "200", "SM 23rd Ed. 3120 B", "mg/L"),
    AnalysisParameter("chloride", "Chloride", "250", "SMEWW 4500-Cl- B", "mg/L"),
    AnalysisParameter("total_iron", "Total iron", "0.3", "SM 3500 Fe B", "mg/L"),
    AnalysisParameter("electrical_conductivity", "Electrical conductivity", "-", "SM 23rd Ed. 2510 B", "µS/cm"),
)

BACTERIOLOGICAL = (
    AnalysisParameter("thermotolerant_coliforms", "Thermotolerant coliforms", "-", "-", "CFU/100mL"),
    AnalysisParameter("total_coliforms", "Total coliforms", "Absent", "ISO 9308", "CFU/100mL"),
    AnalysisParameter("escherichia_coli", "E. coli", "Absent", "ISO 9308", "CFU/100mL"),
)

BTEX = (
    AnalysisParameter("benzene", "Benzene", "-", "EPA 8260 D:2018", "µg/L"),
    AnalysisParameter("toluene", "Toluene", "-", "EPA 8260 D:2018", "µg/L"),
    AnalysisParameter("ethylbenzene", "Ethylbenzene", "-", "EPA 8260 D:2018", "µg/L"),
    AnalysisParameter("xylene", "Xylene", "-", "5021A:2014", "µg/L"),
)

OILS_DIESEL = (
    AnalysisParameter("benzo_a_pyrene", "Benzo(a)pyrene", "10", "EPA 8270 E-1:2018", "µg/L"),
)

PARAMETER_GROUPS: dict[str, tuple[AnalysisParameter, ...]] = {
    "physical_chemical": PHYSICAL_CHEMICAL,
    "bacteriological": BACTERIOLOGICAL,
    "btex": BTEX,
    "oils_diesel": OILS_DIESEL,
}

PARAMETERS: dict[str, AnalysisParameter] = {
    p.key: p for group in PARAMETER_GROUPS.values() for p in group
}

# Temperatures may legitimately be below zero; every other result is a
# concentration, count or index.
SIGNED_PARAMETERS = frozenset({"water_temperature"})
PH_RANGE = (0.0, 14.0)

MSG_UNKNOWN = "unknown parameter"
MSG_NUMBER = "must be a valid number"
MSG_NEGATIVE = "must not be negative"
MSG_PH = "must be between 0 and 14"


def get_parameter(key: str) -> AnalysisParameter | None:
    return PARAMETERS.get(key)


def validate_results(results: dict[str, Any]) -> tuple[dict[str, str], dict[str, float]]:
    """Check reported results against the catalogue.

    Returns ``(errors, values)``. Errors are keyed ``parameters.<key>``;
    ``values`` holds the accepted results with unreported (None) entries
    dropped, and is empty whenever there is an error.
    """
    errors: dict[str, str] = {}
    values: dict[str, float] = {}
    for key, raw in results.items():
        field = f"parameters.{key}"
        if key not in PARAMETERS:
            errors[field] = MSG_UNKNOWN
            continue
        if raw is None:
            continue
        if isinstance(raw, bool):
            errors[field] = MSG_NUMBER
            continue
        try:
            number = float(raw)
        except (TypeError, ValueError):
            errors[field] = MSG_NUMBER
            continue
        if not math.isfinite(number):
            errors[field] = MSG_NUMBER
        elif key == "ph" and not PH_RANGE[0] <= number <= PH_RANGE[1]:
            errors[field] = MSG_PH
        elif number < 0 and key not in SIGNED_PARAMETERS:
            errors[field] = MSG_NEGATIVE
        else:
            values[key] = number
    if errors:
        values = {}
    return errors, values
