from .errors import InvalidNumberError, PressureUnitsError, UnsupportedUnitError
from .models import UnitMeta
from .pressure import Pressure, convert_pressure
from .units import SI_UNIT, UNITS, UnitDescriptor, describe_unit, list_units, resolve_unit, unit_meta

__version__ = "0.1.0"

__all__ = [
    "InvalidNumberError",
    "Pressure",
    "PressureUnitsError",
    "SI_UNIT",
    "UNITS",
    "UnitDescriptor",
    "UnitMeta",
    "UnsupportedUnitError",
    "convert_pressure",
    "describe_unit",
    "list_units",
    "resolve_unit",
    "unit_meta",
]
