"""
Conversión entre unidades de presión.
La tabla de valores se calcula completa al construir el objeto y no cambia después.
"""
import logging
import math
import numbers
from types import MappingProxyType
from typing import Dict, List, Mapping

from .errors import InvalidNumberError
from .models import UnitMeta
from .units import SI_UNIT, UNITS, describe_unit, list_units, resolve_unit

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """
    Texto del valor sin decimales fijos; 100000.0 -> "100000".
    Los no enteros usan el repr más corto de Python, con el exponente sin ceros
    a la izquierda ("1e-5") y los infinitos como "Infinity" / "-Infinity".
    """
    value = float(value)
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    mantissa, sep, exponent = repr(value).partition("e")
    if sep:
        return f"{mantissa}e{int(exponent):+d}"
    return mantissa


class Pressure:
    """Valor de presión expresado en todas las unidades del registro."""

    def __init__(self, from_value: float, from_unit: str = SI_UNIT):
        if isinstance(from_value, bool) or not isinstance(from_value, numbers.Real):
            raise InvalidNumberError(from_value, "fromValue")
        try:
            number = float(from_value)
        except OverflowError:
            # enteros fuera del rango de float
            raise InvalidNumberError(from_value, "fromValue") from None
        if math.isnan(number):
            raise InvalidNumberError(from_value, "fromValue")
        source = resolve_unit("fromUnit", from_unit)

        value_si = from_value if source.identifier == SI_UNIT else source.to_si(from_value)
        table: Dict[str, float] = {}
        for unit in UNITS:
            # la unidad de origen conserva el valor exacto del usuario
            table[unit.identifier] = from_value if unit is source else unit.from_si(value_si)
        self._table: Mapping[str, float] = MappingProxyType(table)
        logger.debug("Pressure %r %s -> %r Pa", from_value, source.identifier, value_si)

    @property
    def table(self) -> Mapping[str, float]:
        return self._table

    def to_object(self) -> Dict[str, float]:
        """Valores en todas las unidades, con el símbolo ASCII como clave."""
        return dict(self._table)

    def to_value(self, to_unit: str = SI_UNIT) -> float:
        return self._table[resolve_unit("toUnit", to_unit).identifier]

    def to_string(self, to_unit: str = SI_UNIT) -> str:
        """Valor en la unidad pedida seguido de su símbolo estándar, p. ej. '1 bar'."""
        unit = resolve_unit("toUnit", to_unit)
        return f"{format_number(self._table[unit.identifier])} {unit.symbols[0]}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Pressure({self._table[SI_UNIT]!r}, {SI_UNIT!r})"

    @staticmethod
    def unit(unit: str = SI_UNIT) -> UnitMeta:
        return describe_unit(unit)

    @staticmethod
    def units() -> List[UnitMeta]:
        return list_units()


def convert_pressure(from_value: float, from_unit: str = SI_UNIT, to_unit: str = SI_UNIT) -> float:
    """Convierte un valor de presión entre dos unidades."""
    return Pressure(from_value, from_unit).to_value(to_unit)
