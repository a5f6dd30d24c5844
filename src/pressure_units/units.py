"""
Registro de unidades de presión.
Todas las conversiones pasan por Pa (unidad SI de referencia).
"""
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .errors import UnsupportedUnitError
from .models import UnitMeta

BAR_TO_PA = 1e5
PSI_TO_PA = (0.45359237 * 9.80665) / (0.0254 ** 2)  # lbf/in² a partir de lb y g_n
ATM_TO_PA = 101325.0
AT_TO_PA = 98066.5                                  # kgf/cm²
TORR_TO_PA = ATM_TO_PA / 760

SI_UNIT = "Pa"


@dataclass(frozen=True)
class UnitDescriptor:
    identifier: str
    names: Tuple[str, ...]
    symbols: Tuple[str, ...]
    to_si: Callable[[float], float]
    from_si: Callable[[float], float]

    def aliases(self) -> Tuple[str, ...]:
        return (self.identifier, *self.names, *self.symbols)

    def matches(self, alias: str) -> bool:
        return alias == self.identifier or alias in self.names or alias in self.symbols


def _identity(value: float) -> float:
    return value


def _linear(identifier: str, name: str, symbol: str, factor: float) -> UnitDescriptor:
    """Unidad lineal: valor_SI = valor * factor."""
    return UnitDescriptor(
        identifier=identifier,
        names=(name,),
        symbols=(symbol,),
        to_si=lambda value: value * factor,
        from_si=lambda value: value / factor,
    )


UNITS: Tuple[UnitDescriptor, ...] = (
    UnitDescriptor(SI_UNIT, ("Pascal",), ("Pa",), _identity, _identity),
    _linear("bar", "Bar", "bar", BAR_TO_PA),
    _linear("psi", "Pound Per Square Inch", "psi", PSI_TO_PA),
    _linear("atm", "Standard Atmosphere", "atm", ATM_TO_PA),
    _linear("at", "Technical Atmosphere", "at", AT_TO_PA),
    _linear("Torr", "Torr", "Torr", TORR_TO_PA),
)

SUPPORTED_INPUTS: Tuple[str, ...] = tuple(sorted({alias for unit in UNITS for alias in unit.aliases()}))


def resolve_unit(parameter_name: str, alias: str) -> UnitDescriptor:
    """Busca la unidad por símbolo ASCII, nombre o símbolo (exacto, sensible a mayúsculas)."""
    for unit in UNITS:
        if unit.matches(alias):
            return unit
    raise UnsupportedUnitError(alias, parameter_name, SUPPORTED_INPUTS)


def unit_meta(identifier: str) -> UnitMeta:
    unit = resolve_unit("$internal", identifier)
    return UnitMeta(
        symbol_ascii=unit.identifier,
        names=unit.names,
        symbols=unit.symbols,
        is_si_unit=unit.identifier == SI_UNIT,
    )


def describe_unit(alias: str = SI_UNIT) -> UnitMeta:
    return unit_meta(resolve_unit("unit", alias).identifier)


def list_units() -> List[UnitMeta]:
    return [unit_meta(unit.identifier) for unit in UNITS]
