"""Errores del conversor de presión."""
from typing import Iterable


class PressureUnitsError(ValueError):
    """Base de todos los errores de pressure_units."""


class InvalidNumberError(PressureUnitsError):
    def __init__(self, value, parameter_name: str = "fromValue"):
        self.value = value
        self.parameter_name = parameter_name
        super().__init__(f"`{value}` (parameter `{parameter_name}`) is not a number!")


class UnsupportedUnitError(PressureUnitsError):
    def __init__(self, value, parameter_name: str, supported: Iterable[str]):
        self.value = value
        self.parameter_name = parameter_name
        self.supported = tuple(supported)
        super().__init__(
            f"`{value}` (parameter `{parameter_name}`) is not a supported pressure unit! "
            f"Only accept these values: {', '.join(self.supported)}"
        )
