from typing import Tuple
from pydantic import BaseModel, ConfigDict


class UnitMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol_ascii: str           # índice interno
    names: Tuple[str, ...]      # el nombre estándar va primero
    symbols: Tuple[str, ...]    # el símbolo estándar va primero
    is_si_unit: bool = False
