"""Configuración por defecto del CLI / app (archivo JSON opcional)."""
import json
from typing import Optional

from pydantic import BaseModel, field_validator

from .units import SI_UNIT, resolve_unit


class PressureConfig(BaseModel):
    default_from_unit: str = SI_UNIT
    default_to_unit: str = SI_UNIT
    output_dir: str = "output"
    excel: bool = False

    @field_validator("default_from_unit", "default_to_unit")
    @classmethod
    def check_unit(cls, v, info):
        resolve_unit(info.field_name, v)
        return v


def load_config(path: Optional[str] = None) -> PressureConfig:
    if path is None:
        return PressureConfig()
    with open(path, "r", encoding="utf-8") as f:
        cfg = json.load(f)
    return PressureConfig(**cfg)
