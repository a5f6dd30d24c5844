# src/pressure_units/tables.py
import logging
import os
from typing import Iterable, List

import pandas as pd

from .pressure import Pressure
from .units import SI_UNIT, list_units, resolve_unit

logger = logging.getLogger(__name__)


def units_frame() -> pd.DataFrame:
    rows = [
        {
            "symbol_ascii": meta.symbol_ascii,
            "name": meta.names[0],
            "symbol": meta.symbols[0],
            "is_si_unit": meta.is_si_unit,
        }
        for meta in list_units()
    ]
    return pd.DataFrame(rows)


def pressure_range(pmin: float, pmax: float, step: float) -> List[float]:
    """Grilla pmin..pmax (inclusive) con paso step."""
    if step <= 0:
        raise ValueError("step debe ser positivo.")
    if pmax < pmin:
        raise ValueError("pmax debe ser mayor o igual que pmin.")
    n = int((pmax - pmin) / step + 1e-9)
    # el acumulado en float puede pasarse de pmax (0.7/0.1 -> 0.7000000000000001)
    values = [min(pmin + i * step, pmax) for i in range(n + 1)]
    if values[-1] < pmax:
        values.append(pmax)
    return values


def conversion_rows(values: Iterable[float], from_unit: str = SI_UNIT) -> List[dict]:
    source = resolve_unit("fromUnit", from_unit).identifier
    rows = []
    for value in values:
        row = {"from_value": value, "from_unit": source}
        row.update(Pressure(value, source).to_object())
        rows.append(row)
    return rows


def conversion_frame(values: Iterable[float], from_unit: str = SI_UNIT) -> pd.DataFrame:
    return pd.DataFrame(conversion_rows(values, from_unit))


def write_outputs(df: pd.DataFrame, outdir: str, stem: str, excel: bool = False) -> List[str]:
    """Guarda CSV (y XLSX si se pide y hay xlsxwriter). Devuelve las rutas escritas."""
    os.makedirs(outdir, exist_ok=True)
    written = []

    csv_path = os.path.join(outdir, f"{stem}.csv")
    df.to_csv(csv_path, index=False)
    written.append(csv_path)

    if excel:
        try:
            import xlsxwriter  # noqa: F401
        except ImportError:
            logger.warning("xlsxwriter no instalado; se generó solo CSV.")
            return written
        xlsx_path = os.path.join(outdir, f"{stem}.xlsx")
        with pd.ExcelWriter(xlsx_path, engine="xlsxwriter") as writer:
            df.to_excel(writer, sheet_name="Pressure", index=False)
        written.append(xlsx_path)
    return written
