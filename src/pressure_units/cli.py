# src/pressure_units/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .errors import PressureUnitsError
from .pressure import Pressure, format_number
from .tables import conversion_frame, pressure_range, units_frame, write_outputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pressure-units",
        description="Convierte presiones entre Pa, bar, psi, atm, at y Torr.",
    )
    parser.add_argument("value", nargs="?", type=float, help="Valor de presión a convertir")
    parser.add_argument("--from", dest="from_unit", help="Unidad de origen (símbolo, nombre o símbolo ASCII)")
    parser.add_argument("--to", dest="to_unit", help="Unidad de destino")
    parser.add_argument("--all", action="store_true", help="Muestra el valor en todas las unidades")
    parser.add_argument("--list", action="store_true", help="Lista las unidades soportadas")
    parser.add_argument("--pmin", type=float, help="Presión mínima de la tabla")
    parser.add_argument("--pmax", type=float, help="Presión máxima de la tabla")
    parser.add_argument("--step", type=float, help="Paso de presión de la tabla")
    parser.add_argument("--config", help="Archivo JSON de configuración")
    parser.add_argument("--verbose", action="store_true", help="Log en nivel DEBUG")
    return parser


def _print_units():
    df = units_frame()
    print(df.to_string(index=False))


def _print_all(pressure: Pressure):
    print("\n=== Equivalencias ===")
    for meta in Pressure.units():
        print(f"{meta.names[0]:<22}: {pressure.to_string(meta.symbol_ascii)}")
    print("=====================\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(args.config)
        from_unit = args.from_unit or cfg.default_from_unit
        to_unit = args.to_unit or cfg.default_to_unit

        if args.list:
            _print_units()
            return 0

        table_args = (args.pmin, args.pmax, args.step)
        if any(a is not None for a in table_args):
            if any(a is None for a in table_args):
                parser.error("--pmin, --pmax y --step van juntos.")
            values = pressure_range(args.pmin, args.pmax, args.step)
            df = conversion_frame(values, from_unit)
            print(f"Presiones     : {format_number(values[0])} .. {format_number(values[-1])} "
                  f"(step={format_number(args.step)}) -> {len(values)} pts")
            for path in write_outputs(df, cfg.output_dir, "pressure_table", excel=cfg.excel):
                print(f"Escrito: {path}")
            return 0

        if args.value is None:
            parser.error("falta el valor a convertir (o usa --list).")

        pressure = Pressure(args.value, from_unit)
        if args.all:
            _print_all(pressure)
        else:
            print(pressure.to_string(to_unit))
        return 0
    except PressureUnitsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
