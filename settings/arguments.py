# settings/arguments.py
from __future__ import annotations
import argparse

from core.pipeline import ON_ERROR_CHOICES


def _str2bool(v: str) -> bool:
    s = v.strip().lower()
    if s in ("1", "true", "t", "yes", "y", "on"):
        return True
    if s in ("0", "false", "f", "no", "n", "off"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected (true/false).")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="printer-counters",
        description="Read usage counters from printer web pages into <serial>.xlsx files.",
    )
    p.add_argument("-j", "--json", help="Path to printers.json (defaults to config / project root)")
    p.add_argument("-o", "--output-dir", dest="output_dir", help="Where to write the .xlsx reports (default: cwd)")
    p.add_argument(
        "--on-error",
        dest="on_error",
        choices=ON_ERROR_CHOICES,
        help="continue with the next printer or abort the run when a printer fails",
    )
    p.add_argument("--headless", type=_str2bool, default=None, help="Run the browser headless (true/false)")
    p.add_argument("-ip", "--only-ip", dest="only_ip", help="Process only this printer IP")
    p.add_argument("-d", "--debug", type=_str2bool, default=False)
    p.add_argument("-l", "--logs", type=_str2bool, default=True)
    p.add_argument(
        "--show-config",
        action="store_true",
        help="print resolved config paths and exit",
    )
    p.add_argument(
        "--list-models",
        action="store_true",
        help="print the supported printer models and exit",
    )
    return p


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
