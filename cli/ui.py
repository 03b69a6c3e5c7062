# cli/ui.py
from __future__ import annotations
from typing import Dict, List

from settings.config import AppConfig


def cprint(msg: str) -> None:
    # single place to control console output
    print(msg, flush=True)


def print_config(cfg: AppConfig) -> None:
    for line in cfg.pretty_lines():
        cprint(line)


def print_models(names: List[str]) -> None:
    cprint("Supported printer models:")
    for name in names:
        cprint(f"  - {name}")


def print_summary(counts: Dict[str, int], total: int) -> None:
    cprint(
        f"\n{total} printer(s): saved={counts.get('saved', 0)} "
        f"mismatch={counts.get('mismatch', 0)} unsupported={counts.get('unsupported', 0)} "
        f"failed={counts.get('failed', 0)}"
    )
