# cli/main.py
from __future__ import annotations

from settings.arguments import parse_args
from settings.config import AppConfig
from core.registry import build_registry, supported_models
from cli.ui import print_config, print_models
from cli.command import run_counters


def main(argv=None) -> None:
    args = parse_args(argv)
    cfg = AppConfig.from_args(args)

    if getattr(args, "show_config", False):
        print_config(cfg)
        return

    if getattr(args, "list_models", False):
        print_models(supported_models(build_registry()))
        return

    exit_code = run_counters(args, cfg)
    if exit_code != 0:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
