from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os

from adapters.printers_store import find_printers_json


def _env_bool(var: str, default: bool) -> bool:
    v = os.getenv(var)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in ("1", "true", "t", "yes", "y", "on")


@dataclass
class AppConfig:
    root: Path
    logs_dir: Path
    printers_json: Path
    output_dir: Path
    headless: bool
    browser_type: str
    nav_timeout_ms: float
    on_error: str
    column_width: float

    @classmethod
    def load(cls) -> "AppConfig":
        root = Path(__file__).resolve().parents[1]

        def env_path(var: str, default: Path) -> Path:
            v = os.getenv(var)
            if not v:
                return default
            p = Path(v).expanduser()
            return p if p.is_absolute() else (root / p)

        return cls(
            root=root,
            logs_dir=root / "logs" / "main",
            printers_json=find_printers_json(None, project_root=root),
            output_dir=env_path("PRINTER_REPORTS_DIR", Path.cwd()),
            headless=_env_bool("PRINTER_HEADLESS", True),
            browser_type=os.getenv("PRINTER_BROWSER", "chromium"),
            nav_timeout_ms=float(os.getenv("PRINTER_NAV_TIMEOUT_MS", "30000")),
            on_error=os.getenv("PRINTER_ON_ERROR", "continue").strip().lower(),
            column_width=float(os.getenv("PRINTER_COLUMN_WIDTH", "20")),
        )

    @classmethod
    def from_args(cls, args) -> "AppConfig":
        cfg = cls.load()
        if getattr(args, "json", None):
            cfg.printers_json = find_printers_json(args.json, project_root=cfg.root)
        if getattr(args, "output_dir", None):
            cfg.output_dir = Path(args.output_dir).expanduser().resolve()
        if getattr(args, "on_error", None):
            cfg.on_error = args.on_error
        if getattr(args, "headless", None) is not None:
            cfg.headless = args.headless
        return cfg

    def pretty_lines(self) -> list[str]:
        return [
            "Resolved configuration:",
            f"root           : {self.root}",
            f"logs_dir       : {self.logs_dir}",
            f"printers_json  : {self.printers_json}",
            f"output_dir     : {self.output_dir}",
            f"browser        : {self.browser_type} (headless={self.headless})",
            f"nav timeout    : {self.nav_timeout_ms:g} ms",
            f"on error       : {self.on_error}",
            f"column width   : {self.column_width:g}",
        ]
