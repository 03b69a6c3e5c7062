# adapters/printers_store.py
from __future__ import annotations
from pathlib import Path
import json
import os
from typing import List

from core.errors import ConfigurationError
from core.printers import PRINTERS_KEY, PrinterDescriptor, flatten_printers


def find_printers_json(explicit: str | None, *, project_root: Path) -> Path:
    if explicit:
        return Path(explicit).expanduser().resolve()

    # 1) cwd
    cwd = Path.cwd() / "printers.json"
    if cwd.is_file():
        return cwd

    # 2) project root
    root_file = project_root / "printers.json"
    if root_file.is_file():
        return root_file

    # 3) env?
    env_p = os.getenv("PRINTERS_JSON")
    if env_p:
        p = Path(env_p).expanduser()
        return p if p.is_absolute() else (project_root / p)

    # fallback
    return root_file


def load_printers(path: Path) -> List[PrinterDescriptor]:
    """
    Read printers.json:

        {"printers": [{"<model>": [{"ipAddress": ..., "serialNumber": ..., "model": ...}]}]}

    and return the flat, ordered list of printers.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"printers file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get(PRINTERS_KEY), list):
        raise ConfigurationError(f"{path} has no '{PRINTERS_KEY}' list")
    return flatten_printers(data[PRINTERS_KEY])
