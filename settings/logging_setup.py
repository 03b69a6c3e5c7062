# settings/logging_setup.py
from __future__ import annotations
import logging
import sys
from datetime import datetime
from pathlib import Path
from contextlib import contextmanager
from typing import List, Optional, Tuple

FMT = "%(asctime)s [%(levelname)s] %(message)s"
DEBUG_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: Path, enable_logs: bool, debug: bool = False) -> Tuple[Optional[Path], List[logging.Handler]]:
    """
    Attach run handlers to the root logger: a timestamped file under
    `log_dir` when logs are enabled, and with `debug` a stderr handler that
    also shows module loggers (browser navigation, per-printer detail).
    """
    handlers: List[logging.Handler] = []
    logfile: Optional[Path] = None
    if enable_logs:
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = log_dir / f"{ts}.log"
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setFormatter(logging.Formatter(DEBUG_FMT if debug else FMT, datefmt=DATEFMT))
        handlers.append(fh)
    if debug:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(logging.DEBUG)
        sh.setFormatter(logging.Formatter(DEBUG_FMT, datefmt=DATEFMT))
        handlers.append(sh)

    root = logging.getLogger()
    for h in handlers:
        root.addHandler(h)
    if handlers:
        root.setLevel(logging.DEBUG if debug else logging.INFO)
        flog(f"=== Printer counters start (python {sys.version.split()[0]}, debug={debug}) ===")
    return logfile, handlers


def flog(msg: str, level: int = logging.INFO) -> None:
    if logging.getLogger().handlers:
        logging.log(level, msg)


@contextmanager
def cli_logging(log_dir: Path, enable_logs: bool, debug: bool = False):
    root = logging.getLogger()
    previous_level = root.level
    logfile, handlers = setup_logging(log_dir, enable_logs=enable_logs, debug=debug)
    try:
        yield logfile
    finally:
        if logfile is not None:
            flog(f"Log saved to: {logfile}")
        for h in handlers:
            root.removeHandler(h)
            h.close()
        root.setLevel(previous_level)
