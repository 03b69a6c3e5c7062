# cli/command.py
from __future__ import annotations
import logging

from settings.config import AppConfig
from settings.logging_setup import cli_logging, flog
from adapters.browser import session_opener
from adapters.printers_store import load_printers
from core.errors import ConfigurationError, PipelineAborted
from core.pipeline import ON_ERROR_CHOICES, run_printers, summarize_results
from core.printers import filter_by_ip
from core.registry import build_registry
from cli.ui import cprint, print_summary


def run_counters(args, cfg: AppConfig) -> int:
    """
    Load printers.json, scrape every printer in order, print a summary.
    Returns process-like exit code: 0 = ran to the end, 1 = aborted,
    2 = configuration problem (nothing was scraped).
    """
    with cli_logging(cfg.logs_dir, enable_logs=args.logs, debug=args.debug) as logfile:
        try:
            if cfg.on_error not in ON_ERROR_CHOICES:
                raise ConfigurationError(f"PRINTER_ON_ERROR must be one of {ON_ERROR_CHOICES}, got {cfg.on_error!r}")
            registry = build_registry()
            json_path = cfg.printers_json
            printers = load_printers(json_path)
        except ConfigurationError as e:
            cprint(f"[ERROR] {e}")
            flog(f"[ERROR] {e}", level=logging.ERROR)
            return 2

        printers = filter_by_ip(printers, getattr(args, "only_ip", None))
        flog(f"{len(printers)} printer(s) from {json_path}; on_error={cfg.on_error}")

        opener = session_opener(
            headless=cfg.headless,
            browser_type=cfg.browser_type,
            timeout_ms=cfg.nav_timeout_ms,
        )
        try:
            results = run_printers(
                printers,
                registry,
                open_session=opener,
                output_dir=cfg.output_dir,
                on_error=cfg.on_error,
                column_width=cfg.column_width,
                echo=cprint,
            )
        except PipelineAborted as e:
            cprint(f"\nRun aborted at {e.ip}; remaining printers were skipped.")
            flog(f"=== Run aborted: {e} ===", level=logging.ERROR)
            return 1

        counts, not_saved = summarize_results(results)
        print_summary(counts, len(results))
        for r in not_saved:
            flog(f"[{r.outcome.upper()}] {r.printer.ip_address} | model={r.printer.model} | error={r.error}")
        flog("=== Printer counters end ===")

        if args.debug and logfile is not None:
            cprint(f"(log: {logfile})")
        return 0
