# core/pipeline.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Tuple

from core.errors import ExtractionError, PipelineAborted
from core.printers import PrinterDescriptor
from core.registry import ModelDefinition
from core.report import DEFAULT_COLUMN_WIDTH
from core.scrape import (
    FAILED,
    MISMATCH,
    SAVED,
    UNSUPPORTED,
    ScrapeResult,
    SessionOpener,
    scrape,
)
from settings.logging_setup import flog
from cli.ui import cprint

ON_ERROR_CONTINUE = "continue"
ON_ERROR_ABORT = "abort"
ON_ERROR_CHOICES = (ON_ERROR_CONTINUE, ON_ERROR_ABORT)


def run_printers(
    printers: Iterable[PrinterDescriptor],
    registry: Dict[str, ModelDefinition],
    *,
    open_session: SessionOpener,
    output_dir: Path,
    on_error: str = ON_ERROR_CONTINUE,
    column_width: float = DEFAULT_COLUMN_WIDTH,
    echo: Callable[[str], None] = cprint,
) -> List[ScrapeResult]:
    """
    Scrape printers one at a time, in the order given.

    Unknown models and serial mismatches are reported and skipped. A failed
    printer is reported too; with on_error="abort" it then stops the run by
    raising PipelineAborted, otherwise the next printer is processed.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}")

    results: List[ScrapeResult] = []
    for prn in printers:
        ip = prn.ip_address
        model = registry.get(prn.model)
        if model is None:
            echo(f"Printer model not supported for IP: {ip}")
            flog(f"[{ip}] unsupported model {prn.model!r}", level=logging.WARNING)
            results.append(ScrapeResult(prn, UNSUPPORTED))
            continue

        flog(f"[{ip}] {model.name} -> {model.url_for(ip)}")
        try:
            res = scrape(
                prn,
                model,
                open_session=open_session,
                output_dir=output_dir,
                column_width=column_width,
            )
        except ExtractionError as e:
            echo(f"Error while processing IP {ip}: {e}")
            flog(f"[{ip}] {type(e).__name__}: {e}", level=logging.ERROR)
            results.append(ScrapeResult(prn, FAILED, error=e))
            if on_error == ON_ERROR_ABORT:
                raise PipelineAborted(ip, e) from e
            continue

        if res.outcome == MISMATCH:
            echo(f"Serial number does not match for IP {ip}")
            flog(
                f"[{ip}] serial mismatch: expected={prn.serial_number!r} found={res.found_serial!r}",
                level=logging.WARNING,
            )
        elif res.outcome == SAVED:
            echo(f"File saved: {res.path}")
            flog(f"[{ip}] saved {res.path}")
        results.append(res)
    return results


def summarize_results(results: List[ScrapeResult]) -> Tuple[Dict[str, int], List[ScrapeResult]]:
    counts = {SAVED: 0, MISMATCH: 0, UNSUPPORTED: 0, FAILED: 0}
    for r in results:
        counts[r.outcome] = counts.get(r.outcome, 0) + 1
    not_saved = [r for r in results if not r.ok]
    return counts, not_saved
