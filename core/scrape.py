# core/scrape.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ContextManager, Optional

from core.errors import ExtractionError, PrinterCountersError
from core.extract import Document
from core.printers import PrinterDescriptor
from core.registry import ModelDefinition
from core.report import DEFAULT_COLUMN_WIDTH, Worksheet
from adapters.excel_io import report_path, write_report

LOG = logging.getLogger(__name__)

SAVED = "saved"
MISMATCH = "mismatch"
UNSUPPORTED = "unsupported"
FAILED = "failed"

SessionOpener = Callable[[ModelDefinition], ContextManager]


@dataclass
class ScrapeResult:
    printer: PrinterDescriptor
    outcome: str
    path: Optional[Path] = None
    found_serial: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.outcome == SAVED


def build_sheet(model: ModelDefinition, doc: Document, column_width: float) -> Worksheet:
    labels = model.counters.label_row()
    rows = model.counters.extract(doc)
    sheet = Worksheet(title=model.sheet_title)
    sheet.build_section(rows, model.section_header, labels=labels)
    sheet.set_column_width(column_width)
    return sheet


def scrape(
    printer: PrinterDescriptor,
    model: ModelDefinition,
    *,
    open_session: SessionOpener,
    output_dir: Path,
    column_width: float = DEFAULT_COLUMN_WIDTH,
) -> ScrapeResult:
    """
    Fetch the model's counters page for one printer, check the serial number
    and write <serial>.xlsx into `output_dir`.

    Returns SAVED or MISMATCH. Anything that goes wrong on the way is raised
    as ExtractionError (SerializationError for the write) carrying the IP.
    """
    ip = printer.ip_address
    url = model.url_for(ip)
    try:
        with open_session(model) as session:
            html = session.fetch(url, mode=model.fetch, wait_until=model.wait_until)
            doc = Document(html)
            found = model.identity.extract(doc)
            if found != printer.serial_number:
                LOG.info("[%s] serial mismatch: expected=%r found=%r", ip, printer.serial_number, found)
                return ScrapeResult(printer, MISMATCH, found_serial=found)
            sheet = build_sheet(model, doc, column_width)
    except ExtractionError as e:
        if e.ip is None:
            e.ip = ip
        raise
    except PrinterCountersError:
        raise
    except Exception as e:
        raise ExtractionError(f"{type(e).__name__}: {e}", ip=ip) from e

    target = report_path(output_dir, printer.serial_number)
    try:
        write_report(sheet, target, via_buffer=model.write_via_buffer)
    except ExtractionError as e:
        e.ip = ip
        raise
    LOG.info("[%s] %s rows -> %s", ip, len(sheet.rows), target)
    return ScrapeResult(printer, SAVED, path=target, found_serial=found)
