# adapters/excel_io.py
from __future__ import annotations
from io import BytesIO
from pathlib import Path

import openpyxl
from openpyxl.utils import get_column_letter

from core.errors import SerializationError
from core.report import Worksheet


def report_path(output_dir: Path, serial_number: str) -> Path:
    return Path(output_dir) / f"{serial_number}.xlsx"


def build_workbook(sheet: Worksheet) -> openpyxl.Workbook:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet.title
    for row in sheet.rows:
        ws.append(row)
    if sheet.column_width is not None:
        for idx in range(1, sheet.column_count + 1):
            ws.column_dimensions[get_column_letter(idx)].width = sheet.column_width
    return wb


def save_workbook(wb: openpyxl.Workbook, path: Path) -> None:
    tmp = path.with_suffix(".tmp")
    try:
        wb.save(str(tmp))
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()


def workbook_bytes(wb: openpyxl.Workbook) -> bytes:
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def write_report(sheet: Worksheet, path: Path, *, via_buffer: bool = False) -> Path:
    """
    Serialize `sheet` to `path`. With `via_buffer` the workbook is rendered in
    memory first and written in one call, otherwise saved through a temp file.
    Either way a failed write leaves no file behind.
    """
    path = Path(path)
    try:
        wb = build_workbook(sheet)
        if via_buffer:
            data = workbook_bytes(wb)
            try:
                path.write_bytes(data)
            except OSError:
                if path.exists():
                    path.unlink()
                raise
        else:
            save_workbook(wb, path)
    except Exception as e:
        # openpyxl rejects some cell text (control characters) with ValueError
        raise SerializationError(f"could not write {path}: {e}") from e
    return path

