# plugins/counters/hp_laser_408.py
from __future__ import annotations
from core.extract import PathGrid, QuotedValueIdentity
from core.registry import ModelDefinition

# counters.json, one source line per table row
SERIAL_LINE = "/html/body/table/tbody/tr[2]/td[2]"


def _line(n: int) -> str:
    return f"/html/body/table/tbody/tr[{n}]/td[2]"


METRICS = ("Print", "Report", "Total")

CATEGORIES = (
    ("Simplex Mono", (_line(13), _line(16), _line(17))),
    ("Duplex", (_line(23), _line(26), _line(27))),
    ("Total Prints", (_line(33), _line(36), _line(37))),
)

MODEL = ModelDefinition(
    name="HP Laser 408",
    url="https://{ip}/sws/app/information/counters/counters.json",
    fetch="source",
    ignore_https_errors=True,
    identity=QuotedValueIdentity(SERIAL_LINE),
    counters=PathGrid(METRICS, CATEGORIES),
    sheet_title="Sheet 1",
    write_via_buffer=True,
)
