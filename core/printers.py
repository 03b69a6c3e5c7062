from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, List

PRINTERS_KEY = "printers"


@dataclass(frozen=True)
class PrinterDescriptor:
    ip_address: str
    serial_number: str
    model: str


def _text(v: Any) -> str:
    return "" if v is None else str(v)


def iter_detail_records(groups: Iterable[Any]) -> Iterable[dict]:
    """
    Walk the `printers` list. Each element is a single-key mapping
    {model name: [detail, ...]}; anything else contributes nothing.
    """
    for group in groups:
        if not isinstance(group, dict) or not group:
            continue
        name = next(iter(group))
        details = group[name]
        if not isinstance(details, list):
            continue
        for item in details:
            if isinstance(item, dict):
                yield item


def to_descriptor(details: dict) -> PrinterDescriptor:
    return PrinterDescriptor(
        ip_address=_text(details.get("ipAddress")),
        serial_number=_text(details.get("serialNumber")),
        model=_text(details.get("model")),
    )


def flatten_printers(groups: Iterable[Any]) -> List[PrinterDescriptor]:
    return [to_descriptor(d) for d in iter_detail_records(groups)]


def filter_by_ip(printers: List[PrinterDescriptor], only_ip: str | None) -> List[PrinterDescriptor]:
    if not only_ip:
        return printers
    return [p for p in printers if p.ip_address == only_ip.strip()]
