# core/report.py
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

DEFAULT_COLUMN_WIDTH = 20


class Worksheet:
    """
    In-memory sheet: ordered rows of cell values plus one column width
    applied to every used column. Rows may be ragged.
    """

    def __init__(self, title: str = "Data"):
        self.title = title
        self.rows: List[List[str]] = []
        self.column_width: Optional[float] = None

    def add_row(self, row: Iterable) -> None:
        self.rows.append(list(row))

    def add_blank_row(self) -> None:
        self.rows.append([])

    def build_section(
        self,
        rows: Sequence[Sequence[str]],
        header: str,
        labels: Optional[Sequence[str]] = None,
    ) -> None:
        self.add_row([header])
        if labels:
            self.add_row(labels)
        for row in rows:
            self.add_row(row)
        self.add_blank_row()

    @property
    def column_count(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def set_column_width(self, width: float = DEFAULT_COLUMN_WIDTH) -> None:
        self.column_width = width
