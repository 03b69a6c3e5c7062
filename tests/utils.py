"""Test helpers: a fake browser standing in for Playwright and an xlsx reader."""

from contextlib import contextmanager
from pathlib import Path

import openpyxl

from adapters.browser import FETCH_SOURCE, render_source

FIXTURES = Path(__file__).parent / "fixtures"

SAMSUNG_URL = "http://10.0.0.2/sws.application/information/countersView.sws"
LASER_408_URL = "https://10.0.0.3/sws/app/information/counters/counters.json"
E57540_URL = "http://10.0.0.4/hp/device/InternalPages/Index?id=UsagePage"
E52645_URL = "http://10.0.0.5/hp/device/InternalPages/Index?id=UsagePage"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeSession:
    def __init__(self, browser: "FakeBrowser"):
        self.browser = browser

    def fetch(self, url: str, *, mode: str = "page", wait_until: str = "load") -> str:
        self.browser.fetched.append((url, mode, wait_until))
        body = self.browser.pages.get(url)
        if body is None:
            raise RuntimeError(f"net::ERR_CONNECTION_REFUSED at {url}")
        if isinstance(body, BaseException):
            raise body
        return render_source(body) if mode == FETCH_SOURCE else body


class FakeBrowser:
    """Callable like the opener from adapters.browser.session_opener()."""

    def __init__(self) -> None:
        self.pages: dict = {}
        self.opened: list = []
        self.closed = 0
        self.fetched: list = []

    def __call__(self, model):
        return self._session(model)

    @contextmanager
    def _session(self, model):
        self.opened.append((model.name, model.ignore_https_errors))
        try:
            yield FakeSession(self)
        finally:
            self.closed += 1



def sheet_rows(path: Path) -> list:
    """Rows of the first sheet with None read back as "" and trailing blanks dropped."""
    wb = openpyxl.load_workbook(filename=str(path))
    ws = wb.worksheets[0]
    rows = []
    for row in ws.iter_rows(values_only=True):
        vals = ["" if v is None else v for v in row]
        while vals and vals[-1] == "":
            vals.pop()
        rows.append(vals)
    return rows
