# adapters/browser.py
from __future__ import annotations
import html
import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright

from core.errors import ExtractionError

LOG = logging.getLogger(__name__)

FETCH_PAGE = "page"
FETCH_SOURCE = "source"


def render_source(text: str) -> str:
    """
    Lay out a raw response body the way a browser's view-source does:
    one table row per line, the line text in the second cell.
    """
    rows = "".join(
        f'<tr><td class="line-number" value="{i}"></td>'
        f'<td class="line-content">{html.escape(line)}</td></tr>'
        for i, line in enumerate(text.splitlines(), start=1)
    )
    return f"<html><head></head><body><table><tbody>{rows}</tbody></table></body></html>"


class BrowserSession:
    def __init__(self, page: Page):
        self.page = page

    def fetch(self, url: str, *, mode: str = FETCH_PAGE, wait_until: str = "load") -> str:
        LOG.debug("GET %s (%s, wait_until=%s)", url, mode, wait_until)
        response = self.page.goto(url, wait_until=wait_until)
        if mode == FETCH_SOURCE:
            if response is None:
                raise ExtractionError(f"no response body for {url}")
            return render_source(response.text())
        return self.page.content()


@contextmanager
def open_browser_session(
    *,
    ignore_https_errors: bool = False,
    headless: bool = True,
    browser_type: str = "chromium",
    timeout_ms: float = 30000,
) -> Iterator[BrowserSession]:
    """
    One isolated browser per printer. The browser is closed on every
    path out of the `with` block.
    """
    with sync_playwright() as p:
        launcher = getattr(p, browser_type)
        browser = launcher.launch(headless=headless)
        try:
            context = browser.new_context(ignore_https_errors=ignore_https_errors)
            page = context.new_page()
            page.set_default_timeout(timeout_ms)
            yield BrowserSession(page)
        finally:
            browser.close()


def session_opener(*, headless: bool = True, browser_type: str = "chromium", timeout_ms: float = 30000):
    """Bind run-wide browser options; TLS tolerance comes from each model."""

    def _open(model):
        return open_browser_session(
            ignore_https_errors=model.ignore_https_errors,
            headless=headless,
            browser_type=browser_type,
            timeout_ms=timeout_ms,
        )

    return _open
