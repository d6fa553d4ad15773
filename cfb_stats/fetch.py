"""Page acquisition: plain HTTP fetches and headless browser renders.

Most targets are a single `requests` GET. Rivals only builds its rankings
table in the browser and lazily appends rows while the page is scrolled, so
those targets are loaded in headless Chromium (Playwright) and scrolled until
enough rows exist or the page stops growing.

Transport errors are never retried; they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, Protocol, Union

import requests
from playwright.sync_api import Page, sync_playwright

from . import config
from .request import RenderMode, TargetDescriptor

logger = logging.getLogger(__name__)

RIVALS_ROW_SELECTOR = "table tbody tr"


class ScrollSurface(Protocol):
    """The only page operations the scroll loop is allowed to perform."""

    def scroll_by(self, px: int) -> None: ...

    def scroll_height(self) -> int: ...

    def count_rows(self, selector: str) -> int: ...


class PlaywrightScrollSurface:
    """`ScrollSurface` backed by a live Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    def scroll_by(self, px: int) -> None:
        self.page.evaluate("(px) => window.scrollBy(0, px)", px)

    def scroll_height(self) -> int:
        return int(self.page.evaluate("() => document.body.scrollHeight"))

    def count_rows(self, selector: str) -> int:
        return self.page.locator(selector).count()


def auto_scroll(
    surface: ScrollSurface,
    *,
    row_selector: str = RIVALS_ROW_SELECTOR,
    target_rows: int = config.SCROLL_TARGET_ROWS,
    max_attempts: int = config.SCROLL_MAX_ATTEMPTS,
    distance: int = config.SCROLL_DISTANCE_PX,
    interval: float = config.SCROLL_INTERVAL_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Scroll down in fixed steps until `target_rows` rows are present.

    Every `interval` seconds the page is scrolled by `distance` pixels and the
    rows matching `row_selector` are re-counted. Once the scrolled distance
    has reached the bottom of the document, a tick that does not beat the
    highest row count seen so far counts as one attempt; a new high resets
    the count. The loop stops when the target is reached or after
    `max_attempts` consecutive attempts, so a page that never grows is
    released after the ticks needed to reach the bottom plus `max_attempts`.

    Returns:
        The number of matching rows when the loop stopped.
    """
    best = surface.count_rows(row_selector)
    if best >= target_rows:
        return best

    scrolled = 0
    attempts = 0
    ticks = 0
    while True:
        sleep(interval)
        surface.scroll_by(distance)
        scrolled += distance
        ticks += 1

        current = surface.count_rows(row_selector)
        if current >= target_rows:
            logger.debug(f"Reached {current} rows after {ticks} scroll ticks")
            return current

        # only a new high resets; recycled tables can bounce around
        if current > best:
            best = current
            attempts = 0
        elif scrolled >= surface.scroll_height():
            attempts += 1

        if attempts >= max_attempts:
            logger.warning(
                f"Stopped scrolling after {ticks} ticks with {current}/{target_rows} rows loaded"
            )
            return current


def fetch_plain(
    target: TargetDescriptor, session: Optional[requests.Session] = None
) -> Union[dict[str, Any], str]:
    """Single GET for `target`.

    Raises requests.HTTPError on non-success responses.
    """
    http = session or requests
    resp = http.get(
        target.url,
        params=dict(target.params),
        headers=dict(target.headers),
        timeout=config.REQUEST_TIMEOUT,
    )
    resp.raise_for_status()
    if target.as_json:
        return resp.json()
    return resp.text


def render_page(
    target: TargetDescriptor,
    *,
    row_selector: str = RIVALS_ROW_SELECTOR,
    target_rows: int = config.SCROLL_TARGET_ROWS,
    max_attempts: int = config.SCROLL_MAX_ATTEMPTS,
    distance: int = config.SCROLL_DISTANCE_PX,
    interval: float = config.SCROLL_INTERVAL_SECONDS,
) -> str:
    """Load `target` in a fresh headless browser and return the rendered HTML.

    The browser is closed whether or not the target row count was reached,
    and also when navigation or scrolling raises.
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=config.BROWSER_HEADLESS)
        try:
            page = browser.new_page(user_agent=target.headers.get("User-Agent"))
            page.goto(target.url, wait_until="networkidle")
            rows = auto_scroll(
                PlaywrightScrollSurface(page),
                row_selector=row_selector,
                target_rows=target_rows,
                max_attempts=max_attempts,
                distance=distance,
                interval=interval,
            )
            logger.info(f"Rendered {target.url} with {rows} rows")
            return page.content()
        finally:
            browser.close()


def fetch_content(
    target: TargetDescriptor,
    session: Optional[requests.Session] = None,
    **render_options: Any,
) -> Union[dict[str, Any], str]:
    """Acquire the raw JSON document or HTML string for `target`.

    `render_options` are passed to `render_page` for browser targets and
    ignored otherwise.
    """
    logger.info(f"Fetching {target.url} ({target.render_mode.value})")
    if target.render_mode is RenderMode.BROWSER_RENDERED:
        return render_page(target, **render_options)
    return fetch_plain(target, session=session)


__all__ = [
    "ScrollSurface",
    "PlaywrightScrollSurface",
    "auto_scroll",
    "fetch_plain",
    "render_page",
    "fetch_content",
]
