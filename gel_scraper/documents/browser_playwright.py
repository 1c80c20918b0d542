from __future__ import annotations

import logging
from typing import Any

from ..config import ExtractorConfig
from .base import SnapshotDocument, SwatchElement

try:
    from playwright.async_api import TimeoutError as PlaywrightTimeoutError
    from playwright.async_api import async_playwright
except Exception:  # pragma: no cover - optional dependency safety
    PlaywrightTimeoutError = Exception
    async_playwright = None

logger = logging.getLogger(__name__)

# The browser serializes inline hex and named colors as rgb(...).
SNAPSHOT_JS = """
elements => elements.map(el => ({
    text: el.innerText,
    backgroundColor: el.style.backgroundColor,
}))
"""


async def snapshot_page(page: Any, selector: str) -> list[SwatchElement]:
    rows = await page.eval_on_selector_all(selector, SNAPSHOT_JS)
    return [
        SwatchElement(
            text=(row.get("text") or "").strip(),
            background_color=(row.get("backgroundColor") or "").strip(),
        )
        for row in rows
    ]


async def render_browser_document(
    html: str,
    selector: str,
    config: ExtractorConfig | None = None,
) -> SnapshotDocument:
    """Render ``html`` in headless Chromium and snapshot the matching elements.

    The markup is loaded with ``set_content``, so no URL is navigated to.
    """
    config = config or ExtractorConfig()
    if async_playwright is None:
        raise RuntimeError(
            "Playwright is not installed in this environment. "
            "Install it and run `playwright install chromium`."
        )

    timeout_ms = int(config.browser_timeout_s * 1000)
    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until="load", timeout=timeout_ms)
                elements = await snapshot_page(page, selector)
            finally:
                await browser.close()
    except PlaywrightTimeoutError as exc:
        raise TimeoutError("Playwright timed out while rendering page.") from exc
    except Exception as exc:
        raise RuntimeError(f"Playwright browser render failed: {exc}") from exc

    logger.debug("Browser snapshot matched %d element(s) for %r", len(elements), selector)
    return SnapshotDocument({selector: elements})
