# product_scraper/sources/amazon_search.py

import asyncio
from typing import List, Optional
from urllib.parse import quote_plus

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from config import ACTIVE_CONFIG
from product_scraper.interfaces.models import ExtractedRecord, FieldSpec, ScrapeRun
from product_scraper.sources.scraper_config import SELECTORS
from product_scraper.utils.browser import BrowserFactory, capture_screenshot
from product_scraper.utils.extract import attribute, extract_all, text
from product_scraper.utils.html_nodes import parse_html
from product_scraper.utils.logging_config import Logger, _log

SCRAPER = ACTIVE_CONFIG.SCRAPER
BASE = SCRAPER["BASE_URL"]

PRODUCT_FIELDS = [
    FieldSpec("title", SELECTORS["TITLE"], text()),
    FieldSpec("rating", SELECTORS["RATING"], text()),
    FieldSpec("image", SELECTORS["IMAGE"], attribute("src")),
    FieldSpec("price", SELECTORS["PRICE"], text()),
]


def build_search_url(keyword: str, page: int = 1) -> str:
    url = f"{BASE}/s?k={quote_plus(keyword)}"
    if page > 1:
        url += f"&page={page}"
    return url


# ----------------------------------------------------------
# Saved pages
# ----------------------------------------------------------
async def extract_from_html(html: str) -> List[ExtractedRecord]:
    """Run the product field set over a saved search results page."""
    return await extract_all(parse_html(html), SELECTORS["ITEM"], PRODUCT_FIELDS)


# ----------------------------------------------------------
# SCRAPE SEARCH RESULTS
# ----------------------------------------------------------
async def scrape_page(page, url: str, logger: Optional[Logger] = None) -> Optional[List[ExtractedRecord]]:
    """
    Load one results page and extract every card on it.
    Returns None if the page could not be loaded in time.
    """
    _log(logger, f"📄 Loading results page: {url}")
    try:
        await page.goto(url, timeout=SCRAPER["TIMEOUT"], wait_until="domcontentloaded")
    except PlaywrightTimeoutError as e:
        _log(logger, f"❌ Timeout loading {url}: {e}")
        return None

    # No cards at all is a valid (empty) result
    try:
        await page.wait_for_selector(SELECTORS["ITEM"], timeout=SCRAPER["RESULTS_TIMEOUT"])
    except PlaywrightTimeoutError:
        _log(logger, f"⚠️ No result cards showed up on {url}")

    return await extract_all(page, SELECTORS["ITEM"], PRODUCT_FIELDS)


async def scrape_search(
    keyword: str,
    pages: int = 1,
    screenshot_path: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> ScrapeRun:
    run = ScrapeRun(keyword=keyword)

    _log(logger, f"➡️ Searching products for: {keyword}")

    async with BrowserFactory(headless=SCRAPER["HEADLESS"], logger=logger) as page:
        for p in range(1, pages + 1):
            url = build_search_url(keyword, p)
            records = await scrape_page(page, url, logger=logger)
            if records is None:
                continue

            run.urls.append(url)
            run.records.extend(records)
            _log(logger, f"📦 {len(records)} products on page {p}")

            if screenshot_path and p == 1:
                run.screenshot = await capture_screenshot(page, screenshot_path, logger=logger)

    return run


# ----------------------------------------------------------
# Sync wrapper
# ----------------------------------------------------------
def scrape_search_sync(
    keyword: str,
    pages: int = 1,
    screenshot_path: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> ScrapeRun:
    return asyncio.run(scrape_search(keyword, pages, screenshot_path, logger=logger))
