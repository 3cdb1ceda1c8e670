# product_scraper/sources/scraper_config.py

SCRAPER_SETTINGS = {
    "VIEWPORT": {"width": 1600, "height": 1000},
    "LOCALE": "en-US",
    "TIMEZONE": "America/New_York",
    "USER_AGENT": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/123.0.0.0 Safari/537.36"
    ),
    "BROWSER_ARGS": [
        "--disable-blink-features=AutomationControlled",
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ],
}

# Search result cards and the fields read from each card.
SELECTORS = {
    "ITEM": "div.s-result-item[data-component-type='s-search-result']",
    "TITLE": "h2 span",
    "RATING": "span.a-icon-alt",
    "IMAGE": "img.s-image",
    "PRICE": ".a-price .a-offscreen",
}
