import pytest

from product_scraper.utils.html_nodes import parse_html


def _card(title=None, rating=None, image=None, price=None):
    parts = []
    if title is not None:
        parts.append(f"<h2><a href='#'><span>{title}</span></a></h2>")
    if rating is not None:
        parts.append(f"<i class='a-icon a-icon-star-small'><span class='a-icon-alt'>{rating}</span></i>")
    if image is not None:
        parts.append(f"<img class='s-image' src='{image}' alt=''>")
    if price is not None:
        parts.append(
            "<span class='a-price'>"
            f"<span class='a-offscreen'>{price}</span>"
            "<span aria-hidden='true'>ignored</span>"
            "</span>"
        )
    return (
        "<div class='s-result-item' data-component-type='s-search-result'>"
        + "".join(parts)
        + "</div>"
    )


def make_results_page(cards):
    return (
        "<html><body><div class='s-main-slot'>"
        + "".join(_card(**c) for c in cards)
        + "<div class='s-result-item'>sponsored banner</div>"
        + "</div></body></html>"
    )


THREE_CARDS = [
    {
        "title": "Wireless Mouse",
        "rating": "4.5 out of 5 stars",
        "image": "https://m.media-amazon.com/images/I/mouse.jpg",
        "price": "$19.99",
    },
    {
        "title": "Ergonomic Mouse",
        "rating": "4.2 out of 5 stars",
        "image": "https://m.media-amazon.com/images/I/ergo.jpg",
    },
    {
        "title": "Gaming Mouse",
        "rating": "4.8 out of 5 stars",
        "image": "https://m.media-amazon.com/images/I/gaming.jpg",
        "price": "$49.00",
    },
]


@pytest.fixture
def three_cards_html():
    return make_results_page(THREE_CARDS)


@pytest.fixture
def empty_results_html():
    return make_results_page([])


class FakePage:
    """Stands in for a Playwright page, backed by static HTML."""

    def __init__(self, html_by_url=None, default_html=""):
        self.html_by_url = html_by_url or {}
        self.default_html = default_html
        self.visited = []
        self.screenshots = []
        self._root = parse_html(default_html)

    async def goto(self, url, timeout=None, wait_until=None):
        self.visited.append(url)
        self._root = parse_html(self.html_by_url.get(url, self.default_html))

    async def wait_for_selector(self, selector, timeout=None):
        return await self._root.query_selector(selector)

    async def query_selector_all(self, selector):
        return await self._root.query_selector_all(selector)

    async def screenshot(self, path, full_page=False):
        self.screenshots.append((path, full_page))
        with open(path, "wb") as fh:
            fh.write(b"\x89PNG")


class FakeBrowserFactory:
    def __init__(self, page):
        self.page = page

    def __call__(self, headless=True, logger=None):
        return self

    async def __aenter__(self):
        return self.page

    async def __aexit__(self, exc_type, exc, tb):
        return False
