# product_scraper/utils/html_nodes.py

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class HtmlNode:
    """
    Wraps a BeautifulSoup tag behind the same async calls a Playwright
    ElementHandle offers, so saved pages go through the normal extractor.
    """

    def __init__(self, tag: Tag):
        self.tag = tag

    async def query_selector(self, selector: str) -> Optional["HtmlNode"]:
        found = self.tag.select_one(selector)
        return HtmlNode(found) if found is not None else None

    async def query_selector_all(self, selector: str) -> List["HtmlNode"]:
        return [HtmlNode(t) for t in self.tag.select(selector)]

    async def inner_text(self) -> str:
        return self.tag.get_text(" ", strip=True)

    async def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if isinstance(value, list):
            # multi-valued attributes like class
            return " ".join(value)
        return value


def parse_html(html: str) -> HtmlNode:
    return HtmlNode(BeautifulSoup(html, "html.parser"))
