import pytest

from product_scraper.errors.exceptions import ExtractionError
from product_scraper.interfaces.models import FieldSpec
from product_scraper.utils.extract import (
    attribute,
    extract_all,
    extract_record,
    safe_extract,
    text,
)
from product_scraper.utils.html_nodes import parse_html


class BrokenNode:
    async def inner_text(self):
        raise RuntimeError("node detached")

    async def get_attribute(self, name):
        raise RuntimeError("node detached")


class Container:
    def __init__(self, node=None, lookup_error=None):
        self.node = node
        self.lookup_error = lookup_error

    async def query_selector(self, selector):
        if self.lookup_error:
            raise self.lookup_error
        return self.node


@pytest.mark.asyncio
async def test_no_match_gives_none():
    root = parse_html("<div><span class='a'>x</span></div>")
    assert await safe_extract(root, "span.missing", text()) is None


@pytest.mark.asyncio
async def test_failing_transform_gives_none():
    root = parse_html("<div><span class='a'>x</span></div>")

    async def boom(node):
        raise ValueError("bad markup")

    assert await safe_extract(root, "span.a", boom) is None


@pytest.mark.asyncio
async def test_broken_node_and_lookup_errors_give_none():
    assert await safe_extract(Container(node=BrokenNode()), "span", text()) is None
    assert await safe_extract(Container(node=BrokenNode()), "img", attribute("src")) is None
    assert await safe_extract(Container(lookup_error=RuntimeError("gone")), "span", text()) is None


@pytest.mark.asyncio
async def test_missing_attribute_gives_none():
    root = parse_html("<div><img class='s-image'></div>")
    assert await safe_extract(root, "img", attribute("src")) is None


@pytest.mark.asyncio
async def test_attribute_transform_raises_extraction_error():
    node = await parse_html("<img class='s-image'>").query_selector("img")
    with pytest.raises(ExtractionError):
        await attribute("src")(node)


@pytest.mark.asyncio
async def test_first_match_wins():
    root = parse_html("<ul><li>first</li><li>second</li></ul>")
    assert await safe_extract(root, "li", text()) == "first"


@pytest.mark.asyncio
async def test_values_stay_opaque_strings():
    root = parse_html("<div><span class='p'>  $1,299.00 </span><span class='r'>4.5 out of 5 stars</span></div>")
    assert await safe_extract(root, "span.p", text()) == "$1,299.00"
    assert await safe_extract(root, "span.r", text()) == "4.5 out of 5 stars"


@pytest.mark.asyncio
async def test_record_always_has_every_field():
    fields = [
        FieldSpec("a", "span.a", text()),
        FieldSpec("b", "span.b", text()),
        FieldSpec("c", "img", attribute("src")),
    ]
    root = parse_html("<div><span class='a'>one</span></div>")

    record = await extract_record(root, fields)

    assert list(record) == ["a", "b", "c"]
    assert record == {"a": "one", "b": None, "c": None}


@pytest.mark.asyncio
async def test_extract_all_keeps_document_order():
    root = parse_html("<div class='i'><b>1</b></div><div class='i'><b>2</b></div><div class='i'></div>")
    records = await extract_all(root, "div.i", [FieldSpec("n", "b", text())])
    assert records == [{"n": "1"}, {"n": "2"}, {"n": None}]


@pytest.mark.asyncio
async def test_extract_all_without_containers_is_empty():
    root = parse_html("<html><body><p>No results</p></body></html>")
    assert await extract_all(root, "div.i", [FieldSpec("n", "b", text())]) == []
