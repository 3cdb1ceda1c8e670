# product_scraper/utils/extract.py

from typing import Any, List, Optional, Sequence

from product_scraper.errors.exceptions import ExtractionError
from product_scraper.interfaces.models import ExtractedRecord, FieldSpec, Transform


# ----------------------------------------------------------
# Transforms: matched node -> value
# ----------------------------------------------------------
def text() -> Transform:
    """Inner text of the matched node."""

    async def _text(node: Any) -> Optional[str]:
        return await node.inner_text()

    return _text


def attribute(name: str) -> Transform:
    """Named attribute of the matched node (e.g. ``src`` of an ``<img>``)."""

    async def _attribute(node: Any) -> Optional[str]:
        value = await node.get_attribute(name)
        if value is None:
            raise ExtractionError(f"attribute {name!r} missing")
        return value

    return _attribute


# ----------------------------------------------------------
# Safe single-field extractor
# ----------------------------------------------------------
async def safe_extract(container: Any, selector: str, transform: Transform) -> Optional[str]:
    """
    Reads one field from one item container.

    Only the first node matching ``selector`` is used. No match, a broken
    node or a failing transform all give ``None``; nothing is raised.
    """
    try:
        node = await container.query_selector(selector)
        if node is None:
            return None
        value = await transform(node)
        if value is None:
            return None
        value = str(value).strip()
        return value or None
    except Exception:
        return None


async def extract_record(container: Any, fields: Sequence[FieldSpec]) -> ExtractedRecord:
    record: ExtractedRecord = {}
    for f in fields:
        record[f.name] = await safe_extract(container, f.selector, f.transform)
    return record


async def extract_all(
    root: Any,
    item_selector: str,
    fields: Sequence[FieldSpec],
) -> List[ExtractedRecord]:
    """
    One record per item container under ``root``, in document order.

    Containers are handled one at a time; a page without any container
    gives an empty list.
    """
    containers = await root.query_selector_all(item_selector)

    records: List[ExtractedRecord] = []
    for container in containers:
        records.append(await extract_record(container, fields))
    return records
