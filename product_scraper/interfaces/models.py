from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel

# One scraped item: field name -> opaque string value (or None).
ExtractedRecord = Dict[str, Optional[str]]

Transform = Callable[[Any], Awaitable[Optional[str]]]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    selector: str
    transform: Transform


@dataclass
class ScrapeRun:
    keyword: str
    urls: List[str] = field(default_factory=list)
    records: List[ExtractedRecord] = field(default_factory=list)
    screenshot: Optional[str] = None


# ----------------------------------------------------------
# Remote scraping service payload
# ----------------------------------------------------------
class RemoteScrapeInput(BaseModel):
    action: Literal["product", "seller", "keywords"]
    url: str


class RemoteScrapeRequest(BaseModel):
    actor: str = "scraper.amazon"
    input: RemoteScrapeInput
