# product_scraper/sources/remote_api.py

from typing import Any, Optional

import requests
from pydantic import ValidationError

from config import ACTIVE_CONFIG
from product_scraper.errors.exceptions import NetworkError, ScraperError
from product_scraper.interfaces.models import RemoteScrapeInput, RemoteScrapeRequest
from product_scraper.utils.logging_config import Logger, _log


class RemoteScraperClient:
    """
    Thin client for the hosted scraping service: one POST per call, the
    response JSON is handed back untouched.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        path: Optional[str] = None,
        timeout: Optional[float] = None,
        logger: Optional[Logger] = None,
    ):
        settings = ACTIVE_CONFIG.REMOTE_API
        self.token = token or settings["TOKEN"]
        self.base_url = (base_url or settings["BASE_URL"]).rstrip("/")
        self.path = path or settings["PATH"]
        self.timeout = timeout or settings["TIMEOUT"]
        self.actor = settings["ACTOR"]
        self.logger = logger

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{self.path}"

    def build_payload(self, action: str, url: str) -> dict:
        try:
            request = RemoteScrapeRequest(
                actor=self.actor,
                input=RemoteScrapeInput(action=action, url=url),
            )
        except ValidationError as e:
            raise ValueError(f"invalid remote scrape request: {e}") from e
        return request.model_dump()

    def scrape(self, action: str, url: str) -> Any:
        """action is one of 'product', 'seller' or 'keywords'."""
        payload = self.build_payload(action, url)

        if not self.token:
            raise ScraperError("SCRAPER_API_TOKEN is not set")

        _log(self.logger, f"🌐 Remote scrape ({action}): {url}")
        try:
            resp = requests.post(
                self.endpoint,
                json=payload,
                headers={"x-api-token": self.token},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise NetworkError(f"remote scrape failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"remote scrape returned invalid JSON: {e}") from e
