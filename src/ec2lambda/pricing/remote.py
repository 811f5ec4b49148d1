import asyncio
import json
from pathlib import Path

import httpx
import structlog

logger = structlog.get_logger()

# key used when a document lists prices per platform
DEFAULT_PLATFORM = "linux"


class PriceDocumentError(ValueError):
    """
    raised when a price document is not a mapping of instance
    type to hourly price.
    """


def parse_price_document(
    document: "object",
    platform: "str" = DEFAULT_PLATFORM,
) -> "dict[str, float]":
    """
    converts a decoded JSON document into an instance type to
    hourly price mapping. Accepts either flat entries
    ({"t2.micro": 0.0116}) or per-platform entries
    ({"t2.micro": {"linux": 0.0116, "windows": 0.0162}}).
    """
    if not isinstance(document, dict):
        raise PriceDocumentError("price document must be a JSON object")

    prices: "dict[str, float]" = {}
    for instance_type, entry in document.items():
        if isinstance(entry, dict):
            if platform not in entry:
                raise PriceDocumentError(
                    f"{instance_type}: no price for platform {platform!r}"
                )
            entry = entry[platform]

        # bool is an int subclass but never a price
        if isinstance(entry, bool) or not isinstance(entry, (int, float)):
            raise PriceDocumentError(
                f"{instance_type}: price must be a number, got {entry!r}"
            )
        prices[str(instance_type)] = float(entry)

    return prices


class JsonPriceSource:
    """
    JsonPriceSource implements the PriceSource protocol for JSON
    price documents, either fetched over HTTP(S) or read from a
    local file.
    """

    def __init__(
        self,
        location: "str",
        platform: "str" = DEFAULT_PLATFORM,
    ) -> "None":
        self._location = location
        self._platform = platform
        self._client: "httpx.AsyncClient | None" = None
        if self.is_remote:
            self._client = httpx.AsyncClient(timeout=10.0)

    @property
    def name(self) -> "str":
        return "remote" if self.is_remote else "file"

    @property
    def is_remote(self) -> "bool":
        return self._location.startswith(("http://", "https://"))

    async def close(self) -> "None":
        """
        closes the underlying HTTP client.
        """
        if self._client is not None:
            await self._client.aclose()

    async def fetch_prices(self) -> "dict[str, float]":
        """
        loads and parses the price document.
        """
        if self._client is not None:
            logger.debug("fetch_prices", url=self._location)
            resp = await self._client.get(self._location)
            resp.raise_for_status()
            try:
                document = resp.json()
            except ValueError as e:
                raise PriceDocumentError(f"invalid JSON from {self._location}") from e
        else:
            text = await asyncio.to_thread(
                Path(self._location).read_text, encoding="utf-8"
            )
            try:
                document = json.loads(text)
            except ValueError as e:
                raise PriceDocumentError(f"invalid JSON in {self._location}") from e

        prices = parse_price_document(document, self._platform)
        logger.debug("prices_parsed", source=self.name, count=len(prices))
        return prices
