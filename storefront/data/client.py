from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from storefront.config import get_settings
from storefront.errors import HTTPStatusError, MalformedResponseError, TransportError
from storefront.schemas.products import Product, ProductRecord

logger = logging.getLogger(__name__)


def parse_products(payload: Any) -> List[Product]:
    """Validate the raw API payload and normalize it into products.

    The payload must be a JSON array whose elements carry
    ``fields.name``, ``fields.price`` (cents) and ``fields.image[0].url``.
    """
    if not isinstance(payload, list):
        raise MalformedResponseError(f"Expected a JSON array, got {type(payload).__name__}")

    products: List[Product] = []
    for index, item in enumerate(payload):
        try:
            record = ProductRecord.model_validate(item)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Product at index {index} is malformed: {exc.error_count()} validation error(s)"
            ) from exc
        products.append(Product.from_record(record))
    return products


class CatalogClient:
    def __init__(
        self,
        url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.url = url or settings.catalog_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session = session or requests.Session()

    def fetch_products(self) -> List[Product]:
        logger.info("Fetching catalog from %s", self.url)
        try:
            response = self._session.get(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError("Response body is not valid JSON") from exc
        return parse_products(payload)


def get_catalog_client() -> CatalogClient:
    return CatalogClient()
