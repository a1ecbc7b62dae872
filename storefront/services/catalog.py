from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from storefront.data.client import CatalogClient, get_catalog_client
from storefront.errors import CatalogError, HTTPStatusError
from storefront.schemas.products import LoadResult, Product
from storefront.services.render import (
    LOAD_ERROR_MESSAGE,
    CardRenderer,
    CatalogView,
    get_card_renderer,
)
from storefront.utils.text import fold_case

logger = logging.getLogger(__name__)


@dataclass
class CatalogState:
    products: List[Product] = field(default_factory=list)
    last_result: Optional[LoadResult] = None

    @property
    def loaded(self) -> bool:
        return self.last_result is not None


def matches(product: Product, term: str) -> bool:
    return fold_case(term) in fold_case(product.name)


def filter_products(products: Sequence[Product], term: str) -> List[Product]:
    """Return the products whose name contains ``term``, ignoring case, in catalog order."""
    return [product for product in products if matches(product, term)]


class CatalogController:
    """Fetches the catalog once, renders it, and re-renders filtered subsets."""

    def __init__(
        self,
        client: Optional[CatalogClient] = None,
        renderer: Optional[CardRenderer] = None,
        state: Optional[CatalogState] = None,
    ) -> None:
        self.client = client or get_catalog_client()
        self.renderer = renderer or get_card_renderer()
        self.state = state or CatalogState()
        self.view = CatalogView()

    def load(self) -> LoadResult:
        self.view.show_loader()
        try:
            products = self.client.fetch_products()
            self.state.products = products
            result = LoadResult.success(products)
            logger.info("Loaded %d products", len(products))
            self.render(products)
        except CatalogError as exc:
            logger.error("An error occurred: %s", exc.message)
            self.state.products = []
            status_code = exc.status_code if isinstance(exc, HTTPStatusError) else None
            result = LoadResult.failure(exc.kind, exc.message, status_code=status_code)
            self.show_error()
        finally:
            self.view.show_content()
        self.state.last_result = result
        return result

    def show_error(self) -> None:
        self.view.replace(self.renderer.message(LOAD_ERROR_MESSAGE, error=True), has_cards=False, is_error=True)

    def render(self, products: Sequence[Product]) -> None:
        self.view.replace(self.renderer.cards(products), has_cards=bool(products))

    def filter(self, term: str) -> List[Product]:
        subset = filter_products(self.state.products, term)
        self.render(subset)
        return subset
