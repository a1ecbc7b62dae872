from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.config import get_settings
from storefront.schemas.products import Product, ViewState
from storefront.utils.text import format_price

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

NO_RESULTS_MESSAGE = "No products found matching your search."
LOAD_ERROR_MESSAGE = "Sorry, we couldn't load the products. Please try again later."


class ContainerDisplay(str, Enum):
    # Values are the CSS `display` applied to the product container.
    GRID = "grid"
    MESSAGE = "block"
    HIDDEN = "none"


@dataclass
class CatalogView:
    """The visual surface: loader state plus the product container."""

    state: ViewState = ViewState.LOADING
    html: str = ""
    has_cards: bool = False
    is_error: bool = False

    @property
    def display(self) -> ContainerDisplay:
        if self.state is ViewState.LOADING:
            return ContainerDisplay.HIDDEN
        return ContainerDisplay.GRID if self.has_cards else ContainerDisplay.MESSAGE

    @property
    def loader_visible(self) -> bool:
        return self.state is ViewState.LOADING

    def show_loader(self) -> None:
        self.state = ViewState.LOADING

    def show_content(self) -> None:
        self.state = ViewState.CONTENT

    def replace(self, html: str, has_cards: bool, is_error: bool = False) -> None:
        self.html = html
        self.has_cards = has_cards
        self.is_error = is_error


class CardRenderer:
    def __init__(self, currency_symbol: Optional[str] = None) -> None:
        symbol = currency_symbol if currency_symbol is not None else get_settings().currency_symbol
        self.currency_symbol = symbol
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["price"] = lambda cents: format_price(cents, symbol)

    def cards(self, products: Sequence[Product]) -> str:
        template = self.env.get_template("_cards.html")
        return template.render(products=products, no_results_message=NO_RESULTS_MESSAGE)

    def message(self, message: str, error: bool = False) -> str:
        return self.env.get_template("_message.html").render(message=message, error=error)

    def page(self, view: CatalogView, search_term: str = "", cards_url: str = "/catalog/cards") -> str:
        template = self.env.get_template("index.html")
        return template.render(
            title="Product Catalog",
            view=view,
            search_term=search_term,
            cards_url=cards_url,
        )


_renderer: Optional[CardRenderer] = None


def get_card_renderer() -> CardRenderer:
    global _renderer
    if _renderer is None:
        _renderer = CardRenderer()
    return _renderer
