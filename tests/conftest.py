"""Shared fixtures: fake HTTP sessions and catalog payloads."""

from typing import Any, Optional

import pytest
from markupsafe import escape

from storefront.data.client import CatalogClient
from storefront.services.catalog import CatalogController
from storefront.services.render import LOAD_ERROR_MESSAGE, CardRenderer
from storefront import state

TEST_URL = "https://catalog.test/products"

# The error message as it appears in autoescaped HTML.
LOAD_ERROR_HTML = str(escape(LOAD_ERROR_MESSAGE))


def make_record(name: str, price: int, url: str = "https://images.test/item.jpg", record_id: Optional[str] = None) -> dict:
    return {
        "id": record_id or name.lower().replace(" ", "-"),
        "fields": {"name": name, "price": price, "image": [{"url": url}]},
    }


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, Optional[float]]] = []

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def sample_payload() -> list[dict]:
    return [
        make_record("Red Shirt", 2500, url="https://images.test/red-shirt.jpg"),
        make_record("Blue Hat", 1200, url="https://images.test/blue-hat.jpg"),
        make_record("Modern Bookshelf", 3199),
    ]


@pytest.fixture
def renderer() -> CardRenderer:
    return CardRenderer(currency_symbol="$")


@pytest.fixture
def make_controller(renderer):
    def _make(session: FakeSession) -> CatalogController:
        client = CatalogClient(url=TEST_URL, session=session)
        return CatalogController(client=client, renderer=renderer)

    return _make


@pytest.fixture
def loaded_controller(make_controller, sample_payload) -> CatalogController:
    controller = make_controller(FakeSession(FakeResponse(payload=sample_payload)))
    controller.load()
    return controller


@pytest.fixture
def reset_state():
    yield
    state.set_controller(None)
