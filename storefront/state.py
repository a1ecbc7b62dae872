from __future__ import annotations

from typing import Optional

from storefront.services.catalog import CatalogController

_controller: Optional[CatalogController] = None


def get_controller() -> CatalogController:
    global _controller
    if _controller is None:
        _controller = CatalogController()
    return _controller


def set_controller(controller: Optional[CatalogController]) -> None:
    global _controller
    _controller = controller


def init_controller() -> None:
    """Run the initial catalog load during startup without FastAPI dependency injection."""
    controller = get_controller()
    if not controller.state.loaded:
        controller.load()
