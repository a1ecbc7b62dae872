from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from storefront.schemas.products import CatalogResponse, ProductOut
from storefront.services.catalog import CatalogController
from storefront.state import get_controller
from storefront.utils.text import format_price

router = APIRouter(tags=["catalog"])


@router.get("/", response_class=HTMLResponse)
def catalog_page(
    q: str = Query(default=""),
    controller: CatalogController = Depends(get_controller),
) -> HTMLResponse:
    last_result = controller.state.last_result
    if last_result is not None:
        if last_result.ok:
            controller.filter(q)
        else:
            controller.show_error()
    html = controller.renderer.page(controller.view, search_term=q)
    return HTMLResponse(html)


@router.get("/catalog/cards", response_class=HTMLResponse)
def catalog_cards(
    q: str = Query(default=""),
    controller: CatalogController = Depends(get_controller),
) -> HTMLResponse:
    controller.filter(q)
    return HTMLResponse(controller.view.html, headers={"X-Container-Display": controller.view.display.value})


@router.get("/catalog/products", response_model=CatalogResponse)
def catalog_products(
    q: str = Query(default=""),
    controller: CatalogController = Depends(get_controller),
) -> CatalogResponse:
    subset = controller.filter(q)
    symbol = controller.renderer.currency_symbol
    last_result = controller.state.last_result
    return CatalogResponse(
        state=controller.view.state,
        count=len(subset),
        products=[
            ProductOut(
                name=product.name,
                price=product.price,
                formatted_price=format_price(product.price, symbol),
                image_url=product.image_url,
            )
            for product in subset
        ],
        error=last_result.error_kind if last_result is not None else None,
    )
