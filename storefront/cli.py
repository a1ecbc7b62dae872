from __future__ import annotations

import argparse
import os
from typing import List, Optional

from storefront.config import get_settings
from storefront.data.client import CatalogClient
from storefront.logging_config import configure_logging
from storefront.services.catalog import CatalogController
from storefront.services.render import LOAD_ERROR_MESSAGE, NO_RESULTS_MESSAGE
from storefront.utils.text import format_price


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch the product catalog and print the (filtered) product cards")
    parser.add_argument("--url", type=str, default=None, help="Catalog endpoint (default: STOREFRONT_CATALOG_URL or the course API)")
    parser.add_argument("--search", type=str, default="", help="Case-insensitive substring to match against product names")
    parser.add_argument("--html-out", type=str, default=None, help="Write the rendered page to this path")
    return parser


def main(argv: Optional[List[str]] = None, controller: Optional[CatalogController] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if controller is None:
        controller = CatalogController(client=CatalogClient(url=args.url))

    result = controller.load()
    if not result.ok:
        print(LOAD_ERROR_MESSAGE)
    else:
        products = controller.filter(args.search)
        if not products:
            print(NO_RESULTS_MESSAGE)
        for product in products:
            print(f"{product.name} - {format_price(product.price, controller.renderer.currency_symbol)}")

    if args.html_out:
        directory = os.path.dirname(args.html_out)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.html_out, "w", encoding="utf-8") as f:
            f.write(controller.renderer.page(controller.view, search_term=args.search))
        print(f"Saved catalog page to: {args.html_out}")

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
