#!/usr/bin/env python3
"""
Walk through a storefront session and print each stage to the terminal.
Loads the catalogue, switches category, searches, then clicks "Buy".

Usage (from repo root):
  python scripts/run_storefront_demo.py --category 3 --search yoga
  INTEGRATIONS_MODE=mock python scripts/run_storefront_demo.py
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from storefront.api.main import select_integrations
from storefront.catalog.loader import CatalogLoader
from storefront.catalog.product_cards import ProductCardGenerator
from storefront.catalog.tracker import IntentTracker
from storefront.catalog.view_state import ViewStateController
from storefront.utils.config_loader import load_storefront_config


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


async def main(category: str, search: str, buy: bool) -> None:
    config = load_storefront_config()
    client, sink = select_integrations(config)
    controller = ViewStateController(CatalogLoader(client))
    cards = ProductCardGenerator()

    await controller.mount()
    print_stage("Mounted (all categories)", cards.generate_page(controller))

    await controller.select_category(int(category) if category.isdigit() else category)
    controller.set_search(search)
    print_stage(f"Category={category!r} search={search!r}", cards.generate_page(controller))

    visible = controller.visible_products
    if buy and visible:
        tracker = IntentTracker(sink, navigator=lambda url: print(f"\n-> would open {url}"))
        outcome = await tracker.on_purchase_intent(visible[0])
        print_stage("Buy clicked", {"redirect_url": outcome.redirect_url, "tracked": outcome.tracked})


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Storefront walkthrough")
    parser.add_argument("--category", default="all")
    parser.add_argument("--search", default="")
    parser.add_argument("--no-buy", action="store_true", help="Skip the buy click")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(main(args.category, args.search, not args.no_buy))
