# src/cli/runner.py

"""Read-only inspection commands over a marketplace data directory."""

import json
import logging
import sys
from decimal import Decimal

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.models.product import Product
from src.services import storefront
from src.services.marketplace import Marketplace

logger = logging.getLogger("ecofinds.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _money(amount: Decimal) -> str:
    return f"{Settings.CURRENCY_SYMBOL}{amount:,.2f}"


def _dump_json(payload: object) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _print_products(products: list[Product], title: str) -> None:
    table = Table(title=title, show_lines=True, title_style="bold cyan")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Title", max_width=40)
    table.add_column("Category")
    table.add_column("Condition", justify="center")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Seller", style="magenta")
    table.add_column("★", justify="center")

    for p in products:
        table.add_row(
            p.id,
            p.title,
            p.category + (f" / {p.sub_category}" if p.sub_category else ""),
            p.condition or "—",
            _money(p.price),
            p.seller.name,
            "★" if p.featured else "",
        )
    Console().print(table)


def run_browse(
    market: Marketplace,
    search: str | None,
    category: str | None,
    featured_only: bool,
    output_format: str,
) -> int:
    """List catalog products matching the filters."""
    if featured_only:
        products = storefront.featured(market.catalog, limit=len(market.catalog))
    else:
        products = storefront.browse(market.catalog, search=search, category=category)

    if not products:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    if output_format == "table":
        _print_products(products, "Catalog")
    else:
        _dump_json([p.to_dict() for p in products])
    return 0


def run_categories(market: Marketplace, output_format: str) -> int:
    """Show the category taxonomy with product counts."""
    summaries = storefront.category_summaries(market.catalog)
    if output_format == "json":
        _dump_json([
            {
                "name": s.category.name,
                "icon": s.category.icon,
                "sub_categories": list(s.category.sub_categories),
                "product_count": s.product_count,
            }
            for s in summaries
        ])
        return 0

    table = Table(title="Categories", title_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Products", justify="right")
    table.add_column("Sub-categories", style="dim")
    for s in summaries:
        table.add_row(
            s.category.name,
            str(s.product_count),
            ", ".join(s.category.sub_categories),
        )
    Console().print(table)
    return 0


def run_cart(market: Marketplace, output_format: str) -> int:
    """Show the persisted cart and its total."""
    items = storefront.cart_view(market.cart, market.catalog)
    total = market.cart.total(market.catalog.get_by_id)

    if output_format == "json":
        _dump_json({
            "items": [
                {
                    "product_id": i.product.id,
                    "title": i.product.title,
                    "quantity": i.quantity,
                    "subtotal": str(i.subtotal),
                }
                for i in items
            ],
            "item_count": market.cart.item_count(),
            "total": str(total),
        })
        return 0

    if not items:
        _err.print("[yellow]Your cart is empty.[/yellow]")
        return 0

    table = Table(title="Cart", show_lines=True, title_style="bold cyan")
    table.add_column("Title")
    table.add_column("Qty", justify="right")
    table.add_column("Subtotal", justify="right", style="green")
    for i in items:
        table.add_row(i.product.title, str(i.quantity), _money(i.subtotal))
    Console().print(table)
    _err.print(f"[bold]Total:[/bold] {_money(total)}")
    return 0


def run_history(market: Marketplace, user_id: str, output_format: str) -> int:
    """Show a user's purchases, newest first."""
    views = storefront.purchase_history(market.purchases, market.catalog, user_id)

    if output_format == "json":
        _dump_json([
            {
                "purchase_id": v.purchase.id,
                "product_id": v.product.id,
                "title": v.product.title,
                "price": str(v.purchase.price),
                "purchased_at": v.purchase.purchased_at.isoformat(),
            }
            for v in views
        ])
        return 0

    if not views:
        _err.print(f"[yellow]No purchases for user {user_id}.[/yellow]")
        return 0

    table = Table(title=f"Purchases of {user_id}", title_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Title")
    table.add_column("Paid", justify="right", style="green")
    for v in views:
        table.add_row(
            v.purchase.purchased_at.strftime("%Y-%m-%d %H:%M"),
            v.product.title,
            _money(v.purchase.price),
        )
    Console().print(table)
    return 0


def run_reset(market: Marketplace) -> int:
    """Delete every persisted document so the next start reseeds."""
    removed = market.storage.clear()
    _err.print(f"[green]✓ Removed {removed} stored documents[/green]")
    return 0
