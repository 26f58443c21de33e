"""CLI commands for stock management."""

from __future__ import annotations

import click

from combostore.application.manage_catalog import UpdateStockHandler
from combostore.application.show_inventory import ShowInventoryHandler, is_low_stock
from combostore.application.storefront import Storefront
from combostore.domain.model.value_objects import Category
from combostore.infrastructure.cli.runner import run


@click.command("set")
@click.option("--design", "design_id", required=True, help="Design ID.")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in Category]),
    help="Inventory category.",
)
@click.option("--size", required=True, help="Size, e.g. XL or 4-5.")
@click.option("--value", required=True, type=int, help="Units in stock.")
def inventory_set(design_id: str, category: str, size: str, value: int) -> None:
    """Set the stock of one size of a design."""

    async def action(front: Storefront):
        return await UpdateStockHandler(front).handle(design_id, category, size, value)

    design = run(action)
    click.echo(
        f"'{design.name}' {category}/{size} set to "
        f"{design.inventory.count(category, size)}"
    )


@click.command("show")
@click.option("--search", default="", help="Filter by name, color or fabric.")
@click.option("--low-stock", is_flag=True, default=False, help="Only designs running low.")
def inventory_show(search: str, low_stock: bool) -> None:
    """Show stock per design, category and size."""

    async def action(front: Storefront):
        return ShowInventoryHandler(front).handle(search=search, low_stock_only=low_stock)

    lines = run(action)
    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Design':<24} {'Category':<10} {'Size':<6} {'Stock':>6}")
    click.echo("-" * 49)
    for line in lines:
        click.echo(f"{line.design_name:<24} {line.category:<10} {line.size:<6} {line.stock:>6}")


@click.command("summary")
def inventory_summary() -> None:
    """Show catalog totals."""

    async def action(front: Storefront):
        return ShowInventoryHandler(front).summary()

    summary = run(action)
    click.echo(f"Designs:         {summary.total_designs}")
    click.echo(f"Units in stock:  {summary.total_stock}")
    click.echo(f"Low-stock sizes: {summary.low_stock_count}")
    click.echo(f"Pending orders:  {summary.pending_orders}")


@click.command("low-stock")
def inventory_low_stock() -> None:
    """List sizes down to their last unit."""

    async def action(front: Storefront):
        handler = ShowInventoryHandler(front)
        return [
            (design.name, category.value, size, count)
            for design in handler.low_stock_designs()
            for category, size, count in design.inventory.cells()
            if is_low_stock(count)
        ]

    cells = run(action)
    if not cells:
        click.echo("Nothing is running low.")
        return

    for name, category, size, count in cells:
        click.echo(f"{name:<24} {category:<10} {size:<6} {count:>6}")
