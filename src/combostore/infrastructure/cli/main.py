import logging

import click

from combostore.infrastructure.cli.design_commands import (
    design_add,
    design_delete,
    design_edit,
    design_list,
)
from combostore.infrastructure.cli.inventory_commands import (
    inventory_low_stock,
    inventory_set,
    inventory_show,
    inventory_summary,
)
from combostore.infrastructure.cli.order_commands import (
    order_accept,
    order_list,
    order_reject,
    order_show,
    order_submit,
    watch,
)
from combostore.infrastructure.config import get_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Combo Store: family combo designs, stock and orders"""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def design() -> None:
    """Manage designs."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
design.add_command(design_add)
design.add_command(design_delete)
design.add_command(design_edit)
design.add_command(design_list)
inventory.add_command(inventory_low_stock)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
inventory.add_command(inventory_summary)
order.add_command(order_accept)
order.add_command(order_list)
order.add_command(order_reject)
order.add_command(order_show)
order.add_command(order_submit)
cli.add_command(watch)
