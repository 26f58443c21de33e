"""CLI commands for the Order aggregate."""

from __future__ import annotations

import asyncio

import click

from combostore.application.dto import CustomerDetails, OrderDTO
from combostore.application.order_lifecycle import OrderLifecycleController
from combostore.application.show_order import ShowOrderHandler
from combostore.application.storefront import Storefront
from combostore.application.submit_order import SubmitOrderHandler
from combostore.domain.exceptions import EntityNotFoundError
from combostore.domain.model.change_event import ChangeEvent
from combostore.domain.model.order import OrderStatus
from combostore.domain.model.value_objects import DEFAULT_COUNTRY_CODE, ComboType
from combostore.infrastructure.cli.runner import parse_pairs, run


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Design:   {dto.design_name}")
    click.echo(f"Combo:    {dto.combo_label} ({dto.combo_type})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Phone:    {dto.customer_phone}")
    if dto.customer_email:
        click.echo(f"Email:    {dto.customer_email}")
    click.echo(f"Address:  {dto.customer_address}")
    click.echo()
    click.echo(f"  {'Member':<10} {'Size':<6} Notes")
    click.echo(f"  {'-'*40}")
    for member, size in dto.selected_sizes.items():
        click.echo(f"  {member:<10} {size:<6} {dto.notes.get(member, '')}")


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders in this status.",
)
def order_list(status: str | None) -> None:
    """List orders, newest first."""

    async def action(front: Storefront):
        return ShowOrderHandler(front).list_all(status)

    orders = run(action)
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<10} {'Design':<24} {'Combo':<8} {'Customer':<20} {'Status':<9}")
    click.echo("-" * 75)
    for o in orders:
        click.echo(
            f"{o.id:<10} {o.design_name:<24} {o.combo_type:<8} {o.customer_name:<20} {o.status:<9}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""

    async def action(front: Storefront):
        return ShowOrderHandler(front).handle(order_id)

    _display_order(run(action))


@click.command("submit")
@click.option("--design", "design_id", required=True, help="Design ID.")
@click.option(
    "--combo",
    required=True,
    type=click.Choice([c.value for c in ComboType]),
    help="Family combination.",
)
@click.option("--size", "sizes", multiple=True, help="Member size as 'Father=XL'.")
@click.option("--note", "notes", multiple=True, help="Member note as 'Son=height 110cm'.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--country-code", default=DEFAULT_COUNTRY_CODE, help="Phone country code.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--email", default=None, help="Email (optional).")
def order_submit(
    design_id: str,
    combo: str,
    sizes: tuple[str, ...],
    notes: tuple[str, ...],
    name: str,
    phone: str,
    country_code: str,
    address: str,
    email: str | None,
) -> None:
    """Place a new order. Members without --size opt out (N/A)."""
    selected = parse_pairs(sizes, "--size")
    member_notes = parse_pairs(notes, "--note")
    customer = CustomerDetails(
        name=name, phone=phone, address=address, country_code=country_code, email=email
    )

    async def action(front: Storefront):
        return await SubmitOrderHandler(front).handle(
            design_id, combo, selected, customer, notes=member_notes or None
        )

    dto = run(action)
    click.echo(f"Order #{dto.id} placed  (status={dto.status})")


@click.command("accept")
@click.option("--id", "order_id", required=True, help="Order ID to accept.")
def order_accept(order_id: str) -> None:
    """Accept a pending order (deducts stock)."""

    async def action(front: Storefront):
        order = front.find_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        await OrderLifecycleController(front).accept(order)

    run(action)
    click.echo(f"Order #{order_id} accepted and stock deducted!")


@click.command("reject")
@click.option("--id", "order_id", required=True, help="Order ID to reject.")
def order_reject(order_id: str) -> None:
    """Reject a pending order (stock unchanged)."""

    async def action(front: Storefront):
        await OrderLifecycleController(front).reject(order_id)

    run(action)
    click.echo(f"Order #{order_id} rejected.")


@click.command("watch")
@click.option("--seconds", default=60, type=int, help="How long to listen.")
def watch(seconds: int) -> None:
    """Print design/order changes pushed by the remote store."""

    async def action(front: Storefront):
        if not front.gateway.pushes_changes:
            click.echo("Local mode has no change feed; nothing to watch.")
            return

        def echo(collection: str, event: ChangeEvent) -> None:
            click.echo(
                f"{collection:<8} {event.event_type.value:<7} {event.record_id}  "
                f"({len(front.designs)} designs, {len(front.pending_orders)} pending orders)"
            )

        front.add_listener(echo)
        await front.start_sync()
        try:
            await asyncio.sleep(seconds)
        finally:
            await front.stop_sync()

    run(action)
