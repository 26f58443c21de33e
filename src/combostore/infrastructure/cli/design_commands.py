"""CLI commands for the Design aggregate."""

from __future__ import annotations

import click

from combostore.application.manage_catalog import DeleteDesignHandler, SaveDesignHandler
from combostore.application.storefront import Storefront
from combostore.domain.model.value_objects import ChildType
from combostore.infrastructure.cli.runner import run

_CHILD_TYPES = click.Choice([c.value for c in ChildType])


@click.command("list")
def design_list() -> None:
    """List all designs in the catalog."""

    async def action(front: Storefront):
        return front.designs

    designs = run(action)
    if not designs:
        click.echo("No designs found.")
        return

    click.echo(f"{'ID':<10} {'Name':<24} {'Color':<16} {'Fabric':<12} {'Stock':>6}")
    click.echo("-" * 72)
    for d in designs:
        click.echo(
            f"{d.id:<10} {d.name:<24} {d.color:<16} {d.fabric:<12} {d.inventory.total:>6}"
        )


@click.command("add")
@click.option("--name", required=True, help="Design name.")
@click.option("--color", default="", help="Color description.")
@click.option("--fabric", default="", help="Fabric.")
@click.option("--image-url", default="", help="Public image URL.")
@click.option("--label", default=None, help="Badge label, e.g. 'PREMIUM DESIGN'.")
@click.option("--child-type", type=_CHILD_TYPES, default=None, help="Kids line offered.")
def design_add(
    name: str,
    color: str,
    fabric: str,
    image_url: str,
    label: str | None,
    child_type: str | None,
) -> None:
    """Add a new design with empty stock."""

    async def action(front: Storefront):
        return await SaveDesignHandler(front).handle(
            name=name,
            color=color,
            fabric=fabric,
            image_url=image_url,
            label=label,
            child_type=child_type,
        )

    design = run(action)
    click.echo(f"Design #{design.id} '{design.name}' added")


@click.command("edit")
@click.option("--id", "design_id", required=True, help="Design ID.")
@click.option("--name", required=True, help="Design name.")
@click.option("--color", default=None, help="Color description.")
@click.option("--fabric", default=None, help="Fabric.")
@click.option("--image-url", default=None, help="Public image URL.")
@click.option("--label", default=None, help="Badge label.")
@click.option("--child-type", type=_CHILD_TYPES, default=None, help="Kids line offered.")
def design_edit(
    design_id: str,
    name: str,
    color: str | None,
    fabric: str | None,
    image_url: str | None,
    label: str | None,
    child_type: str | None,
) -> None:
    """Edit an existing design (stock is kept)."""

    async def action(front: Storefront):
        return await SaveDesignHandler(front).handle(
            design_id=design_id,
            name=name,
            color=color,
            fabric=fabric,
            image_url=image_url,
            label=label,
            child_type=child_type,
        )

    design = run(action)
    click.echo(f"Design #{design.id} '{design.name}' updated")


@click.command("delete")
@click.option("--id", "design_id", required=True, help="Design ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this design?")
def design_delete(design_id: str) -> None:
    """Delete a design. Existing orders keep pointing at it."""

    async def action(front: Storefront):
        await DeleteDesignHandler(front).handle(design_id)

    run(action)
    click.echo(f"Design #{design_id} deleted.")
