"""Runs an async use case from a synchronous click command."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click

from combostore.application.storefront import Storefront
from combostore.domain.exceptions import DomainException
from combostore.infrastructure import bootstrap

T = TypeVar("T")


def run(action: Callable[[Storefront], Awaitable[T]]) -> T:
    """Load a storefront on the configured backend and run *action* on it."""

    async def _main() -> T:
        front = await bootstrap.storefront()
        notice = front.take_notice()
        if notice:
            click.echo(notice, err=True)
        return await action(front)

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Parse repeated 'Key=Value' options into a dict."""
    result: dict[str, str] = {}
    for pair in values:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid format '{pair}'. Expected 'Member=Value'.", param_hint=option
            )
        key, value = pair.split("=", 1)
        result[key.strip()] = value.strip()
    return result
