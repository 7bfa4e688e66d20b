"""CLI command: objkit selector -- assemble a CSS selector from ordered parts."""

from __future__ import annotations

import sys

import click

from objkit.selector import PartKind, SelectorError, css_selector_builder


def _split_part(raw: str) -> tuple[PartKind, str]:
    kind, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}")
    try:
        return PartKind(kind), value
    except ValueError:
        choices = ", ".join(PartKind)
        raise click.BadParameter(
            f"unknown part kind {kind!r} (choose from {choices})"
        ) from None


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE PARTS, applied in the order given.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.

    Example: objkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = css_selector_builder
    try:
        for raw in parts:
            kind, value = _split_part(raw)
            builder = builder.part(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())
