"""CLI command: selectorkit format -- print a selector in canonical form."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.parser import parse_selector


@click.command(name="format")
@click.argument("selector")
def format_selector(selector: str) -> None:
    """Parse SELECTOR and print its canonical form.

    Whitespace around combinators is normalised to a single space on each
    side; the descendant combinator prints as three spaces.
    """
    try:
        node = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(node.stringify())
