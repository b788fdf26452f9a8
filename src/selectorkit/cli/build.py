"""CLI command: selectorkit build -- build a selector from a JSON tree."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.config import BuilderConfig
from selectorkit.errors import SelectorError
from selectorkit.serialize import from_dict


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option(
    "--lenient",
    is_flag=True,
    help="Accept combinator tokens other than ' ', '+', '~', '>'",
)
def build(jsonfile: str, lenient: bool) -> None:
    """Build a selector from a JSON tree and print it.

    The file holds the structure produced by ``selectorkit.serialize.to_dict``.
    """
    builder = SelectorBuilder(BuilderConfig(strict_combinators=not lenient))
    try:
        data = json.loads(Path(jsonfile).read_text(encoding="utf-8"))
        node = from_dict(data, builder)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read {jsonfile}: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(node.stringify())
