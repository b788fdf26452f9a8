"""CLI command: selectorkit check -- lint a selector."""

from __future__ import annotations

import json
import sys
from collections import Counter
from pathlib import Path

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.config import BuilderConfig
from selectorkit.errors import SelectorError
from selectorkit.model.diagnostic import Severity
from selectorkit.parser import parse_selector
from selectorkit.serialize import from_dict
from selectorkit.validation import lint


@click.command()
@click.argument("source")
@click.option(
    "--json",
    "from_json",
    is_flag=True,
    help="Treat SOURCE as a path to a JSON selector tree",
)
def check(source: str, from_json: bool) -> None:
    """Lint SOURCE, a selector string or (with --json) a JSON tree file.

    Each diagnostic is printed with its suggested fix, followed by a count
    per severity. The exit code is 1 when any diagnostic is an ERROR.
    """
    try:
        if from_json:
            # Lenient, so unknown combinators are reported rather than rejected.
            builder = SelectorBuilder(BuilderConfig(strict_combinators=False))
            data = json.loads(Path(source).read_text(encoding="utf-8"))
            node = from_dict(data, builder)
        else:
            node = parse_selector(source)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        click.echo(f"Cannot read {source}: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    diagnostics = lint(node)
    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    counts = Counter(d.severity for d in diagnostics)
    if not diagnostics:
        click.echo(f"OK: {node.stringify()}")
    else:
        click.echo(
            f"{node.stringify()!r}: "
            f"{counts[Severity.ERROR]} error(s), "
            f"{counts[Severity.WARNING]} warning(s), "
            f"{counts[Severity.INFO]} info"
        )
    sys.exit(1 if counts[Severity.ERROR] else 0)
