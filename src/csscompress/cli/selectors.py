"""CLI command: csscompress selectors -- normalize selectors read line by line."""

from __future__ import annotations

from dataclasses import replace
from typing import TextIO

import click

from csscompress.config import MODES, SelectorOptions
from csscompress.selectors import SelectorProcessor


@click.command("selectors")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--mode",
    type=click.Choice(sorted(MODES)),
    default="sane",
    show_default=True,
    help="Preset option set.",
)
@click.option("--lowercase/--no-lowercase", default=None, help="Case-fold element and pseudo names.")
@click.option("--strict-id/--no-strict-id", default=None, help="Drop everything before the last id.")
@click.option(
    "--pseudo-space/--no-pseudo-space",
    default=None,
    help="Space out :first-letter and :first-line.",
)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Rewrite on a thread pool.")
@click.option("--keep-tokens", is_flag=True, help="Leave sentinel tokens in the output.")
def selectors_command(
    source: TextIO,
    mode: str,
    lowercase: bool | None,
    strict_id: bool | None,
    pseudo_space: bool | None,
    workers: int | None,
    keep_tokens: bool,
) -> None:
    """Normalize CSS selectors, one per line, read from SOURCE (stdin by default).

    Each normalized selector is printed on its own line, in input order.
    """
    overrides = {
        "lowercase_selectors": lowercase,
        "strict_id": strict_id,
        "pseudo_space": pseudo_space,
    }

    options = replace(SelectorOptions.mode(mode), **{k: v for k, v in overrides.items() if v is not None})

    processor = SelectorProcessor(options=options, max_workers=workers)
    lines = [line.rstrip("\r\n") for line in source if line.strip()]

    for selector in processor.selectors(lines):
        click.echo(selector if keep_tokens else processor.release(selector))
