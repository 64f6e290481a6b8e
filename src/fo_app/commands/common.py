# src/fo_app/commands/common.py
from __future__ import annotations

from pathlib import Path

import typer


def resolve_dry_run(apply: bool, plan: bool) -> bool:
    """
    Standardize dry-run across commands.
    - default: dry-run (plan)
    - --apply => not dry-run
    - --plan  => force dry-run
    - both    => error
    """
    if apply and plan:
        raise typer.BadParameter("Use either --apply or --plan, not both.")
    return (not apply) or plan


def prompt_existing_dir(maybe_root: Path | None, prompt_label: str = "root") -> Path:
    root = maybe_root or Path(typer.prompt(f"{prompt_label} (folder)")).expanduser()
    if not root.exists() or not root.is_dir():
        raise typer.BadParameter(
            f"{prompt_label} does not exist or is not a directory: {root}"
        )
    return root


def parse_categories(raw: list[str]) -> dict[str, list[str]]:
    """
    Parse repeated "Name=ext1,ext2" options into an ordered category table.
    Repeating a name appends to its extensions.
    """
    table: dict[str, list[str]] = {}
    for item in raw:
        name, sep, exts = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(
                f"category must look like NAME=ext1,ext2 (got {item!r})"
            )
        values = [e.strip() for e in exts.split(",") if e.strip()]
        if not values:
            raise typer.BadParameter(f"category {name!r} lists no extensions")
        table.setdefault(name, []).extend(values)
    return table
