#!/usr/bin/env python3
"""Dependency doctor for ``dayboard check-deps``.

Lists every runtime distribution with its installed version, then checks the
configured display timezone resolves against the local tz database. Exit code
0 means the environment can run the API; 1 means something is missing.
"""

from __future__ import annotations

import sys
from importlib import import_module, metadata

from rich.console import Console
from rich.table import Table

from dayboard.backend.core.planning import resolve_timezone

# import-name → distribution name on the index
PACKAGES: dict[str, str] = {
    "fastapi": "fastapi",
    "uvicorn": "uvicorn",
    "pydantic": "pydantic",
    "yaml": "pyyaml",
    "rich": "rich",
    "click": "click",
    "requests": "requests",
    "tzdata": "tzdata",
}


def _installed_version(module: str, distribution: str) -> str | None:
    try:
        import_module(module)
    except ImportError:
        return None
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "?"


def main(timezone_name: str = "Asia/Seoul", console: Console | None = None) -> int:
    """
    Report missing packages and an unusable display timezone.

    Args:
        timezone_name: ``calendar.timezone`` from the loaded configuration
        console: Where to print (a fresh stdout console by default)

    Returns:
        Process exit code
    """
    console = console or Console()
    table = Table(title="Runtime packages", show_lines=False)
    table.add_column("Package", style="bold")
    table.add_column("Version")
    missing: list[str] = []
    for module, distribution in PACKAGES.items():
        version = _installed_version(module, distribution)
        if version is None:
            missing.append(distribution)
            table.add_row(distribution, "[red]missing[/red]")
        else:
            table.add_row(distribution, f"[green]{version}[/green]")
    console.print(table)

    try:
        resolve_timezone(timezone_name)
        console.print(f"Display timezone [bold]{timezone_name}[/bold] [green]ok[/green]")
        tz_ok = True
    except ValueError as e:
        console.print(f"[red]{e}[/red] (set calendar.timezone or DAYBOARD_TIMEZONE)")
        tz_ok = False

    if missing:
        console.print(f"\n[yellow]Install with:[/yellow] pip install {' '.join(missing)}  (or pip install -e .)")
    if missing or not tz_ok:
        return 1
    console.print("\n[green]Environment ready[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
