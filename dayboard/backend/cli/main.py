#!/usr/bin/env python3
"""
Dayboard command line.

Entry points for running and inspecting the planning dashboard:
1. ``serve``      – run the HTTP API with uvicorn
2. ``agenda``     – sign in and print a day's schedules with their progress
3. ``terms``      – print the day's glossary terms
4. ``check-deps`` – verify every runtime package can be imported
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from dayboard.backend.core.errors import DayboardError
from dayboard.backend.core.planning import (
    aggregate_progress,
    local_today,
    priority_label,
    progress_message,
    resolve_timezone,
    schedule_progress,
    schedules_on,
)
from dayboard.backend.core.utils.config import apply_env_overrides, get_default_config, load_config
from dayboard.backend.core.utils.logging_setup import setup_from_config

console = Console()

DEFAULT_CONFIG = "configs/default_config.yaml"


def print_banner():
    """Print the project banner."""
    banner = """
╔══════════════════════════════════════════════════════════════╗
║     Dayboard – schedules, to-dos, memos and the day's terms  ║
╚══════════════════════════════════════════════════════════════╝
    """
    console.print(banner, style="bold blue")


def _load(config: str | None) -> dict:
    """Explicit file, else the default file if present, else built-in defaults."""
    if config:
        return load_config(config)
    if Path(DEFAULT_CONFIG).exists():
        return load_config(DEFAULT_CONFIG)
    return apply_env_overrides(get_default_config())


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    default=None,
    help=f"Path to configuration file (default: {DEFAULT_CONFIG} if present).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug mode with additional logging.")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool, debug: bool):
    """Personal planning dashboard backend."""
    try:
        cfg = _load(config)
    except FileNotFoundError as e:
        console.print(f"\n[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(1) from e

    setup_from_config(cfg["logging"], verbose=verbose, debug=debug)

    ctx.obj = {"config": cfg, "debug": debug}


@main.command()
@click.option("--host", default=None, help="Bind address (default from config).")
@click.option("--port", type=int, default=None, help="Port (default from config).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Run the HTTP API."""
    import uvicorn

    from dayboard.backend.api.app import create_app

    cfg = ctx.obj["config"]
    host = host or cfg["server"]["host"]
    port = port or int(cfg["server"]["port"])
    print_banner()
    console.print(f"  Serving on [bold]http://{host}:{port}/api[/bold]")
    if reload:
        # uvicorn needs an import string to reload; that instance resolves its own config.
        uvicorn.run("dayboard.backend.api.app:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(create_app(cfg), host=host, port=port)


@main.command()
@click.option("--username", "-u", prompt=True, help="Login handle.")
@click.option("--password", "-p", prompt=True, hide_input=True, help="Password.")
@click.option(
    "--day",
    "-d",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day to show (default: today).",
)
@click.pass_context
def agenda(ctx: click.Context, username: str, password: str, day: datetime | None):
    """Sign in and print a day's schedules with their progress.

    Needs ``backend.mode: rest``; the in-memory backend starts empty in every
    process, so there is no account to sign in to.
    """
    from dayboard.backend.services import Workspace

    logger = logging.getLogger(__name__)
    cfg = ctx.obj["config"]
    if cfg["backend"]["mode"] != "rest":
        console.print(
            "\n[bold red]agenda needs a hosted backend:[/bold red] set backend.mode to rest "
            "(or DAYBOARD_BACKEND_MODE=rest) with its url and key."
        )
        raise SystemExit(1)

    workspace = Workspace(cfg)
    target = day.date() if day else workspace.today()
    try:
        workspace.auth.sign_in(username, password)
        stores = workspace.stores
        items = schedules_on(stores.schedules.items, target, workspace.tz)

        table = Table(title=f"Agenda for {target.isoformat()}")
        table.add_column("Title", style="bold")
        table.add_column("Category")
        table.add_column("Priority")
        table.add_column("Progress", justify="right")
        table.add_column("Done", justify="center")
        for item in items:
            table.add_row(
                item.title,
                stores.categories.lookup(item.category_id).name,
                priority_label(item.priority),
                f"{schedule_progress(item, tz=workspace.tz)}%",
                "✓" if item.completed else "",
            )
        console.print(table)

        percent = aggregate_progress(items, tz=workspace.tz)
        console.print(f"\n[bold]Overall progress:[/bold] {percent}%")
        message = progress_message(percent)
        if message:
            console.print(f"[cyan]{message}[/cyan]")

    except DayboardError as e:
        console.print(f"\n[bold red]{e.kind} error:[/bold red] {e.message}")
        logger.debug("Agenda failed", exc_info=True)
        if ctx.obj["debug"]:
            raise
        raise SystemExit(1) from e
    finally:
        workspace.close()


@main.command()
@click.option("--reshuffle", is_flag=True, default=False, help="Draw a fresh set for today.")
@click.pass_context
def terms(ctx: click.Context, reshuffle: bool):
    """Print today's glossary terms."""
    from dayboard.backend.core.glossary import DailyTerms
    from dayboard.backend.core.utils.storage import LocalStorage

    cfg = ctx.obj["config"]
    today = local_today(resolve_timezone(cfg["calendar"]["timezone"]))
    daily = DailyTerms(LocalStorage(cfg["storage"]["path"]))
    picked = daily.reshuffle(today) if reshuffle else daily.today(today)
    console.print(f"[bold cyan]Terms for {today.isoformat()}[/bold cyan]")
    for label in picked:
        console.print(f"  • {label}")


@main.command("check-deps")
@click.pass_context
def check_deps(ctx: click.Context):
    """Verify every runtime package and the display timezone are usable."""
    from dayboard.backend.cli.check_deps import main as run_check

    raise SystemExit(run_check(ctx.obj["config"]["calendar"]["timezone"], console))


if __name__ == "__main__":
    main()
