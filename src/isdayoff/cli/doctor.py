"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from isdayoff.adapters.isdayoff_api import IsDayOffTransport
from isdayoff.core.config import AppSettings
from isdayoff.core.decoding import decode_single
from isdayoff.core.domain.models import YearMonthDayQuery
from isdayoff.core.errors import IsDayOffError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# 1 de enero: festivo en todos los calendarios que publica el servicio.
_CHECK_QUERY = YearMonthDayQuery(year=2024, month=1, day=1)


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    transport = IsDayOffTransport(settings)
    try:
        status = decode_single(await transport.fetch(_CHECK_QUERY))
    except IsDayOffError as exc:
        return False, str(exc)
    return True, f"2024-01-01 -> {status.label()}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show effective settings and check the remote API."""

    state = ctx.obj
    settings = getattr(state, "settings", None) or AppSettings()

    table = Table(title="isdayoff Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Country", "OK" if settings.country else "DEFAULT", settings.country or "service default")
    table.add_row("Pre-holiday days", "ON" if settings.pre_holiday else "OFF", "pre=1" if settings.pre_holiday else "-")

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)
