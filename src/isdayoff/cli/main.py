"""CLI de isdayoff (Typer + Rich).

Por qué una CLI fina:
- Toda la lógica vive en `IsDayOffClient`; aquí solo se parsean argumentos,
  se arma la configuración y se renderiza el resultado.
- `--json` permite usar la salida en pipelines.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from isdayoff.cli import doctor
from isdayoff.cli.ui_components import (
    build_day_panel,
    build_month_grid,
    build_span_table,
    build_summary_table,
)
from isdayoff.core.config import AppSettings
from isdayoff.core.domain.day_status import DayStatus
from isdayoff.core.domain.models import DayStatusSpan
from isdayoff.core.errors import IsDayOffError
from isdayoff.core.services.calendar_client import IsDayOffClient

T = TypeVar("T")

app = typer.Typer(
    no_args_is_help=True,
    help="Query the isdayoff.ru production calendar (workdays, days off, short days).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_DATE_FORMATS = ["%Y-%m-%d"]


@dataclass
class CliState:
    settings: AppSettings
    as_json: bool = False


def build_client(settings: AppSettings) -> IsDayOffClient:
    return IsDayOffClient(settings=settings)


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        state = CliState(settings=AppSettings())
        ctx.obj = state
    return state


def _run(state: CliState, call: Callable[[IsDayOffClient], Awaitable[T]]) -> tuple[IsDayOffClient, T]:
    async def _go() -> tuple[IsDayOffClient, T]:
        async with build_client(state.settings) as client:
            return client, await call(client)

    try:
        return asyncio.run(_go())
    except IsDayOffError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


async def _today(client: IsDayOffClient) -> tuple[date, DayStatus]:
    # Una sola lectura del reloj: la fecha mostrada es la consultada.
    day = client.clock.today()
    return day, await client.date(day.year, day.month, day.day)


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False))


def _render_day(state: CliState, day: date, status: DayStatus) -> None:
    if state.as_json:
        _print_json({"date": day.isoformat(), "status": int(status), "label": status.label()})
        return
    _console.print(build_day_panel(day, status))


def _render_span(state: CliState, span: DayStatusSpan, *, grid: bool = False) -> None:
    if state.as_json:
        _print_json(span.model_dump(mode="json"))
        return
    _console.print(build_month_grid(span) if grid else build_span_table(span))
    _console.print(build_summary_table(span))


@app.callback()
def main(
    ctx: typer.Context,
    country: str | None = typer.Option(None, "--country", "-c", help="Calendar country code (ru, by, kz, uz, tr)."),
    pre: bool = typer.Option(False, "--pre", help="Mark pre-holiday short days as 2."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    overrides: dict[str, Any] = {}
    if country is not None:
        overrides["country"] = country
    if pre:
        overrides["pre_holiday"] = True
    ctx.obj = CliState(settings=AppSettings(**overrides), as_json=as_json)


@app.command()
def today(ctx: typer.Context) -> None:
    """Status of the current local day."""

    state = _state(ctx)
    _, (day, status) = _run(state, _today)
    _render_day(state, day, status)


@app.command(name="date")
def date_(
    ctx: typer.Context,
    day: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Day to check (YYYY-MM-DD)."),
) -> None:
    """Status of a single day."""

    state = _state(ctx)
    _, status = _run(state, lambda c: c.date(day.year, day.month, day.day))
    _render_day(state, day.date(), status)


@app.command()
def month(
    ctx: typer.Context,
    year: int | None = typer.Option(None, "--year", "-y", min=1, max=9999, help="Year (defaults to current)."),
    month: int | None = typer.Option(None, "--month", "-m", min=1, max=12, help="Month (defaults to current)."),
) -> None:
    """Statuses of a whole month."""

    state = _state(ctx)
    _, span = _run(state, lambda c: c.month_calendar(year, month))
    _render_span(state, span, grid=True)


@app.command()
def year(
    ctx: typer.Context,
    year: int = typer.Argument(..., min=1, max=9999, help="Year to fetch."),
) -> None:
    """Statuses of a whole year (summary only unless --json)."""

    state = _state(ctx)
    _, span = _run(state, lambda c: c.year_calendar(year))
    if state.as_json:
        _print_json(span.model_dump(mode="json"))
        return
    _console.print(build_summary_table(span))


@app.command()
def period(
    ctx: typer.Context,
    start: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="First day (YYYY-MM-DD)."),
    end: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Last day, inclusive (YYYY-MM-DD)."),
) -> None:
    """Statuses of every day between START and END inclusive."""

    state = _state(ctx)
    _, span = _run(state, lambda c: c.period_calendar(start.date(), end.date()))
    _render_span(state, span)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
