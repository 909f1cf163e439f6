"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import calendar
from datetime import date

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from isdayoff.core.domain.day_status import DayStatus
from isdayoff.core.domain.models import DayStatusSpan

STATUS_STYLES: dict[DayStatus, str] = {
    DayStatus.WORKDAY: "white",
    DayStatus.DAY_OFF: "bold red",
    DayStatus.SHORT_DAY: "yellow",
    DayStatus.UNKNOWN: "dim",
}


def status_text(status: DayStatus) -> Text:
    return Text(status.label(), style=STATUS_STYLES[status])


def build_day_panel(day: date, status: DayStatus) -> Panel:
    """Panel para un único día (`today`/`date`)."""

    body = Text.assemble(
        (day.isoformat(), "bold cyan"),
        "\n",
        status_text(status),
    )
    return Panel(body, border_style=STATUS_STYLES[status], padding=(1, 4))


def build_month_grid(span: DayStatusSpan) -> Table:
    """Rejilla semanal (lunes a domingo) de un mes completo.

    Asume que `span` empieza el día 1 del mes; los días que el servicio no
    devolvió se dejan vacíos.
    """

    year, month = span.start.year, span.start.month
    by_day = {d.day: s for d, s in span.days() if d.month == month}

    table = Table(title=f"{calendar.month_name[month]} {year}", show_lines=False)
    for name in calendar.day_abbr:
        table.add_column(name, justify="right")

    for week in calendar.Calendar().monthdayscalendar(year, month):
        cells: list[Text | str] = []
        for day in week:
            if day == 0 or day not in by_day:
                cells.append("" if day == 0 else str(day))
                continue
            cells.append(Text(str(day), style=STATUS_STYLES[by_day[day]]))
        table.add_row(*cells)
    return table


def build_span_table(span: DayStatusSpan) -> Table:
    """Tabla fecha/estado para periodos arbitrarios."""

    table = Table(title=f"{span.start.isoformat()} .. {span.end.isoformat()}")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Weekday", style="dim")
    table.add_column("Status")
    for day, status in span.days():
        table.add_row(day.isoformat(), day.strftime("%a"), status_text(status))
    return table


def build_summary_table(span: DayStatusSpan) -> Table:
    table = Table(title="Summary")
    table.add_column("Status", no_wrap=True)
    table.add_column("Days", justify="right")
    for status in DayStatus:
        table.add_row(status_text(status), str(span.count(status)))
    table.add_row(Text("Total", style="bold"), str(len(span)))
    return table
