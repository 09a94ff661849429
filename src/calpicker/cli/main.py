"""calpicker CLI — Typer 기반."""

import logging
from datetime import date

import typer
from pydantic import ValidationError

from calpicker.config import PickerConfig
from calpicker.exceptions import CalPickerError, ConfigError, SelectionModeError
from calpicker.logging_config import setup_logging
from calpicker.models import DateList, DateRange, MonthView, Selection, dump_json
from calpicker.services.cell_classifier import build_month_view
from calpicker.services.date_utils import parse_date, weekday_name
from calpicker.services.range_selector import handle_date_click, range_state
from calpicker.services.week_grid import get_ordered_weekdays

logger = logging.getLogger(__name__)

app = typer.Typer(help="Calendar month grid and date-range selection")

VALID_MODES = {"single", "range", "multi"}

LEGEND = "[dd] selected  =dd= in range  ~dd~ hover preview  -dd- disabled  *dd* today"


def _echo(msg: str = "", err: bool = False) -> None:
    typer.echo(msg, err=err)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
) -> None:
    """Calendar month grid and date-range selection."""
    level = logging.DEBUG if verbose else logging.INFO
    setup_logging(level)


def _get_config() -> PickerConfig:
    try:
        return PickerConfig()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration ({problems})") from e


def _handle_error(e: CalPickerError) -> None:
    _echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _parse_optional(value: str | None) -> date | None:
    return parse_date(value) if value else None


def _parse_range(value: str) -> DateRange:
    """'2026-10-01:2026-10-05' 또는 '2026-10-01' (1일 범위)."""
    start, _, end = value.partition(":")
    start_date = parse_date(start)
    return DateRange(start=start_date, end=parse_date(end) if end else start_date)


def _parse_dates(value: str) -> DateList:
    return DateList(tuple(parse_date(v) for v in value.split(",") if v.strip()))


def _resolve_mode(
    mode: str | None, config: PickerConfig, range_: str | None, dates: str | None
) -> str:
    if range_ and dates:
        raise SelectionModeError("--range and --dates cannot be combined")
    if mode is None:
        if dates or config.multi_date:
            return "multi"
        if range_ or config.allow_range:
            return "range"
        return "single"
    if mode not in VALID_MODES:
        valid = ", ".join(sorted(VALID_MODES))
        _echo(f"Error: Invalid mode '{mode}'. Must be one of: {valid}", err=True)
        raise typer.Exit(code=1)
    return mode


def _parse_selection(range_: str | None, dates: str | None) -> Selection:
    if range_:
        return _parse_range(range_)
    if dates:
        return _parse_dates(dates)
    return None


def _apply_mode(config: PickerConfig, mode: str, week_starts_on: int | None) -> PickerConfig:
    update = {"allow_range": mode == "range", "multi_date": mode == "multi"}
    if week_starts_on is not None:
        update["week_starts_on"] = week_starts_on
    return config.model_copy(update=update)


def _format_selection(selection: Selection) -> str:
    if isinstance(selection, DateRange):
        state = range_state(selection).value
        return f"{selection.start.isoformat()} → {selection.end.isoformat()} ({state})"
    if isinstance(selection, DateList):
        return ", ".join(d.isoformat() for d in selection.dates) or "(empty)"
    return "(none)"


def _format_cell(day: date | None, flags, today: date) -> str:
    if day is None:
        return "    "
    text = f"{day.day:02d}"
    if flags.selected:
        return f"[{text}]"
    if flags.in_range:
        return f"={text}="
    if flags.in_hovering_range:
        return f"~{text}~"
    if flags.disabled:
        return f"-{text}-"
    if day == today:
        return f"*{text}*"
    return f" {text} "


def _render_month(view: MonthView, today: date) -> list[str]:
    title = f"{view.name.capitalize()} {view.year}"
    if view.current:
        title += " (current)"
    lines = [title]
    lines.append(" ".join(f" {h.name[:2].capitalize()} " for h in view.weekdays))
    for week in view.weeks:
        lines.append(" ".join(_format_cell(c.day, c.flags, today) for c in week))
    return lines


@app.command()
def month(
    year: int = typer.Argument(help="Year, e.g. 2026"),
    month_number: int = typer.Argument(help="Month (1-12)", min=1, max=12, metavar="MONTH"),
    week_starts_on: int = typer.Option(
        None, "--week-starts-on", "-w", min=0, max=6, help="0 = Sunday (default: config)"
    ),
    mode: str = typer.Option(None, "--mode", "-m", help="single, range, or multi"),
    range_: str = typer.Option(None, "--range", "-r", help="START[:END] (YYYY-MM-DD)"),
    dates: str = typer.Option(None, "--dates", "-d", help="Comma-separated dates"),
    hover: str = typer.Option(None, help="Hovered date (YYYY-MM-DD)"),
    focus: str = typer.Option(None, help="Focused date (YYYY-MM-DD)"),
    disable_before: str = typer.Option(None, help="Disable dates before (YYYY-MM-DD)"),
    disable_after: str = typer.Option(None, help="Disable dates after (YYYY-MM-DD)"),
    disable: list[str] = typer.Option(None, "--disable", help="Disable a specific date"),
    today: str = typer.Option(None, help="Reference 'today' (default: system date)"),
    json_out: bool = typer.Option(False, "--json", help="Print the month view as JSON"),
) -> None:
    """Print a week-aligned month grid with selection markers."""
    try:
        config = _get_config()
        resolved = _resolve_mode(mode, config, range_, dates)
        config = _apply_mode(config, resolved, week_starts_on)

        overrides = {}
        if disable_before:
            overrides["disable_dates_before"] = parse_date(disable_before)
        if disable_after:
            overrides["disable_dates_after"] = parse_date(disable_after)
        if disable:
            overrides["disable_specific_dates"] = [parse_date(v) for v in disable]
        if overrides:
            config = config.model_copy(update=overrides)

        now = _parse_optional(today) or date.today()
        view = build_month_view(
            month_number - 1,
            year,
            config=config,
            now=now,
            selection=_parse_selection(range_, dates),
            hover_date=_parse_optional(hover),
            focused_date=_parse_optional(focus),
        )
    except CalPickerError as e:
        _handle_error(e)

    if json_out:
        _echo(dump_json(view))
        return
    for line in _render_month(view, now):
        _echo(line)
    _echo()
    _echo(LEGEND)


@app.command()
def click(
    target_date: str = typer.Argument(help="Clicked date (YYYY-MM-DD)"),
    mode: str = typer.Option(None, "--mode", "-m", help="single, range, or multi"),
    range_: str = typer.Option(None, "--range", "-r", help="Current START[:END]"),
    dates: str = typer.Option(None, "--dates", "-d", help="Current comma-separated dates"),
    json_out: bool = typer.Option(False, "--json", help="Print the new selection as JSON"),
) -> None:
    """Apply one click to the current selection and print the result."""
    try:
        config = _get_config()
        resolved = _resolve_mode(mode, config, range_, dates)
        clicked = parse_date(target_date)
        new_selection = handle_date_click(
            _parse_selection(range_, dates),
            clicked,
            allow_range=resolved == "range",
            multi_date=resolved == "multi",
        )
    except CalPickerError as e:
        _handle_error(e)

    logger.debug("Click %s in %s mode -> %s", clicked, resolved, new_selection)
    if json_out:
        _echo(dump_json(new_selection))
    else:
        _echo(f"Selection: {_format_selection(new_selection)}")


@app.command()
def weekdays(
    week_starts_on: int = typer.Option(
        None, "--week-starts-on", "-w", min=0, max=6, help="0 = Sunday (default: config)"
    ),
) -> None:
    """Print weekday keys in column order."""
    if week_starts_on is None:
        try:
            week_starts_on = _get_config().week_starts_on
        except CalPickerError as e:
            _handle_error(e)
    for wd in get_ordered_weekdays(week_starts_on):
        _echo(f"{int(wd)} {weekday_name(wd)}")
