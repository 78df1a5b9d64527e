"""Typer CLI for holidaycal."""

from __future__ import annotations

import datetime
import json
import logging
import pathlib
import sys

import typer

from holidaycal.exceptions import HolidayError
from holidaycal.holidays import HolidayRecord, HolidayType
from holidaycal.registry import CountryYearResult, build_year, supported_countries
from holidaycal.translations import BASE_LOCALE, resolve_name

app = typer.Typer(
    name="holidaycal",
    help="Public, religious and observed holidays per country and year.",
    add_completion=False,
)

TYPE_CHOICES = [t.value for t in HolidayType]
DEFAULT_COUNTRY = "us"


def _parse_date(value: str) -> datetime.date:
    """Parse a YYYY-MM-DD date string."""
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date format {value!r}. Use YYYY-MM-DD.") from None


def _parse_type(value: str) -> HolidayType:
    try:
        return HolidayType(value.lower())
    except ValueError:
        raise typer.BadParameter(
            f"Invalid holiday type {value!r}. Choose from: {', '.join(TYPE_CHOICES)}"
        ) from None


def _current_year() -> int:
    return datetime.date.today().year


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------


def _load_config(path: str) -> dict[str, object]:
    """Load and validate a JSON config file."""
    p = pathlib.Path(path)
    if not p.exists():
        raise _fail(f"Config file not found: {path}")

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise _fail(f"Invalid JSON in config file: {exc}") from None

    if not isinstance(data, dict):
        raise _fail("Config file must contain a JSON object.")
    if "holidays" in data and not isinstance(data["holidays"], list):
        raise _fail("'holidays' must be a list.")
    if "types" in data and not isinstance(data["types"], list):
        raise _fail("'types' must be a list.")
    if "year" in data and (isinstance(data["year"], bool) or not isinstance(data["year"], int)):
        raise _fail(f"'year' must be an integer, got {data['year']!r}.")

    return data


def _custom_record(raw: object, index: int, result: CountryYearResult) -> HolidayRecord:
    """Build a record from a config entry: a date string or ``{key, date, type, names}``."""
    if isinstance(raw, str):
        raw = {"date": raw}
    if not isinstance(raw, dict) or "date" not in raw:
        raise _fail(f"Custom holiday #{index + 1} needs a 'date'.")

    d = _parse_date(str(raw["date"]))
    if d.year != result.year:
        raise _fail(f"Custom holiday {d} does not fall in {result.year}.")

    names = raw.get("names", {})
    if isinstance(names, str):
        names = {BASE_LOCALE: names}
    return HolidayRecord(
        key=str(raw.get("key", f"customHoliday{index + 1}")),
        date=d,
        type=_parse_type(str(raw.get("type", HolidayType.OTHER.value))),
        localized_names=dict(names),
        timezone=result.country.timezone,
        locale=result.locale,
    )


def _cli_holiday(value: str, index: int) -> dict[str, object]:
    """``YYYY-MM-DD`` or ``YYYY-MM-DD=Name`` from ``--holiday``."""
    date_part, _, name = value.partition("=")
    entry: dict[str, object] = {"date": date_part, "key": f"cliHoliday{index + 1}"}
    if name:
        entry["names"] = name
    return entry


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _serialize(record: HolidayRecord, locale: str) -> dict[str, object]:
    return {
        "key": record.key,
        "date": record.date.isoformat(),
        "type": record.type.value,
        "name": resolve_name(record, locale),
    }


def _print_text(result: CountryYearResult, records: list[HolidayRecord], locale: str) -> None:
    typer.echo(f"  {result.country.name} ({result.country.code}) holidays {result.year}")
    typer.echo()
    for r in records:
        typer.echo(
            f"    {r.date.strftime('%a, %b %d'):>12}  {resolve_name(r, locale):<40} {r.type.value}"
        )
    typer.echo()
    typer.echo(f"  {len(records)} holidays.")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_holidays(
    country: str | None = typer.Option(
        None,
        "--country",
        "-c",
        help="Country name or ISO code. Defaults to 'us'.",
    ),
    year: int | None = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
    locale: str | None = typer.Option(
        None,
        "--locale",
        "-l",
        help="Display locale, e.g. nl_NL. Defaults to the country's locale.",
    ),
    holiday_type: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--type",
        "-t",
        help=f"Only show holidays of this type ({', '.join(TYPE_CHOICES)}). Repeatable.",
    ),
    holiday: list[str] | None = typer.Option(  # noqa: B008
        None,
        "--holiday",
        "-H",
        help="Additional holiday date (YYYY-MM-DD or YYYY-MM-DD=Name). Repeatable.",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Path to a JSON config file (country, year, locale, types, holidays).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log rule evaluation to stderr.",
    ),
) -> None:
    """List the holidays of a country, sorted by date."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s", force=True
        )

    data = _load_config(config) if config is not None else {}

    resolved_country = country or str(data.get("country", DEFAULT_COUNTRY))
    resolved_year = year if year is not None else int(data.get("year", _current_year()))  # type: ignore[arg-type]
    resolved_locale = locale or data.get("locale")
    raw_types = holiday_type or data.get("types") or []
    types = {_parse_type(str(t)) for t in raw_types}  # type: ignore[union-attr]

    try:
        result = build_year(resolved_country, resolved_year, resolved_locale)  # type: ignore[arg-type]
        extra = list(data.get("holidays", []))  # type: ignore[call-overload]
        extra += [_cli_holiday(h, i) for i, h in enumerate(holiday or [])]
        if extra:
            result = result.with_holidays(_custom_record(raw, i, result) for i, raw in enumerate(extra))
    except HolidayError as exc:
        raise _fail(str(exc)) from None

    records = [r for r in result.sorted_by_date() if not types or r.type in types]

    if output_json:
        output = {
            "country": result.country.name,
            "year": result.year,
            "locale": result.locale,
            "holidays": [_serialize(r, result.locale) for r in records],
        }
        json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
        typer.echo()
        return

    _print_text(result, records, result.locale)


@app.command()
def countries() -> None:
    """List the supported countries."""
    for c in supported_countries():
        typer.echo(f"  {c.code}  {c.name:<14} {c.timezone:<20} {c.locale}")


def main() -> None:
    """Entry point for the CLI."""
    app()
