"""
Command-line interface.

    plaace-report extract SHEET.csv [--json]
    plaace-report process MANIFEST.json [--output-dir DIR]

A manifest is a JSON list of {"id": ..., "name": ..., "csv_path": ...}.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from .assemble import assemble_document
from .config import configure_logging, get_settings
from .extract import extract_records
from .models import Property, Record
from .storage import ReportError, read_report, write_document
from .table import parse_table

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="plaace-report",
    help="Extract market actors from exported location-analysis sheets",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides REPORT_LOG_LEVEL"),
):
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


def _fmt(value) -> str:
    """Numbers print the way the site shows them: 88, not 88.0."""
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@app.command()
def extract(
    sheet: Path = typer.Argument(..., help="Exported CSV sheet"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
):
    """Print the actors found in one sheet."""
    try:
        text, _ = read_report(sheet)
    except ReportError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    records = extract_records(parse_table(text))

    if as_json:
        typer.echo(json.dumps([r.model_dump(by_alias=True) for r in records], indent=2, ensure_ascii=False))
        return

    table = Table(title=f"{sheet.name}: {len(records)} actors")
    table.add_column("Name")
    table.add_column("Revenue (MNOK)", justify="right")
    table.add_column("YoY %", justify="right")
    table.add_column("Employees", justify="right")
    table.add_column("Share %", justify="right")
    for r in records:
        table.add_row(
            r.name,
            _fmt(r.revenue),
            _fmt(r.year_over_year_growth),
            _fmt(r.employee_count),
            _fmt(r.market_share),
        )
    console.print(table)


def load_manifest(path: Path) -> List[Property]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return TypeAdapter(List[Property]).validate_python(data)


def process_property(prop: Property, output_dir: Path) -> List[Record]:
    if not prop.csv_path:
        raise ReportError(f"no csv_path for {prop.id}")

    text, _ = read_report(Path(prop.csv_path))
    records = extract_records(parse_table(text))
    write_document(assemble_document(prop, records), output_dir)
    return records


@app.command()
def process(
    manifest: Path = typer.Argument(..., help="JSON list of properties"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Overrides REPORT_OUTPUT_DIR"),
):
    """Build and write one property document per manifest entry."""
    try:
        properties = load_manifest(manifest)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[red]Invalid manifest {manifest}: {e}[/red]")
        raise typer.Exit(1)

    output_dir = output_dir or get_settings().output_dir
    failed = 0

    for prop in properties:
        console.print(f"\nProcessing {prop.name}...")
        try:
            records = process_property(prop, output_dir)
        except (ReportError, OSError) as e:
            failed += 1
            logger.warning("failed to process %s: %s", prop.id, e)
            console.print(f"  [red]✗ {e}[/red]")
            continue

        console.print(f"  Found {len(records)} actors")
        console.print(f"  [green]✓[/green] Created {Path(output_dir) / (prop.id + '.json')}")
        if records:
            console.print(f"  Sample actor: {records[0].name} - {_fmt(records[0].revenue)}M NOK")

    if failed:
        console.print(f"\n[red]{failed} of {len(properties)} properties failed[/red]")
        raise typer.Exit(1)
    console.print("\n[green]✓ All properties processed![/green]")


if __name__ == "__main__":
    app()
