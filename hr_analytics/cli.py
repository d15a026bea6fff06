"""Command-line runner: validates inputs or executes the full HR pipeline."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

import hr_analytics
from hr_analytics.config import PipelineConfig, load_pipeline_config
from hr_analytics.exceptions import PipelineError
from hr_analytics.reports import REPORTS, print_reports
from hr_analytics.utils.io import SUPPORTED_FORMATS
from hr_analytics.validation.reporters import build_gate_report

console = Console()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def build_config(args: argparse.Namespace) -> PipelineConfig:
    config = load_pipeline_config(args.env)
    if args.input_dir:
        config = replace(config, inputs=replace(config.inputs, directory=Path(args.input_dir)))
    if args.output_dir:
        config = replace(config, outputs=replace(config.outputs, directory=Path(args.output_dir)))
    if args.format:
        config = replace(config, outputs=replace(config.outputs, format=args.format))
    if args.skip_gate:
        config = replace(config, run_quality_gate=False)
    return config


def print_validation(outcome: dict) -> bool:
    table = Table(title="Input Validation")
    table.add_column("Check")
    table.add_column("Valid")
    table.add_column("Details")

    match outcome:
        case {"status": "ok", "rows_available": rows}:
            table.add_row("source tables", "[green]✓[/green]", f"{rows} rows available")
            valid = True
        case {"status": "error", "errors": errors}:
            for error in errors:
                table.add_row("schema", "[red]✗[/red]", error)
            valid = False
        case {"status": "error", "message": msg}:
            table.add_row("source tables", "[red]✗[/red]", msg)
            valid = False
        case _:
            table.add_row("source tables", "[red]✗[/red]", "Unknown validation result")
            valid = False

    console.print(table)
    return valid


def print_run_summary(result: hr_analytics.PipelineResult) -> None:
    table = Table(title=f"Run {result.context.run_id}")
    table.add_column("Stage")
    table.add_column("Result")

    table.add_row("Final records", str(len(result.final)))
    table.add_row("Excluded by join", str(result.join.excluded_count))
    for name, count in result.quality.summary().items():
        table.add_row(f"quality: {name}", str(count))
    for gate in result.gate:
        table.add_row(f"gate: {gate['table']}", gate["status"])
    table.add_row("Status", str(result.status))
    console.print(table)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the HR analytics pipeline")
    parser.add_argument("--env", type=str, help="Configuration environment")
    parser.add_argument("--input-dir", type=str, help="Directory holding the four source tables")
    parser.add_argument("--output-dir", type=str, help="Directory for pipeline outputs")
    parser.add_argument("--format", choices=SUPPORTED_FORMATS, help="Output file format")
    parser.add_argument("--validate", action="store_true", help="Only validate inputs, don't run")
    parser.add_argument("--report", action="append", metavar="NAME", help="Build only these reports")
    parser.add_argument("--list-reports", action="store_true", help="List report names and exit")
    parser.add_argument("--no-write", action="store_true", help="Don't write outputs to disk")
    parser.add_argument("--show", action="store_true", help="Print every report to the console")
    parser.add_argument("--skip-gate", action="store_true", help="Skip the output quality gate")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    if args.list_reports:
        for name, spec in REPORTS.items():
            console.print(f"[cyan]{name}[/cyan]  {spec.title} [dim]({spec.source})[/dim]")
        return

    try:
        config = build_config(args)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    if args.validate:
        if not print_validation(hr_analytics.validate(config)):
            sys.exit(1)
        return

    if args.report:
        unknown = [name for name in args.report if name not in REPORTS]
        if unknown:
            console.print(f"[red]Unknown report(s): {', '.join(unknown)}[/red]")
            sys.exit(1)

    console.print("[bold]Running HR analytics pipeline...[/bold]")
    try:
        result = hr_analytics.run(config, report_names=args.report, write_outputs=not args.no_write)
    except (FileNotFoundError, PipelineError) as exc:
        console.print(f"[red]Pipeline failed: {exc}[/red]")
        sys.exit(1)

    if args.show:
        print_reports(result.reports)
        if result.gate:
            console.print(build_gate_report(result.gate, "table"))
    print_run_summary(result)


if __name__ == "__main__":
    main()
