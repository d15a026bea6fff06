"""Quality gate result reporting and formatting.

Turns the per-table gate summaries into console tables, JSON or plain
text for logs and run manifests.
"""

import json
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table

type ReportFormat = str  # "table" | "json" | "summary"

console = Console()


def build_gate_report(results: list[dict], output_format: ReportFormat = "table") -> str:
    match output_format:
        case "json":
            return _to_json(results)
        case "summary":
            return _to_summary(results)
        case "table":
            return _to_table(results)
        case other:
            raise ValueError(f"Unsupported report format: {other}")


def _to_json(results: list[dict]) -> str:
    report = {
        "timestamp": datetime.now().isoformat(),
        "tables": len(results),
        "failed": sum(1 for r in results if r["status"] == "failed"),
        "results": results,
    }
    return json.dumps(report, indent=2)


def _to_summary(results: list[dict]) -> str:
    lines = []
    for r in results:
        lines.append(f"[{r['table']}] {r['passed']}/{r['total']} passed ({r['status']})")
        for failure in r["failed_expectations"]:
            lines.append(f"  FAIL: {failure}")
    return "\n".join(lines)


def _to_table(results: list[dict]) -> str:
    table = Table(title="Output quality gate")
    table.add_column("Table", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Passed", justify="right")
    table.add_column("Failures")

    for r in results:
        match r["status"]:
            case "passed":
                status = "[green]PASS[/green]"
            case "warning":
                status = "[yellow]WARN[/yellow]"
            case _:
                status = "[red]FAIL[/red]"
        table.add_row(
            r["table"],
            status,
            f"{r['passed']}/{r['total']}",
            "\n".join(r["failed_expectations"]),
        )

    buf = Console(file=None, force_terminal=False, width=120)
    with buf.capture() as capture:
        buf.print(table)
    return capture.get()


def save_gate_report(results: list[dict], output_dir: Path) -> Path:
    """Persist the gate results as JSON next to the run outputs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = output_dir / f"quality_gate_{timestamp}.json"
    path.write_text(_to_json(results))
    console.print(f"  Report saved: {path}")
    return path
