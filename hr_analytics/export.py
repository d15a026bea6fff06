"""Write pipeline outputs: enriched tables, final records, listings and reports."""

import json
from pathlib import Path

import pandas as pd
from rich.console import Console

from hr_analytics.config import OutputConfig
from hr_analytics.utils.io import output_path, write_output
from hr_analytics.utils.types import ReportTables, SourceTables

console = Console()

MANIFEST_NAME = "run_manifest.json"


def write_pipeline_output(
    outputs: OutputConfig,
    tables: SourceTables,
    listings: dict[str, pd.DataFrame],
    reports: ReportTables,
    manifest: dict,
) -> list[Path]:
    """Write every artifact of a run under ``outputs.directory``.

    Layout::

        <dir>/tables/<table>.<fmt>      enriched sources and final_records
        <dir>/quality/<listing>.<fmt>   rows flagged for review
        <dir>/reports/<report>.<fmt>    aggregate reports
        <dir>/run_manifest.json
    """
    base = Path(outputs.directory)
    fmt = outputs.format
    console.print(f"  Writing outputs to {base} ({fmt})")

    written = []
    for name, df in tables.items():
        written.append(write_output(df, output_path(base / "tables", name, fmt), fmt))

    # empty listings are written too
    for name, df in listings.items():
        written.append(write_output(df, output_path(base / "quality", name, fmt), fmt))

    for name, df in reports.items():
        written.append(write_output(df, output_path(base / "reports", name, fmt), fmt))

    manifest_path = base / MANIFEST_NAME
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(json.dumps(manifest, indent=2, default=str))
    written.append(manifest_path)

    console.print(f"  Export complete: {len(written)} files")
    return written
