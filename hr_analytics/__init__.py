"""HR analytics batch pipeline.

Cleans, bands, joins and aggregates the four HR case-study tables
(profile, compensation/performance, leave/recruitment, tenure/attrition)
into a Final Record table and a set of named reports.
"""

import logging
import uuid
from dataclasses import asdict, dataclass, field
from pathlib import Path

import pandas as pd

from hr_analytics.config import PipelineConfig, load_pipeline_config
from hr_analytics.export import write_pipeline_output
from hr_analytics.exceptions import IngestError, PipelineError, QualityGateError
from hr_analytics.ingest import ingest_hr_tables
from hr_analytics.join import JoinResult, build_final_records
from hr_analytics.models import SCHEMAS
from hr_analytics.quality import QualityReport, run_quality_checks
from hr_analytics.reports import build_reports
from hr_analytics.transform import enrich_tables
from hr_analytics.utils.types import (
    DatasetMetadata,
    PipelineContext,
    PipelineStatus,
    ReportTables,
    SourceTables,
    classify_quality,
)
from hr_analytics.utils.validators import collect_errors, validate_tables

__version__ = "0.4.0"

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    context: PipelineContext
    tables: SourceTables
    quality: QualityReport
    join: JoinResult
    reports: ReportTables
    schema_checks: dict[str, dict] = field(default_factory=dict)
    gate: list[dict] = field(default_factory=list)
    status: PipelineStatus = PipelineStatus.SUCCESS

    @property
    def final(self) -> pd.DataFrame:
        return self.join.final

    def manifest(self) -> dict:
        profile_rows = len(self.tables["profile"])
        coverage = len(self.final) / profile_rows if profile_rows else 0.0
        outliers = len(self.quality.listings.get("age_out_of_range", []))
        validity = 1 - outliers / profile_rows if profile_rows else 0.0
        return {
            "run_id": self.context.run_id,
            "env": self.context.env,
            "started_at": self.context.start_time.isoformat(),
            "status": str(self.status),
            "data_quality": str(classify_quality(coverage, validity)),
            "tables": [asdict(DatasetMetadata.from_frame(n, df)) for n, df in self.tables.items()],
            "quality_issues": self.quality.summary(),
            "excluded_ids": self.join.excluded_ids,
            "schema_checks": {n: r["valid"] for n, r in self.schema_checks.items()},
            "quality_gate": {r["table"]: r["status"] for r in self.gate},
            "reports": sorted(self.reports),
        }


def validate(config: PipelineConfig | None = None) -> dict[str, str | int | list[str]]:
    """Check that the source tables load and match their schemas. Never raises."""
    config = config or load_pipeline_config()
    try:
        tables = ingest_hr_tables(config.inputs)
    except (FileNotFoundError, IngestError, ValueError) as exc:
        return {"status": "error", "message": str(exc)}

    errors = collect_errors(validate_tables(tables, SCHEMAS))

    if errors:
        return {"status": "error", "message": f"{len(errors)} schema violations", "errors": errors}
    return {"status": "ok", "rows_available": sum(len(df) for df in tables.values())}


def run(
    config: PipelineConfig | None = None,
    report_names: list[str] | None = None,
    write_outputs: bool = True,
) -> PipelineResult:
    """Execute validate -> enrich -> join -> aggregate and write the outputs."""
    config = config or load_pipeline_config()
    context = PipelineContext(env=config.env, run_id=uuid.uuid4().hex[:8], write_outputs=write_outputs)
    logger.info("Starting HR analytics run %s (%s)", context.run_id, context.env)

    raw = ingest_hr_tables(config.inputs)
    schema_checks = validate_tables(raw, SCHEMAS)

    quality = run_quality_checks(raw["profile"], raw["compensation"], raw["leave"], config.quality)
    tables = enrich_tables({**raw, "profile": quality.profile})

    joined = build_final_records(tables["profile"], tables["compensation"], tables["leave"], tables["tenure"])
    tables["final_records"] = joined.final

    reports = build_reports(tables, report_names)
    result = PipelineResult(
        context=context,
        tables=tables,
        quality=quality,
        join=joined,
        reports=reports,
        schema_checks=schema_checks,
    )

    if config.run_quality_gate:
        from hr_analytics.validation import gate_passed, run_quality_gate, save_gate_report

        result.gate = run_quality_gate(tables, quality=config.quality)
        if write_outputs:
            save_gate_report(result.gate, Path(config.outputs.directory) / "quality")
        if not gate_passed(result.gate):
            result.status = PipelineStatus.FAILED

    # outputs are written whatever the gate says; a failed gate only decides the exit
    if write_outputs:
        write_pipeline_output(config.outputs, tables, quality.listings, reports, result.manifest())

    logger.info("Run %s finished: %s", context.run_id, result.status)
    if result.status == PipelineStatus.FAILED and config.fail_on_quality_gate:
        failed = [r["table"] for r in result.gate if r["status"] == "failed"]
        raise QualityGateError("Output quality gate failed", failed_tables=failed)
    return result


__all__ = [
    "PipelineError",
    "PipelineResult",
    "run",
    "validate",
]
