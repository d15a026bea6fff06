"""Shared type definitions for the HR analytics pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

import pandas as pd


type TableName = str
type SourceTables = dict[TableName, pd.DataFrame]
type ReportTables = dict[str, pd.DataFrame]


class PipelineStatus(StrEnum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class DataQuality(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PipelineContext:
    env: str
    run_id: str
    start_time: datetime = field(default_factory=datetime.now)
    write_outputs: bool = True


@dataclass(frozen=True)
class DatasetMetadata:
    name: str
    row_count: int
    column_count: int

    @classmethod
    def from_frame(cls, name: str, df: pd.DataFrame) -> "DatasetMetadata":
        return cls(name=name, row_count=len(df), column_count=len(df.columns))


def classify_quality(coverage: float, validity: float) -> DataQuality:
    """Grade a run from join coverage and the share of rows passing checks."""
    match (coverage, validity):
        case (c, v) if c > 0.95 and v > 0.95:
            return DataQuality.HIGH
        case (c, v) if c > 0.80 and v > 0.80:
            return DataQuality.MEDIUM
        case (c, v) if c > 0.50 or v > 0.50:
            return DataQuality.LOW
        case _:
            return DataQuality.UNKNOWN
