"""Derive band and total columns on the cleaned source tables."""

import logging

import pandas as pd

from hr_analytics.bands import (
    AGE_GROUP,
    EXPERIENCE_LEVEL,
    HIRE_DECADE,
    PROMOTION_STATUS,
    TENURE_BAND,
    BandRules,
)
from hr_analytics.utils.types import SourceTables

logger = logging.getLogger(__name__)


def _add_band(df: pd.DataFrame, band: BandRules) -> pd.DataFrame:
    df[band.name] = band.apply(df)
    logger.debug("%s: %s", band.name, df[band.name].value_counts().to_dict())
    return df


def enrich_profile(profile: pd.DataFrame) -> pd.DataFrame:
    """Add ``age_group`` and ``exp_level``."""
    df = profile.copy()
    df = _add_band(df, AGE_GROUP)
    df = _add_band(df, EXPERIENCE_LEVEL)
    return df


def enrich_leave(leave: pd.DataFrame) -> pd.DataFrame:
    """Add ``total_off_days`` (leaves plus absenteeism, null if either is null)."""
    df = leave.copy()
    df["total_off_days"] = df["leaves"] + df["absenteeism"]
    return df


def enrich_tenure(tenure: pd.DataFrame) -> pd.DataFrame:
    """Add ``hire_year`` and the decade, tenure and promotion bands."""
    df = tenure.copy()
    df["hire_year"] = pd.to_datetime(df["date_of_hire"], errors="coerce").dt.year.astype("Int64")
    df = _add_band(df, HIRE_DECADE)
    df = _add_band(df, TENURE_BAND)
    df = _add_band(df, PROMOTION_STATUS)
    return df


def enrich_tables(tables: SourceTables) -> SourceTables:
    """Enrich every source table that has derived fields.

    Bands are recomputed from the underlying numeric fields on every call,
    so enriching already-enriched tables gives the same result.
    """
    enriched = dict(tables)
    enriched["profile"] = enrich_profile(tables["profile"])
    enriched["leave"] = enrich_leave(tables["leave"])
    enriched["tenure"] = enrich_tenure(tables["tenure"])
    logger.info(
        "Enriched %d profile, %d leave and %d tenure records",
        len(enriched["profile"]),
        len(enriched["leave"]),
        len(enriched["tenure"]),
    )
    return enriched
