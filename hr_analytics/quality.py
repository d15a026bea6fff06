"""Data-quality listings and rule-based corrections for the source tables.

Nothing here raises on bad data. Out-of-range ages, null keys and duplicate
keys are returned as listings for a person to act on, and the two education
rules rewrite values to fixed labels instead of dropping records.
"""

import logging
from dataclasses import dataclass, field

import pandas as pd

from hr_analytics.config import QualityConfig
from hr_analytics.models import KEY

logger = logging.getLogger(__name__)

type Listing = pd.DataFrame


@dataclass
class QualityReport:
    profile: pd.DataFrame
    listings: dict[str, Listing] = field(default_factory=dict)
    corrections: dict[str, list[str]] = field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        return sum(len(listing) for listing in self.listings.values())

    @property
    def clean(self) -> bool:
        return self.issue_count == 0

    def add(self, name: str, listing: Listing) -> None:
        self.listings[name] = listing
        if listing.empty:
            logger.info("[quality] %s: no records", name)
        else:
            logger.warning("[quality] %s: %d records need review", name, len(listing))

    def summary(self) -> dict[str, int]:
        counts = {name: len(listing) for name, listing in self.listings.items()}
        counts.update({name: len(ids) for name, ids in self.corrections.items()})
        return counts


def _education_matches(education: pd.Series, labels: tuple[str, ...]) -> pd.Series:
    """Case-insensitive membership test, as the source database compared text."""
    wanted = {label.casefold() for label in labels}
    return education.map(lambda value: isinstance(value, str) and value.casefold() in wanted).astype(bool)


def find_age_outliers(profile: pd.DataFrame, min_age: int = 18, max_age: int = 60) -> Listing:
    """Records whose age lies outside ``[min_age, max_age]``."""
    age = pd.to_numeric(profile["age"], errors="coerce")
    return profile[(age < min_age) | (age > max_age)]


def correct_underage_education(
    profile: pd.DataFrame,
    config: QualityConfig = QualityConfig(),
) -> tuple[pd.DataFrame, list[str]]:
    """Rewrite postgraduate and doctoral education to the below-secondary label
    for anyone younger than ``config.underage_education_age``.

    Returns the corrected copy and the ids that were rewritten.
    """
    df = profile.copy()
    age = pd.to_numeric(df["age"], errors="coerce")
    labels = config.postgraduate_labels + config.doctorate_labels
    mask = (age < config.underage_education_age) & _education_matches(df["education"], labels)

    df.loc[mask, "education"] = config.below_secondary_label
    corrected = df.loc[mask, KEY].astype(str).tolist()
    if corrected:
        logger.warning(
            "Rewrote education to %r for %d underage records",
            config.below_secondary_label,
            len(corrected),
        )
    return df, corrected


def flag_education_for_review(
    profile: pd.DataFrame,
    config: QualityConfig = QualityConfig(),
) -> tuple[pd.DataFrame, list[str]]:
    """Mark doctoral education under ``config.review_education_age`` for manual review."""
    df = profile.copy()
    age = pd.to_numeric(df["age"], errors="coerce")
    mask = (age < config.review_education_age) & _education_matches(
        df["education"], config.doctorate_labels
    )

    df.loc[mask, "education"] = config.needs_review_label
    flagged = df.loc[mask, KEY].astype(str).tolist()
    if flagged:
        logger.warning("Flagged %d education values for review", len(flagged))
    return df, flagged


def find_null_ids(df: pd.DataFrame) -> Listing:
    return df[df[KEY].isna()]


def find_duplicate_ids(df: pd.DataFrame) -> Listing:
    """Keys that occur more than once, with their occurrence count."""
    counts = df.groupby(KEY, dropna=False).size().reset_index(name="count")
    return counts[counts["count"] > 1].reset_index(drop=True)


def run_quality_checks(
    profile: pd.DataFrame,
    compensation: pd.DataFrame,
    leave: pd.DataFrame,
    config: QualityConfig = QualityConfig(),
) -> QualityReport:
    """Run every listing and apply both education rules, in order."""
    logger.info("Running data-quality checks")
    report = QualityReport(profile=profile)

    report.add("age_out_of_range", find_age_outliers(profile, config.min_age, config.max_age))

    corrected, rewritten = correct_underage_education(profile, config)
    corrected, flagged = flag_education_for_review(corrected, config)
    report.profile = corrected
    report.corrections = {
        "education_below_secondary": rewritten,
        "education_needs_review": flagged,
    }

    report.add("compensation_null_ids", find_null_ids(compensation))
    report.add("leave_duplicate_ids", find_duplicate_ids(leave))

    logger.info("Quality checks complete: %d records listed for review", report.issue_count)
    return report
