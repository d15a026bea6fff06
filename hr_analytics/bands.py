"""Ordered, first-match-wins banding rules.

Each band is a list of ``(predicate, label)`` pairs plus a mandatory default.
Rules are evaluated top to bottom and the first predicate that holds decides
the label, exactly like a SQL ``CASE WHEN ... ELSE`` chain. Predicates take
their inputs by column name and are written with ``&`` / comparison
operators, so the same rule works on scalars and on whole columns.
"""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
import pandas as pd

type Predicate = Callable[..., bool | pd.Series]
type Rule = tuple[Predicate, str]


def between(value, low, high):
    """Inclusive range check, like SQL ``BETWEEN``."""
    return (value >= low) & (value <= high)


def _as_mask(condition: bool | pd.Series, length: int) -> np.ndarray:
    if isinstance(condition, pd.Series):
        return condition.fillna(False).to_numpy(dtype=bool)
    return np.full(length, bool(condition))


@dataclass(frozen=True)
class BandRules:
    name: str
    inputs: tuple[str, ...]
    rules: tuple[Rule, ...]
    default: str

    @property
    def labels(self) -> list[str]:
        return [label for _, label in self.rules] + [self.default]

    def classify(self, *args, **values) -> str:
        """Band a single record.

        Null inputs never satisfy a predicate, so they land in the default.
        """
        values.update(zip(self.inputs, args))
        if any(pd.isna(values[name]) for name in self.inputs):
            return self.default
        for predicate, label in self.rules:
            if predicate(**values):
                return label
        return self.default

    def apply(self, df: pd.DataFrame) -> pd.Series:
        """Band every row of ``df`` using the columns named in ``inputs``."""
        columns = {name: pd.to_numeric(df[name], errors="coerce") for name in self.inputs}
        conditions = [_as_mask(predicate(**columns), len(df)) for predicate, _ in self.rules]
        choices = [label for _, label in self.rules]
        banded = np.select(conditions, choices, default=self.default)
        return pd.Series(banded, index=df.index, name=self.name, dtype=object)


AGE_GROUP = BandRules(
    name="age_group",
    inputs=("age",),
    rules=(
        (lambda age: age < 25, "Below 25"),
        (lambda age: between(age, 25, 35), "25-35"),
        # 35 is matched by the rule above
        (lambda age: between(age, 35, 50), "35-50"),
    ),
    default="Above 50",
)

EXPERIENCE_LEVEL = BandRules(
    name="exp_level",
    inputs=("total_working_years",),
    rules=(
        (lambda total_working_years: total_working_years < 2, "Fresher"),
        (lambda total_working_years: between(total_working_years, 2, 5), "Junior"),
        (lambda total_working_years: between(total_working_years, 6, 10), "Mid-level"),
    ),
    default="Senior",
)

HIRE_DECADE = BandRules(
    name="hire_decade",
    inputs=("hire_year",),
    rules=(
        (lambda hire_year: between(hire_year, 1969, 1989), "Before 1990"),
        (lambda hire_year: between(hire_year, 1990, 1999), "1990-1999"),
        (lambda hire_year: between(hire_year, 2000, 2009), "2000-2009"),
        (lambda hire_year: between(hire_year, 2010, 2019), "2010-2019"),
    ),
    default="Latest hirings",
)

TENURE_BAND = BandRules(
    name="tenure_band",
    inputs=("years_at_company",),
    rules=(
        (lambda years_at_company: between(years_at_company, 0, 1), "New Joiner"),
        (lambda years_at_company: between(years_at_company, 2, 5), "Early career"),
        (lambda years_at_company: between(years_at_company, 6, 12), "Experienced"),
        (lambda years_at_company: between(years_at_company, 13, 20), "Long-term"),
    ),
    default="Senior-most",
)

PROMOTION_STATUS = BandRules(
    name="promotion_status",
    inputs=("years_at_company", "years_since_last_promotion"),
    rules=(
        (
            lambda years_at_company, years_since_last_promotion:
                (years_at_company <= 1) & (years_since_last_promotion == 0),
            "New hire",
        ),
        (
            lambda years_at_company, years_since_last_promotion:
                (years_at_company > 1) & (years_since_last_promotion == 0),
            "Just promoted",
        ),
        (
            lambda years_at_company, years_since_last_promotion:
                between(years_since_last_promotion, 1, 3),
            "Recently promoted",
        ),
        (
            lambda years_at_company, years_since_last_promotion:
                between(years_since_last_promotion, 4, 7),
            "Promotion delayed",
        ),
    ),
    default="Needs promotion",
)

ALL_BANDS = (AGE_GROUP, EXPERIENCE_LEVEL, HIRE_DECADE, TENURE_BAND, PROMOTION_STATUS)
