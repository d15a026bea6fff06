import numpy as np
import pandas as pd
import pytest

from hr_analytics.bands import (
    AGE_GROUP,
    ALL_BANDS,
    EXPERIENCE_LEVEL,
    HIRE_DECADE,
    PROMOTION_STATUS,
    TENURE_BAND,
    BandRules,
)


@pytest.mark.parametrize(
    "age, expected",
    [
        (0, "Below 25"),
        (24, "Below 25"),
        (25, "25-35"),
        (35, "25-35"),
        (36, "35-50"),
        (50, "35-50"),
        (51, "Above 50"),
        (120, "Above 50"),
    ],
)
def test_age_group_boundaries(age, expected):
    assert AGE_GROUP.classify(age) == expected


def test_age_group_is_total_over_plausible_ages():
    ages = pd.DataFrame({"age": range(0, 121)})
    banded = AGE_GROUP.apply(ages)

    assert banded.notna().all()
    assert set(banded) <= set(AGE_GROUP.labels)
    assert [AGE_GROUP.classify(age) for age in range(0, 121)] == banded.tolist()


def test_first_matching_rule_wins():
    overlapping = BandRules(
        name="overlap",
        inputs=("x",),
        rules=((lambda x: x >= 0, "first"), (lambda x: x >= 0, "second")),
        default="none",
    )
    assert overlapping.classify(5) == "first"
    assert overlapping.apply(pd.DataFrame({"x": [5, -1]})).tolist() == ["first", "none"]


@pytest.mark.parametrize(
    "years, expected",
    [(0, "Fresher"), (1, "Fresher"), (2, "Junior"), (5, "Junior"), (6, "Mid-level"),
     (10, "Mid-level"), (11, "Senior"), (40, "Senior")],
)
def test_experience_level(years, expected):
    assert EXPERIENCE_LEVEL.classify(total_working_years=years) == expected


def test_fractional_experience_between_ranges_falls_to_default():
    assert EXPERIENCE_LEVEL.classify(5.5) == "Senior"


@pytest.mark.parametrize(
    "year, expected",
    [
        (1968, "Latest hirings"),
        (1969, "Before 1990"),
        (1989, "Before 1990"),
        (1990, "1990-1999"),
        (2009, "2000-2009"),
        (2010, "2010-2019"),
        (2019, "2010-2019"),
        (2020, "Latest hirings"),
    ],
)
def test_hire_decade(year, expected):
    assert HIRE_DECADE.classify(year) == expected


@pytest.mark.parametrize(
    "years, expected",
    [(0, "New Joiner"), (1, "New Joiner"), (2, "Early career"), (5, "Early career"),
     (6, "Experienced"), (12, "Experienced"), (13, "Long-term"), (20, "Long-term"),
     (21, "Senior-most")],
)
def test_tenure_band(years, expected):
    assert TENURE_BAND.classify(years) == expected


@pytest.mark.parametrize(
    "tenure, since_promotion, expected",
    [
        (0, 0, "New hire"),
        (1, 0, "New hire"),
        (2, 0, "Just promoted"),
        (1, 1, "Recently promoted"),
        (10, 3, "Recently promoted"),
        (10, 4, "Promotion delayed"),
        (10, 7, "Promotion delayed"),
        (10, 8, "Needs promotion"),
    ],
)
def test_promotion_status(tenure, since_promotion, expected):
    assert PROMOTION_STATUS.classify(tenure, since_promotion) == expected


def test_null_inputs_land_in_default():
    assert AGE_GROUP.classify(np.nan) == "Above 50"
    frame = pd.DataFrame({"years_at_company": [np.nan, 3], "years_since_last_promotion": [0, np.nan]})
    assert PROMOTION_STATUS.apply(frame).tolist() == ["Needs promotion", "Needs promotion"]


def test_apply_handles_nullable_integers():
    frame = pd.DataFrame({"hire_year": pd.array([1995, None, 2021], dtype="Int64")})
    assert HIRE_DECADE.apply(frame).tolist() == ["1990-1999", "Latest hirings", "Latest hirings"]


def test_apply_on_empty_frame():
    banded = TENURE_BAND.apply(pd.DataFrame({"years_at_company": pd.Series([], dtype=float)}))
    assert banded.empty


def test_every_band_has_a_default():
    for band in ALL_BANDS:
        assert band.default
        assert band.labels[-1] == band.default
