import pandas as pd
import pytest

from hr_analytics.config import InputConfig
from hr_analytics.exceptions import IngestError
from hr_analytics.ingest import ingest_hr_tables, normalize_flag, prepare_table


def test_headers_normalized_to_snake_case(profile, tenure):
    assert {"emp_id", "marital_status", "education", "job_role", "over_time", "total_working_years"} <= set(
        profile.columns
    )
    assert {"date_of_hire", "years_since_last_promotion", "status_of_leaving"} <= set(tenure.columns)


def test_keys_are_trimmed_strings():
    raw = pd.DataFrame({"EmpID": [7.0, " 8 ", None], "Source_of_hire": ["a", "b", "c"],
                        "Work_accident": ["No"] * 3, "Job_mode": ["FullTime"] * 3,
                        "Leaves": [1, 2, 3], "Absenteeism": [0, 0, 0]})
    leave = prepare_table(raw, "leave")
    assert leave["emp_id"].tolist()[:2] == ["7", "8"]
    assert leave["emp_id"].isna().tolist() == [False, False, True]


@pytest.mark.parametrize("raw, expected", [
    ("Yes", "Yes"), (" y ", "Yes"), ("TRUE", "Yes"), (1, "Yes"),
    ("no", "No"), ("N", "No"), ("false", "No"), (0, "No"),
])
def test_normalize_flag(raw, expected):
    assert normalize_flag(raw) == expected


def test_unknown_flag_is_left_alone():
    assert normalize_flag("maybe") == "maybe"


def test_numeric_columns_coerced(compensation):
    assert pd.api.types.is_numeric_dtype(compensation["monthly_income"])


def test_bad_numbers_become_null():
    raw = pd.DataFrame({"EmpID": [1, 2], "MonthlyIncome": ["1000", "n/a"], "JobSatisfaction": [3, 4],
                        "TrainingTimesLastYear": [1, 2], "PercentSalaryHike": [11, 12], "StockOptionLevel": [0, 1]})
    compensation = prepare_table(raw, "compensation")
    assert compensation["monthly_income"].isna().tolist() == [False, True]


def test_hire_dates_parsed(tenure):
    assert pd.api.types.is_datetime64_any_dtype(tenure["date_of_hire"])


def test_missing_required_column_raises():
    raw = pd.DataFrame({"EmpID": [1], "Attrition": ["No"]})
    with pytest.raises(IngestError) as excinfo:
        prepare_table(raw, "tenure")
    assert excinfo.value.details["table_name"] == "tenure"
    assert "years_at_company" in excinfo.value.details["missing_columns"]


def test_ingest_hr_tables_loads_all_four(raw_dir):
    tables = ingest_hr_tables(InputConfig(directory=raw_dir))
    assert {name: len(df) for name, df in tables.items()} == {
        "profile": 8, "compensation": 9, "leave": 9, "tenure": 7,
    }


def test_dry_run_checks_files_only(raw_dir, tmp_path):
    assert ingest_hr_tables(InputConfig(directory=raw_dir), dry_run=True) == {}

    with pytest.raises(FileNotFoundError):
        ingest_hr_tables(InputConfig(directory=tmp_path / "nowhere"), dry_run=True)


def test_missing_file_raises(raw_dir):
    (raw_dir / "tenure_attrition.csv").unlink()
    with pytest.raises(FileNotFoundError):
        ingest_hr_tables(InputConfig(directory=raw_dir))
