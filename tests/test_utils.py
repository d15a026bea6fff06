import pandas as pd
import pytest

from hr_analytics.models import SCHEMAS
from hr_analytics.utils.io import output_path, read_table, write_output
from hr_analytics.utils.transforms import (
    count_by,
    merge_datasets,
    normalize_columns,
    round_half_up,
    to_snake_case,
    truncate,
)
from hr_analytics.utils.validators import collect_errors, validate_dataframe, validate_tables


@pytest.mark.parametrize("raw, expected", [
    ("EmpID", "emp_id"),
    ("MonthlyIncome", "monthly_income"),
    ("Date_of_Hire", "date_of_hire"),
    ("YearsSinceLastPromotion", "years_since_last_promotion"),
    (" Job_mode ", "job_mode"),
])
def test_to_snake_case(raw, expected):
    assert to_snake_case(raw) == expected


def test_normalize_columns_applies_mapping():
    df = pd.DataFrame(columns=["EmpID", "Higher_Education"])
    result = normalize_columns(df, {"empid": "emp_id", "higher_education": "education"})
    assert list(result.columns) == ["emp_id", "education"]
    assert list(df.columns) == ["EmpID", "Higher_Education"]


def test_round_half_up():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -3.0
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(pd.Series([1.05, 2.45]), 1).tolist() == [1.1, 2.5]


def test_truncate():
    assert truncate(2.75, 1) == 2.7
    assert truncate(-2.75, 1) == -2.7
    assert truncate(pd.Series([3.0, 2.99]), 1).tolist() == [3.0, 2.9]


def test_merge_drops_null_keys():
    left = pd.DataFrame({"k": ["1", None], "a": [1, 2]})
    right = pd.DataFrame({"k": ["1", None], "b": [3, 4]})
    assert merge_datasets(left, right, "k").to_dict("records") == [{"k": "1", "a": 1, "b": 3}]


def test_merge_rejects_unknown_join():
    frame = pd.DataFrame({"k": [1]})
    with pytest.raises(ValueError, match="Unsupported merge type"):
        merge_datasets(frame, frame, "k", how="cross")


def test_count_by_keeps_null_group():
    df = pd.DataFrame({"g": ["a", None, None], "v": [1, None, 2]})
    assert count_by(df, "g")["count"].tolist() == [1, 2]
    assert count_by(df, "g", value="v")["count"].tolist() == [1, 1]


def test_read_and_write_roundtrip_csv(tmp_path):
    df = pd.DataFrame({"emp_id": ["1", "2"], "age": [30, 40]})
    path = write_output(df, output_path(tmp_path, "people", "csv"), "csv")
    assert path == tmp_path / "people.csv"
    assert read_table(path)["age"].tolist() == [30, 40]


def test_read_table_falls_back_to_latin1(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("name,city\nJosé,Zürich\n".encode("latin-1"))
    assert read_table(path).at[0, "city"] == "Zürich"


def test_read_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "absent.csv")


def test_unsupported_output_format(tmp_path):
    with pytest.raises(ValueError):
        output_path(tmp_path, "x", "xlsx")


def test_validate_dataframe_collects_failures(tenure):
    assert validate_dataframe(tenure, SCHEMAS["tenure"])["valid"]

    broken = tenure.copy()
    broken.loc[0, "attrition"] = "Perhaps"
    result = validate_dataframe(broken, SCHEMAS["tenure"])
    assert not result["valid"]
    assert any("attrition" in error for error in result["errors"])


def test_validate_tables_skips_tables_without_schema(tenure):
    broken = tenure.copy()
    broken.loc[0, "years_at_company"] = -1
    results = validate_tables({"tenure": broken, "scratch": pd.DataFrame({"x": [1]})}, SCHEMAS)

    assert list(results) == ["tenure"]
    errors = collect_errors(results)
    assert errors and all(error.startswith("tenure: ") for error in errors)
