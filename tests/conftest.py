"""Shared fixtures: a small HR dataset in the raw export layout."""

from dataclasses import replace
from pathlib import Path

import pandas as pd
import pytest

from hr_analytics.config import load_pipeline_config
from hr_analytics.ingest import prepare_table

PROFILE_CSV = """\
EmpID,Gender,MaritalStatus,Higher_Education,Department,JobRole,BusinessTravel,Job_mode,Mode_of_work,OverTime,Age,TotalWorkingYears
1,Male,Single,Graduation,Sales,Sales Executive,Travel_Rarely,FullTime,WFO,Yes,24,1
2,Female,Married,PHD,R&D,Scientist,Non-Travel,FullTime,WFH,No,19,1
3,Male,Married,PHD,R&D,Scientist,Travel_Rarely,PartTime,WFO,No,23,2
4,Female,Single,Post-Graduation,HR,Recruiter,Travel_Frequently,FullTime,WFO,Yes,35,10
5,Male,Divorced,Graduation,Sales,Manager,Travel_Rarely,FullTime,WFH,No,50,20
6,Female,Married,Post-Graduation,R&D,Director,Non-Travel,FullTime,WFO,Yes,62,30
7,Male,Single,Graduation,Sales,Sales Representative,Travel_Rarely,PartTime,WFO,No,17,0
8,Female,Married,Graduation,HR,Manager,Travel_Rarely,FullTime,WFH,No,45,15
"""

COMPENSATION_CSV = """\
EmpID,MonthlyIncome,JobSatisfaction,TrainingTimesLastYear,PercentSalaryHike,StockOptionLevel
1,3000,4,2,11,0
2,2500,3,3,12,1
3,4000,2,2,15,1
4,5000,4,3,14,0
5,9000,1,1,20,2
6,12000,3,2,13,2
7,1500,2,0,11,0
8,7000,4,4,19,1
,3500,1,2,12,0
"""

LEAVE_CSV = """\
EmpID,Source_of_hire,Work_accident,Job_mode,Leaves,Absenteeism
1,Job Portal,No,FullTime,2,1
2,Referral,No,FullTime,3,0
3,Walk-in,Yes,PartTime,1,2
4,Job Portal,No,FullTime,4,1
5,Recruiter,No,FullTime,0,3
6,Referral,Yes,FullTime,5,2
7,Walk-in,No,PartTime,2,4
8,Referral,No,FullTime,1,1
8,Referral,No,FullTime,1,1
"""

TENURE_CSV = """\
EmpID,Date_of_Hire,YearsAtCompany,YearsSinceLastPromotion,Attrition,Status_of_leaving
1,2023-03-01,1,0,Yes,Resigned
2,2024-06-15,0,0,No,
3,2022-01-10,2,0,No,
4,2015-07-01,8,3,Yes,Resigned
5,2004-02-20,20,8,No,
6,1988-09-01,30,5,Yes,Retired
7,2024-01-05,1,1,Yes,Terminated
"""

SOURCE_FILES = {
    "hr_basic_profile.csv": PROFILE_CSV,
    "hr_compensation_performance.csv": COMPENSATION_CSV,
    "hr_leave_recruitment.csv": LEAVE_CSV,
    "tenure_attrition.csv": TENURE_CSV,
}


def write_sources(directory: Path, files: dict[str, str] = SOURCE_FILES) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (directory / name).write_text(content)
    return directory


@pytest.fixture
def raw_dir(tmp_path: Path) -> Path:
    return write_sources(tmp_path / "raw")


@pytest.fixture
def config(tmp_path: Path, raw_dir: Path):
    base = load_pipeline_config("test", root=tmp_path)
    return replace(
        base,
        inputs=replace(base.inputs, directory=raw_dir),
        outputs=replace(base.outputs, directory=tmp_path / "output"),
    )


@pytest.fixture
def raw_tables(raw_dir: Path) -> dict[str, pd.DataFrame]:
    files = {
        "profile": "hr_basic_profile.csv",
        "compensation": "hr_compensation_performance.csv",
        "leave": "hr_leave_recruitment.csv",
        "tenure": "tenure_attrition.csv",
    }
    return {name: prepare_table(pd.read_csv(raw_dir / file), name) for name, file in files.items()}


@pytest.fixture
def profile(raw_tables) -> pd.DataFrame:
    return raw_tables["profile"]


@pytest.fixture
def compensation(raw_tables) -> pd.DataFrame:
    return raw_tables["compensation"]


@pytest.fixture
def leave(raw_tables) -> pd.DataFrame:
    return raw_tables["leave"]


@pytest.fixture
def tenure(raw_tables) -> pd.DataFrame:
    return raw_tables["tenure"]
