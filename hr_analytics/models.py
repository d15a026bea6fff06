"""Pandera schemas and column layouts for the four HR source tables."""

import pandera as pa
from pandera import Column, Check

KEY = "emp_id"
YES, NO = "Yes", "No"
FLAG_VALUES = [YES, NO]

# Raw export headers that do not snake_case into the canonical name
COLUMN_ALIASES = {
    "higher_education": "education",
    "empid": KEY,
    "employee_id": KEY,
}

PROFILE_COLUMNS = [
    KEY, "gender", "marital_status", "education", "department", "job_role",
    "business_travel", "mode_of_work", "over_time", "age", "total_working_years",
]
COMPENSATION_COLUMNS = [
    KEY, "monthly_income", "job_satisfaction", "training_times_last_year",
    "percent_salary_hike", "stock_option_level",
]
LEAVE_COLUMNS = [
    KEY, "source_of_hire", "work_accident", "job_mode", "leaves", "absenteeism",
]
TENURE_COLUMNS = [
    KEY, "date_of_hire", "years_at_company", "years_since_last_promotion",
    "attrition", "status_of_leaving",
]

REQUIRED_COLUMNS = {
    "profile": PROFILE_COLUMNS,
    "compensation": COMPENSATION_COLUMNS,
    "leave": LEAVE_COLUMNS,
    "tenure": TENURE_COLUMNS,
}

FLAG_COLUMNS = {
    "profile": ["over_time"],
    "leave": ["work_accident"],
    "tenure": ["attrition"],
}

NUMERIC_COLUMNS = {
    "profile": ["age", "total_working_years"],
    "compensation": [
        "monthly_income", "job_satisfaction", "training_times_last_year",
        "percent_salary_hike", "stock_option_level",
    ],
    "leave": ["leaves", "absenteeism"],
    "tenure": ["years_at_company", "years_since_last_promotion"],
}

# Final Record layout, in output order, with the table each field comes from
FINAL_RECORD_COLUMNS = {
    KEY: "profile",
    "gender": "profile",
    "marital_status": "profile",
    "education": "profile",
    "department": "profile",
    "job_role": "profile",
    "business_travel": "profile",
    "job_mode": "profile",
    "mode_of_work": "profile",
    "over_time": "profile",
    "age_group": "profile",
    "exp_level": "profile",
    "monthly_income": "compensation",
    "job_satisfaction": "compensation",
    "training_times_last_year": "compensation",
    "source_of_hire": "leave",
    "work_accident": "leave",
    "attrition": "tenure",
    "status_of_leaving": "tenure",
    "hire_year": "tenure",
    "hire_decade": "tenure",
    "years_at_company": "tenure",
    "tenure_band": "tenure",
    "promotion_status": "tenure",
}


profile_schema = pa.DataFrameSchema(
    {
        KEY: Column(nullable=False),
        "gender": Column(str, nullable=True),
        "education": Column(str, nullable=True),
        "department": Column(str, nullable=False),
        "over_time": Column(str, Check.isin(FLAG_VALUES), nullable=True),
        "age": Column(float, Check.in_range(0, 120), nullable=False),
        "total_working_years": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
    },
    strict=False,
    coerce=True,
)


compensation_schema = pa.DataFrameSchema(
    {
        # null keys are listed by the quality checks rather than rejected here
        KEY: Column(nullable=True),
        "monthly_income": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "job_satisfaction": Column(float, Check.in_range(1, 4), nullable=True),
        "training_times_last_year": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "percent_salary_hike": Column(float, nullable=True),
        "stock_option_level": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
    },
    strict=False,
    coerce=True,
)


leave_schema = pa.DataFrameSchema(
    {
        KEY: Column(nullable=False),
        "source_of_hire": Column(str, nullable=True),
        "work_accident": Column(str, Check.isin(FLAG_VALUES), nullable=True),
        "leaves": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "absenteeism": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
    },
    strict=False,
    coerce=True,
)


tenure_schema = pa.DataFrameSchema(
    {
        KEY: Column(nullable=False, unique=True),
        "date_of_hire": Column(pa.DateTime, nullable=True),
        "years_at_company": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "years_since_last_promotion": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "attrition": Column(str, Check.isin(FLAG_VALUES), nullable=False),
        "status_of_leaving": Column(str, nullable=True),
    },
    strict=False,
    coerce=True,
)


final_record_schema = pa.DataFrameSchema(
    {
        KEY: Column(nullable=False),
        "department": Column(str),
        "age_group": Column(str, Check.isin(["Below 25", "25-35", "35-50", "Above 50"])),
        "attrition": Column(str, Check.isin(FLAG_VALUES)),
        "tenure_band": Column(str),
        "promotion_status": Column(str),
    },
    strict=False,
    coerce=True,
)


SCHEMAS = {
    "profile": profile_schema,
    "compensation": compensation_schema,
    "leave": leave_schema,
    "tenure": tenure_schema,
    "final_records": final_record_schema,
}
