"""Pipeline configuration and environment setup."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from hr_analytics.utils.io import load_toml_config

type ConfigDict = dict[str, str | int | bool | list[str]]

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_VAR = "HR_ANALYTICS_ENV"


@dataclass(frozen=True)
class InputConfig:
    directory: Path
    profile_file: str = "hr_basic_profile.csv"
    compensation_file: str = "hr_compensation_performance.csv"
    leave_file: str = "hr_leave_recruitment.csv"
    tenure_file: str = "tenure_attrition.csv"
    separator: str = ","

    def table_paths(self) -> dict[str, Path]:
        return {
            "profile": self.directory / self.profile_file,
            "compensation": self.directory / self.compensation_file,
            "leave": self.directory / self.leave_file,
            "tenure": self.directory / self.tenure_file,
        }


@dataclass(frozen=True)
class OutputConfig:
    directory: Path
    format: str = "csv"


@dataclass(frozen=True)
class QualityConfig:
    min_age: int = 18
    max_age: int = 60
    # ages strictly below these bounds trigger the education rewrites
    underage_education_age: int = 20
    review_education_age: int = 25
    # the source database writes "12th" for below-secondary education
    below_secondary_label: str = "12th"
    needs_review_label: str = "Needs Review"
    postgraduate_labels: tuple[str, ...] = ("Post-Graduation", "Post-Graduate")
    doctorate_labels: tuple[str, ...] = ("PHD", "PhD")


@dataclass(frozen=True)
class PipelineConfig:
    env: str
    inputs: InputConfig
    outputs: OutputConfig
    quality: QualityConfig = field(default_factory=QualityConfig)
    run_quality_gate: bool = True
    fail_on_quality_gate: bool = False


def load_pipeline_config(env: str | None = None, root: Path = PROJECT_ROOT) -> PipelineConfig:
    """Build the config for ``env`` and apply project-level overrides."""
    overrides = get_env_config(root)
    env = env or os.environ.get(ENV_VAR) or overrides.get("env", "production")

    match env:
        case "production":
            inputs = InputConfig(directory=Path("/data/hr/raw"))
            outputs = OutputConfig(directory=Path("/data/hr/output"), format="parquet")
            gate = dict(run_quality_gate=True, fail_on_quality_gate=True)
        case "staging":
            inputs = InputConfig(directory=Path("/data/hr-staging/raw"))
            outputs = OutputConfig(directory=Path("/data/hr-staging/output"))
            gate = dict(run_quality_gate=True, fail_on_quality_gate=False)
        case "development":
            inputs = InputConfig(directory=root / "data" / "raw")
            outputs = OutputConfig(directory=root / "data" / "output")
            gate = dict(run_quality_gate=True, fail_on_quality_gate=False)
        case "test":
            inputs = InputConfig(directory=root / "tests" / "data")
            outputs = OutputConfig(directory=root / "build" / "test-output")
            gate = dict(run_quality_gate=False, fail_on_quality_gate=False)
        case other:
            raise ValueError(f"Unknown environment: {other}")

    config = PipelineConfig(env=env, inputs=inputs, outputs=outputs, **gate)
    return apply_overrides(config, overrides, root)


def apply_overrides(config: PipelineConfig, overrides: ConfigDict, root: Path = PROJECT_ROOT) -> PipelineConfig:
    """Layer flat ``key = value`` overrides onto a config."""
    inputs, outputs, quality = config.inputs, config.outputs, config.quality
    top_level = {}

    for key, value in overrides.items():
        match key:
            case "env":
                continue
            case "input_dir":
                inputs = replace(inputs, directory=_resolve(value, root))
            case "output_dir":
                outputs = replace(outputs, directory=_resolve(value, root))
            case "output_format":
                outputs = replace(outputs, format=str(value))
            case "separator":
                inputs = replace(inputs, separator=str(value))
            case "profile_file" | "compensation_file" | "leave_file" | "tenure_file":
                inputs = replace(inputs, **{key: str(value)})
            case "min_age" | "max_age" | "underage_education_age" | "review_education_age":
                quality = replace(quality, **{key: int(value)})
            case "below_secondary_label" | "needs_review_label":
                quality = replace(quality, **{key: str(value)})
            case "postgraduate_labels" | "doctorate_labels":
                quality = replace(quality, **{key: tuple(value)})
            case "run_quality_gate" | "fail_on_quality_gate":
                top_level[key] = bool(value)
            case unknown:
                raise ValueError(f"Unknown configuration key: {unknown}")

    return replace(config, inputs=inputs, outputs=outputs, quality=quality, **top_level)


def get_env_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read overrides from pyproject.toml, then hr_analytics.yaml if present."""
    overrides: ConfigDict = {}

    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        data = load_toml_config(pyproject)
        overrides.update(data.get("tool", {}).get("hr_analytics", {}))

    yaml_path = root / "hr_analytics.yaml"
    if yaml_path.exists():
        with open(yaml_path) as f:
            overrides.update(yaml.safe_load(f) or {})

    return overrides


def _resolve(value: str | Path, root: Path) -> Path:
    path = Path(value)
    return path if path.is_absolute() else root / path
