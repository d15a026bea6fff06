from pathlib import Path

import pytest

from hr_analytics.config import QualityConfig, apply_overrides, get_env_config, load_pipeline_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("HR_ANALYTICS_ENV", raising=False)


def test_default_env_is_production(tmp_path):
    config = load_pipeline_config(root=tmp_path)
    assert config.env == "production"
    assert config.outputs.format == "parquet"
    assert config.fail_on_quality_gate


def test_test_env_paths_are_relative_to_root(tmp_path):
    config = load_pipeline_config("test", root=tmp_path)
    assert config.inputs.directory == tmp_path / "tests" / "data"
    assert config.outputs.directory == tmp_path / "build" / "test-output"
    assert not config.run_quality_gate


def test_env_variable_selects_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HR_ANALYTICS_ENV", "staging")
    assert load_pipeline_config(root=tmp_path).env == "staging"


def test_unknown_env_raises(tmp_path):
    with pytest.raises(ValueError, match="Unknown environment"):
        load_pipeline_config("qa", root=tmp_path)


def test_pyproject_section_overrides(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.hr_analytics]\nenv = "development"\ninput_dir = "exports"\nmin_age = 21\n'
    )
    config = load_pipeline_config(root=tmp_path)

    assert config.env == "development"
    assert config.inputs.directory == tmp_path / "exports"
    assert config.quality.min_age == 21
    assert config.quality.max_age == 60


def test_yaml_file_wins_over_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.hr_analytics]\noutput_format = "json"\n')
    (tmp_path / "hr_analytics.yaml").write_text("output_format: csv\nneeds_review_label: Review\n")

    overrides = get_env_config(tmp_path)
    assert overrides == {"output_format": "csv", "needs_review_label": "Review"}

    config = load_pipeline_config("test", root=tmp_path)
    assert config.outputs.format == "csv"
    assert config.quality.needs_review_label == "Review"


def test_absolute_override_paths_kept(tmp_path):
    base = load_pipeline_config("test", root=tmp_path)
    config = apply_overrides(base, {"output_dir": "/srv/hr"}, tmp_path)
    assert config.outputs.directory == Path("/srv/hr")


def test_unknown_override_key_raises(tmp_path):
    base = load_pipeline_config("test", root=tmp_path)
    with pytest.raises(ValueError, match="Unknown configuration key"):
        apply_overrides(base, {"colour": "blue"}, tmp_path)


def test_quality_defaults():
    quality = QualityConfig()
    assert (quality.min_age, quality.max_age) == (18, 60)
    assert quality.below_secondary_label == "12th"
    assert "PhD" in quality.doctorate_labels
