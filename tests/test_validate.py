import io
import json

import pytest

from bizcase import validate
from bizcase.config import load_model_config, params_from_dict


def _flat(**overrides):
    d = {
        "initial_investment": 1000,
        "discount_rate": 5,
        "project_duration_months": 12,
        "annual_revenue_increase": 2400,
    }
    d.update(overrides)
    return d


def test_minimal_case_passes():
    validate.validate_params_dict(_flat())


def test_missing_key_raises():
    d = _flat()
    del d["discount_rate"]
    with pytest.raises(SystemExit, match="discount_rate"):
        validate.validate_params_dict(d)


@pytest.mark.parametrize(
    "key,value",
    [
        ("project_duration_months", 0),
        ("project_duration_months", 12.5),
        ("initial_investment", -1),
        ("discount_rate", "ten"),
        ("annual_revenue_growth_pct", -150),
    ],
)
def test_bad_values_raise(key, value):
    with pytest.raises(SystemExit):
        validate.validate_params_dict(_flat(**{key: value}))


def test_multiplier_ordering_rule():
    with pytest.raises(SystemExit, match="multiplier_ordering"):
        validate.validate_params_dict(_flat(best_case_multiplier=0.5, worst_case_multiplier=0.9))


def test_grouped_aliases_are_resolved():
    data = {
        "project": {"name": "Pilot", "investment": 500, "duration_months": 6, "discount_rate_pct": 2},
        "revenue": {"yearly_revenue": 1200, "revenue_growth_pct": 3},
        "costs": {"operating_costs": 100, "maintenance_costs": 20},
    }
    validate.validate_params_dict(data)
    p = params_from_dict(data)
    assert p.project_name == "Pilot"
    assert p.initial_investment == 500.0
    assert p.project_duration_months == 6
    assert p.annual_revenue_growth_pct == 3.0
    assert p.best_case_multiplier == 1.3


def test_top_level_key_wins_over_group():
    text = "discount_rate: 7\nproject:\n  discount_rate: 3\n  initial_investment: 10\n"
    flat = load_model_config(io.StringIO(text))
    assert flat["discount_rate"] == 7
    assert flat["initial_investment"] == 10


def test_load_yaml_and_json(tmp_path):
    y = tmp_path / "case.yaml"
    y.write_text("project:\n  initial_investment: 10\n", encoding="utf-8")
    j = tmp_path / "case.json"
    j.write_text(json.dumps({"project": {"initial_investment": 20}}), encoding="utf-8")
    assert validate.load_params_from_file(y)["initial_investment"] == 10
    assert validate.load_params_from_file(j)["initial_investment"] == 20


def test_load_rejects_directory(tmp_path):
    with pytest.raises(SystemExit):
        validate.load_params_from_file(tmp_path)


def test_mode_from_env(monkeypatch):
    monkeypatch.setenv("VALIDATION_MODE", "STRICT")
    assert validate.mode_from_env_or_flag(None) == "strict"
    assert validate.mode_from_env_or_flag("relaxed") == "relaxed"
    monkeypatch.delenv("VALIDATION_MODE")
    assert validate.mode_from_env_or_flag(None) == "relaxed"


def test_validate_main_reports_bad_files(tmp_path, capsys):
    (tmp_path / "good.yaml").write_text(
        "initial_investment: 1\ndiscount_rate: 1\nproject_duration_months: 1\nannual_revenue_increase: 1\n",
        encoding="utf-8",
    )
    (tmp_path / "bad.yaml").write_text("initial_investment: 1\n", encoding="utf-8")
    assert validate._main([str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "bad.yaml" in err
