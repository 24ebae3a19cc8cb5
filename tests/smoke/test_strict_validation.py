import subprocess
import sys
from pathlib import Path
import pytest

from bizcase.scenario_runner import run_dir

ROOT = Path(__file__).resolve().parents[2]

MIN_CFG = """\
project:
  initial_investment: 150000
  project_duration_months: 24
  discount_rate: 10
revenue: { annual_revenue_increase: 75000 }
costs: { annual_operating_costs: 15000, annual_maintenance_costs: 5000 }
"""

def _write(p: Path, name: str, text: str) -> Path:
    f = p / name
    f.write_text(text, encoding="utf-8")
    return f

def test_relaxed_accepts_default_multipliers(tmp_path: Path, monkeypatch):
    cfg = _write(tmp_path, "no_multipliers.yaml", MIN_CFG)
    monkeypatch.setenv("VALIDATION_MODE", "relaxed")
    res = run_dir(cfg, tmp_path / "out")
    assert res.summary["scenarios"]["best"]["total_revenue"] > res.summary["scenarios"]["expected"]["total_revenue"]

def test_strict_requires_multipliers_in_runner(tmp_path: Path, monkeypatch):
    cfg = _write(tmp_path, "no_multipliers.yaml", MIN_CFG)
    monkeypatch.setenv("VALIDATION_MODE", "strict")
    with pytest.raises(SystemExit):
        run_dir(cfg, tmp_path / "out")

def test_strict_rejects_unknown_keys(tmp_path: Path, monkeypatch):
    text = MIN_CFG + "scenarios: { best_case_multiplier: 1.3, worst_case_multiplier: 0.7 }\ntax_rate: 0.3\n"
    cfg = _write(tmp_path, "extra.yaml", text)
    monkeypatch.setenv("VALIDATION_MODE", "strict")
    with pytest.raises(SystemExit, match="tax_rate"):
        run_dir(cfg, tmp_path / "out")

def test_cli_strict_flag_fails(tmp_path: Path):
    cfg = _write(tmp_path, "no_multipliers.yaml", MIN_CFG)
    out = tmp_path / "out"
    with pytest.raises(subprocess.CalledProcessError):
        subprocess.check_call(
            [sys.executable, "-m", "bizcase", "--config", str(cfg), "--out", str(out), "--strict"],
            cwd=ROOT,
        )
