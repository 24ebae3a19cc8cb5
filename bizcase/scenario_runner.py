# bizcase/scenario_runner.py
from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Any, List, Optional
from datetime import datetime
import json
import warnings

import pandas as pd

from .config import params_from_dict
from .finance.metrics import run_metrics
from .recommendations import recommend
from .types import ProjectParameters, ScenarioSet
from .validate import load_params_from_file, mode_from_env_or_flag, validate_params_dict


@dataclass
class RunResult:
    summary: Dict[str, Any]
    summary_path: Path
    monthly_path: Optional[Path] = None


def scenario_params(p: ProjectParameters) -> Dict[str, ProjectParameters]:
    """Expected/best/worst inputs; only the revenue increase is scaled."""
    return {
        "expected": p,
        "best": replace(p, annual_revenue_increase=p.annual_revenue_increase * p.best_case_multiplier),
        "worst": replace(p, annual_revenue_increase=p.annual_revenue_increase * p.worst_case_multiplier),
    }


def compute_scenarios(p: ProjectParameters) -> ScenarioSet:
    variants = scenario_params(p)
    results = {name: run_metrics(v) for name, v in variants.items()}
    for name, m in results.items():
        if not m.irr.converged:
            warnings.warn(
                f"{name} scenario: IRR {m.irr.status.value} after {m.irr.iterations} iterations",
                RuntimeWarning,
                stacklevel=2,
            )
    return ScenarioSet(params=p, **results)


def build_summary(scenarios: ScenarioSet) -> Dict[str, Any]:
    p = scenarios.params
    return {
        "project_name": p.project_name,
        "initial_investment": p.initial_investment,
        "discount_rate": p.discount_rate,
        "project_duration_months": p.project_duration_months,
        "scenarios": scenarios.as_dict(),
        "recommendations": [r.to_dict() for r in recommend(scenarios)],
    }


def monthly_frame(scenarios: ScenarioSet) -> pd.DataFrame:
    """One row per period (0 = investment) with each scenario's net flow."""
    df = pd.DataFrame({name: list(m.cash_flows) for name, m in scenarios.items()})
    df.index.name = "month"
    df["cumulative_expected"] = df["expected"].cumsum()
    return df.reset_index()


def _write_monthly(path: Path, df: pd.DataFrame, fmt: str) -> None:
    if fmt == "jsonl":
        df.to_json(path, orient="records", lines=True)
    elif fmt == "csv":
        df.to_csv(path, index=False)
    else:
        raise SystemExit(f"unknown fmt: {fmt}")


def run_params(
    data: Dict[str, Any],
    *,
    mode: str | None = None,
) -> ScenarioSet:
    """Validate a canonical mapping and compute its scenarios."""
    validate_params_dict(data, mode=mode_from_env_or_flag(mode))
    return compute_scenarios(params_from_dict(data))


def run_dir(
    config: str | Path,
    out_dir: str | Path,
    *,
    fmt: str = "csv",
    save_monthly: bool = False,
    mode: str | None = None,
) -> RunResult:
    """
    Run one case file, or validate every case file in a directory.
    Writes summary.json into out_dir and, with save_monthly, the per-month table.
    """
    cfg_path = Path(config)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    # Directory mode: validate each case file; raise on violations.
    if cfg_path.is_dir():
        checked: List[str] = []
        for f in sorted(cfg_path.glob("*.y*ml")):
            if not f.is_file():
                continue
            validate_params_dict(load_params_from_file(f), mode=mode_from_env_or_flag(mode))
            checked.append(f.name)
        if not checked:
            raise ValueError(f"{cfg_path}: no scenario files found")
        return RunResult(summary={"validated": checked}, summary_path=out / "summary.json")

    scenarios = run_params(load_params_from_file(cfg_path), mode=mode)
    summary = build_summary(scenarios)

    summary_path = out / "summary.json"
    summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")

    monthly_path: Optional[Path] = None
    if save_monthly:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        ext = "jsonl" if fmt == "jsonl" else "csv"
        monthly_path = out / f"{cfg_path.stem}_monthly_{stamp}.{ext}"
        _write_monthly(monthly_path, monthly_frame(scenarios), ext)

    return RunResult(summary=summary, summary_path=summary_path, monthly_path=monthly_path)


def run_matrix(dir_path: str | Path, out_dir: str | Path, pattern: str = "*.y*ml", *, fmt: str = "csv") -> Dict[str, RunResult]:
    """Run every case in a directory, each into its own sub-directory of out_dir."""
    d = Path(dir_path)
    o = Path(out_dir)
    results = {}
    for cfg in sorted(d.glob(pattern)):
        results[cfg.name] = run_dir(cfg, o / cfg.stem, fmt=fmt, save_monthly=False)
    return results
