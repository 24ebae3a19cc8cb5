# bizcase/cli.py
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

import pandas as pd
import yaml

from .scenario_runner import RunResult, run_dir, run_matrix

DEFAULT_CASE = Path(__file__).resolve().parent / "inputs" / "scenarios" / "release_case.yaml"


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="bizcase",
        description="Business case analyzer: ROI, NPV, payback and IRR across expected/best/worst scenarios",
    )
    p.add_argument(
        "--mode",
        default="report",
        choices=["report", "matrix"],
        help="report: one case (or validate a directory). matrix: run every case in a directory.",
    )
    p.add_argument(
        "--config",
        required=False,
        default=None,
        help="Path to a YAML/JSON case, or a directory of cases. If omitted, runs the bundled release case.",
    )
    p.add_argument(
        "--outputs-dir",
        "--out",
        dest="outputs_dir",
        default="outputs",
        help="Directory to write result files (default: outputs). Will be created if missing.",
    )
    p.add_argument(
        "--format",
        "--fmt",
        dest="fmt",
        default="text",
        choices=["text", "json", "csv", "jsonl"],
        help="stdout rendering (text/json) or monthly file format (csv/jsonl). Default: text.",
    )
    p.add_argument(
        "--save-monthly",
        action="store_true",
        help="If set, write the per-month cash-flow table alongside summary.json.",
    )
    v = p.add_mutually_exclusive_group()
    v.add_argument(
        "--strict",
        action="store_true",
        help="Enable strict validation (unknown keys raise, multipliers required).",
    )
    v.add_argument(
        "--relaxed",
        action="store_true",
        help="Enable relaxed validation.",
    )
    return p.parse_args(argv)


def _apply_validation_mode(ns: argparse.Namespace) -> None:
    # Default: leave env as-is; flags override explicitly.
    if ns.strict:
        os.environ["VALIDATION_MODE"] = "strict"
    elif ns.relaxed:
        os.environ["VALIDATION_MODE"] = "relaxed"


def _print_report(res: RunResult, fmt: str) -> None:
    summary = res.summary
    if fmt == "json":
        print(json.dumps(summary, indent=2))
        return
    if "scenarios" not in summary:
        print(f"Validated {len(summary.get('validated', []))} case file(s).")
        return
    if fmt != "text":
        print(f"Wrote {res.summary_path}")
        if res.monthly_path:
            print(f"Wrote {res.monthly_path}")
        return

    name = summary.get("project_name") or "Business case"
    print(name)
    print("=" * len(name))
    df = pd.DataFrame.from_dict(summary["scenarios"], orient="index")
    cols = ["roi", "npv", "payback_months", "irr_pct", "total_revenue"]
    print(df[cols].to_string(float_format=lambda x: f"{x:,.2f}"))
    print()
    for rec in summary["recommendations"]:
        print(f"[{rec['level']}] {rec['message']}")


def main(argv: list[str] | None = None) -> int:
    ns = parse_args(argv)
    _apply_validation_mode(ns)

    outputs_dir = Path(ns.outputs_dir).resolve()
    cfg_path = Path(ns.config).resolve() if ns.config else DEFAULT_CASE
    outputs_dir.mkdir(parents=True, exist_ok=True)

    monthly_fmt = "jsonl" if ns.fmt == "jsonl" else "csv"
    try:
        if ns.mode == "matrix":
            if not cfg_path.is_dir():
                print(f"ERROR: matrix mode needs a directory, got {cfg_path}", file=sys.stderr)
                return 2
            results = run_matrix(cfg_path, outputs_dir, fmt=monthly_fmt)
            if ns.fmt == "json":
                print(json.dumps({k: r.summary for k, r in results.items()}, indent=2))
            else:
                print(f"Ran {len(results)} case(s) into {outputs_dir}")
            return 0

        res = run_dir(cfg_path, outputs_dir, fmt=monthly_fmt, save_monthly=ns.save_monthly)
    except SystemExit as e:
        # Validation failures surface as SystemExit(message)
        if isinstance(e.code, int):
            return e.code
        print(f"ERROR: {e.code}", file=sys.stderr)
        return 2
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_report(res, ns.fmt)
    return 0


__all__ = ["main", "parse_args"]
