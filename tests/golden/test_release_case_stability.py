from __future__ import annotations
import json, os, sys, subprocess
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
SCENARIO = ROOT / "bizcase/inputs/scenarios/release_case.yaml"
BASELINE = ROOT / "tests/golden/summary.json"

# Keys we freeze for drift detection, as "<scenario>.<metric>"
FROZEN_KEYS = (
    "expected.roi", "expected.total_revenue",
    "best.roi", "best.total_revenue",
    "worst.roi", "worst.total_revenue",
)

def _pick(summary: dict, dotted: str) -> float:
    scenario, metric = dotted.split(".", 1)
    return float(summary["scenarios"][scenario][metric])

def test_release_case_is_stable(tmp_path):
    assert SCENARIO.exists(), f"Missing scenario {SCENARIO} – add it, or update the path in this test."

    # Run via CLI to exercise the public surface and artifact writing
    outdir = tmp_path / "golden"
    env = os.environ.copy()
    env["VALIDATION_MODE"] = "relaxed"  # Force non-strict for reproducibility
    cmd = [
        sys.executable, "-m", "bizcase",
        "--config", str(SCENARIO),
        "--out", str(outdir),
        "--fmt", "csv",
        "--save-monthly",
    ]
    subprocess.run(cmd, check=True, env=env, cwd=ROOT)

    # Artifacts must exist
    sj = outdir / "summary.json"
    assert sj.exists() and sj.stat().st_size > 0, "Expected summary.json"
    any_csv = list(outdir.glob("*monthly*.csv"))
    assert any_csv, "Expected at least one monthly CSV file"

    # Baseline must exist; if not, instruct to refresh
    assert BASELINE.exists(), (
        "Golden baseline missing. Run:\n"
        "  python scripts/golden_refresh.py\n"
        "and commit tests/golden/summary.json"
    )

    got = json.loads(sj.read_text(encoding="utf-8"))
    want = json.loads(BASELINE.read_text(encoding="utf-8"))

    # Compare only frozen keys with a small tolerance
    for k in FROZEN_KEYS:
        assert k in want, f"Missing '{k}' in baseline"
        diff = abs(_pick(got, k) - float(want[k]))
        assert diff < 1e-6, f"{k} drifted: got={_pick(got, k)} want={want[k]} (|Δ|={diff})"
