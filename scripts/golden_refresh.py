from __future__ import annotations
import json, os, subprocess, sys, tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCENARIO = ROOT / "bizcase/inputs/scenarios/release_case.yaml"
BASELINE = ROOT / "tests/golden/summary.json"
FROZEN_KEYS = (
    "expected.roi", "expected.total_revenue",
    "best.roi", "best.total_revenue",
    "worst.roi", "worst.total_revenue",
)

def main() -> int:
    if not SCENARIO.exists():
        print(f"[x] Missing scenario: {SCENARIO}", file=sys.stderr)
        return 2

    env = os.environ.copy()
    env["VALIDATION_MODE"] = "relaxed"

    with tempfile.TemporaryDirectory(prefix="bizcase_golden_") as tmp:
        outdir = Path(tmp)
        cmd = [
            sys.executable, "-m", "bizcase",
            "--config", str(SCENARIO),
            "--out", str(outdir),
            "--fmt", "json",
        ]
        subprocess.run(cmd, check=True, env=env, cwd=ROOT, stdout=subprocess.DEVNULL)

        sj = outdir / "summary.json"
        if not sj.exists():
            print("[x] summary.json not produced; check CLI/run_dir", file=sys.stderr)
            return 3
        data = json.loads(sj.read_text(encoding="utf-8"))

    # Ensure we only store known keys to keep the baseline slim & stable
    minimal = {}
    for k in FROZEN_KEYS:
        scenario, metric = k.split(".", 1)
        value = data.get("scenarios", {}).get(scenario, {}).get(metric)
        if value is not None:
            minimal[k] = float(value)
    if set(minimal) != set(FROZEN_KEYS):
        print(f"[x] summary.json missing keys {set(FROZEN_KEYS)-set(minimal)}", file=sys.stderr)
        return 4

    BASELINE.parent.mkdir(parents=True, exist_ok=True)
    BASELINE.write_text(json.dumps(minimal, indent=2, sort_keys=True), encoding="utf-8")
    print(f"[ok] Wrote baseline {BASELINE}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
