# bizcase/validate.py
from __future__ import annotations
import os, sys, json
from pathlib import Path
from typing import Any, Dict, Iterable, List
import yaml

from .config import canonicalize, load_model_config
from .schema import COMPOSITE_CONSTRAINTS, REQUIRED_KEYS, SCHEMA, STRICT_REQUIRED_KEYS


def mode_from_env_or_flag(flag: str | None) -> str:
    if flag in ("strict", "relaxed"):
        return flag
    env = (os.environ.get("VALIDATION_MODE") or "").lower()
    return env if env in ("strict", "relaxed") else "relaxed"


def _check_scalar(key: str, value: Any, bounds: Dict[str, Any]) -> None:
    kind = bounds.get("type", "float")
    if kind == "str":
        return
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise SystemExit(f"{key} must be numeric, got {value!r}")
    if kind == "int" and v != int(v):
        raise SystemExit(f"{key} must be a whole number, got {value!r}")
    lo = float(bounds.get("min", float("-inf")))
    hi = float(bounds.get("max", float("inf")))
    if not (lo <= v <= hi):
        raise SystemExit(f"{key} outside allowed range [{lo}, {hi}]: {v}")


def validate_params_dict(data: Dict[str, Any], *, mode: str = "relaxed") -> None:
    """
    Guardrails applied before the engine runs (the engine itself does not validate):
      - relaxed: require the core keys; check types and bounds
      - strict : also require both scenario multipliers and reject unknown keys
    """
    flat = canonicalize(data)
    required = STRICT_REQUIRED_KEYS if mode == "strict" else REQUIRED_KEYS

    missing = [k for k in required if flat.get(k) is None]
    if missing:
        raise SystemExit(f"missing required keys: {missing}")

    if mode == "strict":
        unknown = [k for k in flat.keys() if k not in SCHEMA]
        if unknown:
            raise SystemExit(f"unknown keys (strict mode): {unknown}")

    for k, bounds in SCHEMA.items():
        if flat.get(k) is not None:
            _check_scalar(k, flat[k], bounds)

    present = {k: v for k, v in flat.items() if v is not None}
    for rule in COMPOSITE_CONSTRAINTS:
        if not rule["check"](present):
            raise SystemExit(f"{rule['name']}: {rule['message']}")


def load_params_from_file(path: Path) -> Dict[str, Any]:
    """Read a YAML or JSON case file and return its canonical flat mapping."""
    p = Path(path)
    if p.is_dir():
        # scenario_runner handles directories; keep this function file-only
        raise SystemExit(f"{p} is a directory (expected a file)")
    if p.suffix.lower() in (".yaml", ".yml"):
        return load_model_config(p)
    return canonicalize(json.loads(p.read_text(encoding="utf-8") or "{}"))


def iter_input_files(p: Path) -> Iterable[Path]:
    if p.is_file():
        yield p
    elif p.is_dir():
        for ext in ("*.yaml", "*.yml", "*.json"):
            yield from sorted(p.rglob(ext))


def _main(argv: List[str] | None = None) -> int:
    import argparse
    parser = argparse.ArgumentParser(prog="bizcase.validate", add_help=True)
    parser.add_argument("paths", nargs="+", help="YAML/JSON files or directories to validate")
    parser.add_argument("--mode", choices=["strict", "relaxed"], default=None, help="validation mode")
    args = parser.parse_args(argv)

    mode = mode_from_env_or_flag(args.mode)
    had_error = False

    for raw in args.paths:
        target = Path(raw)
        any_seen = False
        for f in iter_input_files(target):
            if not f.is_file():
                continue
            any_seen = True
            try:
                data = load_params_from_file(f)
                validate_params_dict(data, mode=mode)
                print(f"OK: {f}")
            except SystemExit as e:
                print(f"{f}: {e}", file=sys.stderr)
                had_error = True
            except (ValueError, OSError, yaml.YAMLError) as e:
                print(f"{f}: ERROR: {e}", file=sys.stderr)
                had_error = True
        if not any_seen:
            print(f"{target}: no YAML/JSON files found", file=sys.stderr)
            had_error = True

    return 1 if had_error else 0


if __name__ == "__main__":
    raise SystemExit(_main())
