"""Enforce per-module and overall coverage minimums from a coverage.py JSON report.

Usage: ``pytest --cov=farc --cov-report=json && python scripts/check_coverage_thresholds.py``
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Final

# The codec and its transcoding are the format's only hard logic; hold them to a higher bar.
MODULE_MINIMUMS: Final[dict[str, float]] = {
    "src/farc/codec.py": 95.0,
    "src/farc/transcode.py": 100.0,
    "src/farc/config.py": 95.0,
    "src/farc/types.py": 90.0,
    "src/farc/detect.py": 90.0,
}
DEFAULT_TOTAL_MINIMUM: Final[float] = 90.0


def _read_report(path: Path) -> dict[str, object]:
    """Load a coverage JSON report into a plain dict."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        msg = "Coverage report root must be a JSON object."
        raise TypeError(msg)
    return raw


def _summary_percent(node: object) -> float | None:
    """Return ``percent_covered`` from a node holding a ``summary`` or ``totals`` block."""
    if not isinstance(node, dict):
        return None
    block = node.get("summary", node)
    if not isinstance(block, dict):
        return None
    value = block.get("percent_covered")
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return None


def _module_key(path: str) -> str:
    """Normalize a coverage file key to ``src/...`` with forward slashes."""
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    marker_index = normalized.rfind("/src/")
    if marker_index >= 0:
        return normalized[marker_index + 1 :]
    return normalized


def _index_files(report: dict[str, object]) -> dict[str, object]:
    """Map normalized module paths to their coverage entries."""
    files = report.get("files")
    if not isinstance(files, dict):
        msg = "Coverage report is missing a valid 'files' object."
        raise TypeError(msg)
    return {_module_key(str(key)): entry for key, entry in files.items()}


def collect_failures(report: dict[str, object], *, total_minimum: float) -> list[str]:
    """Return one message per module (or total) below its minimum."""
    by_module = _index_files(report)
    failures: list[str] = []

    for module_path, minimum in MODULE_MINIMUMS.items():
        percent = _summary_percent(by_module.get(module_path))
        if percent is None:
            failures.append(f"{module_path}: no coverage data")
        elif percent < minimum:
            failures.append(f"{module_path}: {percent:.2f}% < required {minimum:.2f}%")

    total = _summary_percent(report.get("totals"))
    if total is None:
        failures.append("total: no coverage data")
    elif total < total_minimum:
        failures.append(f"total: {total:.2f}% < required {total_minimum:.2f}%")

    return failures


def main(argv: list[str] | None = None) -> int:
    """Run the coverage gate; return a process exit code."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("report", nargs="?", default="coverage.json", help="coverage.py JSON report path.")
    parser.add_argument(
        "--total-minimum",
        type=float,
        default=DEFAULT_TOTAL_MINIMUM,
        help=f"Minimum overall percent covered (default: {DEFAULT_TOTAL_MINIMUM}).",
    )
    args = parser.parse_args(argv)

    failures = collect_failures(_read_report(Path(args.report)), total_minimum=args.total_minimum)
    for failure in failures:
        sys.stderr.write(f"{failure}\n")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
