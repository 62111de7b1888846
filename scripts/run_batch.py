"""Batch executor for valve release searches over several budgets."""
from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Dict, List
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from configs import BatchSettings, Config
from graph_valves import ReleasePlan, save_json
from graph_valves.io_utils import ensure_dir
from src.main import execute_run

SUMMARY_FIELDS = ["label", "start", "time_budget", "score", "expansions", "actions", "opened"]


def _parse_int_list(values: List[str] | None) -> List[int] | None:
    if not values:
        return None
    return [int(value) for value in values]


def _summarise_run(config: Config, plan: ReleasePlan) -> Dict:
    opened: List[str] = []
    for kind, valve in plan.path.as_pairs():
        if kind == "activate" and valve not in opened:
            opened.append(valve)
    return {
        "label": config.label(),
        "start": plan.start,
        "time_budget": plan.time_budget,
        "score": plan.score,
        "expansions": plan.expansions,
        "actions": len(plan.path),
        "opened": "->".join(opened) if opened else "N/A",
    }


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Batch valve release searches")
    parser.add_argument("--input", help="Override scan path defined in configs.BatchSettings")
    parser.add_argument("--output", help="Override batch output root directory")
    parser.add_argument("--times", nargs="*", help="Time budgets to evaluate")
    parser.add_argument("--starts", nargs="*", help="Starting valves to evaluate")
    parser.add_argument("--no-memo", action="store_true", help="Run the plain exhaustive search")
    args = parser.parse_args(argv)

    settings = BatchSettings()
    if args.input:
        settings.input_path = args.input
    if args.output:
        settings.output_root = args.output
    time_override = _parse_int_list(args.times)
    if time_override:
        settings.time_budgets = time_override
    if args.starts:
        settings.start_rooms = args.starts
    if args.no_memo:
        settings.memoize = False

    summaries = []
    for config in settings.iter_configs():
        plan, _timeline = execute_run(config)
        summaries.append(_summarise_run(config, plan))

    out_dir = ensure_dir(settings.output_root)
    summary_path = Path(out_dir) / "summary.json"
    save_json(summaries, str(summary_path))

    csv_path = Path(out_dir) / "summary.csv"
    with open(csv_path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        writer.writerows(summaries)

    print(f"Batch summary written to {summary_path} and {csv_path}")


if __name__ == "__main__":
    main()
