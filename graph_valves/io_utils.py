"""IO utilities for the valve graph abstraction."""
from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable, Mapping

TIMELINE_FIELDS = ["step", "action", "target", "position", "flow", "released", "active"]


def ensure_dir(path: str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_json(data: Any, path: str) -> None:
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def save_timeline(timeline: Iterable[dict], path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=TIMELINE_FIELDS)
        writer.writeheader()
        for entry in timeline:
            writer.writerow(entry)


def write_run_log(path: str, *, config_dict: Mapping[str, Any], plan_summary: Mapping[str, Any]) -> None:
    """Persist a JSON summary of one run.

    ``opened`` lists valves in the order of their first activation; repeated
    activations of an already open valve are dropped.
    """

    opened = []
    for step in plan_summary.get("steps") or []:
        if step.get("action") == "activate" and step.get("valve") not in opened:
            opened.append(step.get("valve"))

    steps = list(plan_summary.get("steps") or [])
    log_payload: dict[str, Any] = {
        "input": str(config_dict.get("input_path", "-")),
        "start": plan_summary.get("start"),
        "time_budget": plan_summary.get("time_budget"),
        "score": plan_summary.get("score"),
        "expansions": plan_summary.get("expansions"),
        "memoize": bool(config_dict.get("memoize", False)),
        "immediate_activation": bool(config_dict.get("immediate_activation", False)),
        "actions": len(steps),
        "moves": sum(1 for step in steps if step.get("action") == "move"),
        "opened": opened,
    }

    Path(path).write_text(json.dumps(log_payload, indent=2, ensure_ascii=False), encoding="utf-8")


__all__ = ["TIMELINE_FIELDS", "ensure_dir", "save_json", "save_timeline", "write_run_log"]
