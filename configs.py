"""Centralised configuration objects for valve release workflows."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict, fields
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional


def _coerce_value(value: str, target_type: Any) -> Any:
    """Best-effort coercion used by environment overrides."""

    if isinstance(target_type, str):  # annotations are strings under postponed evaluation
        target_type = target_type.replace(" ", "")
        optional = target_type.endswith("|None") or target_type.startswith("Optional[")
        if optional and value.lower() in {"", "none", "null"}:
            return None
        base = target_type.replace("Optional[", "").rstrip("]").replace("|None", "")
        target_type = {"bool": bool, "int": int, "float": float, "str": str}.get(base, str)
    origin = getattr(target_type, "__origin__", None)
    if origin in {list, List}:  # comma-separated parsing for lists
        return [item.strip() for item in value.split(",") if item.strip()]
    if target_type is bool:
        return value.lower() in {"1", "true", "yes", "on"}
    if target_type is int:
        return int(value)
    if target_type is float:
        return float(value)
    return value


@dataclass
class Config:
    """Settings for a single valve release search."""

    start_room: str = "AA"
    time_budget: int = 30
    algorithm: str = "exhaustive"
    memoize: bool = True
    max_expansions: Optional[int] = None
    immediate_activation: bool = False
    input_path: str = "-"
    simulate: bool = True
    render_chart: bool = False
    verbose: bool = False
    output_dir: Optional[str] = None
    plan_filename: str = "plan.json"
    timeline_json_filename: str = "timeline.json"
    timeline_csv_filename: str = "timeline.csv"
    trace_filename: str = "trace.jsonl"
    log_filename: str = "run_log.json"
    chart_filename: str = "release.png"
    run_name: Optional[str] = None

    def ensure_output_dir(self) -> Path:
        if self.output_dir is None:
            raise ValueError("no output directory configured")
        directory = Path(self.output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def output_path(self, filename: str) -> Path:
        return self.ensure_output_dir() / filename

    def label(self) -> str:
        return self.run_name or f"{self.algorithm}_{self.start_room}_T{self.time_budget}"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_env(self, prefix: str = "GRAPH_VALVES_") -> "Config":
        for field_def in fields(self):
            env_key = f"{prefix}{field_def.name.upper()}"
            if env_key in os.environ:
                raw_value = os.environ[env_key]
                try:
                    coerced = _coerce_value(raw_value, field_def.type)
                except ValueError as exc:
                    raise ValueError(f"Failed to parse env var {env_key}: {raw_value}") from exc
                setattr(self, field_def.name, coerced)
        return self


@dataclass
class BatchSettings:
    """Grid definition for ``scripts/run_batch.py``."""

    input_path: str = "inputs/example.txt"
    start_rooms: List[str] = field(default_factory=lambda: ["AA"])
    time_budgets: List[int] = field(default_factory=lambda: [5, 10, 15, 20])
    memoize: bool = True
    output_root: str = "batch_runs"

    def iter_configs(self) -> Iterable[Config]:
        for start in self.start_rooms:
            for budget in self.time_budgets:
                label = f"exhaustive_{start}_T{budget}"
                yield Config(
                    start_room=start,
                    time_budget=budget,
                    memoize=self.memoize,
                    input_path=self.input_path,
                    output_dir=str(Path(self.output_root) / label),
                    run_name=label,
                )


__all__ = ["Config", "BatchSettings"]
