"""Public API for the valve graph abstraction."""
from .actions import Activate, CandidatePath, Move, next_node
from .errors import (
    DanglingEdgeError,
    DuplicateNodeError,
    GraphBuildError,
    MalformedRecordError,
    SearchBudgetExceeded,
    UnknownNodeError,
)
from .io_utils import ensure_dir, save_json, save_timeline, write_run_log
from .planner import ReleasePlan, plan_release
from .problem import Tunnels, Valve, ValveRecord
from .scan import TunnelScanParser, load_scans
from .scoring import ReplayStep, replay, score
from .search import ExhaustiveSearch, best_path
from .simulator import TimelineEntry, simulate_release
from .trace_logger import TraceLogger

__all__ = [
    "Valve",
    "ValveRecord",
    "Tunnels",
    "Move",
    "Activate",
    "CandidatePath",
    "next_node",
    "score",
    "replay",
    "ReplayStep",
    "best_path",
    "ExhaustiveSearch",
    "TunnelScanParser",
    "load_scans",
    "plan_release",
    "ReleasePlan",
    "simulate_release",
    "TimelineEntry",
    "TraceLogger",
    "ensure_dir",
    "save_json",
    "save_timeline",
    "write_run_log",
    "GraphBuildError",
    "DuplicateNodeError",
    "DanglingEdgeError",
    "MalformedRecordError",
    "UnknownNodeError",
    "SearchBudgetExceeded",
]
