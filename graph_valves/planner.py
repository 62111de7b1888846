"""Planning interface for the valve graph abstraction."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict

from configs import Config
from .actions import CandidatePath
from .problem import Tunnels
from .scoring import score
from .search import ExhaustiveSearch

# frames reserved for the caller stack below the search
_STACK_HEADROOM = 50


@dataclass(frozen=True)
class ReleasePlan:
    start: str
    time_budget: int
    path: CandidatePath
    score: int
    expansions: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "time_budget": self.time_budget,
            "score": self.score,
            "expansions": self.expansions,
            "steps": [{"action": kind, "valve": valve} for kind, valve in self.path.as_pairs()],
        }


def _check_depth(time_budget: int) -> None:
    limit = sys.getrecursionlimit() - _STACK_HEADROOM
    if time_budget > limit:
        raise ValueError(f"time budget {time_budget} exceeds the supported search depth of {limit}")


def plan_exhaustive(graph: Tunnels, config: Config) -> ReleasePlan:
    _check_depth(config.time_budget)
    if config.start_room not in graph:
        raise ValueError(f"start valve {config.start_room!r} is not in the scan")
    search = ExhaustiveSearch(
        graph,
        config.time_budget,
        memoize=config.memoize,
        max_expansions=config.max_expansions,
        immediate_activation=config.immediate_activation,
    )
    path = search.run(config.start_room)
    return ReleasePlan(
        start=config.start_room,
        time_budget=config.time_budget,
        path=path,
        score=score(graph, path, config.time_budget, immediate_activation=config.immediate_activation),
        expansions=search.expansions,
    )


def plan_release(graph: Tunnels, config: Config, algorithm: str | None = None) -> ReleasePlan:
    algorithm = algorithm or config.algorithm
    if algorithm == "exhaustive":
        return plan_exhaustive(graph, config)
    raise NotImplementedError(f"Unknown algorithm: {algorithm}")


__all__ = ["ReleasePlan", "plan_release", "plan_exhaustive"]
