"""Timeline simulator for release plans."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from configs import Config
from .planner import ReleasePlan
from .problem import Tunnels
from .scoring import replay


@dataclass
class TimelineEntry:
    step: int
    action: str
    target: str
    position: str
    flow: int
    released: int
    active: str


def simulate_release(graph: Tunnels, plan: ReleasePlan, config: Optional[Config] = None) -> List[TimelineEntry]:
    immediate = config.immediate_activation if config is not None else False
    timeline: List[TimelineEntry] = []
    for row in replay(graph, plan.path, plan.time_budget, start=plan.start, immediate_activation=immediate):
        timeline.append(
            TimelineEntry(
                step=row.step,
                action=row.action.kind if row.action is not None else "wait",
                target=row.action.target if row.action is not None else "",
                position=row.position or "",
                flow=row.flow,
                released=row.released,
                active=" ".join(row.active),
            )
        )
    return timeline


__all__ = ["simulate_release", "TimelineEntry"]
