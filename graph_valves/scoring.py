"""Replay of candidate paths against a fixed time budget."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

import numpy as np

from .actions import Action, Activate, CandidatePath, next_node
from .problem import Tunnels


@dataclass(frozen=True)
class ReplayStep:
    step: int
    action: Optional[Action]
    position: Optional[str]
    flow: int
    released: int
    active: Tuple[str, ...]


def _check_time(total_time: int) -> None:
    if total_time < 0:
        raise ValueError(f"time budget must be non-negative, got {total_time}")


def score(graph: Tunnels, path: CandidatePath, total_time: int, *, immediate_activation: bool = False) -> int:
    """Total release of ``path`` played from step zero over ``total_time`` steps.

    By default a step pays out the flow of the valves already open before its
    action runs, so an ``Activate`` starts paying on the following step. With
    ``immediate_activation`` the action is applied first.
    """

    _check_time(total_time)
    active: Set[str] = set()
    flow = 0
    released = 0
    for step in range(total_time):
        action = path.actions[step] if step < len(path) else None
        if not immediate_activation:
            released += flow
        if isinstance(action, Activate) and action.at not in active:
            active.add(action.at)
            flow += graph.flow_rate(action.at)
        if immediate_activation:
            released += flow
    return released


def replay(
    graph: Tunnels,
    path: CandidatePath,
    total_time: int,
    start: Optional[str] = None,
    *,
    immediate_activation: bool = False,
) -> List[ReplayStep]:
    """Step-by-step view of :func:`score`; the last ``released`` equals the score."""

    _check_time(total_time)
    if total_time == 0:
        return []

    active: Set[str] = set()
    flow = 0
    position = start
    rows = []
    for step in range(total_time):
        action = path.actions[step] if step < len(path) else None
        paid = flow
        if isinstance(action, Activate) and action.at not in active:
            active.add(action.at)
            flow += graph.flow_rate(action.at)
        if immediate_activation:
            paid = flow
        if action is not None and position is not None:
            position = next_node(action, position)
        rows.append((step, action, position, paid, tuple(sorted(active))))

    released = np.cumsum(np.array([row[3] for row in rows], dtype=np.int64))
    return [
        ReplayStep(
            step=step,
            action=action,
            position=position,
            flow=paid,
            released=int(total),
            active=active_ids,
        )
        for (step, action, position, paid, active_ids), total in zip(rows, released)
    ]


__all__ = ["ReplayStep", "score", "replay"]
