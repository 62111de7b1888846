"""Exhaustive depth-bounded search for the best valve release sequence.

Every call at ``(node, time_remaining)`` enumerates the moves to each
neighbour (declaration order) followed by activating the current valve,
recurses one step deeper for each, and keeps the candidate with the highest
score. Candidates are always scored from step zero under the *total* budget
of the top-level call, never under ``time_remaining``.

Without memoisation this is ``O(branching ** budget)``. Keep budgets in the
tens and branching in single digits, or pass ``memoize=True``: since a
sub-path is scored independently of the moves that led to it, the best
sub-path from ``(node, time_remaining)`` is the same whatever the history,
so caching on that pair returns the exhaustive answer exactly.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .actions import Action, Activate, CandidatePath, Move, next_node
from .errors import SearchBudgetExceeded
from .problem import Tunnels
from .scoring import score


class ExhaustiveSearch:
    def __init__(
        self,
        graph: Tunnels,
        total_time: int,
        *,
        memoize: bool = False,
        max_expansions: Optional[int] = None,
        immediate_activation: bool = False,
    ) -> None:
        if total_time < 0:
            raise ValueError(f"time budget must be non-negative, got {total_time}")
        self.graph = graph
        self.total_time = total_time
        self.max_expansions = max_expansions
        self.immediate_activation = immediate_activation
        self.expansions = 0
        self._cache: Optional[Dict[Tuple[str, int], CandidatePath]] = {} if memoize else None

    def run(self, start: str) -> CandidatePath:
        self.graph.node(start)
        return self.best_from(start, self.total_time)

    def candidate_actions(self, node: str) -> List[Action]:
        actions: List[Action] = [Move(to=neighbor) for neighbor in self.graph.neighbors(node)]
        actions.append(Activate(at=node))
        return actions

    def best_from(self, node: str, time_remaining: int) -> CandidatePath:
        key = (node, time_remaining)
        if self._cache is not None and key in self._cache:
            return self._cache[key]

        self.expansions += 1
        if self.max_expansions is not None and self.expansions > self.max_expansions:
            raise SearchBudgetExceeded(self.max_expansions)

        best = CandidatePath.empty()
        if time_remaining > 0:
            best_score = None
            for action in self.candidate_actions(node):
                sub_path = self.best_from(next_node(action, node), time_remaining - 1)
                candidate = sub_path.prepend(action)
                candidate_score = score(
                    self.graph,
                    candidate,
                    self.total_time,
                    immediate_activation=self.immediate_activation,
                )
                # strict comparison keeps the first maximum
                if best_score is None or candidate_score > best_score:
                    best, best_score = candidate, candidate_score

        if self._cache is not None:
            self._cache[key] = best
        return best


def best_path(
    graph: Tunnels,
    start: str,
    time_remaining: int,
    *,
    memoize: bool = False,
    max_expansions: Optional[int] = None,
    immediate_activation: bool = False,
) -> CandidatePath:
    """Return the highest scoring path of at most ``time_remaining`` actions from ``start``."""

    search = ExhaustiveSearch(
        graph,
        time_remaining,
        memoize=memoize,
        max_expansions=max_expansions,
        immediate_activation=immediate_activation,
    )
    return search.run(start)


__all__ = ["ExhaustiveSearch", "best_path"]
