"""Actions available to the actor and the candidate paths built from them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

MOVE = "move"
ACTIVATE = "activate"


@dataclass(frozen=True)
class Move:
    to: str

    @property
    def kind(self) -> str:
        return MOVE

    @property
    def target(self) -> str:
        return self.to


@dataclass(frozen=True)
class Activate:
    at: str

    @property
    def kind(self) -> str:
        return ACTIVATE

    @property
    def target(self) -> str:
        return self.at


Action = Union[Move, Activate]


def next_node(action: Action, current: str) -> str:
    """Node the actor stands on after ``action``; activating does not move it."""

    if isinstance(action, Move):
        return action.to
    return current


@dataclass(frozen=True)
class CandidatePath:
    """Ordered actions, one per time step. The start node lives with the caller."""

    actions: Tuple[Action, ...] = ()

    @classmethod
    def empty(cls) -> "CandidatePath":
        return cls()

    def prepend(self, action: Action) -> "CandidatePath":
        return CandidatePath((action,) + self.actions)

    def as_pairs(self) -> List[Tuple[str, str]]:
        return [(action.kind, action.target) for action in self.actions]

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)

    def __getitem__(self, index: int) -> Action:
        return self.actions[index]


__all__ = ["MOVE", "ACTIVATE", "Move", "Activate", "Action", "next_node", "CandidatePath"]
