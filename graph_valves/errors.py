"""Error taxonomy for the valve graph engine."""
from __future__ import annotations

from typing import Optional


class GraphBuildError(ValueError):
    """Raised when externally supplied valve records cannot form a graph."""

    def __init__(self, message: str, node_id: Optional[str] = None, line: Optional[int] = None) -> None:
        self.node_id = node_id
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DuplicateNodeError(GraphBuildError):
    def __init__(self, node_id: str, line: Optional[int] = None) -> None:
        super().__init__(f"valve {node_id!r} is declared more than once", node_id=node_id, line=line)


class DanglingEdgeError(GraphBuildError):
    def __init__(self, node_id: str, target: str, line: Optional[int] = None) -> None:
        self.target = target
        super().__init__(
            f"valve {node_id!r} has a tunnel to undeclared valve {target!r}",
            node_id=node_id,
            line=line,
        )


class MalformedRecordError(GraphBuildError):
    def __init__(
        self,
        reason: str,
        node_id: Optional[str] = None,
        line: Optional[int] = None,
        text: Optional[str] = None,
    ) -> None:
        self.text = text
        message = reason if text is None else f"{reason}: {text!r}"
        super().__init__(message, node_id=node_id, line=line)


class UnknownNodeError(RuntimeError):
    """Lookup of a valve id that a validated graph does not contain.

    Signals a bug in the caller rather than bad input, so nothing inside the
    engine catches it.
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"unknown valve {node_id!r}")


class SearchBudgetExceeded(RuntimeError):
    def __init__(self, max_expansions: int) -> None:
        self.max_expansions = max_expansions
        super().__init__(f"search exceeded {max_expansions} expansions")


__all__ = [
    "GraphBuildError",
    "DuplicateNodeError",
    "DanglingEdgeError",
    "MalformedRecordError",
    "UnknownNodeError",
    "SearchBudgetExceeded",
]
