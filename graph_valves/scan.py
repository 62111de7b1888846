"""Tunnel scan loading utilities."""
from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import MalformedRecordError
from .problem import ValveRecord

SCAN_PATTERN = (
    r"^Valve (?P<valve>[A-Z]+) has flow rate=(?P<flow_rate>\d+); "
    r"(?:tunnel leads to valve|tunnels lead to valves) (?P<paths>[A-Z, ]+)$"
)


class TunnelScanParser:
    """Parses lines such as ``Valve AA has flow rate=0; tunnels lead to valves DD, II``."""

    def __init__(self, pattern: str = SCAN_PATTERN) -> None:
        self._regex = re.compile(pattern)

    def parse_line(self, text: str, line: Optional[int] = None) -> ValveRecord:
        text = text.strip()
        match = self._regex.match(text)
        if match is None:
            raise MalformedRecordError("invalid tunnel scan", line=line, text=text)
        paths = tuple(path.strip() for path in match.group("paths").split(",") if path.strip())
        return ValveRecord(
            id=match.group("valve"),
            flow_rate=int(match.group("flow_rate")),
            neighbors=paths,
            line=line,
        )

    def parse_lines(self, lines: Iterable[str]) -> List[ValveRecord]:
        records: List[ValveRecord] = []
        for idx, text in enumerate(lines, start=1):
            if not text.strip():
                continue
            records.append(self.parse_line(text, line=idx))
        return records


def load_scans(path: str, parser: Optional[TunnelScanParser] = None) -> List[ValveRecord]:
    """Read scan records from ``path``; ``"-"`` reads standard input."""

    parser = parser or TunnelScanParser()
    if path == "-":
        return parser.parse_lines(sys.stdin.read().splitlines())
    return parser.parse_lines(Path(path).read_text(encoding="utf-8").splitlines())


__all__ = ["SCAN_PATTERN", "TunnelScanParser", "load_scans"]
