import json
from pathlib import Path
from typing import Iterable, Optional

from .scoring import ReplayStep


class TraceLogger:
    """Writes replayed steps as JSON Lines."""

    def __init__(self, save_path: str = "logs/trace.jsonl"):
        Path(save_path).parent.mkdir(exist_ok=True, parents=True)
        self.file = open(save_path, "w", encoding="utf-8")

    def record(self, row: ReplayStep, start: Optional[str] = None):
        data = {
            "step": row.step,
            "action": getattr(row.action, "kind", None),
            "target": getattr(row.action, "target", None),
            "position": row.position if row.position is not None else start,
            "flow": row.flow,
            "released": row.released,
            "active": list(row.active),
        }
        self.file.write(json.dumps(data, ensure_ascii=False) + "\n")

    def record_all(self, rows: Iterable[ReplayStep], start: Optional[str] = None):
        for row in rows:
            self.record(row, start=start)

    def close(self):
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
