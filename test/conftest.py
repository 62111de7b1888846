from pathlib import Path

import pytest

from graph_valves import Tunnels, ValveRecord

EXAMPLE_SCAN = Path(__file__).resolve().parents[1] / "inputs" / "example.txt"


@pytest.fixture
def two_rooms():
    return Tunnels.build(
        [
            ValveRecord("AA", 0, ("BB",)),
            ValveRecord("BB", 5, ("AA",)),
        ]
    )


@pytest.fixture
def example_scan_path():
    return str(EXAMPLE_SCAN)
