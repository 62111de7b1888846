import pytest

pytest.importorskip("matplotlib")
pytest.importorskip("PIL")

from configs import Config
from graph_valves import plan_release, simulate_release
from graph_valves.visuals import render_release_chart, render_release_gif


def _timeline(graph):
    config = Config(time_budget=4)
    plan = plan_release(graph, config)
    return [entry.__dict__ for entry in simulate_release(graph, plan, config)]


def test_render_chart(two_rooms, tmp_path):
    target = tmp_path / "release.png"
    render_release_chart(_timeline(two_rooms), str(target))
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_gif(two_rooms, tmp_path):
    target = tmp_path / "release.gif"
    render_release_gif(_timeline(two_rooms), str(target))
    assert target.read_bytes()[:6] in (b"GIF87a", b"GIF89a")


def test_empty_timeline_writes_nothing(tmp_path):
    target = tmp_path / "release.png"
    render_release_chart([], str(target))
    assert not target.exists()
