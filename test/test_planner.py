import sys

import pytest

from configs import BatchSettings, Config
from graph_valves import Activate, Move, TraceLogger, plan_release, replay, simulate_release


def test_plan_release_two_rooms(two_rooms):
    plan = plan_release(two_rooms, Config(start_room="AA", time_budget=3, memoize=False))
    assert plan.start == "AA"
    assert plan.time_budget == 3
    assert plan.score == 5
    assert plan.path.actions[:2] == (Move("BB"), Activate("BB"))
    assert plan.expansions > 0
    assert plan.as_dict()["steps"][0] == {"action": "move", "valve": "BB"}


def test_memoized_plan_needs_fewer_expansions(two_rooms):
    plain = plan_release(two_rooms, Config(time_budget=8, memoize=False))
    cached = plan_release(two_rooms, Config(time_budget=8, memoize=True))
    assert cached.path == plain.path
    assert cached.score == plain.score
    assert cached.expansions < plain.expansions


def test_unknown_algorithm(two_rooms):
    with pytest.raises(NotImplementedError):
        plan_release(two_rooms, Config(time_budget=2), algorithm="greedy")


def test_unknown_start_is_reported(two_rooms):
    with pytest.raises(ValueError, match="ZZ"):
        plan_release(two_rooms, Config(start_room="ZZ", time_budget=2))


def test_budget_deeper_than_recursion_limit(two_rooms):
    with pytest.raises(ValueError, match="search depth"):
        plan_release(two_rooms, Config(time_budget=sys.getrecursionlimit()))


def test_simulate_release(two_rooms):
    config = Config(time_budget=4, memoize=True)
    plan = plan_release(two_rooms, config)
    timeline = simulate_release(two_rooms, plan, config)
    assert [entry.step for entry in timeline] == [0, 1, 2, 3]
    assert [entry.action for entry in timeline] == ["move", "activate", "activate", "activate"]
    assert timeline[-1].released == plan.score == 10
    assert timeline[0].position == "BB"
    assert timeline[2].active == "BB"


def test_simulate_empty_budget(two_rooms):
    plan = plan_release(two_rooms, Config(time_budget=0))
    assert simulate_release(two_rooms, plan) == []


def test_trace_logger_writes_json_lines(two_rooms, tmp_path):
    plan = plan_release(two_rooms, Config(time_budget=3))
    trace_path = tmp_path / "logs" / "trace.jsonl"
    with TraceLogger(str(trace_path)) as trace:
        trace.record_all(replay(two_rooms, plan.path, 3, start="AA"), start="AA")
    lines = trace_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert '"action": "move"' in lines[0]
    assert '"released": 5' in lines[-1]


def test_config_env_overrides(monkeypatch):
    monkeypatch.setenv("GRAPH_VALVES_TIME_BUDGET", "12")
    monkeypatch.setenv("GRAPH_VALVES_MEMOIZE", "off")
    monkeypatch.setenv("GRAPH_VALVES_MAX_EXPANSIONS", "500")
    monkeypatch.setenv("GRAPH_VALVES_START_ROOM", "BB")
    config = Config().update_from_env()
    assert config.time_budget == 12
    assert config.memoize is False
    assert config.max_expansions == 500
    assert config.start_room == "BB"


def test_config_env_clears_optional(monkeypatch):
    monkeypatch.setenv("GRAPH_VALVES_MAX_EXPANSIONS", "none")
    config = Config(max_expansions=10).update_from_env()
    assert config.max_expansions is None


def test_config_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("GRAPH_VALVES_TIME_BUDGET", "thirty")
    with pytest.raises(ValueError, match="GRAPH_VALVES_TIME_BUDGET"):
        Config().update_from_env()


def test_config_without_output_dir():
    with pytest.raises(ValueError):
        Config().ensure_output_dir()


def test_batch_settings_labels(tmp_path):
    settings = BatchSettings(start_rooms=["AA", "BB"], time_budgets=[3, 4], output_root=str(tmp_path))
    labels = [config.label() for config in settings.iter_configs()]
    assert labels == ["exhaustive_AA_T3", "exhaustive_AA_T4", "exhaustive_BB_T3", "exhaustive_BB_T4"]
