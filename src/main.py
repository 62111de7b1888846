"""Command-line entrypoint for the valve release search."""
from __future__ import annotations

import argparse
import sys
from typing import List, Tuple

from configs import Config
from graph_valves import (
    GraphBuildError,
    ReleasePlan,
    SearchBudgetExceeded,
    TraceLogger,
    Tunnels,
    load_scans,
    plan_release,
    replay,
    save_json,
    save_timeline,
    simulate_release,
    write_run_log,
)

STEP_LABELS = {"move": "go", "activate": "open"}


def _log(config: Config, message: str) -> None:
    if config.verbose:
        print(f"[valves] {message}", flush=True)


def build_graph(config: Config) -> Tunnels:
    records = load_scans(config.input_path)
    graph = Tunnels.build(records)
    _log(config, f"Loaded {len(graph)} valves from {config.input_path}")
    return graph


def format_plan(plan: ReleasePlan) -> str:
    lines = ["Found best path:"]
    for kind, valve in plan.path.as_pairs():
        lines.append(f"  {STEP_LABELS[kind]} {valve}")
    lines.append("")
    lines.append(f"Score: {plan.score}")
    return "\n".join(lines)


def execute_run(config: Config) -> Tuple[ReleasePlan, List[dict]]:
    """Execute the search pipeline for a fully specified configuration."""

    graph = build_graph(config)
    _log(
        config,
        f"Search start: start={config.start_room}, time={config.time_budget}, "
        f"memoize={config.memoize}, max_expansions={config.max_expansions}",
    )
    plan = plan_release(graph, config, algorithm=config.algorithm)
    _log(config, f"Search completed: score={plan.score}, expansions={plan.expansions}")

    timeline_rows: List[dict] = []
    if config.simulate:
        timeline_rows = [entry.__dict__ for entry in simulate_release(graph, plan, config)]

    if config.output_dir is not None:
        out_dir = config.ensure_output_dir()
        plan_dict = plan.as_dict()
        save_json(plan_dict, str(out_dir / config.plan_filename))
        if config.simulate:
            save_timeline(timeline_rows, str(out_dir / config.timeline_csv_filename))
            save_json(timeline_rows, str(out_dir / config.timeline_json_filename))
            with TraceLogger(str(out_dir / config.trace_filename)) as trace:
                rows = replay(
                    graph,
                    plan.path,
                    plan.time_budget,
                    start=plan.start,
                    immediate_activation=config.immediate_activation,
                )
                trace.record_all(rows, start=plan.start)
            if config.render_chart:
                from graph_valves.visuals import render_release_chart

                render_release_chart(timeline_rows, str(out_dir / config.chart_filename))
        write_run_log(
            str(out_dir / config.log_filename),
            config_dict=config.as_dict(),
            plan_summary=plan_dict,
        )
        _log(config, f"Artifacts written to {out_dir}")

    return plan, timeline_rows


def run_from_cli(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the valve opening sequence that releases the most pressure")
    parser.add_argument("--input", default="-", help="Tunnel scan file ('-' reads stdin)")
    parser.add_argument("-s", "--start", default="AA", help="Starting valve")
    parser.add_argument("-t", "--time", type=int, default=30, help="Time budget in minutes")
    parser.add_argument("--no-memo", action="store_true", help="Disable the (node, time) search cache")
    parser.add_argument("--max-expansions", type=int, default=None, help="Abort after this many search calls")
    parser.add_argument(
        "--immediate-activation",
        action="store_true",
        help="Count an opened valve's flow in the minute it is opened",
    )
    parser.add_argument("--no-sim", action="store_true", help="Skip the timeline simulation")
    parser.add_argument("--output", default=None, help="Directory for JSON/CSV outputs")
    parser.add_argument("--chart", action="store_true", help="Render a release chart into the output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress messages")
    args = parser.parse_args(argv)

    if args.time < 0:
        parser.error("--time must be non-negative")

    config = Config(
        start_room=args.start,
        time_budget=args.time,
        memoize=not args.no_memo,
        max_expansions=args.max_expansions,
        immediate_activation=args.immediate_activation,
        input_path=args.input,
        simulate=not args.no_sim,
        render_chart=args.chart,
        verbose=args.verbose,
        output_dir=args.output,
    )
    config.update_from_env()

    try:
        plan, _ = execute_run(config)
    except (GraphBuildError, SearchBudgetExceeded, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_plan(plan))
    return 0


if __name__ == "__main__":
    sys.exit(run_from_cli())
