#!/usr/bin/env python3
import argparse
import logging
import os
from datetime import datetime
from typing import List, Optional

from wfsched.config import RunConfig, load_config
from wfsched.examples import EXAMPLES, load_example
from wfsched.models import PlacementEvent
from wfsched.report import format_report
from wfsched.scheduler import list_schedule
from wfsched.sweep import machine_sweep, write_sweep_csv
from wfsched.visualization import next_unique_path, plot_gantt

logger = logging.getLogger("wfsched")


def _log_placement(event: PlacementEvent) -> None:
    logger.info(
        "job=%s machine=M%d preds=%s ready=%s completes=%s machines=%s",
        event.job_id,
        event.machine + 1,
        list(event.predecessors),
        event.dependency_ready,
        event.completion_time,
        list(event.machine_finish_times),
    )


def run(config: RunConfig) -> int:
    """Schedule the configured example and print the report."""
    graph = load_example(config.example)
    logger.info("Workflow %s: %r, machines=%d", config.example, graph, config.machines)

    schedule = list_schedule(
        graph,
        config.machines,
        trace=_log_placement if config.trace else None,
    )
    for line in format_report(graph, schedule):
        print(line)

    if config.gantt:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        out_path = next_unique_path(
            os.path.join(config.charts_dir, f"gantt_{config.example}_k{config.machines}_{ts}.png")
        )
        plot_gantt(schedule, save_path=out_path)

    if config.sweep:
        rows = machine_sweep(load_example(config.example), range(1, config.sweep_max_machines + 1))
        for r in rows:
            print(f"K={r.machines}: makespan={r.makespan}")
        write_sweep_csv(rows, os.path.join(config.charts_dir, f"sweep_{config.example}.csv"))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Workflow list scheduling on identical machines")
    parser.add_argument("--config", default=None, help="Path to a YAML/JSON config file")
    parser.add_argument("--example", choices=sorted(EXAMPLES), default=None)
    parser.add_argument("--machines", type=int, default=None, help="Number of machines (K)")
    parser.add_argument("--trace", action="store_true", default=None, help="Log every placement")
    parser.add_argument("--gantt", action="store_true", default=None, help="Save a Gantt chart")
    parser.add_argument("--sweep", type=int, default=None, metavar="N", help="Also run K=1..N")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else RunConfig()
    config = config.with_overrides(
        example=args.example,
        machines=args.machines,
        trace=args.trace,
        gantt=args.gantt,
        log_level=args.log_level,
    )
    if args.sweep is not None:
        config = config.with_overrides(sweep=True, sweep_max_machines=args.sweep)

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
