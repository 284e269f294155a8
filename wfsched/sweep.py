"""Schedule one workflow for a range of machine counts and summarize."""

from __future__ import annotations

import csv
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .graph import WorkflowGraph
from .scheduler import list_schedule

logger = logging.getLogger("wfsched.sweep")


@dataclass(frozen=True)
class SweepRow:
    machines: int
    makespan: float
    speedup: Optional[float]

    def to_dict(self):
        return asdict(self)


def machine_sweep(graph: WorkflowGraph, machine_counts: Iterable[int]) -> List[SweepRow]:
    """Run the list scheduler once per machine count.

    ``speedup`` is the makespan of the first count divided by the makespan
    of the current one (None when the current makespan is 0).
    """
    rows: List[SweepRow] = []
    baseline = None
    for k in machine_counts:
        result = list_schedule(graph, k).makespan
        if baseline is None:
            baseline = result
        speedup = baseline / result if result else None
        rows.append(SweepRow(machines=k, makespan=result, speedup=speedup))
        logger.info("K=%d makespan=%s", k, result)
    return rows


def write_sweep_csv(rows: List[SweepRow], out_path: str | Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    columns = ["machines", "makespan", "speedup"]
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(columns)
        for r in rows:
            speedup = "" if r.speedup is None else f"{r.speedup:.4f}"
            writer.writerow([r.machines, r.makespan, speedup])
    logger.info("Sweep summary written to %s", out_path)
    return out_path
