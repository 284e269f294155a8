import logging
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from .models import Schedule  # noqa: E402

logger = logging.getLogger("wfsched.visualization")


def plot_gantt(
    schedule: Schedule,
    save_path: str | Path,
    title: Optional[str] = None,
    show_legend: Optional[bool] = None,
) -> Optional[str]:
    """Draw one bar per placed job and save the chart as an image.

    Improvements:
    - Uses constrained_layout to reduce layout warnings.
    - Disables legend automatically for large workflows unless forced.
    - Adaptive figure size based on number of machines and jobs.

    Returns:
        Path of the written file, or None when the schedule placed no jobs
        (K <= 1).
    """
    if not schedule.rows:
        logger.info("Schedule has no placed jobs; Gantt chart skipped")
        return None

    m = len(schedule.machine_finish_times)
    n = len(schedule.rows)
    base_w, base_h = 10, 0.5 * m + 2
    fig, ax = plt.subplots(
        figsize=(min(base_w + n * 0.05, 18), min(base_h, 16)),
        constrained_layout=True,
    )
    cmap = plt.get_cmap("tab20")
    colors = {row.job_id: cmap(i % 20) for i, row in enumerate(schedule.rows)}
    for row in schedule.rows:
        ax.barh(
            row.machine,
            row.duration,
            left=row.start,
            height=0.8,
            color=colors[row.job_id],
            alpha=0.85,
            edgecolor="black",
            linewidth=0.6,
        )
        if row.duration:
            ax.text(
                row.start + row.duration / 2,
                row.machine,
                str(row.job_id),
                ha="center",
                va="center",
                fontsize=8,
            )
    ax.set_xlabel("Time", fontsize=12)
    ax.set_ylabel("Machine", fontsize=12)
    ax.set_title(title or f"Gantt Chart - Makespan = {schedule.makespan}", fontsize=14, fontweight="bold")
    ax.set_yticks(range(m))
    ax.set_yticklabels([f"M{i + 1}" for i in range(m)])
    ax.grid(True, alpha=0.25, axis="x", linestyle="--", linewidth=0.7)
    ax.set_ylim(-0.5, m - 0.5)

    if show_legend is None:
        show_legend = n <= 40
    if show_legend:
        legend_elements = [
            plt.Rectangle(
                (0, 0), 1, 1, facecolor=colors[row.job_id], alpha=0.85, edgecolor="black",
                label=f"Job {row.job_id}",
            )
            for row in schedule.rows
        ]
        ax.legend(
            handles=legend_elements,
            bbox_to_anchor=(1.02, 1),
            loc="upper left",
            borderaxespad=0.0,
            fontsize=8,
            frameon=False,
            ncol=1 if n <= 25 else 2,
        )

    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    logger.info("Gantt chart saved as: %s", save_path)
    return str(save_path)


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    stem = p.stem
    suffix = p.suffix
    parent = p.parent
    counter = 1
    while True:
        candidate = parent / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1
