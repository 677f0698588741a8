from __future__ import annotations

from typing import Optional

from models.hole import Gender, Hole
from models.tee import Tee

from .stats import elevation_profile, time_par_by_hole


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def plot_elevation_profile(hole: Hole, title: Optional[str] = None):
    """Line chart: elevation against running distance along a hole."""
    plt = _load_plt()
    profile = elevation_profile(hole)
    distances = [row["distance"] for row in profile]
    elevations = [row["elevation"] for row in profile]

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(distances, elevations, marker=None, linewidth=2)
    if elevations:
        ax.fill_between(distances, elevations, min(elevations), alpha=0.15)
    ax.set_title(title or f"Hole {hole.number} Elevation Profile")
    ax.set_xlabel("Running Distance (ft)")
    ax.set_ylabel("Elevation (ft)")
    ax.grid(alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_time_par_by_hole(tee: Tee, gender: Gender = Gender.MENS):
    """
    Combined chart:
    - bars: time par per hole (minutes)
    - line: stroke par per hole
    """
    plt = _load_plt()
    table = time_par_by_hole(tee, gender)
    rows = table["holes"]
    x = list(range(len(rows)))
    minutes = [(row["time_par"] or 0) / 60 for row in rows]
    stroke_pars = [row["stroke_par"] for row in rows]

    fig, ax1 = plt.subplots(figsize=(11, 5))
    ax1.bar(x, minutes, alpha=0.8, label="Time Par")
    ax1.set_title(f"{tee.name} Time Par Per Hole ({Gender(gender).value})")
    ax1.set_xlabel("Hole")
    ax1.set_ylabel("Time Par (min)")
    ax1.set_xticks(x)
    ax1.set_xticklabels([str(row["hole"]) for row in rows])
    ax1.grid(axis="y", alpha=0.2)

    ax2 = ax1.twinx()
    ax2.plot(x, stroke_pars, color="black", marker="o", linewidth=2, label="Stroke Par")
    ax2.set_ylabel("Stroke Par")
    ax2.set_ylim(0, max(stroke_pars + [5]) + 1)

    handles1, labels1 = ax1.get_legend_handles_labels()
    handles2, labels2 = ax2.get_legend_handles_labels()
    ax1.legend(handles1 + handles2, labels1 + labels2, loc="upper left")
    fig.tight_layout()
    return fig, (ax1, ax2)
