"""Generate a leaderboard bar chart from win counts."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from snakes_ladders.persistence import LeaderboardEntry

LEADER_COLOR = "#E0A526"
BAR_COLOR = "#3A9D5D"


def make_leaderboard_chart(
    entries: list[LeaderboardEntry],
    output_path: str = "leaderboard.png",
    title: str = "Snakes & Ladders Leaderboard",
) -> str:
    """Create a horizontal bar chart of wins, most wins on top.

    Each bar is labelled with its win count and share of all wins; the
    leader(s) are highlighted. Raises ``ValueError`` if *entries* is empty.
    Returns the path to the saved PNG.
    """
    if not entries:
        raise ValueError("No leaderboard entries to chart.")

    ranked = sorted(entries, key=lambda e: (-e.wins, e.name))
    total = sum(e.wins for e in ranked) or 1
    top_wins = ranked[0].wins

    fig, ax = plt.subplots(figsize=(10, max(3, len(ranked) * 0.7)))
    colors = [LEADER_COLOR if e.wins == top_wins else BAR_COLOR for e in ranked]
    bars = ax.barh([e.name for e in ranked], [e.wins for e in ranked], color=colors, edgecolor="white")

    for bar, entry in zip(bars, ranked):
        ax.annotate(
            f"{entry.wins} ({entry.wins / total:.0%})",
            xy=(bar.get_width(), bar.get_y() + bar.get_height() / 2),
            xytext=(4, 0), textcoords="offset points",
            va="center", fontsize=11, fontweight="bold",
        )

    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_xlabel("Wins")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.invert_yaxis()
    ax.set_xlim(left=0, right=top_wins * 1.25 + 1)
    ax.spines[["top", "right"]].set_visible(False)

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
