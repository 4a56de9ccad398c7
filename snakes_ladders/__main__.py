"""CLI entry point: python -m snakes_ladders {play,leaderboard,chart}."""

from __future__ import annotations

import argparse
import os
import random
import sys
from pathlib import Path

from snakes_ladders import log
from snakes_ladders.chart import make_leaderboard_chart
from snakes_ladders.errors import GameRuleError
from snakes_ladders.game import GameObserver, GameRunner, TurnRecord
from snakes_ladders.persistence import LeaderboardDB


RESULTS_DIR = Path(os.environ.get("SNAKES_LADDERS_RESULTS", "results"))
DB_PATH = RESULTS_DIR / "leaderboard.db"


def _open_db() -> LeaderboardDB:
    return LeaderboardDB(DB_PATH)


class PrintObserver:
    """Prints one line per turn."""

    def __init__(self, player_names: list[str]):
        self.player_names = player_names

    def on_turn(self, record: TurnRecord) -> None:
        name = self.player_names[record.player]
        line = f"[{record.turn_number:3d}] {name} rolled {record.dice_value}: {record.start_position} → {record.target_position}"
        if record.bounced:
            line += " (bounced)"
        if record.teleported:
            kind = "snake" if record.final_position < record.target_position else "ladder"
            line += f" → {record.final_position} ({kind})"
        if record.won:
            line += ", wins!"
        print(line)


def _player_names(args: argparse.Namespace) -> list[str]:
    if args.names:
        return list(args.names)
    return [f"Player {i + 1}" for i in range(args.players)]


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Simulate one hot-seat game and record the winner."""
    names = _player_names(args)
    rng = random.Random(args.seed)
    observer: GameObserver = PrintObserver(names)

    runner = GameRunner(
        player_names=names,
        rng=rng,
        max_turns=args.max_turns,
        observer=observer,
    )
    result = runner.play()
    print(f"\n{result.reason} → {result.winner_name or 'no winner'} after {result.turns} turns")

    if args.no_record:
        return
    db = _open_db()
    db.record_game(
        player_names=names,
        winner=result.winner_name,
        reason=result.reason,
        turns=result.turns,
        stats=runner.state.stats,
    )
    db.close()


# ── leaderboard ──────────────────────────────────────────────────────

def cmd_leaderboard(args: argparse.Namespace) -> None:
    """Print the top players by wins."""
    if not DB_PATH.exists():
        print(f"No database found at {DB_PATH}. Play some games first.", file=sys.stderr)
        sys.exit(1)

    db = _open_db()
    entries = db.top(limit=args.limit)
    db.close()

    if not entries:
        print("No wins recorded yet.", file=sys.stderr)
        sys.exit(1)

    print("\nLeaderboard")
    print("=" * 40)
    for entry in entries:
        print(f"  {entry.name:30s} {entry.wins:7d}")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Generate leaderboard chart from the database."""
    if not DB_PATH.exists():
        print(f"No database found at {DB_PATH}. Play some games first.", file=sys.stderr)
        sys.exit(1)

    db = _open_db()
    entries = db.top(limit=args.limit)
    db.close()

    if not entries:
        print("No wins recorded yet.", file=sys.stderr)
        sys.exit(1)

    out = args.output or "leaderboard.png"
    make_leaderboard_chart(entries, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders rules engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Simulate a hot-seat game")
    p_play.add_argument("--players", type=int, default=4, help="Number of players (default 4)")
    p_play.add_argument("--names", nargs="+", help="Player names (overrides --players)")
    p_play.add_argument("--seed", type=int, help="Seed for the dice")
    p_play.add_argument("--max-turns", type=int, default=1000, help="Max turns per game")
    p_play.add_argument("--no-record", action="store_true", help="Don't save the result")

    p_lb = sub.add_parser("leaderboard", help="Show top players")
    p_lb.add_argument("--limit", type=int, default=10)

    p_chart = sub.add_parser("chart", help="Generate leaderboard chart")
    p_chart.add_argument("--output", "-o", help="Output PNG path")
    p_chart.add_argument("--limit", type=int, default=10)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    log.setup(verbose=args.verbose)

    try:
        if args.command == "play":
            cmd_play(args)
        elif args.command == "leaderboard":
            cmd_leaderboard(args)
        elif args.command == "chart":
            cmd_chart(args)
        else:
            parser.print_help()
    except GameRuleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
