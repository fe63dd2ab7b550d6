#!/usr/bin/env python3
"""
Engine Benchmark Runner

Runs perft from the starting position, then a self-play match between
two search depths, to establish baseline speed and strength numbers.

Usage:
    python tools/run_benchmark.py [--perft 3] [--depths 1,2] [--games 10]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from ataxx_engine.board import BLUE, EMPTY, RED, BoardState
from ataxx_engine.players import AIPlayer
from ataxx_engine.search import SearchEngine
from ataxx_engine.utils.testing import perft, play_game


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_perft(max_depth: int):
    """Print perft counts and speed for depths 1..max_depth."""
    print("=" * 80)
    print("PERFT - starting position")
    print("=" * 80)
    print(f"{'Depth':<8} {'Nodes':>14} {'Time':>10} {'Nodes/sec':>15}")
    print("-" * 80)

    for depth in range(1, max_depth + 1):
        board = BoardState()
        start_time = time.time()
        nodes = perft(board, depth)
        elapsed = time.time() - start_time
        nps = nodes / elapsed if elapsed > 0 else 0
        print(f"{depth:<8} {nodes:>14,} {format_time(elapsed):>10} {nps:>15,.0f}")


def run_match(depth_a: int, depth_b: int, games: int):
    """
    Play GAMES games between two depths, swapping colors every game.

    Returns:
        Dict with wins for each depth, draws and total time
    """
    print("\n" + "=" * 80)
    print(f"SELF-PLAY MATCH - depth {depth_a} vs depth {depth_b}, {games} games")
    print("=" * 80)

    engine_a = SearchEngine(max_depth=depth_a)
    engine_b = SearchEngine(max_depth=depth_b)
    results = {"a": 0, "b": 0, "draws": 0, "unfinished": 0}
    total_moves = 0

    start_time = time.time()
    for game in tqdm(range(games), desc="Games"):
        a_is_red = game % 2 == 0
        if a_is_red:
            red, blue = AIPlayer(RED, engine_a), AIPlayer(BLUE, engine_b)
        else:
            red, blue = AIPlayer(RED, engine_b), AIPlayer(BLUE, engine_a)

        record = play_game(red, blue)
        total_moves += len(record.moves)

        if record.winner is None:
            results["unfinished"] += 1
        elif record.winner is EMPTY:
            results["draws"] += 1
        elif (record.winner is RED) == a_is_red:
            results["a"] += 1
        else:
            results["b"] += 1

    total_time = time.time() - start_time

    print(f"\n{'Depth':<8} {'Wins':<8}")
    print("-" * 80)
    print(f"{depth_a:<8} {results['a']:<8}")
    print(f"{depth_b:<8} {results['b']:<8}")
    print(f"Draws: {results['draws']}  Unfinished: {results['unfinished']}")
    print(f"Total time: {format_time(total_time)}  Avg moves/game: {total_moves / max(games, 1):.1f}")

    results["total_time"] = total_time
    return results


def main():
    parser = argparse.ArgumentParser(
        description="Run perft and a self-play match between two depths"
    )
    parser.add_argument(
        "--perft",
        type=int,
        default=3,
        help="Maximum perft depth (default: 3, 0 to skip)"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2",
        help="Two comma-separated search depths to match (default: 1,2)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=4,
        help="Number of games in the match (default: 4)"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)
    if len(depths) != 2:
        print("Error: exactly two depths are required")
        sys.exit(1)

    try:
        if args.perft > 0:
            run_perft(args.perft)
        if args.games > 0:
            run_match(depths[0], depths[1], args.games)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)


if __name__ == "__main__":
    main()
