"""Command-line driver: reads a puzzle file (or asks for one), runs the bounded propagation solve, and prints the grid, the candidate map, or a JSON report. Optionally renders the final board to an image."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzles/easy.txt
#   python -m apps.cli.solve_cli puzzles/hard.txt --details --max_steps 40
#   python -m apps.cli.solve_cli puzzles/easy.txt --json --png solved.png
#   python -m apps.cli.solve_cli --watch 3           # prompts for a filename, prints the grid after steps 1-3
#
# Exit codes: 0 solved, 1 stalled (propagation alone was not enough), 2 contradiction / bad input.
import argparse
import json
import logging
import sys
from pathlib import Path

from propagator.board import Board, SolvePhase
from propagator.config import load_config
from propagator.errors import SudokuError
from propagator.render import render_grid
from propagator.sudoku_tools import board_payload, parse_puzzle

from .grid_image import draw_board

EXIT_SOLVED = 0
EXIT_STALLED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by constraint propagation.")
    ap.add_argument("puzzle", nargs="?", default=None, help="puzzle text file (81 cells; 0 . _ * x = blank)")
    ap.add_argument("--config", type=str, default=None, help="YAML settings file")
    ap.add_argument("--max_steps", type=int, default=None)
    ap.add_argument("--details", action="store_true", default=None, help="show remaining candidates per cell")
    ap.add_argument("--no-color", dest="color", action="store_false", default=None)
    ap.add_argument("--watch", type=int, default=0, metavar="N", help="print the grid after each of the first N steps")
    ap.add_argument("--png", type=str, default=None, help="also render the final board to this image path")
    ap.add_argument("--json", action="store_true", help="print a JSON report instead of the grid")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def make_watcher(limit: int, color: bool = False):
    def watch(board):
        if board.steps > limit:
            return
        print(f"-- step {board.steps} --")
        print("\n".join(render_grid(board, color=color)))

    return watch


def read_puzzle(path: str | None) -> list:
    if path is None:
        path = input("Puzzle file: ").strip()
    return parse_puzzle(Path(path).read_text(encoding="utf-8"))


def main(args=None) -> int:
    if args is None:
        args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config, max_steps=args.max_steps, details=args.details, color=args.color)

    try:
        values = read_puzzle(args.puzzle)
        board = Board(values)
        watcher = make_watcher(args.watch, color=bool(cfg.color)) if args.watch > 0 else None
        board.start(max_steps=int(cfg.max_steps), on_step=watcher)
    except (OSError, ValueError, SudokuError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(board_payload(board, details=bool(cfg.details)), indent=2))
    else:
        lines = board.render(details=True) if cfg.details else render_grid(board, color=bool(cfg.color))
        print("\n".join(lines))
        print(f"{board.phase.value} after {board.steps} step(s), {len(board.commits)} placement(s)")

    if args.png:
        draw_board(board, args.png, size=int(cfg.image_size))

    return EXIT_SOLVED if board.phase is SolvePhase.SOLVED else EXIT_STALLED


if __name__ == "__main__":
    sys.exit(main())
