"""Command-line interface for the Lights Out puzzle."""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

import numpy as np

from ..core.game import LightsOutGame
from ..core.grid import MAX_DIMENSION, MIN_DIMENSION, Grid

logger = logging.getLogger(__name__)

HELP_TEXT = "Enter 'row col' to activate a cell, 'u' to undo, 'r' to reset, 'q' to quit"


class CLILightsOut:
    """Command-line interface for playing Lights Out."""

    def new_game(
        self,
        rows: int,
        columns: int,
        lit: int,
        seed: Optional[int] = None,
        verbose: bool = False,
    ) -> LightsOutGame:
        """Create a new session on a randomly lit grid.

        Args:
            rows: Number of grid rows
            columns: Number of grid columns
            lit: Number of initially lit cells
            seed: Optional seed for reproducible boards
            verbose: Print setup information

        Returns:
            The new game session
        """
        rng = np.random.default_rng(seed)
        grid = Grid.with_random_lit(rows, columns, lit, rng=rng)

        if verbose:
            seed_info = f", seed {seed}" if seed is not None else ""
            print(f"Created {rows}x{columns} grid with {lit} lit cells{seed_info}")

        return LightsOutGame(grid)

    def run_moves(self, game: LightsOutGame, moves: List[Tuple[int, int]], show_grid: bool = False) -> dict:
        """Apply a fixed list of moves without prompting.

        Stops early if the puzzle is solved before the list runs out.

        Args:
            game: Session to play
            moves: (row, col) pairs to activate in order
            show_grid: Show the initial and final grid states

        Returns:
            Session statistics, including the duration
        """
        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(game.grid))

        start_time = time.time()
        for row, col in moves:
            if game.activate(row, col):
                break
        duration = time.time() - start_time

        if show_grid:
            print("\nFinal grid:")
            print(self._format_grid(game.grid))

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        return stats

    def play(self, game: LightsOutGame) -> dict:
        """Play interactively, reading commands from standard input.

        Args:
            game: Session to play

        Returns:
            Session statistics when the puzzle is solved or the player quits
        """
        print(HELP_TEXT)
        print(self._format_grid(game.grid))

        while not game.is_complete:
            try:
                command = input("> ").strip().lower()
            except EOFError:
                break

            if not command:
                continue
            if command in ("q", "quit"):
                break
            if command in ("u", "undo"):
                if game.undo() is None:
                    print("Nothing to undo")
            elif command in ("r", "reset"):
                game.reset()
            else:
                try:
                    row, col = parse_move(command)
                    game.activate(row, col)
                except ValueError as e:
                    print(f"Invalid move: {e}")
                    continue

            print(self._format_grid(game.grid))
            print(f"Moves: {game.moves}, lit: {game.lit_count}")

        return game.get_statistics()

    def _format_grid(self, grid: Grid) -> str:
        """Format grid with row and column indices.

        Args:
            grid: Grid to format

        Returns:
            Formatted grid string
        """
        header = "   " + " ".join(str(c % 10) for c in range(grid.columns))
        lines = [header]
        for r, row in enumerate(str(grid).split("\n")):
            lines.append(f"{r:2d} " + " ".join(row))
        return "\n".join(lines)


def parse_move(text: str) -> Tuple[int, int]:
    """Parse a move given as 'row,col' or 'row col'.

    Args:
        text: Move string

    Returns:
        Tuple of (row, col)

    Raises:
        ValueError: If the text isn't two integers
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Invalid move format: '{text}'. Expected 'row,col'")

    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid move format: '{text}'. Expected 'row,col'")


def parse_moves(items: List[str]) -> List[Tuple[int, int]]:
    """Parse moves from command-line items, each possibly holding ';'-separated moves."""
    moves = []
    for item in items:
        for part in item.split(";"):
            if part.strip():
                moves.append(parse_move(part))
    return moves


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Play the Lights Out puzzle from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play interactively on a 5x5 grid with 10 lit cells
  lightsout-cli

  # Play a reproducible 7x9 board
  lightsout-cli --rows 7 --columns 9 --lit 20 --seed 42

  # Apply a list of moves and show the result
  lightsout-cli --seed 1 --moves 0,0 2,2 "4,4;1,3" --show-grid
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=5, help=f"Grid rows {MIN_DIMENSION}-{MAX_DIMENSION} (default: 5)"
    )

    parser.add_argument(
        "-c", "--columns", type=int, default=5, help=f"Grid columns {MIN_DIMENSION}-{MAX_DIMENSION} (default: 5)"
    )

    parser.add_argument("-l", "--lit", type=int, default=10, help="Initially lit cells (default: 10)")

    parser.add_argument("-s", "--seed", type=int, help="Random seed for a reproducible board")

    # Play configuration
    parser.add_argument(
        "-m",
        "--moves",
        nargs="+",
        help="Apply these 'row,col' moves instead of playing interactively",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging and detailed statistics",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states when applying moves",
    )

    return parser


def print_results(stats: dict, verbose: bool) -> None:
    """Print session results.

    Args:
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    if stats["is_complete"]:
        print(f"\nPuzzle solved in {stats['moves']} moves")
    else:
        print(f"\nPuzzle not solved: {stats['lit_count']} lights remain after {stats['moves']} moves")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initially lit: {stats['initial_lit_count']}")
        print(f"  Lit now: {stats['lit_count']}")
        print(f"  Lit density: {stats['lit_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not MIN_DIMENSION <= args.rows <= MAX_DIMENSION:
        errors.append(f"Rows must be between {MIN_DIMENSION} and {MAX_DIMENSION}")

    if not MIN_DIMENSION <= args.columns <= MAX_DIMENSION:
        errors.append(f"Columns must be between {MIN_DIMENSION} and {MAX_DIMENSION}")

    if not 1 <= args.lit <= args.rows * args.columns - 1:
        errors.append(f"Lit cells must be between 1 and {args.rows * args.columns - 1}")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not validate_args(args):
        return 1

    cli = CLILightsOut()

    try:
        game = cli.new_game(args.rows, args.columns, args.lit, seed=args.seed, verbose=args.verbose)

        if args.moves:
            moves = parse_moves(args.moves)
            logger.debug("Applying %d moves", len(moves))
            stats = cli.run_moves(game, moves, show_grid=args.show_grid)
        else:
            stats = cli.play(game)

        print_results(stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
