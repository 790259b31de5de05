#!/usr/bin/env python3
"""
Example usage of the lightsout package.
"""

import numpy as np

from lightsout import Grid, LightsOutGame


def main():
    """Demonstrate programmatic usage of the lightsout package."""
    # Start from an empty board and light the center cross
    grid = Grid(5, 5)
    grid.activate(2, 2)

    print("Initial state:")
    print(grid)
    print(f"Lit: {grid.lit_count}")
    print()

    game = LightsOutGame(grid)
    solved = game.activate(2, 2)
    print(f"After pressing the center again: solved={solved}")
    print(grid)
    print()

    # A reproducible random board
    board = Grid.with_random_lit(6, 8, 15, rng=np.random.default_rng(2024))
    game = LightsOutGame(board)
    for move in [(0, 0), (3, 4), (5, 7)]:
        game.activate(*move)
    print(f"After {game.moves} moves:")
    print(board)
    print()

    game.reset()
    print("Back to the start:")
    print(board)
    print()

    # Show statistics
    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
