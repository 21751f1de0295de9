"""
Command-line interface for playing grid games in the terminal.
"""

import argparse
import logging
from typing import List, Optional

from grid_games.api import play_session
from grid_games.utils.config import Config, GAMES


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe or Connect Four with move history and time travel"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--descending", "-d",
        action="store_true",
        help="List moves newest first",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move and jump",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(game_name=args.game, ascending=not args.descending)
    play_session(config.game_name, ascending=config.ascending)


if __name__ == "__main__":
    main()
