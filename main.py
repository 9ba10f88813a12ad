import argparse
import logging

from gridsnake import config
from gridsnake.engine import GameStepEngine


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play grid snake")
    parser.add_argument("--cols", type=int, default=config.COLS, help="Grid width in cells")
    parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid height in cells")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_INTERVAL_MS,
                        help="Milliseconds between snake steps")
    parser.add_argument("--score-increment", type=int, default=config.SCORE_INCREMENT,
                        help="Points per food eaten")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")

    engine = GameStepEngine(
        cols=args.cols,
        rows=args.rows,
        tick_interval_ms=args.tick_ms,
        score_increment=args.score_increment,
        seed=args.seed,
    )

    # Import the pygame front end only once the arguments are valid
    from gridsnake.utils import SnakeGame

    game = SnakeGame(engine)
    game.run()


if __name__ == "__main__":
    main()
