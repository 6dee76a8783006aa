"""Command line entry point: ``snakejump snake`` or ``snakejump jump``."""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .app import ArcadeApp, JumpApp, SnakeApp
from .settings import JumpSettings, SnakeSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snakejump", description="Snake and Doodle Jump in pygame")
    parser.add_argument("game", choices=["snake", "jump"], help="which game to play")
    parser.add_argument("--seed", type=int, default=None, help="random seed for food and platforms")
    parser.add_argument("--width", type=int, default=None, help="playfield width in pixels")
    parser.add_argument("--height", type=int, default=None, help="playfield height in pixels")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def make_app(args: argparse.Namespace) -> ArcadeApp:
    sizes = {k: v for k, v in (("width", args.width), ("height", args.height)) if v is not None}
    if args.game == "snake":
        return SnakeApp(SnakeSettings(**sizes), seed=args.seed)
    return JumpApp(JumpSettings(**sizes), seed=args.seed)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        app = make_app(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info("launching %s", args.game)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
