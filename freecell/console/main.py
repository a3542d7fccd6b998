import logging
from dataclasses import dataclass
import numpy as np
import tyro
from ..engine.board import Board
from ..utils import setup_logging
from .controller import GameController
from .renderer import BoardRenderer, RenderConfig

logger = logging.getLogger(__name__)


@dataclass
class Args:
    seed: int | None = None
    """seed of the shuffle, random if omitted"""
    color: bool = True
    """if toggled, cards are drawn in red and black"""
    clear_screen: bool = True
    """if toggled, the console is cleared before the board is drawn"""
    log_level: str = 'WARNING'
    """the logging level"""
    log_file: str | None = None
    """write logs to this file instead of stderr"""


def build_controller(args: Args) -> GameController:
    board = Board(np.random.default_rng(args.seed))
    renderer = BoardRenderer(RenderConfig(use_color=args.color))
    return GameController(board=board, renderer=renderer, clear_screen=args.clear_screen)


def main() -> None:
    args = tyro.cli(Args)
    setup_logging(args.log_level, args.log_file)
    logger.info('starting with seed %s', args.seed)
    controller = build_controller(args)
    try:
        controller.run()
    except (KeyboardInterrupt, EOFError):
        logger.info('interrupted')
        print('\nThanks for playing!')


if __name__ == '__main__':
    main()
