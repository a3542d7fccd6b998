import logging
import os
from typing import Callable
from ..engine.board import Board, Move
from ..engine.standard_spec import StandardSpec as Spec
from .renderer import BoardRenderer

logger = logging.getLogger(__name__)

MENU = (
    '\n\nPlease select an action for moving the cards:\n'
    '1) Move from play area to play area\n'
    '2) Move from play area to free cell area\n'
    '3) Move from play area to home cell area\n'
    '4) Move from free cell area to play area\n'
    '5) Move from free cell area to home area\n'
    '6) Quit this game'
)

LAST_COLUMN = Spec.num_play_columns - 1
LAST_FREE_CELL = Spec.num_free_cells - 1
LAST_HOME_CELL = Spec.num_home_cells - 1


class GameController:
    """
    Interactive console game: reads menu choices, turns them into board moves
    and redraws the board after each one

    Rule violations never end the game, they are reported and the next action
    is read.

    Args:
        board (Board | None): board to play on, a freshly dealt one if None
        renderer (BoardRenderer | None): draws the board, colored by default
        input_fn (Callable[[str], str]): reads one line of input after showing a prompt
        output_fn (Callable[[str], None]): writes one block of text
        clear_screen (bool): clear the console before drawing the board
    """

    def __init__(
        self,
        board: Board | None = None,
        renderer: BoardRenderer | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clear_screen: bool = False,
    ) -> None:
        self.board = board if board is not None else Board()
        self.renderer = renderer or BoardRenderer()
        self._input = input_fn
        self._output = output_fn
        self._clear_screen = clear_screen
        self.end_game = False

    def run(self) -> None:
        """Play rounds until the player declines another one"""
        while True:
            self._clear()
            self._output('\t\tWelcome to Freecell!\n')
            self.game_loop()
            answer = self._input('\nDo you want to play again? (y/n): ')
            if answer.strip().lower() != 'y':
                break
        self._output('\nThanks for playing!\n')

    def game_loop(self) -> None:
        """Play one round until it is won or quit, then deal a new board"""
        logger.info('round started')
        self.display_board()
        while not self.end_game:
            self.choose_action()
        self.board.reset_new_board()
        self.end_game = False

    def choose_action(self) -> None:
        self._output(MENU)
        choice = self.prompt_int('Your choice: ', 1, 6)
        self.interpret_action_choice(choice)

    def interpret_action_choice(self, choice: int) -> None:
        actions = {
            1: self.move_play_to_play,
            2: self.move_play_to_free,
            3: self.move_play_to_home,
            4: self.move_free_to_play,
            5: self.move_free_to_home,
            6: self.quit_game,
        }
        logger.debug('menu choice %d', choice)
        actions[choice]()

    def move_play_to_play(self) -> None:
        self.display_board()
        source = self.prompt_int(f'\nPlease enter which column (0-{LAST_COLUMN}) to move the card(s) FROM: ',
                                 0, LAST_COLUMN)
        dest = self.prompt_int(f'\nPlease enter which column (0-{LAST_COLUMN}) to move the card(s) TO: ',
                               0, LAST_COLUMN, exclude=source)
        count = self.prompt_int('\nPlease enter the number of cards to move: ')
        if count <= 0:
            self.display_board()
            self._output('\nERROR: Cannot move zero cards.')
            return
        self._perform(Move('play', source, 'play', dest, count))

    def move_play_to_free(self) -> None:
        self.display_board()
        column = self.prompt_int(f'\nPlease enter which column (0-{LAST_COLUMN}) to move the card FROM: ',
                                 0, LAST_COLUMN)
        cell = self.prompt_int(f'\nPlease enter which free cell (0-{LAST_FREE_CELL}) to move the card TO: ',
                               0, LAST_FREE_CELL)
        self._perform(Move('play', column, 'free', cell))

    def move_play_to_home(self) -> None:
        self.display_board()
        column = self.prompt_int(f'\nPlease enter which column (0-{LAST_COLUMN}) to move the card FROM: ',
                                 0, LAST_COLUMN)
        cell = self.prompt_int(f'\nPlease enter which home cell (0-{LAST_HOME_CELL}) to move the card TO: ',
                               0, LAST_HOME_CELL)
        self._perform(Move('play', column, 'home', cell))

    def move_free_to_play(self) -> None:
        self.display_board()
        cell = self.prompt_int(f'\nPlease enter which free cell (0-{LAST_FREE_CELL}) to move the card FROM: ',
                               0, LAST_FREE_CELL)
        column = self.prompt_int(f'\nPlease enter which column (0-{LAST_COLUMN}) to move the card TO: ',
                                 0, LAST_COLUMN)
        self._perform(Move('free', cell, 'play', column))

    def move_free_to_home(self) -> None:
        self.display_board()
        free_cell = self.prompt_int(f'\nPlease enter which free cell (0-{LAST_FREE_CELL}) to move the card FROM: ',
                                    0, LAST_FREE_CELL)
        home_cell = self.prompt_int(f'\nPlease enter which home cell (0-{LAST_HOME_CELL}) to move the card TO: ',
                                    0, LAST_HOME_CELL)
        self._perform(Move('free', free_cell, 'home', home_cell))

    def quit_game(self) -> None:
        logger.info('round quit')
        self.end_game = True

    def display_board(self) -> None:
        self._clear()
        self._output(self.renderer.render(self.board.snapshot()))

    def prompt_int(self, prompt: str, low: int | None = None, high: int | None = None,
                   exclude: int | None = None) -> int:
        """
        Read an integer, asking again until it is in range

        Args:
            prompt (str): first prompt shown
            low (int | None): smallest accepted value, unbounded if None
            high (int | None): largest accepted value, unbounded if None
            exclude (int | None): a value in range that is still refused

        Returns:
            int: the accepted value
        """
        if low is None or high is None:
            retry = '\nChoice must be a whole number. Please try again: '
        elif exclude is None:
            retry = f'\nChoice must be a number between {low} and {high}. Please try again: '
        else:
            retry = (f'\nChoice must be a number between {low} and {high}, '
                     'different from the first column value. Please try again: ')
        text = self._input(prompt)
        while True:
            try:
                value = int(text.strip())
            except ValueError:
                value = None
            if value is not None \
                and (low is None or value >= low) \
                and (high is None or value <= high) \
                and value != exclude:
                return value
            text = self._input(retry)

    def _perform(self, move: Move) -> None:
        result = self.board.apply(move)
        self.display_board()
        if not result.ok:
            self._output(f'\nERROR: {result.error.message}')
            return
        if self.board.won_game():
            logger.info('round won')
            self.end_game = True
            self._output('\n\nYou won!\n')

    def _clear(self) -> None:
        if self._clear_screen:
            os.system('cls' if os.name == 'nt' else 'clear')
