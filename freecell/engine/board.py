import logging
from dataclasses import dataclass
from typing import Iterable
import numpy as np
from .cards import ACE, KING, Card, Deck
from .errors import ErrorKind, FreecellError, IllegalMoveError
from .standard_spec import StandardSpec as Spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only copy of every zone of a board

    free_cells holds a card or None per cell, home_cells and play_area hold
    their stacks bottom card first
    """

    free_cells: tuple[Card | None, ...]
    home_cells: tuple[tuple[Card, ...], ...]
    play_area: tuple[tuple[Card, ...], ...]

    def home_top(self, idx: int) -> Card | None:
        home = self.home_cells[idx]
        return home[-1] if home else None

    def cards(self) -> list[Card]:
        cards = [card for card in self.free_cells if card is not None]
        for home in self.home_cells:
            cards.extend(home)
        for column in self.play_area:
            cards.extend(column)
        return cards


@dataclass(frozen=True)
class Move:
    """
    One move request, read as "move count card(s) from source to destination"

    Supported pairs are play->play, play->free, play->home, free->play and free->home
    """

    source_type: Spec.loc_types
    source_idx: int
    dest_type: Spec.loc_types
    dest_idx: int
    count: int = 1


@dataclass(frozen=True)
class MoveResult:
    ok: bool
    error: FreecellError | None = None

    @property
    def status(self) -> str:
        return 'success' if self.ok else 'failure'


class Board:
    """
    Freecell board: 4 free cells, 4 home cells and 8 play columns

    Every move either applies completely or raises IllegalMoveError and leaves
    the board as it was. Index and count arguments are expected to be in range
    already; out-of-range values raise ValueError.

    Args:
        rng (np.random.Generator | None): randomness for shuffling, a fresh unseeded one if None
        deal (bool): deal a shuffled deck onto the play area, otherwise start with every zone empty
    """

    def __init__(self, rng: np.random.Generator | None = None, deal: bool = True) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self._clear()
        if deal:
            self._create_board()

    @classmethod
    def from_layout(
        cls,
        play_area: Iterable[Iterable[Card]],
        free_cells: Iterable[Card | None] = (),
        home_cells: Iterable[Iterable[Card]] = (),
        rng: np.random.Generator | None = None,
    ) -> 'Board':
        """
        Build a board holding the given cards, without checking the 52 card invariant

        Stacks are given bottom card first; missing columns and cells are left empty.

        Raises:
            ValueError: when a zone is given more stacks or cells than it has
        """
        board = cls(rng=rng, deal=False)
        for loc_type, stacks, target in (
            ('play', play_area, board._play_area),
            ('home', home_cells, board._home_cells),
        ):
            stacks = [list(stack) for stack in stacks]
            if len(stacks) > len(target):
                raise ValueError(f'too many {loc_type} stacks: {len(stacks)}')
            for i, stack in enumerate(stacks):
                target[i].extend(stack)
        free_cells = list(free_cells)
        if len(free_cells) > Spec.num_free_cells:
            raise ValueError(f'too many free cells: {len(free_cells)}')
        board._free_cells[:len(free_cells)] = free_cells
        return board

    def _clear(self) -> None:
        self._free_cells: list[Card | None] = [None] * Spec.num_free_cells
        self._home_cells: list[list[Card]] = [[] for _ in range(Spec.num_home_cells)]
        self._play_area: list[list[Card]] = [[] for _ in range(Spec.num_play_columns)]

    def _create_board(self) -> None:
        deck = Deck(self._rng)
        deck.shuffle()
        for i in range(Spec.num_cards):
            self._play_area[i % Spec.num_play_columns].append(deck.deal())
        logger.debug('dealt new board: %s', [len(column) for column in self._play_area])

    def reset_new_board(self) -> None:
        """Clear every zone, then shuffle a fresh deck and deal it again"""
        self._clear()
        self._create_board()

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            free_cells=tuple(self._free_cells),
            home_cells=tuple(tuple(home) for home in self._home_cells),
            play_area=tuple(tuple(column) for column in self._play_area),
        )

    def check_invariant(self) -> bool:
        """
        Check that the board holds each of the 52 cards exactly once

        Returns:
            bool: True if the invariant holds
        """
        cards = self.snapshot().cards()
        return len(cards) == Spec.num_cards and len(set(cards)) == Spec.num_cards

    def max_movable(self, dest_column: int) -> int:
        """
        Calculate how many cards may move at once onto a play column

        Each empty free cell adds one card, and each empty play column other
        than the destination doubles the total.

        Args:
            dest_column (int): index of the destination column

        Returns:
            int: maximum number of cards
        """
        self._check_index('play', dest_column)
        empty_cells = sum(1 for card in self._free_cells if card is None)
        empty_columns = sum(1 for column in self._play_area if not column)
        if not self._play_area[dest_column]:
            empty_columns -= 1
        return (1 + empty_cells) * 2 ** empty_columns

    def won_game(self) -> bool:
        return all(len(home) == KING for home in self._home_cells)

    def move_play_to_play(self, source_column: int, dest_column: int, count: int) -> None:
        self._check_index('play', source_column)
        self._check_index('play', dest_column)
        if source_column == dest_column:
            raise ValueError('source and destination columns must differ')
        if count < 1:
            raise ValueError(f'cannot move {count} cards')

        if count > self.max_movable(dest_column):
            raise self._illegal(ErrorKind.INSUFFICIENT_CAPACITY)
        source = self._play_area[source_column]
        if not source:
            raise self._illegal(ErrorKind.EMPTY_SOURCE)

        # walk down from the top card; deepest ends up as the run's base
        base = source[-1]
        for i in range(1, count):
            if i >= len(source):
                raise self._illegal(ErrorKind.INSUFFICIENT_SOURCE_CARDS)
            card = source[-1 - i]
            if not base.can_stack_on(card):
                raise self._illegal(ErrorKind.INVALID_SEQUENCE)
            base = card

        dest = self._play_area[dest_column]
        if dest and not base.can_stack_on(dest[-1]):
            raise self._illegal(ErrorKind.INVALID_DESTINATION)

        run = source[-count:]
        del source[-count:]
        dest.extend(run)
        logger.debug('moved %d card(s) from column %d to column %d', count, source_column, dest_column)

    def move_play_to_free(self, column: int, free_cell_idx: int) -> None:
        self._check_index('play', column)
        self._check_index('free', free_cell_idx)
        if not self._play_area[column]:
            raise self._illegal(ErrorKind.EMPTY_SOURCE)
        if self._free_cells[free_cell_idx] is not None:
            raise self._illegal(ErrorKind.CELL_OCCUPIED)
        self._free_cells[free_cell_idx] = self._play_area[column].pop()
        logger.debug('moved %s from column %d to free cell %d',
                     self._free_cells[free_cell_idx], column, free_cell_idx)

    def move_play_to_home(self, column: int, home_cell_idx: int) -> None:
        self._check_index('play', column)
        self._check_index('home', home_cell_idx)
        source = self._play_area[column]
        if not source:
            raise self._illegal(ErrorKind.EMPTY_SOURCE)
        self._check_home(source[-1], home_cell_idx)
        self._home_cells[home_cell_idx].append(source.pop())
        logger.debug('moved %s from column %d to home cell %d',
                     self._home_cells[home_cell_idx][-1], column, home_cell_idx)

    def move_free_to_play(self, free_cell_idx: int, column: int) -> None:
        self._check_index('free', free_cell_idx)
        self._check_index('play', column)
        card = self._free_cells[free_cell_idx]
        if card is None:
            raise self._illegal(ErrorKind.EMPTY_FREE_CELL)
        dest = self._play_area[column]
        if dest and not card.can_stack_on(dest[-1]):
            raise self._illegal(ErrorKind.INVALID_DESTINATION)
        dest.append(card)
        self._free_cells[free_cell_idx] = None
        logger.debug('moved %s from free cell %d to column %d', card, free_cell_idx, column)

    def move_free_to_home(self, free_cell_idx: int, home_cell_idx: int) -> None:
        self._check_index('free', free_cell_idx)
        self._check_index('home', home_cell_idx)
        card = self._free_cells[free_cell_idx]
        if card is None:
            raise self._illegal(ErrorKind.EMPTY_FREE_CELL)
        self._check_home(card, home_cell_idx)
        self._home_cells[home_cell_idx].append(card)
        self._free_cells[free_cell_idx] = None
        logger.debug('moved %s from free cell %d to home cell %d', card, free_cell_idx, home_cell_idx)

    def apply(self, move: Move) -> MoveResult:
        """
        Perform a move and report the outcome instead of raising

        Raises:
            ValueError: when the move names an unsupported pair of locations or an index out of range

        Returns:
            MoveResult: success, or failure carrying the IllegalMoveError
        """
        try:
            self._dispatch(move)
        except IllegalMoveError as exc:
            return MoveResult(False, exc)
        return MoveResult(True)

    def _dispatch(self, move: Move) -> None:
        pair = (move.source_type, move.dest_type)
        if pair == ('play', 'play'):
            self.move_play_to_play(move.source_idx, move.dest_idx, move.count)
            return
        if move.count != 1:
            raise ValueError(f'cannot move {move.count} cards to a {move.dest_type} cell')
        if pair == ('play', 'free'):
            self.move_play_to_free(move.source_idx, move.dest_idx)
        elif pair == ('play', 'home'):
            self.move_play_to_home(move.source_idx, move.dest_idx)
        elif pair == ('free', 'play'):
            self.move_free_to_play(move.source_idx, move.dest_idx)
        elif pair == ('free', 'home'):
            self.move_free_to_home(move.source_idx, move.dest_idx)
        else:
            raise ValueError(f'cannot move from {move.source_type} to {move.dest_type}')

    def _check_home(self, card: Card, home_cell_idx: int) -> None:
        home = self._home_cells[home_cell_idx]
        if not home:
            if card.rank != ACE:
                raise self._illegal(ErrorKind.INVALID_FIRST_CARD)
        elif not card.can_follow_home(home[-1]):
            raise self._illegal(ErrorKind.INVALID_SEQUENCE,
                                'Cannot move card to that location. Invalid combination of cards.')

    @staticmethod
    def _check_index(loc_type: Spec.loc_types, idx: int) -> None:
        sizes = {
            'play': Spec.num_play_columns,
            'free': Spec.num_free_cells,
            'home': Spec.num_home_cells,
        }
        if idx < 0 or idx >= sizes[loc_type]:
            raise ValueError(f'{loc_type} index cannot be {idx}')

    @staticmethod
    def _illegal(kind: ErrorKind, message: str | None = None) -> IllegalMoveError:
        error = IllegalMoveError(kind, message)
        logger.info('rejected move: %s (%s)', error.message, kind.value)
        return error

