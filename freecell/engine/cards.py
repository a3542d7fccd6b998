from dataclasses import dataclass, replace
from enum import IntEnum
import numpy as np
from .errors import DeckExhaustedError
from .standard_spec import StandardSpec as Spec

class Suit(IntEnum):
    SPADE = 0
    HEART = 1
    CLUB = 2
    DIAMOND = 3

    @property
    def color(self) -> str:
        return Spec.suit_colors[self.value]

    @property
    def symbol(self) -> str:
        return Spec.suit_symbols[self.value]


ACE = 1
KING = len(Spec.ranks)


@dataclass(frozen=True)
class Card:
    """A playing card, compared by rank and suit only"""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank < ACE or self.rank > KING:
            raise ValueError(f'rank of card cannot be {self.rank}')
        object.__setattr__(self, 'suit', Suit(self.suit))

    @property
    def color(self) -> str:
        return self.suit.color

    @property
    def label(self) -> str:
        return Spec.ranks[self.rank - 1]

    def with_rank(self, rank: int) -> 'Card':
        return replace(self, rank=rank)

    def with_suit(self, suit: Suit) -> 'Card':
        return replace(self, suit=suit)

    def is_opposite_color(self, other: 'Card') -> bool:
        return self.color != other.color

    def can_stack_on(self, lower: 'Card') -> bool:
        """
        Check if this card may be placed on top of another in a play column

        Args:
            lower (Card): card currently on top of the column

        Returns:
            bool: True if this card is one rank below and of the opposite color
        """
        return lower.rank - self.rank == 1 and self.is_opposite_color(lower)

    def can_follow_home(self, top: 'Card') -> bool:
        return self.rank - top.rank == 1 and self.suit == top.suit

    def __str__(self) -> str:
        return self.label + self.suit.symbol


class Deck:
    """
    The 52 distinct cards, shuffled and dealt one at a time

    Args:
        rng (np.random.Generator | None): source of randomness, a fresh unseeded one if None
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self._cards: list[Card] = [
            Card(rank, suit) for rank in range(ACE, KING + 1) for suit in Suit
        ]
        self._current = 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._current

    def shuffle(self) -> None:
        """
        Rebuild the deck in a uniformly random order

        Random rank and suit pairs are drawn and kept only when not already placed,
        until every slot is filled. Resets the deal cursor.
        """
        placed: set[tuple[int, int]] = set()
        cards: list[Card] = []
        while len(cards) < Spec.num_cards:
            rank = int(self._rng.integers(ACE, KING + 1))
            suit = int(self._rng.integers(len(Spec.suits)))
            if (rank, suit) in placed:
                continue
            placed.add((rank, suit))
            cards.append(Card(rank, Suit(suit)))
        self._cards = cards
        self._current = 0

    def deal(self) -> Card:
        """
        Deal the card under the cursor

        Raises:
            DeckExhaustedError: when every card has already been dealt

        Returns:
            Card: the dealt card
        """
        if self._current >= len(self._cards):
            raise DeckExhaustedError()
        card = self._cards[self._current]
        self._current += 1
        return card
