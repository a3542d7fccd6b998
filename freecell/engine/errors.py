from enum import Enum

class ErrorKind(str, Enum):
    """Names of the rule violations a board or deck can report"""

    EMPTY_SOURCE = 'empty-source'
    EMPTY_FREE_CELL = 'empty-free-cell'
    CELL_OCCUPIED = 'cell-occupied'
    INVALID_FIRST_CARD = 'invalid-first-card'
    INVALID_SEQUENCE = 'invalid-sequence'
    INVALID_DESTINATION = 'invalid-destination'
    INSUFFICIENT_CAPACITY = 'insufficient-capacity'
    INSUFFICIENT_SOURCE_CARDS = 'insufficient-source-cards'
    EXHAUSTED_DECK = 'exhausted-deck'


_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_SOURCE: 'Cannot move from an empty play area column.',
    ErrorKind.EMPTY_FREE_CELL: 'Cannot move from an empty free cell.',
    ErrorKind.CELL_OCCUPIED: 'Cannot put card in a filled free cell.',
    ErrorKind.INVALID_FIRST_CARD: 'Cannot place that card as the first one in a home cell.',
    ErrorKind.INVALID_SEQUENCE: 'Not all cards to be moved are in the correct order.',
    ErrorKind.INVALID_DESTINATION: 'Cannot move card(s) to that location. Invalid combination of cards.',
    ErrorKind.INSUFFICIENT_CAPACITY: 'Not enough open cells to move that many cards.',
    ErrorKind.INSUFFICIENT_SOURCE_CARDS: 'Cannot move more cards than are available.',
    ErrorKind.EXHAUSTED_DECK: 'No cards left to deal.',
}


class FreecellError(Exception):
    """
    Base class of every named game failure

    Args:
        kind (ErrorKind): which rule was broken
        message (str | None): user-facing text, defaults to the standard wording of the kind
    """

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)


class IllegalMoveError(FreecellError):
    """A move broke a game rule; the board is left untouched"""


class DeckExhaustedError(FreecellError):
    """More cards were dealt than the deck holds"""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(ErrorKind.EXHAUSTED_DECK, message)
