from .board import Board, BoardSnapshot, Move, MoveResult
from .cards import Card, Deck, Suit
from .errors import DeckExhaustedError, ErrorKind, FreecellError, IllegalMoveError
from .standard_spec import StandardSpec

__all__ = [
    'Board', 'BoardSnapshot', 'Move', 'MoveResult',
    'Card', 'Deck', 'Suit',
    'DeckExhaustedError', 'ErrorKind', 'FreecellError', 'IllegalMoveError',
    'StandardSpec',
]
