from typing import TypeAlias, Literal

class StandardSpec():
    """Standard freecell game specifications"""

    # indexed by Suit value
    suits: list[str] = ['Spades', 'Hearts', 'Clubs', 'Diamonds']
    suit_symbols: list[str] = ['♠', '♥', '♣', '♦']
    suit_colors: dict[int, str] = {0: 'black', 1: 'red', 2: 'black', 3: 'red'}
    ranks: list[str] = ['A'] + [str(i) for i in range(2, 11)] + ['J', 'Q', 'K']
    loc_types: TypeAlias = Literal['play', 'free', 'home']
    num_cards: int = len(suits) * len(ranks)
    num_free_cells: int = 4
    num_home_cells: int = len(suits)
    num_play_columns: int = 8
