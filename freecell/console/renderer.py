from dataclasses import dataclass, field
from termcolor import colored
from ..engine.board import BoardSnapshot
from ..engine.cards import Card
from ..engine.standard_spec import StandardSpec as Spec

CELL_WIDTH = 4
ZONE_GAP = ' ' * 10
COLUMN_INDENT = ' ' * 5


def _default_styles() -> dict[str, tuple[str | None, str | None]]:
    return {
        'red': ('red', 'on_white'),
        'black': ('black', 'on_white'),
        'empty': (None, 'on_dark_grey'),
        'label': ('blue', None),
    }


@dataclass
class RenderConfig:
    """
    Presentation settings of the console board

    styles maps a card color ('red' or 'black'), 'empty' and 'label' to a
    (color, on_color) pair of termcolor names
    """

    use_color: bool = True
    styles: dict[str, tuple[str | None, str | None]] = field(default_factory=_default_styles)
    empty_glyph: str = ' -- '


class BoardRenderer:
    """Draws a board snapshot as console text"""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def _style(self, text: str, style: str) -> str:
        if not self.config.use_color:
            return text
        color, on_color = self.config.styles[style]
        return colored(text, color, on_color)

    def render_card(self, card: Card | None) -> str:
        if card is None:
            return self._style(self.config.empty_glyph, 'empty')
        text = f'{card.label:>2} {card.suit.symbol}'
        return self._style(text, card.color)

    def _render_labels(self, count: int) -> str:
        return ''.join(self._style(f'{i:>{CELL_WIDTH}} ', 'label') for i in range(count))

    def render(self, snapshot: BoardSnapshot) -> str:
        s1 = ''.join(' ' + self.render_card(card) for card in snapshot.free_cells)
        s1 += ZONE_GAP
        s1 += ''.join(
            ' ' + self.render_card(snapshot.home_top(i)) for i in range(Spec.num_home_cells)
        )
        s1 += '\n' + self._render_labels(Spec.num_free_cells)
        s1 += ZONE_GAP + self._render_labels(Spec.num_home_cells)

        s2 = COLUMN_INDENT + self._render_labels(Spec.num_play_columns)
        max_column_len = max((len(column) for column in snapshot.play_area), default=0)
        for i in range(max_column_len):
            s2 += '\n' + COLUMN_INDENT
            for column in snapshot.play_area:
                if len(column) > i:
                    s2 += ' ' + self.render_card(column[i])
                else:
                    s2 += ' ' * (CELL_WIDTH + 1)

        return s1 + '\n\n' + s2 + '\n'
