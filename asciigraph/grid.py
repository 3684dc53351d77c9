"""
Row Grid Builder

Builds the text rows of one page: the label row, the x axis rule, and one
row per plotted level with the y axis values down the left hand side.
"""

from typing import Callable, Dict, List, Union
import logging

from .colour import Layer, fmt_in_colour
from .models import DataPoint, GraphConfig, GraphType, Page, ResolvedScale
from .exceptions import UnsupportedGraphTypeError

logger = logging.getLogger(__name__)

Y_AXIS_CHAR = "|"
X_AXIS_CHAR = "-"
BLANK = " "

# Index of the first plotted row; rows 0 and 1 hold the labels and the x axis
FIRST_LEVEL_ROW = 2


def _bar_predicate(value: float, level: float, increment: float) -> bool:
    return value >= level


def _scatter_predicate(value: float, level: float, increment: float) -> bool:
    return level <= value < level + increment


PlotPredicate = Callable[[float, float, float], bool]

PLOT_PREDICATES: Dict[GraphType, PlotPredicate] = {
    GraphType.BAR: _bar_predicate,
    GraphType.SCATTER: _scatter_predicate,
}


def format_axis_value(value: float) -> str:
    """Format a y axis value compactly, printing negative zero as 0."""
    if value == 0:
        value = 0.0
    return f"{value:g}"


def get_plot_predicate(graph_type: Union[GraphType, str]) -> PlotPredicate:
    """Return the plotting predicate for a graph type, failing for unimplemented types."""
    try:
        graph_type = GraphType(graph_type)
    except ValueError:
        raise UnsupportedGraphTypeError(str(graph_type)) from None

    predicate = PLOT_PREDICATES.get(graph_type)
    if predicate is None:
        raise UnsupportedGraphTypeError(graph_type.value)
    return predicate


class RowGridBuilder:
    """Builds the rows of a single page of a graph."""

    def __init__(self, enable_colour: bool = True):
        self.enable_colour = enable_colour

    def render_page(
        self,
        page: Page,
        scale: ResolvedScale,
        config: GraphConfig,
        graph_type: Union[GraphType, str] = GraphType.BAR,
    ) -> List[str]:
        """
        Render a page into rows in output order.

        The highest level comes first and the label row last, so the rows can
        be written top to bottom as they should appear.
        """
        rows = self.build_rows(page, scale, config, graph_type)
        rows.reverse()
        return rows

    def build_rows(
        self,
        page: Page,
        scale: ResolvedScale,
        config: GraphConfig,
        graph_type: Union[GraphType, str] = GraphType.BAR,
    ) -> List[str]:
        """Build rows bottom up: labels, x axis, then each level from the origin upwards."""
        plotted = get_plot_predicate(graph_type)
        axis_width = self.axis_width(scale, config)
        last_row = config.max_height - 1

        rows = [
            BLANK * (axis_width + 1) + "".join(f"{label} " for label in page.labels),
            BLANK * axis_width + X_AXIS_CHAR * page.available_width,
        ]

        for index in range(FIRST_LEVEL_ROW, config.max_height):
            level = scale.level(index - FIRST_LEVEL_ROW)
            # y values on alternate rows, and always on the top row
            if index % 2 == 0 or index == last_row:
                cells = [format_axis_value(level).ljust(axis_width)]
            else:
                cells = [BLANK * axis_width]
            cells.append(Y_AXIS_CHAR)

            for column in page.columns:
                if plotted(column.value, level, scale.increment):
                    cells.append(self._symbol(column, config.plot_symbol))
                else:
                    cells.append(BLANK)
                cells.append(BLANK * len(column.label))
            rows.append("".join(cells))

        return rows

    def axis_width(self, scale: ResolvedScale, config: GraphConfig) -> int:
        """Width of the widest formatted y value among the plotted levels."""
        levels = range(config.max_height - FIRST_LEVEL_ROW)
        return max((len(format_axis_value(scale.level(i))) for i in levels), default=0)

    def _symbol(self, column: DataPoint, symbol: str) -> str:
        if self.enable_colour and column.colour is not None:
            return fmt_in_colour(symbol, column.colour, Layer.FOREGROUND)
        return symbol
