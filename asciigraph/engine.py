"""
Chart Engine

Main coordinator for rendering a dataset as an ASCII graph.
Validates the request, resolves the y axis once, then renders and writes the
graph page by page.
"""

from typing import Any, Iterator, List, Optional, TextIO, Union
import logging
import sys

from .models import (
    REASONABLE_MIN_MAX_HEIGHT,
    REASONABLE_MIN_MAX_WIDTH,
    Dataset,
    GraphConfig,
    GraphType,
    default_config,
)
from .scale import ScaleResolver
from .paginator import ColumnPaginator
from .grid import RowGridBuilder, get_plot_predicate
from .exceptions import GraphError, HeightTooSmallError, NoDataError, WidthTooSmallError

logger = logging.getLogger(__name__)


class ChartEngine:
    """Orchestrates scale resolution, pagination and row building."""

    def __init__(self, out: Optional[TextIO] = None, enable_colour: bool = True):
        self.out = out
        self.resolver = ScaleResolver()
        self.paginator = ColumnPaginator()
        self.builder = RowGridBuilder(enable_colour=enable_colour)

    def render(
        self,
        data: Any,
        config: Optional[GraphConfig] = None,
        graph_type: Union[GraphType, str] = GraphType.BAR,
    ) -> None:
        """
        Render data as a graph and write it to the output sink.

        Args:
            data: A Dataset or anything Dataset.coerce accepts
            config: Graph configuration, defaults to default_config()
            graph_type: BAR or SCATTER

        Raises:
            GraphError: If the data or configuration cannot be rendered.
                Nothing is written for a page that fails.
        """
        out = self.out if self.out is not None else sys.stdout
        for chunk in self._iter_chunks(data, config, graph_type):
            out.write("".join(f"{line}\n" for line in chunk))

    def render_lines(
        self,
        data: Any,
        config: Optional[GraphConfig] = None,
        graph_type: Union[GraphType, str] = GraphType.BAR,
    ) -> List[str]:
        """Render to a list of lines without writing anything."""
        lines: List[str] = []
        for chunk in self._iter_chunks(data, config, graph_type):
            lines.extend(chunk)
        return lines

    def render_to_string(
        self,
        data: Any,
        config: Optional[GraphConfig] = None,
        graph_type: Union[GraphType, str] = GraphType.BAR,
    ) -> str:
        return "".join(f"{line}\n" for line in self.render_lines(data, config, graph_type))

    def _iter_chunks(
        self,
        data: Any,
        config: Optional[GraphConfig],
        graph_type: Union[GraphType, str],
    ) -> Iterator[List[str]]:
        """Yield the title line with the first page, then each following page, as line lists."""
        dataset = Dataset.coerce(data)
        config = config or default_config()

        try:
            self._validate(dataset, config)
            scale = self.resolver.resolve(dataset.values, config.y_range, config.plotted_rows)
            get_plot_predicate(graph_type)
        except GraphError as e:
            logger.error(f"Cannot render graph: {e}")
            raise

        logger.debug(
            f"Rendering {len(dataset)} column(s) as {GraphType(graph_type).value} graph "
            f"({config.max_width}x{config.max_height})"
        )

        pages = self.paginator.iter_pages(list(dataset.points), config.max_width)
        try:
            for page_number, page in enumerate(pages, start=1):
                rows = self.builder.render_page(page, scale, config, graph_type)
                if page_number == 1 and dataset.title is not None:
                    rows.insert(0, f"\t{dataset.title}")
                yield rows
        except GraphError as e:
            logger.error(f"Cannot paginate graph: {e}")
            raise

    def _validate(self, dataset: Dataset, config: GraphConfig) -> None:
        if len(dataset) == 0:
            raise NoDataError()
        if config.max_width < REASONABLE_MIN_MAX_WIDTH:
            raise WidthTooSmallError(config.max_width, REASONABLE_MIN_MAX_WIDTH)
        if config.max_height <= REASONABLE_MIN_MAX_HEIGHT:
            raise HeightTooSmallError(config.max_height, REASONABLE_MIN_MAX_HEIGHT)


def graph(
    data: Any,
    config: Optional[GraphConfig] = None,
    graph_type: Union[GraphType, str] = GraphType.BAR,
    out: Optional[TextIO] = None,
) -> None:
    """Render data as a graph to ``out`` (standard output by default)."""
    ChartEngine(out=out).render(data, config, graph_type)
