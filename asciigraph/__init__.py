"""
asciigraph - ASCII bar and scatter graphs for the terminal

Renders labelled numeric data as text graphs, scaling the y axis
automatically or to fixed bounds and splitting wide datasets over several
figures so that each fits the configured terminal width.

Core Components:
- ChartEngine: Main interface; validates, scales, paginates and writes
- ScaleResolver: Computes the y axis origin and increment
- ColumnPaginator: Splits columns into width-limited pages
- RowGridBuilder: Builds the text rows of one page

Usage:
    from asciigraph import Dataset, GraphConfig, graph

    data = Dataset.from_pairs([("apples", 5), ("oranges", 3)]).with_title("Fruit")
    graph(data, GraphConfig().with_max_height(11))
"""

from .engine import ChartEngine, graph
from .scale import ScaleResolver
from .paginator import ColumnPaginator
from .grid import RowGridBuilder, format_axis_value
from .colour import Colour, Layer, fmt_in_colour
from .models import (
    Custom,
    DataPoint,
    Dataset,
    GraphConfig,
    GraphType,
    MinToMax,
    Page,
    ResolvedScale,
    ScalePolicy,
    ZeroToMax,
    default_config,
)
from .exceptions import (
    ColumnTooWideForConfigError,
    DataConversionError,
    GraphConfigurationError,
    GraphError,
    HeightTooSmallError,
    InvertedCustomRangeError,
    NoDataError,
    UnsupportedGraphTypeError,
    WidthTooSmallError,
)

__all__ = [
    'ChartEngine',
    'graph',
    'ScaleResolver',
    'ColumnPaginator',
    'RowGridBuilder',
    'format_axis_value',
    'Colour',
    'Layer',
    'fmt_in_colour',
    'Custom',
    'DataPoint',
    'Dataset',
    'GraphConfig',
    'GraphType',
    'MinToMax',
    'Page',
    'ResolvedScale',
    'ScalePolicy',
    'ZeroToMax',
    'default_config',
    'ColumnTooWideForConfigError',
    'DataConversionError',
    'GraphConfigurationError',
    'GraphError',
    'HeightTooSmallError',
    'InvertedCustomRangeError',
    'NoDataError',
    'UnsupportedGraphTypeError',
    'WidthTooSmallError',
]

__version__ = '0.1.0'
