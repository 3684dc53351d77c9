"""
Graph Data Models

Data points, datasets, scaling policies and the graph configuration value
consumed by the rendering engine, plus the transient types the engine
creates during a single render.
"""

import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .colour import Colour
from .exceptions import DataConversionError

DEFAULT_MAX_WIDTH = 80
DEFAULT_MAX_HEIGHT = 5
DEFAULT_PLOT_SYMBOL = "#"

REASONABLE_MIN_MAX_WIDTH = 40
REASONABLE_MIN_MAX_HEIGHT = 3

# label row, axis row, and the top level that closes the range
RESERVED_ROWS = 3


class GraphType(str, Enum):
    """Supported graph types."""
    BAR = "bar"
    SCATTER = "scatter"
    # Declared but not implemented; rendering it raises UnsupportedGraphTypeError
    SCATTER_INTERPOLATED = "scatter_interpolated"


@pydantic_dataclass(frozen=True)
class MinToMax:
    """Scale between the minimum and maximum of the data."""


@pydantic_dataclass(frozen=True)
class ZeroToMax:
    """Scale between zero and the maximum of the data."""


@pydantic_dataclass(frozen=True)
class Custom:
    """Scale between caller supplied bounds, lower bound first."""
    lower: float
    upper: float


ScalePolicy = Union[MinToMax, ZeroToMax, Custom]


class GraphConfig(BaseModel):
    """
    Immutable graph configuration.

    The usability floors (REASONABLE_MIN_MAX_WIDTH, REASONABLE_MIN_MAX_HEIGHT)
    are checked by the engine at render time so that a config can be built
    up step by step through the ``with_*`` setters.
    """
    model_config = ConfigDict(frozen=True)

    max_width: int = Field(default=DEFAULT_MAX_WIDTH, ge=1, description="Terminal columns available to one figure")
    max_height: int = Field(default=DEFAULT_MAX_HEIGHT, ge=1, description="Rows per figure, including label and axis rows")
    y_range: ScalePolicy = Field(default_factory=MinToMax, description="How the y axis range is chosen")
    plot_symbol: str = Field(default=DEFAULT_PLOT_SYMBOL, min_length=1, max_length=1, description="Character drawn for plotted values")

    def with_max_width(self, max_width: int) -> "GraphConfig":
        return self._replace(max_width=max_width)

    def with_max_height(self, max_height: int) -> "GraphConfig":
        return self._replace(max_height=max_height)

    def with_y_range(self, y_range: ScalePolicy) -> "GraphConfig":
        return self._replace(y_range=y_range)

    def with_plot_symbol(self, plot_symbol: str) -> "GraphConfig":
        return self._replace(plot_symbol=plot_symbol)

    @property
    def plotted_rows(self) -> int:
        """Number of increments between the lowest and highest plotted level."""
        return self.max_height - RESERVED_ROWS

    def _replace(self, **changes: Any) -> "GraphConfig":
        values = dict(self)
        values.update(changes)
        return type(self)(**values)


def default_config() -> GraphConfig:
    """Return a fresh default configuration: 80 wide, 5 high, min to max, '#'."""
    return GraphConfig()


@dataclass(frozen=True)
class DataPoint:
    """One labelled value; rendered as a single column."""
    label: str
    value: float
    colour: Optional[Colour] = None


@dataclass(frozen=True)
class Dataset:
    """Ordered data points plus an optional title."""
    points: Tuple[DataPoint, ...] = ()
    title: Optional[str] = None

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def labels(self) -> List[str]:
        return [point.label for point in self.points]

    @property
    def values(self) -> List[float]:
        return [point.value for point in self.points]

    def with_title(self, title: Any) -> "Dataset":
        return replace(self, title=None if title is None else str(title))

    @classmethod
    def from_columns(
        cls,
        labels: Iterable[Any],
        values: Iterable[Any],
        colours: Optional[Iterable[Any]] = None,
        title: Optional[str] = None,
    ) -> "Dataset":
        """Build a dataset from parallel sequences of labels and values."""
        labels = list(labels)
        values = list(values)
        if len(labels) != len(values):
            raise DataConversionError(
                f"{len(labels)} labels but {len(values)} values", data_size=len(values)
            )
        if colours is None:
            colours = [None] * len(labels)
        else:
            colours = list(colours)
            if len(colours) != len(labels):
                raise DataConversionError(
                    f"{len(labels)} labels but {len(colours)} colours", data_size=len(values)
                )

        points = tuple(
            _make_point(label, value, colour)
            for label, value, colour in zip(labels, values, colours)
        )
        return cls(points=points, title=title)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[Any]], title: Optional[str] = None) -> "Dataset":
        """Build a dataset from ``(label, value)`` or ``(label, value, colour)`` items."""
        points = []
        for item in pairs:
            if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) not in (2, 3):
                raise DataConversionError(f"expected (label, value[, colour]), got {item!r}")
            points.append(_make_point(*item))
        return cls(points=tuple(points), title=title)

    @classmethod
    def from_mapping(cls, mapping: Mapping, title: Optional[str] = None) -> "Dataset":
        return cls.from_columns(mapping.keys(), mapping.values(), title=title)

    @classmethod
    def from_series(cls, series: pd.Series, title: Optional[str] = None) -> "Dataset":
        """Build a dataset from a pandas Series, using its index as labels."""
        return cls.from_columns(series.index.tolist(), series.tolist(), title=title)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        label_column: str,
        value_column: str,
        colour_column: Optional[str] = None,
        title: Optional[str] = None,
    ) -> "Dataset":
        """Build a dataset from two (or three) columns of a DataFrame."""
        wanted = [label_column, value_column] + ([colour_column] if colour_column else [])
        missing = [column for column in wanted if column not in df.columns]
        if missing:
            raise DataConversionError(
                f"column(s) not found: {', '.join(map(str, missing))}", data_size=len(df)
            )

        colours = None
        if colour_column:
            colours = [None if pd.isna(c) else c for c in df[colour_column].tolist()]
        return cls.from_columns(
            df[label_column].tolist(), df[value_column].tolist(), colours=colours, title=title
        )

    @classmethod
    def coerce(cls, data: Any) -> "Dataset":
        """
        Convert any supported input shape into a Dataset.

        Accepts a Dataset, a pandas Series, a two column DataFrame, a mapping,
        a ``(labels, values)`` tuple of parallel sequences, or an iterable of
        ``(label, value[, colour])`` items.
        A two item tuple whose items are both ``(label, value)`` tuples is read
        as two points, not as parallel columns.
        """
        if isinstance(data, Dataset):
            return data
        if data is None:
            return cls()
        if isinstance(data, pd.Series):
            return cls.from_series(data)
        if isinstance(data, pd.DataFrame):
            if len(data.columns) != 2:
                raise DataConversionError(
                    f"a DataFrame needs exactly 2 columns to convert implicitly, got {len(data.columns)}",
                    data_size=len(data),
                )
            return cls.from_dataframe(data, data.columns[0], data.columns[1])
        if isinstance(data, Mapping):
            return cls.from_mapping(data)
        if (
            isinstance(data, tuple)
            and len(data) == 2
            and not all(_is_pair(item) for item in data)
            and _is_value_sequence(data[1])
        ):
            return cls.from_columns(data[0], data[1])
        if isinstance(data, (str, bytes)):
            raise DataConversionError("a string is not a dataset")
        try:
            return cls.from_pairs(data)
        except TypeError:
            raise DataConversionError(f"unsupported data type: {type(data).__name__}") from None


@dataclass(frozen=True)
class ResolvedScale:
    """Vertical calibration shared by every page of one render."""
    origin: float
    increment: float

    def level(self, index: int) -> float:
        """Value at the given plotted level, counting up from the origin."""
        return index * self.increment + self.origin


@dataclass
class Page:
    """Columns assigned to one rendered figure and the width left unused."""
    columns: List[DataPoint] = field(default_factory=list)
    available_width: int = 0

    @property
    def labels(self) -> List[str]:
        return [column.label for column in self.columns]

    def __len__(self) -> int:
        return len(self.columns)


def _to_value(raw: Any) -> float:
    if isinstance(raw, (bool, np.bool_)) or not isinstance(raw, numbers.Real):
        raise DataConversionError(f"value {raw!r} is not a real number")
    value = float(raw)
    if not math.isfinite(value):
        raise DataConversionError(f"value {raw!r} is not finite")
    return value


def _make_point(label: Any, value: Any, colour: Any = None) -> DataPoint:
    if colour is not None:
        try:
            colour = Colour.parse(colour)
        except ValueError as e:
            raise DataConversionError(str(e)) from e
    return DataPoint(label=str(label), value=_to_value(value), colour=colour)


def _is_pair(candidate: Any) -> bool:
    return (
        isinstance(candidate, tuple)
        and len(candidate) in (2, 3)
        and isinstance(candidate[1], numbers.Real)
    )


def _is_value_sequence(candidate: Any) -> bool:
    if isinstance(candidate, (np.ndarray, pd.Series)):
        return True
    if isinstance(candidate, (str, bytes)) or not isinstance(candidate, Sequence):
        return False
    return all(isinstance(item, numbers.Real) for item in candidate)
