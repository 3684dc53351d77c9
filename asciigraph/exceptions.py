"""
Graph Rendering Exceptions

Custom exceptions for the ASCII graph rendering system.
"""


class GraphError(Exception):
    """Base exception for graph rendering errors."""

    def __init__(self, message: str, graph_type: str = None, data_size: int = None):
        super().__init__(message)
        self.graph_type = graph_type
        self.data_size = data_size


class NoDataError(GraphError):
    """Raised when there are no data points to render."""

    def __init__(self):
        super().__init__("No data to graph", data_size=0)


class DataConversionError(GraphError, ValueError):
    """Raised when input cannot be converted into a dataset."""

    def __init__(self, reason: str, data_size: int = None):
        super().__init__(f"Cannot convert data for graphing: {reason}", data_size=data_size)
        self.reason = reason


class GraphConfigurationError(GraphError):
    """Raised when the graph configuration is below a usable floor."""

    def __init__(self, message: str):
        super().__init__(f"Graph configuration error: {message}")


class WidthTooSmallError(GraphConfigurationError):
    """Raised when max_width is below the reasonable minimum."""

    def __init__(self, max_width: int, minimum: int):
        super().__init__(f"max_width {max_width} is below the minimum of {minimum}")
        self.max_width = max_width
        self.minimum = minimum


class HeightTooSmallError(GraphConfigurationError):
    """Raised when max_height leaves no room for a plotted row."""

    def __init__(self, max_height: int, minimum: int):
        super().__init__(f"max_height {max_height} must be greater than {minimum}")
        self.max_height = max_height
        self.minimum = minimum


class InvertedCustomRangeError(GraphError):
    """Raised when a custom y range has its lower bound above its upper bound."""

    def __init__(self, lower: float, upper: float):
        super().__init__(f"Custom y range is inverted: lower {lower} > upper {upper}")
        self.lower = lower
        self.upper = upper


class ColumnTooWideForConfigError(GraphError):
    """Raised when a column label cannot fit on any page."""

    def __init__(self, label: str, max_width: int):
        super().__init__(
            f"Column '{label}' ({len(label)} characters) does not fit within max_width {max_width}"
        )
        self.label = label
        self.max_width = max_width


class UnsupportedGraphTypeError(GraphError):
    """Raised when a declared graph type has no renderer."""

    def __init__(self, graph_type: str):
        super().__init__(f"Unsupported graph type: {graph_type}", graph_type=graph_type)
