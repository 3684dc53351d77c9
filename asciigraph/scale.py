"""
Scale Resolver

Computes the vertical calibration (origin and per-row increment) of a graph
from its scaling policy and the full set of values being plotted.
"""

from typing import Sequence
import logging

from .models import (
    REASONABLE_MIN_MAX_HEIGHT,
    RESERVED_ROWS,
    Custom,
    MinToMax,
    ResolvedScale,
    ScalePolicy,
    ZeroToMax,
)
from .exceptions import HeightTooSmallError, InvertedCustomRangeError, NoDataError

logger = logging.getLogger(__name__)


class ScaleResolver:
    """Resolves a ScalePolicy against a dataset's values."""

    def resolve(self, values: Sequence[float], policy: ScalePolicy, plotted_rows: int) -> ResolvedScale:
        """
        Resolve the y axis for the given values.

        Args:
            values: Every value in the dataset, not just one page
            policy: MinToMax, ZeroToMax or Custom
            plotted_rows: Number of increments spanning the range (max_height - 3)

        Returns:
            ResolvedScale with the origin and increment

        Raises:
            InvertedCustomRangeError: If a Custom policy has lower > upper
        """
        if plotted_rows < 1:
            raise HeightTooSmallError(plotted_rows + RESERVED_ROWS, REASONABLE_MIN_MAX_HEIGHT)

        if isinstance(policy, Custom):
            if policy.lower > policy.upper:
                raise InvertedCustomRangeError(policy.lower, policy.upper)
            lower, upper = policy.lower, policy.upper
        else:
            if not values:
                raise NoDataError()
            if isinstance(policy, ZeroToMax):
                lower, upper = 0.0, max(0.0, max(values))
            elif isinstance(policy, MinToMax):
                lower, upper = min(values), max(values)
            else:
                raise TypeError(f"Unknown scale policy: {policy!r}")

        scale = ResolvedScale(origin=lower, increment=(upper - lower) / plotted_rows)
        if scale.increment == 0:
            logger.warning(f"Degenerate y range [{lower}, {upper}]; every level has the same value")
        logger.debug(f"Resolved {type(policy).__name__} scale: origin={scale.origin}, increment={scale.increment}")
        return scale
