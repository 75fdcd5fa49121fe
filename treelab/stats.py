"""Mean and population standard deviation."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from treelab.ohno import Reporter, Severity


def mean(data: Sequence[float], reporter: Optional[Reporter] = None) -> float:
    """Return the mean; an empty list is reported and gives 0.0."""
    if not data:
        if reporter is not None:
            reporter.report("get_mean given zero length", Severity.SERIOUS)
        return 0.0
    return sum(data) / len(data)


def stdev(
    data: Sequence[float],
    data_mean: float,
    reporter: Optional[Reporter] = None,
) -> float:
    """Return the population standard deviation about ``data_mean``.

    A single value is reported and gives 0.0; an empty list gives NaN.
    """
    if len(data) == 1:
        if reporter is not None:
            reporter.report("get_sd given single value", Severity.SERIOUS)
        return 0.0
    if not data:
        return math.nan
    return math.sqrt(sum((x - data_mean) ** 2 for x in data) / len(data))