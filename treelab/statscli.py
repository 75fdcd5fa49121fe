"""Command that prints the mean and standard deviation of its arguments."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from treelab.ohno import Reporter, Severity
from treelab.stats import mean, stdev

APP_NAME = "ohno_test_app"
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_number(text: str) -> float:
    """Parse the number at the start of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the mean and standard deviation of the numbers given."""
    args = list(sys.argv[1:] if argv is None else argv)
    reporter = Reporter(sys.stderr, APP_NAME)
    if not args:
        reporter.report("there's no arguments!", Severity.FATAL)
        return -1

    data = [parse_number(arg) for arg in args]
    data_mean = mean(data, reporter)
    data_sd = stdev(data, data_mean, reporter)
    if data_sd == 0.0:
        reporter.report(
            "standard deviation is zero, are those really random numbers?",
            Severity.WARNING,
        )
    print(f"mean: {data_mean:f}\nstdev: {data_sd:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())