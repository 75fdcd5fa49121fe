import io

from treelab.ohno import Reporter
from treelab.stats import mean, stdev


def test_mean_of_constant_list():
    assert mean([4.5, 4.5, 4.5]) == 4.5


def test_mean_empty_reports_and_returns_zero():
    stream = io.StringIO()
    assert mean([], Reporter(stream, "app")) == 0.0
    assert "get_mean given zero length" in stream.getvalue()


def test_stdev_worked_example():
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    assert mean(data) == 5
    assert stdev(data, 5) == 2.0


def test_stdev_constant_is_zero():
    assert stdev([3.0, 3.0], 3.0) == 0.0


def test_stdev_single_value_reports():
    stream = io.StringIO()
    assert stdev([7.0], 7.0, Reporter(stream, "app")) == 0.0
    assert "get_sd given single value" in stream.getvalue()


def test_stdev_empty_is_nan():
    result = stdev([], 0.0)
    assert str(result) == "nan"