from treelab.statscli import main, parse_number


def test_parse_number_prefix():
    assert parse_number("3.5abc") == 3.5
    assert parse_number("  -2e1") == -20.0


def test_parse_number_garbage_is_zero():
    assert parse_number("abc") == 0.0


def test_no_arguments_is_fatal(capsys):
    assert main([]) == -1
    err = capsys.readouterr().err
    assert err == "ohno_test_app: FATAL (Error #1) - there's no arguments!\n"


def test_worked_example(capsys):
    assert main(["2", "4", "4", "4", "5", "5", "7", "9"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "mean: 5.000000\nstdev: 2.000000\n"
    assert captured.err == ""


def test_zero_deviation_warns(capsys):
    assert main(["1", "1"]) == 0
    captured = capsys.readouterr()
    assert "standard deviation is zero" in captured.err
    assert "WARNING" in captured.err


def test_single_value_reports_twice(capsys):
    assert main(["3"]) == 0
    err_lines = capsys.readouterr().err.splitlines()
    assert "get_sd given single value" in err_lines[0]
    assert "(Error #2)" in err_lines[1]