import io

import pytest

from unifuncs.demo import main, run


@pytest.fixture
def report():
    out = io.StringIO()
    run(out)
    return out.getvalue()


def test_every_function_evaluated_at_both_points(report):
    assert report.count("value in x= 3 : ") == 7
    assert report.count("value in x= -5 : ") == 7


def test_dumps_name_each_class(report):
    assert "Dump of Exponential" in report
    assert "Dump of Logarithmic" in report
    assert "Dump of Power" in report


def test_negative_base_error_reported(report):
    assert "[ ERROR ] B coeff should be > 0,\n\t  b_coeff set to 1" in report


def test_negative_log_argument_reported_twice(report):
    assert report.count("[ ERROR ] 'in' value should be > 0") == 2


def test_all_pairs_start_unequal(report):
    assert "E1 and E2 are NOT Equal! " in report
    assert "L1 and L2 are NOT Equal! " in report
    assert "P1 and P2 are NOT Equal! " in report


def test_only_logarithmic_assignment_goes_wrong(report):
    assert report.count("something is wrong!!! ") == 1
    wrong = report.index("something is wrong!!! ")
    assert report.index(" Setting L1 = L2") < wrong < report.index(" Setting P1 = P2")


def test_exponential_overflow_and_underflow(report):
    assert "20^(1000000*10) = inf\n" in report
    assert "20^(-1000000*10) = 0\n" in report


def test_logarithm_with_replaced_base(report):
    assert "10000000000000 * log10(10) = 1e+13\n" in report


def test_report_is_deterministic(report):
    again = io.StringIO()
    run(again)
    assert again.getvalue() == report


def test_main_prints_report_to_stdout(capsys, report):
    assert main([]) == 0
    assert capsys.readouterr().out == report


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])