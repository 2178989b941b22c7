import io
import sys

import pytest

from recursia.console import (
    display_name_of,
    filter_to_selection,
    get_test_groups,
    run_console_tests,
)
from recursia.simpletest import TestRegistry, TestType, expect_equal
from recursia.testdriver import Test, TestResult
from recursia.textutils import RecursiaError


def _passing():
    expect_equal(1 + 1, 2)


def _failing():
    expect_equal(1, 2)


def _make_registry():
    registry = TestRegistry()
    registry.add("dir/beta.py", 5, "beta works", TestType.STUDENT, _passing)
    registry.add("dir/alpha.py", 10, "alpha works", TestType.PROVIDED, _passing)
    registry.add("dir/alpha.py", 20, "alpha second", TestType.PROVIDED, _passing)
    return registry


def _run(registry, test_filter=None, divert=False):
    out, err = io.StringIO(), io.StringIO()
    groups = run_console_tests(test_filter, divert, registry, out, err)
    return groups, out.getvalue(), err.getvalue()


def test_display_name_of_uses_type_label():
    test = Test("adds numbers", TestType.PROVIDED, 3, _passing)
    assert display_name_of(test) == "Provided Test: adds numbers"
    student = Test("mine", TestType.STUDENT, 4, _passing)
    assert display_name_of(student) == "Student Test: mine"


def test_get_test_groups_gives_file_tails_sorted():
    assert get_test_groups(_make_registry()) == ["alpha.py", "beta.py"]


def test_filter_to_selection_negative_allows_everything():
    test = Test("t", TestType.STUDENT, 1, _passing)
    chosen = filter_to_selection(["alpha.py", "beta.py"], -1)
    assert chosen("alpha.py", test) is True
    assert chosen("beta.py", test) is True


def test_filter_to_selection_picks_one_group():
    test = Test("t", TestType.STUDENT, 1, _passing)
    chosen = filter_to_selection(["alpha.py", "beta.py"], 1)
    assert chosen("beta.py", test) is True
    assert chosen("alpha.py", test) is False


def test_filter_to_selection_out_of_range():
    with pytest.raises(RecursiaError):
        filter_to_selection(["alpha.py"], 1)


def test_all_passing_run_reports_progress_and_summary():
    groups, out, err = _run(_make_registry())
    assert err == ""
    assert "Running Provided Test: alpha works from alpha.py.\n    pass\n" in out
    assert "Running Student Test: beta works from beta.py.\n" in out
    assert "alpha.py: 2 of 2 tests passed.\n" in out
    assert "beta.py: 1 of 1 test passed.\n" in out
    assert "Overall: 3 of 3 tests passed.\n" in out
    assert out.endswith("All tests passed!\n")
    assert all(t.result is TestResult.PASS for g in groups for t in g.tests)


def test_failing_test_goes_to_error_stream():
    registry = _make_registry()
    registry.add("dir/gamma.py", 7, "gamma breaks", TestType.STUDENT, _failing)
    groups, out, err = _run(registry)
    assert "Tests failed in gamma.py:\n" in err
    assert "FAIL: gamma breaks (line 7)\n" in err
    assert "    FAIL: " in out
    assert "gamma.py: 0 of 1 test passed.\n" in out
    assert "All tests passed!" not in out
    gamma = next(g for g in groups if g.name == "gamma.py")
    assert gamma.tests[0].result is TestResult.FAIL


def test_selection_runs_only_one_group():
    registry = _make_registry()
    names = get_test_groups(registry)
    groups, out, _ = _run(registry, filter_to_selection(names, 1))
    assert [g.name for g in groups] == ["beta.py"]
    assert "alpha" not in out
    assert "Overall" not in out


def test_divert_streams_hides_test_output(capsys):
    registry = TestRegistry()

    def noisy():
        print("chatter from test")
        print("noise on stderr", file=sys.stderr)

    registry.add("noisy.py", 1, "noisy", TestType.STUDENT, noisy)
    _, out, err = _run(registry, divert=True)
    captured = capsys.readouterr()
    assert "chatter from test" not in captured.out
    assert "noise on stderr" not in captured.err
    assert "chatter from test" not in out
    assert "    pass\n" in out


def test_without_diversion_test_output_reaches_stdout(capsys):
    registry = TestRegistry()
    registry.add("noisy.py", 1, "noisy", TestType.STUDENT,
                 lambda: print("chatter from test"))
    _, out, _ = _run(registry, divert=False)
    assert "chatter from test" in capsys.readouterr().out
    assert "chatter from test" not in out