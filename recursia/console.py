"""Console front end for running registered tests and summarising the results."""

from __future__ import annotations

import io
import sys
from contextlib import ExitStack, redirect_stderr, redirect_stdout
from typing import TextIO

from recursia.simpletest import TestRegistry, default_registry
from recursia.testdriver import Test, TestFilter, TestGroup, TestResult, run, tail_of
from recursia.textutils import RecursiaError, pluralize


def display_name_of(test: Test) -> str:
    """Name of a test as shown to the user, prefixed by its kind."""
    return f"{test.test_type.label}: {test.name}"


def get_test_groups(registry: TestRegistry | None = None) -> list[str]:
    """Names of all files that hold tests, in display order."""
    registry = registry if registry is not None else default_registry
    return sorted(tail_of(key) for key in registry.groups())


def _allow_all(_group: str, _test: Test) -> bool:
    return True


def filter_to_selection(groups: list[str], selection: int) -> TestFilter:
    """Filter admitting only the selected group, or every group if selection is negative.

    Raises RecursiaError if the selection is past the end of the groups.
    """
    if selection < 0:
        return _allow_all
    if selection >= len(groups):
        raise RecursiaError(f"no test group with index {selection}")
    selected = groups[selection]

    def only_selected(group: str, test: Test) -> bool:
        return group == selected and _allow_all(group, test)

    return only_selected


class _ProgressReporter:
    """Writes a line as each test starts and another as it finishes."""

    _OUTCOME_PREFIX = {
        TestResult.PASS: None,
        TestResult.FAIL: "    FAIL: ",
        TestResult.EXCEPTION: "    FAIL: ",
        TestResult.LEAK: "    LEAK: ",
    }

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._running: Test | None = None
        self.last_groups: list[TestGroup] = []

    def _finish(self, test: Test) -> None:
        if test.result not in self._OUTCOME_PREFIX:
            raise RecursiaError("Internal error: Unknown test result?")
        prefix = self._OUTCOME_PREFIX[test.result]
        if prefix is None:
            self._out.write("    pass\n")
        else:
            self._out.write(f"{prefix}{test.detail_message}\n")
        self._running = None

    def __call__(self, groups: list[TestGroup]) -> None:
        self.last_groups = groups
        for group in groups:
            for test in group.tests:
                if test is self._running:
                    self._finish(test)
                if test.result is TestResult.RUNNING:
                    self._running = test
                    self._out.write(
                        f"Running {display_name_of(test)} from {group.name}.\n")


def _write_summary(groups: list[TestGroup], out: TextIO, err: TextIO) -> None:
    out.write("\nTest summary: \n")

    total_tests = sum(group.num_tests for group in groups)
    total_passed = sum(group.num_passed for group in groups)

    for group in groups:
        if group.num_passed == group.num_tests:
            continue
        err.write(f"Tests failed in {group.name}:\n")
        for test in group.tests:
            if test.result is not TestResult.PASS:
                err.write(f"FAIL: {test.name} (line {test.line_number})\n")
                err.write(f"{test.detail_message}\n")

    for group in groups:
        out.write(f"{group.name}: {group.num_passed} of "
                  f"{pluralize(group.num_tests, 'test')} passed.\n")

    if len(groups) > 1:
        out.write(f"Overall: {total_passed} of "
                  f"{pluralize(total_tests, 'test')} passed.\n")

    if total_tests == total_passed:
        out.write("All tests passed!\n")


def run_console_tests(test_filter: TestFilter | None = None,
                      divert_streams: bool = False,
                      registry: TestRegistry | None = None,
                      out: TextIO | None = None,
                      err: TextIO | None = None) -> list[TestGroup]:
    """Run the tests the filter admits, printing progress and a summary.

    With divert_streams, anything the tests themselves print to stdout or
    stderr is swallowed so that only the report is shown. Returns the
    groups with their final results.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    reporter = _ProgressReporter(out)

    with ExitStack() as stack:
        if divert_streams:
            stack.enter_context(redirect_stdout(io.StringIO()))
            stack.enter_context(redirect_stderr(io.StringIO()))
        run(reporter, test_filter, registry=registry)

    _write_summary(reporter.last_groups, out, err)
    return reporter.last_groups