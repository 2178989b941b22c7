"""Running registered test cases and collecting their outcomes by group."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from recursia.memory import AllocationTracker
from recursia.simpletest import TestCase, TestFailedError, TestRegistry, TestType, default_registry
from recursia.textutils import RecursiaError, pluralize

_INDENT = "    "
_TYPE_INDENT = " " * 12

default_tracker = AllocationTracker()


class TestResult(Enum):
    """How a test turned out, or where it is in its run."""

    __test__ = False

    WAITING = auto()
    RUNNING = auto()
    PASS = auto()
    FAIL = auto()
    LEAK = auto()
    EXCEPTION = auto()


@dataclass(eq=False)
class Test:
    """A single test together with its outcome."""

    __test__ = False

    name: str
    test_type: TestType
    line_number: int
    callback: Callable[[], Any] = field(repr=False)
    result: TestResult = TestResult.WAITING
    detail_message: str = ""


@dataclass(eq=False)
class TestGroup:
    """The tests from one file and how many of them have passed."""

    __test__ = False

    name: str
    tests: list[Test] = field(default_factory=list)
    num_tests: int = 0
    num_passed: int = 0


TestReporter = Callable[[list[TestGroup]], None]
TestFilter = Callable[[str, Test], bool]
GroupKey = Callable[[str], Any]


def tail_of(path: str) -> str:
    """Return the file name at the end of a path, splitting on / or \\."""
    index = max(path.rfind("/"), path.rfind("\\"))
    return path if index < 0 else path[index + 1:]


def _allow_all(_group: str, _test: Test) -> bool:
    return True


def _leak_report(errors: dict[str, int]) -> str:
    lines = [f"{_INDENT}Test failed due to memory errors with these types:"]
    for type_name, delta in errors.items():
        if delta > 0:
            lines.append(f"{_TYPE_INDENT}{type_name}: Leaked {pluralize(delta, 'object')}.")
        else:
            lines.append(f"{_TYPE_INDENT}{type_name}: Deallocated "
                         f"{pluralize(-delta, 'more object')} than allocated.")
    return "\n".join(lines) + "\n"


def _error_report(error: RecursiaError) -> str:
    return (
        f"{_INDENT}Test failed due to the program triggering an ErrorException.\n"
        "\n"
        f"{_INDENT}This means that the test did not fail because of a call\n"
        f"{_INDENT}to EXPECT() or EXPECT_ERROR() failing, but rather because\n"
        f"{_INDENT}some code explicitly called the error() function.\n"
        "\n"
        f"{_INDENT}Error: {error}\n"
    )


def _exception_report(error: Exception) -> str:
    return (
        f"{_INDENT}Test failed due to the program triggering an exception.\n"
        "\n"
        f"{_INDENT}This means that the test did not fail because of a call\n"
        f"{_INDENT}to EXPECT() or an EXPECT_ERROR() failing, but rather because\n"
        f"{_INDENT}some code - probably an internal library - triggered\n"
        f"{_INDENT}an error.\n"
        "\n"
        f"{_INDENT}Error: {error}\n"
    )


def _run_single(test: Test, group: TestGroup, tracker: AllocationTracker) -> None:
    try:
        tracker.clear()
        test.callback()
    except TestFailedError as failure:
        test.result = TestResult.FAIL
        test.detail_message = f"{_INDENT}{failure}\n"
        return
    except RecursiaError as error:
        test.result = TestResult.EXCEPTION
        test.detail_message = _error_report(error)
        return
    except Exception as error:  # noqa: BLE001 - any failure is reported, not raised
        test.result = TestResult.EXCEPTION
        test.detail_message = _exception_report(error)
        return

    errors = tracker.types_with_errors()
    if errors:
        test.result = TestResult.LEAK
        test.detail_message = _leak_report(errors)
    else:
        test.result = TestResult.PASS
        group.num_passed += 1


def _to_group(key: str, cases: list[TestCase], test_filter: TestFilter) -> TestGroup:
    group = TestGroup(name=tail_of(key), num_tests=len(cases))
    for case in cases:
        test = Test(case.name, case.test_type, case.line_number, case.callback)
        if test_filter(group.name, test):
            group.tests.append(test)
    return group


def run(reporter: TestReporter,
        test_filter: TestFilter | None = None,
        key: GroupKey | None = None,
        registry: TestRegistry | None = None,
        tracker: AllocationTracker | None = None) -> list[TestGroup]:
    """Run every registered test the filter admits, reporting progress as it goes.

    Groups are ordered by the key applied to their names (alphabetical by
    default); groups left without tests are not shown. The reporter sees the
    full list of groups once at the start and again before and after each test.
    Returns the groups with their final results.
    """
    test_filter = test_filter or _allow_all
    registry = registry if registry is not None else default_registry
    tracker = tracker if tracker is not None else default_tracker

    groups = [
        group
        for group in (_to_group(name, cases, test_filter)
                      for name, cases in registry.groups().items())
        if group.tests
    ]
    groups.sort(key=lambda group: (key or (lambda name: name))(group.name))

    reporter(groups)
    for group in groups:
        for test in group.tests:
            test.result = TestResult.RUNNING
            reporter(groups)
            _run_single(test, group, tracker)
            reporter(groups)
    return groups