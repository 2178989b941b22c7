"""A small unit-testing toolkit: test registration and expectation checks."""

from __future__ import annotations

import bisect
import inspect
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from recursia.textutils import RecursiaError, quoted_version_of
from recursia.timer import Timer

_F = TypeVar("_F", bound=Callable[..., Any])

_DEFAULT_ABBREVIATION = 300
_INDENT = " " * 16


def _normalise(path: str) -> str:
    return os.path.normcase(os.path.abspath(path))


_THIS_FILE = _normalise(__file__)


class TestFailedError(Exception):
    """Raised when an expectation inside a test case does not hold."""

    __test__ = False

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(message if line is None else f"Line {line}: {message}")


class TestType(Enum):
    """Where a test case comes from."""

    __test__ = False

    STUDENT = "Student Test"
    PROVIDED = "Provided Test"
    AUTOGRADER = "Autograder Test"
    MANUAL = "Manual Test"

    @property
    def label(self) -> str:
        """Human-readable name of the kind of test."""
        return self.value


@dataclass(frozen=True)
class TestCase:
    """A registered test: its name, kind, defining line and body."""

    __test__ = False

    name: str
    test_type: TestType
    line_number: int
    callback: Callable[[], Any]


class TestRegistry:
    """Test cases grouped by the file that defines them, ordered by line."""

    __test__ = False

    def __init__(self) -> None:
        self._tests: dict[str, list[TestCase]] = {}

    def add(self, key: str, line: int, name: str, test_type: TestType,
            callback: Callable[[], Any]) -> TestCase:
        """Register a test case under the given group key."""
        case = TestCase(name, test_type, line, callback)
        bisect.insort_right(self._tests.setdefault(key, []), case,
                            key=lambda item: item.line_number)
        return case

    def _decorator(self, name: str, test_type: TestType) -> Callable[[_F], _F]:
        def register(func: _F) -> _F:
            code = func.__code__
            self.add(code.co_filename, code.co_firstlineno, name, test_type, func)
            return func
        return register

    def student_test(self, name: str) -> Callable[[_F], _F]:
        """Decorator registering a function as a student test."""
        return self._decorator(name, TestType.STUDENT)

    def provided_test(self, name: str) -> Callable[[_F], _F]:
        """Decorator registering a function as a provided test."""
        return self._decorator(name, TestType.PROVIDED)

    def groups(self) -> dict[str, list[TestCase]]:
        """All groups sorted by key, each holding its tests sorted by line."""
        return {key: list(self._tests[key]) for key in sorted(self._tests)}

    def __len__(self) -> int:
        return sum(len(cases) for cases in self._tests.values())


default_registry = TestRegistry()


def _caller_line() -> int | None:
    """Line number of the nearest calling frame outside this module."""
    frame = inspect.currentframe()
    try:
        while frame is not None and _normalise(frame.f_code.co_filename) == _THIS_FILE:
            frame = frame.f_back
        return frame.f_lineno if frame is not None else None
    finally:
        del frame


def debug_friendly_string(value: object) -> str:
    """Render a value the way failure reports show it."""
    if value is None:
        return "nullptr"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quoted_version_of(value)
    if isinstance(value, float):
        return f"{value:.16g}d"
    return str(value)


def are_equal(lhs: object, rhs: object) -> bool:
    """Equality, tolerant of rounding error when both sides are floats."""
    if isinstance(lhs, float) and isinstance(rhs, float):
        tolerance = max(abs(lhs), abs(rhs)) * sys.float_info.epsilon
        return abs(lhs - rhs) <= tolerance
    return bool(lhs == rhs)


def abbreviate(text: str, max_len: int = _DEFAULT_ABBREVIATION) -> str:
    """Cut text down to max_len characters followed by an ellipsis."""
    return text if len(text) < max_len else text[:max_len] + " ..."


def show_error(message: str) -> None:
    """Fail the current test with the given message."""
    raise TestFailedError(message, _caller_line())


def expect(condition: object, expression: str = "condition") -> None:
    """Fail unless the condition is true."""
    if not condition:
        show_error(f"EXPECT failed: {expression} is not true.")


def _describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", repr(func))


def expect_error(func: Callable[..., Any], *args: Any, **kwargs: Any) -> RecursiaError:
    """Fail unless calling func reports a RecursiaError; return that error."""
    try:
        func(*args, **kwargs)
    except RecursiaError as error:
        return error
    show_error(f"EXPECT_ERROR: {_describe(func)} did not call error().")
    raise AssertionError("unreachable")


def expect_no_error(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Fail if calling func reports a RecursiaError; return its result otherwise."""
    try:
        return func(*args, **kwargs)
    except RecursiaError as error:
        show_error(f"EXPECT_NO_ERROR: {_describe(func)} called "
                   f"error({quoted_version_of(str(error))}).")


def _evaluate(label: str, value: object) -> str:
    return f"{_INDENT}{label} = {abbreviate(debug_friendly_string(value))}"


def _compound(name: str, fail_symbol: str, holds: Callable[[Any, Any], bool],
              student: object, reference: object) -> None:
    if holds(student, reference):
        return
    show_error(
        f"{name} failed: student {fail_symbol} reference\n"
        f"{_evaluate('student', student)}\n"
        f"{_evaluate('reference', reference)}\n"
    )


def expect_equal(student: object, reference: object) -> None:
    """Fail unless the two values are equal."""
    _compound("EXPECT_EQUAL", "!=", are_equal, student, reference)


def expect_not_equal(student: object, reference: object) -> None:
    """Fail if the two values are equal."""
    _compound("EXPECT_NOT_EQUAL", "==", lambda a, b: not are_equal(a, b),
              student, reference)


def expect_less_than(student: Any, reference: Any) -> None:
    """Fail unless student < reference."""
    _compound("EXPECT_LESS_THAN", ">=", lambda a, b: a < b, student, reference)


def expect_greater_than(student: Any, reference: Any) -> None:
    """Fail unless student > reference."""
    _compound("EXPECT_GREATER_THAN", "<=", lambda a, b: a > b, student, reference)


def expect_less_than_or_equal_to(student: Any, reference: Any) -> None:
    """Fail unless student <= reference."""
    _compound("EXPECT_LESS_THAN_OR_EQUAL_TO", ">", lambda a, b: a <= b,
              student, reference)


def expect_greater_than_or_equal_to(student: Any, reference: Any) -> None:
    """Fail unless student >= reference."""
    _compound("EXPECT_GREATER_THAN_OR_EQUAL_TO", "<", lambda a, b: a >= b,
              student, reference)


def expect_completes_in(limit: float, func: Callable[[], Any]) -> Any:
    """Run func and fail if it takes limit seconds or longer; return its result."""
    with Timer() as timer:
        result = func()
    if timer.elapsed() >= limit:
        show_error(f"EXPECT_COMPLETES_IN: Operation took {timer.elapsed()}s, "
                   f"exceeding limit of {limit}s")
    return result