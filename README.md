# recursia

Small recursive generators, together with the little testing toolkit used
to check them.

## Generators

Every generator raises `recursia.textutils.RecursiaError` when given input it
cannot work with.

### Mountain ranges

`recursia.mountains.make_mountain_range(left, right, amplitude, decay_rate, rng=None)`
builds a jagged line between two `Point`s by midpoint displacement and returns
it as a list of points. Each midpoint is moved up or down by a random whole
number in `[-amplitude, amplitude]`; at every level of recursion the amplitude
is multiplied by `decay_rate` and truncated to a whole number. Segments three
units wide or less are left straight. Pass a `random.Random` as `rng` for
repeatable results; without one a fresh generator is used.

A left point to the right of the right point, a negative amplitude, or a
decay rate outside `[0, 1]` raises `RecursiaError`.

```python
import random
from recursia.mountains import Point, make_mountain_range

rng = random.Random(42)
ridge = make_mountain_range(Point(0, 0), Point(6, 6), 0, 1, rng)
# [Point(x=0, y=0), Point(x=3, y=3), Point(x=6, y=6)]
```

### Words of Recursian

`recursia.words.all_recursian_words(num_syllables)` lists every word with
exactly the given number of syllables. A syllable is a consonant
(`b k n r s '`) followed by a vowel (`e i u`); only the first syllable of a
word may be a bare vowel. Words starting with a vowel come first. There are
21 one-syllable words and 378 two-syllable words; zero syllables gives only
the empty word, and a negative count raises `RecursiaError`.

```python
from recursia.words import all_recursian_words

len(all_recursian_words(2))  # 378
```

### Temples

`recursia.temple.make_temple(bounds, params)` returns the `Rectangle`s that
make up a temple drawn inside `bounds`, in drawing order: a base, a column,
a smaller temple standing on the column, then a row of small temples on the
base from left to right, each one order lower. `TempleParameters` holds the
proportions (relative to the bounding box), the number of small temples and
the order. An order of zero gives no rectangles; a negative order raises
`RecursiaError`.

```python
from recursia.temple import Rectangle, TempleParameters, make_temple

shapes = make_temple(Rectangle(0, 0, 1024, 512), TempleParameters(order=2))
```

## Testing toolkit

- `recursia.simpletest` keeps tests in a `TestRegistry`, grouped by the file
  that defines them and ordered by line. The `student_test(name)` and
  `provided_test(name)` decorators register a function; `add` registers one
  directly. A shared `default_registry` is provided. The checks `expect`,
  `expect_equal`, `expect_not_equal`, `expect_less_than`,
  `expect_greater_than`, `expect_less_than_or_equal_to`,
  `expect_greater_than_or_equal_to`, `expect_error`, `expect_no_error`,
  `expect_completes_in` and `show_error` raise `TestFailedError` when they
  fail. Floats compare equal within rounding error.
- `recursia.testdriver.run(reporter, test_filter=None, key=None, registry=None, tracker=None)`
  runs the registered tests group by group, calling `reporter` with the
  list of `TestGroup`s at the start and before and after each `Test`, and
  returns the groups with each test's `TestResult` (`PASS`, `FAIL`, `LEAK`
  or `EXCEPTION`) and detail message.
- `recursia.memory.AllocationTracker` counts creations and deletions of
  registered type names; the runner clears it before each test and marks a
  test `LEAK` when a count is left unbalanced. Counts are only what your
  code records with `record_new` and `record_delete`.
- `recursia.console.run_console_tests(test_filter=None, divert_streams=False, registry=None, out=None, err=None)`
  writes progress and a summary of passes and failures to text streams
  (standard output and error by default). `get_test_groups` lists the file
  names holding tests and `filter_to_selection` builds a filter for one of
  them, or for all when the selection is negative.
- `recursia.textutils` has the text helpers behind the reports:
  `add_commas_to`, `pluralize`, `quoted_version_of`,
  `read_quoted_version_of`, `format_pattern` and `conjunction_join`.
- `recursia.timer.Timer` is a start/stop stopwatch that can also be used as
  a context manager.

```python
from recursia.simpletest import TestRegistry, expect_equal
from recursia.console import run_console_tests

registry = TestRegistry()

@registry.provided_test("addition works")
def _():
    expect_equal(1 + 1, 2)

run_console_tests(registry=registry)
```

## What it does not do

There is no graphical window for drawing mountains or temples or for showing
test results, no interactive menu for picking a test group, and no
command-line program: everything is called from Python. Allocation tracking
does not watch objects by itself; it only sums what is recorded.