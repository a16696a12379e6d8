"""Property tests for array-literal encoding."""

import sys
from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from row2pgcsv import encode

ints = st.integers(min_value=-(2**63), max_value=2**64 - 1)

# Arbitrarily nested lists whose leaves are integers
nested_int_lists = st.recursive(
    st.lists(ints, max_size=5),
    lambda children: st.lists(children, max_size=4),
    max_leaves=40,
)


def count_sequences(value) -> int:
    """Count the list nodes in a nested structure, including the root."""
    if not isinstance(value, list):
        return 0
    return 1 + sum(count_sequences(item) for item in value)


def nest_empty(depth: int) -> list:
    value: list = []
    for _ in range(depth - 1):
        value = [value]
    return value


@given(st.lists(ints))
def test_flat_list_matches_join(values):
    assert encode(values) == "{" + ",".join(str(v) for v in values) + "}"


@given(st.integers(min_value=1, max_value=50))
def test_uniform_empty_nesting(depth):
    assert encode(nest_empty(depth)) == "{" * depth + "}" * depth


@given(nested_int_lists)
def test_brace_count_equals_sequence_count(value):
    result = encode(value)
    assert result.count("{") == result.count("}") == count_sequences(value)


@given(nested_int_lists)
def test_no_whitespace_or_trailing_comma(value):
    result = encode(value)
    assert not any(ch.isspace() for ch in result)
    assert ",}" not in result
    assert "{," not in result
    assert ",," not in result


@given(nested_int_lists)
def test_braces_balanced_at_every_prefix(value):
    depth = 0
    for ch in encode(value):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        assert depth >= 0
    assert depth == 0
