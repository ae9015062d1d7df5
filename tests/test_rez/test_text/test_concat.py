"""Tests for sequence concatenation."""

import re
from collections import UserList
from collections.abc import Sequence

import pytest

from rez.shared.config import ConcatConfig, LengthPolicy, StringifyConfig
from rez.shared.errors import RezError, SequenceTypeError
from rez.text.concat import SequenceConcatenator, concat, mapping_border
from rez.values.stringify import ValueStringifier, stringify


class ShortReporting(Sequence):
    """Sequence that reports fewer elements than it holds."""

    def __init__(self, items, reported):
        self.items = items
        self.reported = reported
        self.visited = []

    def __len__(self):
        return self.reported

    def __getitem__(self, index):
        self.visited.append(index)
        return self.items[index]


class Rendered:
    def __init__(self, text):
        self.text = text
        self.calls = 0

    def __render__(self):
        self.calls += 1
        return self.text


class TestConcat:
    """Tests for default concatenation."""

    def test_empty(self):
        """Test that an empty sequence gives the empty string."""
        assert concat([]) == ""
        assert concat(()) == ""

    @pytest.mark.parametrize("value", [None, True, 0, -1.5, "x", b"y", object()])
    def test_single_element(self, value):
        """Test concat([v]) == stringify(v)."""
        assert concat([value]) == stringify(value)

    def test_order_preserved_without_separators(self):
        """Test concatenation order and absence of separators."""
        assert concat(["a", "b", "c"]) == "abc"
        assert concat(["c", "b", "a", "a"]) == "cbaa"

    def test_mixed_values(self):
        """Test elements of every primitive kind."""
        assert concat(["a", 1, 2.5, None, True, False]) == "a12.5niltruefalse"

    def test_separators_are_elements(self):
        """Test that delimiters are supplied by the caller."""
        assert concat(["k", "=", 1, ";"]) == "k=1;"

    def test_other_sequences(self):
        """Test tuples, ranges and user sequences."""
        assert concat(("x", 1)) == "x1"
        assert concat(range(4)) == "0123"
        assert concat(UserList(["u", "l"])) == "ul"

    def test_nested_sequence_is_opaque(self):
        """Test that nested collections are not flattened."""
        result = concat(["a", ["b"]])
        assert re.match(r"^alist: 0x[0-9a-f]+$", result)

    def test_render_hooks_called_once_each(self):
        """Test render hooks inside sequences."""
        first, second = Rendered("<1>"), Rendered("<2>")

        assert concat([first, "-", second]) == "<1>-<2>"
        assert first.calls == 1
        assert second.calls == 1

    def test_reported_length_is_trusted(self):
        """Test that elements past the reported length are never visited."""
        sequence = ShortReporting(["a", "b", "c", "d"], reported=2)

        assert concat(sequence) == "ab"
        assert sequence.visited == [0, 1]


class TestMappingInput:
    """Tests for 1-indexed mappings."""

    def test_dense_mapping(self):
        """Test a mapping with keys 1..n."""
        assert concat({1: "a", 2: "b", 3: "c"}) == "abc"

    def test_insertion_order_ignored(self):
        """Test that keys are visited by index, not insertion order."""
        assert concat({2: "b", 1: "a"}) == "ab"

    def test_holey_mapping_truncates(self):
        """Test that the first gap ends the sequence."""
        assert concat({1: "a", 2: "b", 4: "d"}) == "ab"

    def test_mapping_without_index_one(self):
        """Test mappings with no positional part."""
        assert concat({}) == ""
        assert concat({"name": "x", 2: "y"}) == ""

    def test_border(self):
        """Test the border helper."""
        assert mapping_border({}) == 0
        assert mapping_border({1: None, 2: None}) == 2
        assert mapping_border({1: "a", 3: "c"}) == 1


class TestLengthPolicy:
    """Tests for the configurable length policy."""

    def test_reported_renders_nil(self):
        """Test that None elements render as nil by default."""
        assert concat(["a", None, "b"]) == "anilb"

    def test_stop_at_nil(self):
        """Test stopping at the first None."""
        concatenator = SequenceConcatenator(
            ConcatConfig(length_policy=LengthPolicy.STOP_AT_NIL)
        )
        assert concatenator.concat(["a", None, "b"]) == "a"
        assert concatenator.concat([None]) == ""
        assert concatenator.concat(["a", "b"]) == "ab"

    def test_stop_at_nil_with_mapping(self):
        """Test stop-at-nil on mappings holding None values."""
        concatenator = SequenceConcatenator(
            ConcatConfig(length_policy=LengthPolicy.STOP_AT_NIL)
        )
        assert concatenator.concat({1: "a", 2: None, 3: "c"}) == "a"

    def test_custom_stringifier(self):
        """Test that the injected stringifier is used."""
        stringifier = ValueStringifier(StringifyConfig(nil_text="null"))
        concatenator = SequenceConcatenator(stringifier=stringifier)
        assert concatenator.concat([None, 1]) == "null1"


class TestInvalidInput:
    """Tests for boundary validation."""

    @pytest.mark.parametrize("value", [
        "abc",
        b"abc",
        bytearray(b"abc"),
        42,
        None,
        {1, 2},
        (x for x in "ab"),
        object(),
    ])
    def test_non_sequence_rejected(self, value):
        """Test that non-collections raise SequenceTypeError."""
        with pytest.raises(SequenceTypeError):
            concat(value)

    def test_error_hierarchy(self):
        """Test that the error is both a RezError and a TypeError."""
        with pytest.raises(TypeError) as exc_info:
            concat(7)

        assert isinstance(exc_info.value, RezError)
        assert exc_info.value.received_type == "int"
        assert "int" in str(exc_info.value)
