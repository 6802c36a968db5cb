"""
Tests for input validators.
"""

import numpy as np
import pytest

from pyinsight.core.exceptions import ValidationError
from pyinsight.core.validation import (
    check_degrees_of_freedom,
    check_string,
    check_string_mapping,
    check_string_sequence,
)


class TestCheckString:

    def test_valid(self):
        assert check_string("lm", "type_tag") == "lm"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="type_tag"):
            check_string("", "type_tag")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="expected str"):
            check_string(3, "type_tag")


class TestCheckStringSequence:

    def test_list_to_tuple(self):
        assert check_string_sequence(["a", "b"], "names") == ("a", "b")

    def test_generator_consumed_in_order(self):
        assert check_string_sequence((s for s in "xyz"), "names") == ("x", "y", "z")

    def test_bare_string_rejected(self):
        """Iterating a str would silently split it into characters."""
        with pytest.raises(ValidationError, match="sequence of str"):
            check_string_sequence("abc", "names")

    def test_non_string_element(self):
        with pytest.raises(ValidationError, match="positions \\[1\\]"):
            check_string_sequence(["a", 2], "names")

    def test_empty_string_rejected_by_default(self):
        with pytest.raises(ValidationError, match="empty strings"):
            check_string_sequence(["a", ""], "names")

    def test_empty_string_allowed(self):
        assert check_string_sequence(["a", ""], "names", allow_empty_strings=True) == ("a", "")

    def test_empty_sequence_ok(self):
        assert check_string_sequence([], "names") == ()


class TestCheckStringMapping:

    def test_returns_copy(self):
        src = {"x": "conditional"}
        out = check_string_mapping(src, "components")
        assert out == src
        assert out is not src

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError, match="mapping"):
            check_string_mapping([("x", "y")], "components")

    def test_non_string_value(self):
        with pytest.raises(ValidationError, match="offending keys"):
            check_string_mapping({"x": 1}, "components")


class TestCheckDegreesOfFreedom:

    def test_scalar_promoted(self):
        out = check_degrees_of_freedom(17)
        assert out.shape == (1,)
        assert out[0] == 17.0

    def test_none_entries_become_nan(self):
        out = check_degrees_of_freedom([None, 3.0])
        assert np.isnan(out[0])
        assert out[1] == 3.0

    def test_none_scalar(self):
        assert np.isnan(check_degrees_of_freedom(None)).all()

    def test_infinite_kept(self):
        out = check_degrees_of_freedom([np.inf, np.inf])
        assert np.isinf(out).all()

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            check_degrees_of_freedom("17")

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="cannot convert"):
            check_degrees_of_freedom(["a", "b"])
