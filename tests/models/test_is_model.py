"""
Tests for the supported-model registry.
"""

import pytest

from pyinsight.core.exceptions import NotAModelError, ValidationError
from pyinsight.models import (
    MODEL_TYPES,
    check_model,
    is_model,
    is_regression_model,
)


class TestIsModel:

    @pytest.mark.parametrize("tag", ["lm", "glm", "brmsfit", "stanreg", "glmmTMB", "htest"])
    def test_known_models(self, tag):
        assert is_model(tag)

    @pytest.mark.parametrize("tag", ["data.frame", "list", "numeric", "LM"])
    def test_not_models(self, tag):
        assert not is_model(tag)

    def test_hierarchy_any_member(self):
        assert is_model(("myCustomFit", "lm"))
        assert not is_model(("data.frame", "list"))

    def test_invalid_input(self):
        with pytest.raises(ValidationError):
            is_model(42)

    def test_empty_hierarchy(self):
        with pytest.raises(ValidationError):
            is_model(())


class TestIsRegressionModel:

    def test_regression(self):
        assert is_regression_model("lm")

    @pytest.mark.parametrize("tag", ["htest", "emmGrid", "pairwise.htest"])
    def test_non_regression_models(self, tag):
        assert is_model(tag)
        assert not is_regression_model(tag)


class TestCheckModel:

    def test_returns_class_list(self):
        assert check_model("lm") == ("lm",)
        assert check_model(["lmerModLmerTest", "lmerMod"]) == ("lmerModLmerTest", "lmerMod")

    def test_raises_with_type_tag(self):
        with pytest.raises(NotAModelError) as exc_info:
            check_model("data.frame")
        assert exc_info.value.type_tag == "data.frame"

    def test_registry_is_frozen(self):
        assert isinstance(MODEL_TYPES, frozenset)
