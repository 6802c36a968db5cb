"""
Tests for the classifier's static type registry.
"""

import pytest

from pyinsight.models import MODEL_TYPES
from pyinsight.statistic._registry import (
    AMBIGUOUS_TYPES,
    CHI_SQUARED_TYPES,
    F_TYPES,
    MIXED_TYPES,
    REFERENCE_GRID_TYPES,
    STAGE_BY_TAG,
    STAGE_TWEEDIE,
    T_TYPES,
    TWEEDIE_TYPES,
    UNSUPPORTED_TYPES,
    Z_TYPES,
)

STAGE_SETS = {
    "unsupported": UNSUPPORTED_TYPES,
    "t": T_TYPES,
    "z": Z_TYPES,
    "F": F_TYPES,
    "chi-squared": CHI_SQUARED_TYPES,
    "mixed": MIXED_TYPES,
    "ambiguous": AMBIGUOUS_TYPES,
}


class TestDisjointness:
    """Every tag belongs to at most one evaluation stage."""

    def test_stage_sets_pairwise_disjoint(self):
        names = list(STAGE_SETS)
        for i, a in enumerate(names):
            for b in names[i + 1:]:
                overlap = STAGE_SETS[a] & STAGE_SETS[b]
                assert not overlap, f"{a} and {b} share {sorted(overlap)}"

    def test_tweedie_types_only_in_tweedie_stage(self):
        for tags in STAGE_SETS.values():
            assert not (tags & TWEEDIE_TYPES)

    def test_stage_map_covers_all_sets(self):
        expected = set(TWEEDIE_TYPES).union(*STAGE_SETS.values())
        assert set(STAGE_BY_TAG) == expected

    def test_stage_map_is_read_only(self):
        with pytest.raises(TypeError):
            STAGE_BY_TAG["lm"] = "z"

    def test_tweedie_stage(self):
        for tag in TWEEDIE_TYPES:
            assert STAGE_BY_TAG[tag] == STAGE_TWEEDIE


class TestRegistryMembership:

    def test_every_tag_is_a_model(self):
        missing = sorted(set(STAGE_BY_TAG) - MODEL_TYPES)
        assert not missing

    def test_reference_grids_in_mixed_bag(self):
        assert REFERENCE_GRID_TYPES <= MIXED_TYPES

    def test_common_tags_stages(self):
        assert STAGE_BY_TAG["lm"] == "t"
        assert STAGE_BY_TAG["survfit"] == "unsupported"
        assert STAGE_BY_TAG["emmGrid"] == "mixed"
        assert "cpglmm" not in T_TYPES
