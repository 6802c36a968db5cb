"""
Properties every naming scheme must satisfy.
"""

import pytest

from pyinsight.core.protocols import NamingScheme
from pyinsight.parameters import SCHEMES, decode, get_scheme

ALL_SCHEMES = sorted(SCHEMES)

UNCLAIMED = ["xyz", "lp__", "accept_stat__"]


class TestOrderPreservation:

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_one_record_per_name(self, scheme, sleepstudy_brms):
        records = decode(sleepstudy_brms, scheme)
        assert len(records) == len(sleepstudy_brms)
        assert [r.parameter for r in records] == sleepstudy_brms

    def test_reversed_input_gives_reversed_output(self, sleepstudy_rstanarm):
        forward = decode(sleepstudy_rstanarm, "stan-rstanarm")
        backward = decode(list(reversed(sleepstudy_rstanarm)), "stan-rstanarm")
        assert list(reversed(backward)) == list(forward)

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_empty_input(self, scheme):
        assert decode([], scheme) == ()


class TestFallback:

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_unclaimed_names_pass_through(self, scheme):
        for record in decode(UNCLAIMED, scheme):
            assert record.effects == "fixed"
            assert record.component == "conditional"
            assert record.group == ""
            assert record.cleaned_parameter == record.parameter

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_cleaning_is_stable(self, scheme):
        """Decoding already-cleaned fallback names changes nothing."""
        first = decode(UNCLAIMED, scheme)
        second = decode([r.cleaned_parameter for r in first], scheme)
        assert [r.cleaned_parameter for r in second] == [r.cleaned_parameter for r in first]


class TestEffectsGroupConsistency:

    @pytest.mark.parametrize("scheme,fixture", [
        ("stan-rstanarm", "sleepstudy_rstanarm"),
        ("stan-brms", "sleepstudy_brms"),
        ("stan-brms", "zero_inflated_brms"),
    ])
    def test_random_iff_grouped(self, scheme, fixture, request):
        names = request.getfixturevalue(fixture)
        for record in decode(names, scheme):
            assert (record.effects == "random") == bool(record.group)
            assert record.effects in ("fixed", "random")
            assert record.cleaned_parameter

    def test_rstanarm_random_count(self, sleepstudy_rstanarm):
        records = decode(sleepstudy_rstanarm, "stan-rstanarm")
        assert sum(r.effects == "random" for r in records) == 7


class TestSchemeRegistry:

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_satisfies_protocol(self, scheme):
        assert isinstance(get_scheme(scheme), NamingScheme)

    def test_registered_names(self):
        assert set(SCHEMES) == {
            "stan-brms", "stan-rstanarm", "bamlss", "bayesfactor", "generic",
        }
