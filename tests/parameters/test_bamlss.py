"""
Tests for the bamlss naming scheme.
"""

import pytest

from pyinsight.parameters import decode
from pyinsight.parameters.schemes.bamlss import clean_bamlss_name


class TestCleanName:

    @pytest.mark.parametrize("raw,cleaned", [
        ("mu.p.(Intercept)", "(Intercept)"),
        ("mu.p.x1", "x1"),
        ("pi.p.x1", "x1"),
        ("sigma.p.x1", "sigma (x1)"),
        ("mu.s.x2.", "s(x2)"),
        ("mu.p..Intercept.", "Intercept"),
        ("mu.p.a..b", "a.b"),
    ])
    def test_cleaning(self, raw, cleaned):
        assert clean_bamlss_name(raw) == cleaned


class TestComponents:

    def test_parametric(self):
        records = decode(["mu.p.(Intercept)", "mu.p.x1", "sigma.p.x1"], "bamlss")
        assert [r.component for r in records] == ["conditional", "conditional", "sigma"]
        assert [r.cleaned_parameter for r in records] == ["(Intercept)", "x1", "sigma (x1)"]
        assert all(r.effects == "fixed" for r in records)

    def test_smooth_variance(self):
        (record,) = decode(["mu.s.s(x2).tau21"], "bamlss")
        assert record.component == "smooth_terms"
        assert record.function == "smooth"

    def test_smooth_coefficient(self):
        (record,) = decode(["mu.s.s(x2).b1"], "bamlss")
        assert record.component == "smooth_terms"
        assert record.function == "smooth"

    def test_alpha(self):
        (record,) = decode(["mu.p.alpha"], "bamlss")
        assert record.component == "alpha"
        assert record.cleaned_parameter == "mu.p.alpha"

    @pytest.mark.parametrize("name", ["mu.p.logLik", "sigma.p.edf"])
    def test_diagnostics_fall_through(self, name):
        (record,) = decode([name], "bamlss")
        assert record.component == "conditional"
        assert record.cleaned_parameter == name
