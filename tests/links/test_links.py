"""
Tests for link functions and link lookup.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyinsight.core.exceptions import NotAModelError, ValidationError
from pyinsight.links import (
    IdentityLink,
    LinkInverse,
    LogitLink,
    link_function,
    link_inverse,
    make_link,
)
from pyinsight.links._links import LINK_CLASSES


# ═══════════════════════════════════════════════════════════════════════
# Link objects
# ═══════════════════════════════════════════════════════════════════════

class TestLinkMath:

    @pytest.mark.parametrize("name", sorted(LINK_CLASSES))
    def test_inverse_undoes_link(self, name):
        link = make_link(name)
        mu = np.array([0.1, 0.35, 0.8])
        assert_allclose(link.linkinv(link.link(mu)), mu, rtol=1e-10)

    @pytest.mark.parametrize("name", sorted(LINK_CLASSES))
    def test_mu_eta_is_derivative(self, name):
        link = make_link(name)
        eta = link.link(np.array([0.3, 0.6]))
        h = 1e-6
        numeric = (link.linkinv(eta + h) - link.linkinv(eta - h)) / (2 * h)
        assert_allclose(link.mu_eta(eta), numeric, rtol=1e-5)

    def test_logit_values(self):
        link = LogitLink()
        assert_allclose(link.linkinv(0.0), 0.5)
        assert_allclose(link(0.5), 0.0, atol=1e-15)

    def test_inverse_square(self):
        link = make_link("1/mu^2")
        assert_allclose(link(2.0), 0.25)
        assert_allclose(link.linkinv(0.25), 2.0)

    def test_sqrt(self):
        assert_allclose(make_link("sqrt")(np.array([4.0, 9.0])), [2.0, 3.0])

    def test_equality_by_name(self):
        assert IdentityLink() == make_link("identity")
        assert IdentityLink() != LogitLink()
        assert len({IdentityLink(), IdentityLink()}) == 1

    def test_unknown_link(self):
        with pytest.raises(ValidationError, match="Unknown link"):
            make_link("softplus")


# ═══════════════════════════════════════════════════════════════════════
# Lookup
# ═══════════════════════════════════════════════════════════════════════

class TestLinkFunction:

    @pytest.mark.parametrize("type_tag,name", [
        ("lm", "identity"),
        ("coxph", "logit"),
        ("zeroinfl", "log"),
        ("ivprobit", "probit"),
    ])
    def test_fixed_by_type(self, type_tag, name):
        assert link_function(type_tag).name == name

    @pytest.mark.parametrize("family,name", [
        ("gaussian", "identity"),
        ("binomial", "logit"),
        ("quasipoisson", "log"),
        ("Gamma", "inverse"),
        ("inverse.gaussian", "1/mu^2"),
    ])
    def test_family_default(self, family, name):
        assert link_function("glm", family=family).name == name

    def test_explicit_link_wins(self):
        assert link_function("glm", family="binomial", link="probit").name == "probit"
        assert link_function("lm", link="log").name == "log"

    def test_class_hierarchy(self):
        assert link_function(("lmerModLmerTest", "lm")).name == "identity"

    @pytest.mark.parametrize("hierarchy,family,name", [
        (("glm", "lm"), "binomial", "logit"),
        (("negbin", "glm", "lm"), "poisson", "log"),
        (("glm", "lm"), "Gamma", "inverse"),
    ])
    def test_family_beats_parent_class(self, hierarchy, family, name):
        """A glm inherits from lm, but its family decides the link."""
        assert link_function(hierarchy, family=family).name == name

    def test_concrete_class_beats_family(self):
        assert link_function(("zeroinfl",), family="gaussian").name == "log"

    def test_undetermined(self):
        assert link_function("glmmTMB") is None
        assert link_function("glm", family="tweedie") is None

    def test_not_a_model(self):
        with pytest.raises(NotAModelError):
            link_function("data.frame")


class TestLinkInverse:

    def test_callable(self):
        inv = link_inverse("glm", family="poisson")
        assert isinstance(inv, LinkInverse)
        assert inv.name == "log"
        assert_allclose(inv(np.array([0.0, np.log(3.0)])), [1.0, 3.0])

    def test_wraps_link(self):
        inv = link_inverse("glm", family="binomial")
        assert inv.link_object == LogitLink()
        assert_allclose(inv(0.0), 0.5)
        assert "logit" in repr(inv)

    def test_none_when_undetermined(self):
        assert link_inverse("glmmTMB") is None
