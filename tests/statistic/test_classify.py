"""
Tests for the statistic family classifier.

Covers the decision order: hypothesis tests, tweedie pre-check,
unsupported set, fixed sets, mixed bag, ambiguous types.
"""

import numpy as np
import pytest

from pyinsight.core.exceptions import NotAModelError, ValidationError
from pyinsight.statistic import classify, statistic_label


# ═══════════════════════════════════════════════════════════════════════
# Model gate
# ═══════════════════════════════════════════════════════════════════════


class TestModelGate:

    def test_not_a_model(self):
        with pytest.raises(NotAModelError) as exc_info:
            classify("data.frame")
        assert exc_info.value.type_tag == "data.frame"

    def test_not_a_model_is_validation_error(self):
        with pytest.raises(ValidationError):
            classify("character")

    def test_hierarchy_with_model_class(self):
        """Membership is checked over the whole class hierarchy."""
        assert classify(("lmerModLmerTest", "lmerMod")) == "t"

    def test_bad_family_type(self):
        with pytest.raises(ValidationError, match="family"):
            classify("glm", family=1)


# ═══════════════════════════════════════════════════════════════════════
# Fixed sets
# ═══════════════════════════════════════════════════════════════════════


class TestFixedSets:

    def test_lm_is_t(self):
        assert classify("lm") == "t"

    @pytest.mark.parametrize("family", [None, "gaussian", "binomial", "poisson"])
    def test_lm_ignores_family(self, family):
        assert classify("lm", family=family) == "t"

    @pytest.mark.parametrize("tag", ["coxph", "glmmTMB", "clm", "multinom", "zeroinfl"])
    def test_z_types(self, tag):
        assert classify(tag) == "z"

    @pytest.mark.parametrize("tag", ["aov", "anova", "manova", "Gam"])
    def test_f_types(self, tag):
        assert classify(tag) == "F"

    @pytest.mark.parametrize("tag", ["geeglm", "logistf", "vgam", "MANOVA"])
    def test_chi_squared_types(self, tag):
        assert classify(tag) == "chi-squared"


# ═══════════════════════════════════════════════════════════════════════
# Unsupported
# ═══════════════════════════════════════════════════════════════════════


class TestUnsupported:

    def test_survfit_returns_none(self):
        assert classify("survfit") is None

    @pytest.mark.parametrize("tag", ["brmsfit", "stanreg", "BFBayesFactor", "MCMCglmm"])
    def test_bayesian_returns_none(self, tag):
        assert classify(tag, family="gaussian") is None

    def test_model_without_stage_returns_none(self):
        """A registered model the classifier knows nothing about."""
        assert classify("kmeans") is None


# ═══════════════════════════════════════════════════════════════════════
# Tweedie pre-check
# ═══════════════════════════════════════════════════════════════════════


class TestTweedie:

    def test_cpglmm_with_tweedie_family(self):
        assert classify("cpglmm", family="Tweedie") == "t"

    @pytest.mark.parametrize("tag", ["bcplm", "cpglm", "cpglmm", "zcpglm"])
    def test_tweedie_types_without_family(self, tag):
        assert classify(tag) == "t"

    def test_gaussian_family_with_tweedie_link(self):
        """A tweedie glm would otherwise be decided by the mixed bag."""
        assert classify("glm", family="gaussian", link="tweedie") == "t"

    def test_student_t_family_with_tweedie_link(self):
        assert classify("glmmTMB", family="Student t", link="Tweedie") == "t"

    def test_tweedie_family_alone_not_linear(self):
        """Tweedie marker without a Gaussian/t family spelling falls through."""
        assert classify("glm", family="Tweedie") == "z"

    @pytest.mark.parametrize("tag,expected", [
        ("cpglm", "t"),
        ("cpglmm", "t"),
        ("zcpglm", "z"),
        ("bcplm", None),
    ])
    def test_multivariate_skips_precheck(self, tag, expected):
        """Without the pre-check, each tweedie type keeps its own statistic."""
        assert classify(tag, multivariate=True) == expected


# ═══════════════════════════════════════════════════════════════════════
# Mixed bag
# ═══════════════════════════════════════════════════════════════════════


class TestMixedBag:

    def test_emmgrid_infinite_df_is_z(self):
        assert classify("emmGrid", degrees_of_freedom=[np.inf, np.inf]) == "z"

    def test_emmgrid_finite_df_is_t(self):
        assert classify("emmGrid", degrees_of_freedom=[17.0, 17.0]) == "t"

    def test_emm_list_undefined_df_is_z(self):
        assert classify("emm_list", degrees_of_freedom=[np.nan, None]) == "z"

    def test_emmgrid_mixed_df_is_t(self):
        assert classify("emmGrid", degrees_of_freedom=[np.inf, 12.0]) == "t"

    def test_emmgrid_undefined_and_infinite_df_is_t(self):
        """z needs all df undefined or all df infinite, not a mix of both."""
        assert classify("emmGrid", degrees_of_freedom=[np.nan, np.inf]) == "t"

    def test_emmgrid_scalar_df(self):
        assert classify("emmGrid", degrees_of_freedom=np.inf) == "z"

    def test_emmgrid_without_df_is_t(self):
        assert classify("emmGrid") == "t"

    @pytest.mark.parametrize("family", [
        "gaussian", "Gamma", "quasi", "quasibinomial", "quasipoisson", "inverse.gaussian",
    ])
    def test_glm_t_families(self, family):
        assert classify("glm", family=family) == "t"

    @pytest.mark.parametrize("family", ["binomial", "poisson", None])
    def test_glm_other_families_are_z(self, family):
        assert classify("glm", family=family) == "z"

    def test_glmer(self):
        assert classify("glmerMod", family="binomial") == "z"


# ═══════════════════════════════════════════════════════════════════════
# Ambiguous types
# ═══════════════════════════════════════════════════════════════════════


class TestAmbiguous:

    @pytest.mark.parametrize("family,expected", [
        ("binomial", "z"), ("poisson", "z"), ("gaussian", "t"), (None, "t"),
    ])
    def test_fixest_by_family(self, family, expected):
        assert classify("fixest", family=family) == expected

    def test_glht_zero_df_is_z(self):
        assert classify("glht", degrees_of_freedom=0) == "z"

    def test_glht_positive_df_is_t(self):
        assert classify("glht", degrees_of_freedom=25) == "t"

    def test_coeftest_z_column(self):
        cols = ["Estimate", "Std. Error", "z value", "Pr(>|z|)"]
        assert classify("coeftest", summary_column_names=cols) == "z"

    def test_coeftest_t_column(self):
        cols = ["Estimate", "Std. Error", "t value", "Pr(>|t|)"]
        assert classify("coeftest", summary_column_names=cols) == "t"

    @pytest.mark.parametrize("cols,expected", [
        (["Estimate", "Std. Error", "t-value", "Pr(>|t|)"], "t"),
        (["Estimate", "Std. Error", "z-value"], "z"),
        (["Estimate", "F value"], "F"),
        (["Estimate", "Chisq"], "chi-squared"),
    ])
    def test_plm_column_sniffing(self, cols, expected):
        assert classify("plm", summary_column_names=cols) == expected

    def test_sniffing_priority_t_before_z(self):
        assert classify("plm", summary_column_names=["z", "t"]) == "t"

    def test_sniffing_no_match(self):
        assert classify("plm", summary_column_names=["Estimate", "SE"]) is None

    def test_sniffing_no_columns(self):
        assert classify("plm") is None
        assert classify("plm", summary_column_names=[]) is None


# ═══════════════════════════════════════════════════════════════════════
# Hypothesis tests
# ═══════════════════════════════════════════════════════════════════════


class TestHypothesisTests:

    def test_fisher_exact_has_no_statistic(self):
        assert classify(
            "htest", test_method="Fisher's Exact Test for Count Data",
            statistic_name="odds ratio",
        ) is None

    def test_wilcoxon_continuity(self):
        assert classify(
            "htest", test_method="Wilcoxon signed rank test with continuity correction",
            statistic_name="V",
        ) == "z"

    @pytest.mark.parametrize("name,expected", [
        ("t", "t"),
        ("Z", "z"),
        ("F", "F"),
        ("Quade F", "F"),
        ("X-squared", "chi-squared"),
        ("Kruskal-Wallis chi-squared", "chi-squared"),
        ("Bartlett's K-squared", "chi-squared"),
    ])
    def test_statistic_names(self, name, expected):
        assert classify("htest", test_method="Some test", statistic_name=name) == expected

    def test_unknown_statistic_is_none(self):
        assert classify("htest", statistic_name="W") is None

    def test_counts_are_none(self):
        assert classify("htest", statistic_name="number of successes") is None

    def test_method_takes_precedence_over_type(self):
        """Test markers win even before the type-tag lookup."""
        assert classify("lm", statistic_name="X-squared") == "chi-squared"

    def test_unmatched_markers_on_model_fall_through(self):
        assert classify("lm", statistic_name="W") == "t"


# ═══════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════


class TestStatisticLabel:

    @pytest.mark.parametrize("token,label", [
        ("t", "t-statistic"),
        ("z", "z-statistic"),
        ("F", "F-statistic"),
        ("chi-squared", "chi-squared statistic"),
    ])
    def test_labels(self, token, label):
        assert statistic_label(token) == label

    def test_none_passes_through(self):
        assert statistic_label(None) is None

    def test_unknown_token(self):
        with pytest.raises(ValidationError):
            statistic_label("p")

    def test_roundtrip_with_classify(self):
        assert statistic_label(classify("lm")) == "t-statistic"
        assert statistic_label(classify("survfit")) is None
