"""
Static type registry for the statistic family classifier.

Each back-end type tag belongs to exactly one evaluation stage. The sets
below are the declarative data; `STAGE_BY_TAG` is the immutable
tag -> stage map built from them once at import time. Building the map
fails loudly if a tag is listed in two stages.

The tweedie set is the one documented two-stage exception: its tags are
resolved by the tweedie pre-check and appear in no other set.
"""

from __future__ import annotations

from types import MappingProxyType

# Stage names
STAGE_UNSUPPORTED = 'unsupported'
STAGE_T = 't'
STAGE_Z = 'z'
STAGE_F = 'F'
STAGE_CHI_SQUARED = 'chi-squared'
STAGE_MIXED = 'mixed'
STAGE_AMBIGUOUS = 'ambiguous'
STAGE_TWEEDIE = 'tweedie'


# t-value objects ----------------------------------------------------------

T_TYPES = frozenset({
    "asym",
    "bayesx", "BBreg", "BBmm", "biglm", "bfsl", "blmerMod",
    "cch", "censReg", "complmrob", "crq", "crqs",
    "drc",
    "elm",
    "feis", "felm",
    "gamlss", "garch", "glmmPQL", "gls", "gmm", "gnls",
    "HLfit", "hglm",
    "ivreg", "ivFixed", "iv_robust", "ivprobit",
    "lm", "lm_robust", "lm.beta", "lme", "lmerMod", "lmerModLmerTest",
    "lmodel2", "lmRob", "lmrob", "lqm", "lqmm", "lm_weightit",
    "maxLik", "mixed", "mhurdle", "mlm", "mmrm", "mmrm_fit",
    "mmrm_tmb",
    "nlmerMod", "nlrq", "nls",
    "ols", "orcutt",
    "pb1", "pb2", "polr", "phylolm",
    "rlm", "rms", "rlmerMod", "rq", "rqs", "rqss",
    "selection", "speedlm", "spml", "summary.lm", "svyglm", "svyolr", "systemfit",
    "svy2lme",
    "truncreg",
    "varest",
    "wbm", "wblm",
    "yuen",
})

# z-value objects ----------------------------------------------------------

Z_TYPES = frozenset({
    "aareg", "Arima", "averaging",
    "betamfx", "betaor", "betareg", "bife", "bifeAPEs", "bglmerMod",
    "boot_test_mediation", "bracl", "brglm", "brglmFit", "brmultinom", "btergm",
    "cglm", "cph", "clm", "clm2", "clmm", "clmm2", "clogit", "coxme", "coxph",
    "coxr", "crch", "crr", "coxph_weightit",
    "deltaMethod", "DirichletRegModel",
    "ergm",
    "feglm", "flexsurvreg",
    "gee", "ggcomparisons", "glimML", "glmm", "glmmadmb", "glmmFit", "glmmLasso",
    "glmmTMB", "glmx", "gmnl", "glmgee",
    "hurdle",
    "lavaan", "loggammacenslmrob", "logitmfx", "logitor", "logitr", "LORgee", "lrm",
    "margins", "marginaleffects", "marginaleffects.summary", "metaplus", "mixor",
    "MixMod", "mjoint", "mle", "mle2", "mlogit", "mblogit", "mclogit", "mmclogit",
    "multinom", "mvmeta", "mvord", "multinom_weightit",
    "negbin", "negbinmfx", "negbinirr", "nlreg", "nestedLogit",
    "objectiveML", "orm", "ordinal_weightit", "oohbchoice",
    "poissonmfx", "poissonirr", "psm", "probitmfx", "pgmm", "phyloglm",
    "qr", "QRNLMM", "QRLMM",
    "Rchoice", "riskRegression", "robmixglm", "rma", "rma.mv", "rma.uni", "rrvglm",
    "Sarlm", "sem", "SemiParBIV", "serp", "slm", "slopes", "survreg", "svy_vglm",
    "sdmTMB",
    "test_mediation", "tobit",
    "vglm",
    "wbgee",
    "zeroinfl", "zerotrunc",
})

# F-value objects ----------------------------------------------------------

F_TYPES = frozenset({
    "afex_aov", "Anova.mlm", "aov", "aovlist", "anova",
    "Gam",
    "manova", "maov",
    "svychisq", "svytable",
    "t1way",
})

# chi-squared value objects ------------------------------------------------

CHI_SQUARED_TYPES = frozenset({
    "anova.rms",
    "coxph.penal",
    "epi.2by2",
    "flac",
    "flic",
    "geeglm",
    "logistf",
    "MANOVA", "mlma",
    "nparLD",
    "RM",
    "vgam",
})

# mixed bag ----------------------------------------------------------------

# No fixed statistic; decided by the fitted family (or, for reference
# grids, by the degrees of freedom)
MIXED_TYPES = frozenset({
    "bam", "bigglm",
    "cgam", "cgamm",
    "eglm", "emmGrid", "emm_list",
    "gam", "glm", "Glm", "glmc", "glmerMod", "glmRob", "glmrob", "glm_weightit",
    "pseudoglm",
    "scam",
    "speedglm",
})

# Reference-grid / marginal-means objects inside the mixed bag
REFERENCE_GRID_TYPES = frozenset({"emmGrid", "emm_list"})

# Families with t-distributed statistics (everything else: z)
T_FAMILIES = frozenset({
    "gaussian", "Gamma",
    "quasi", "quasibinomial", "quasipoisson",
    "inverse.gaussian",
})

# ambiguous ----------------------------------------------------------------

# Resolved structurally. fixest, glht and coeftest have documented
# per-type rules; everything else is decided by summary column names.
AMBIGUOUS_TYPES = frozenset({"plm", "fixest", "glht", "coeftest"})

# no statistic -------------------------------------------------------------

UNSUPPORTED_TYPES = frozenset({
    "BFBayesFactor", "brmsfit",
    "gbm", "glmmEP",
    "joint",
    "MCMCglmm", "mediate", "mlergm",
    "pairwise.htest",
    "ridgelm",
    "splmm", "stanreg", "stanmvreg", "survfit",
})

# tweedie ------------------------------------------------------------------

# Compound Poisson models: always t, caught before the type-tag lookup
TWEEDIE_TYPES = frozenset({"bcplm", "cpglm", "cpglmm", "zcpglm"})

# Stage of a tweedie type when the pre-check is skipped (multivariate
# models); bcplm has no statistic
TWEEDIE_FALLBACK = MappingProxyType({
    "cpglm": STAGE_T,
    "cpglmm": STAGE_T,
    "zcpglm": STAGE_Z,
})

# Family spellings of Gaussian / Student-t families for the tweedie check
TWEEDIE_LINEAR_FAMILIES = frozenset({"Student's-t", "t Family", "gaussian", "Gaussian"})

# summary column vocabularies ------------------------------------------------

T_COLUMNS = frozenset({
    "t",
    "t-value",
    "t value",
    "t.value",
    "Pr(>|t|)",
})

Z_COLUMNS = frozenset({
    "z",
    "z-value",
    "z value",
    "z.value",
    "Pr(>|z|)",
    "Pr(>|Z|)",
    "Naive z",
    "Robust z",
    "san.z",
    "Wald Z",
})

F_COLUMNS = frozenset({"F", "F-value", "F value", "F.value"})

CHI_SQUARED_COLUMNS = frozenset({"Chisq", "chi-sq", "chi.sq", "Wald", "W", "Pr(>|W|)"})


def _build_stage_map() -> MappingProxyType:
    """Build the tag -> stage map, refusing tags listed in two stages."""
    stages = (
        (STAGE_UNSUPPORTED, UNSUPPORTED_TYPES),
        (STAGE_T, T_TYPES),
        (STAGE_Z, Z_TYPES),
        (STAGE_F, F_TYPES),
        (STAGE_CHI_SQUARED, CHI_SQUARED_TYPES),
        (STAGE_MIXED, MIXED_TYPES),
        (STAGE_AMBIGUOUS, AMBIGUOUS_TYPES),
        (STAGE_TWEEDIE, TWEEDIE_TYPES),
    )
    out: dict[str, str] = {}
    for stage, tags in stages:
        for tag in tags:
            if tag in out:
                raise RuntimeError(
                    f"Type tag {tag!r} registered in both {out[tag]!r} and {stage!r}"
                )
            out[tag] = stage
    return MappingProxyType(out)


STAGE_BY_TAG = _build_stage_map()
