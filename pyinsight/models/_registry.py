"""
Registry of supported model type tags.

A type tag is the class name a fitting back-end gives its fitted-model
objects. Everything else in PyInsight only accepts tags from this
registry; `check_model` is the gate.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyinsight.core.exceptions import NotAModelError, ValidationError


MODEL_TYPES = frozenset({
    "_ranger",

    # a --------------------
    "aareg", "afex_aov", "AKP", "ancova", "anova", "Anova.mlm",
    "anova.rms", "aov", "aovlist", "Arima", "averaging", "asym",

    # b --------------------
    "bam", "bamlss", "bamlss.frame", "bayesGAM", "bayesmeta", "bayesx",
    "bayesQR", "BBmm", "BBreg", "bcplm", "betamfx", "betaor", "betareg",
    "bfsl", "BFBayesFactor", "BGGM", "bglmerMod", "bife", "bifeAPEs",
    "biglm", "bigglm", "blrm", "blavaan", "blmerMod",
    "boot_test_mediation", "bracl", "brglm", "brglmFit", "brmsfit",
    "brmultinom", "bsem", "btergm", "buildmer",

    # c --------------------
    "cch", "censReg", "cgam", "cgamm", "cglm", "clm", "clm2",
    "clmm", "clmm2", "clogit", "coeftest", "complmrob", "comprisk",
    "confusionMatrix", "coxme", "coxph", "coxph.penal", "coxr",
    "cph", "cpglm", "cpglmm", "crch", "crq", "crqs", "crr",
    "coxph_weightit",

    # d --------------------
    "dep.effect", "deltaMethod", "DirichletRegModel", "drc",

    # e --------------------
    "eglm", "elm", "emmGrid", "emm_list", "epi.2by2", "ergm",

    # f --------------------
    "fdm", "feglm", "feis", "felm", "fitdistr", "fixest", "flexmix",
    "flexsurvreg", "flac", "flic",

    # g --------------------
    "gam", "Gam", "GAMBoost", "gamlr", "gamlss", "gamm", "gamm4",
    "garch", "gbm", "gee", "geeglm", "gjrm", "glht", "glimML", "Glm", "glm",
    "glmaag", "glmbb", "glmboostLSS", "glmc", "glmdm", "glmdisc", "glmgee",
    "glmerMod", "glmlep", "glmm", "glmmadmb", "glmmEP", "glmmFit",
    "glmmfields", "glmmLasso", "glmmPQL", "glmmTMB", "glmnet", "glmrob",
    "glmRob", "glmx", "gls", "gmnl", "gmm", "gnls", "gsm", "ggcomparisons",
    "glm_weightit",

    # h --------------------
    "heavyLme", "HLfit", "htest", "hurdle", "hglm",

    # i --------------------
    "ivFixed", "iv_robust", "ivreg", "ivprobit",

    # j --------------------
    "joint",

    # k --------------------
    "kmeans",

    # l --------------------
    "lavaan", "lm", "lm.beta", "lm_robust", "lm_weightit", "lme", "lmrob",
    "lmRob", "loggammacenslmrob", "logistf", "LogitBoost", "loo",
    "LORgee", "lmodel2", "lmerMod", "lmerModLmerTest",
    "logitmfx", "logitor", "logitr", "lqm", "lqmm", "lrm",

    # m --------------------
    "maov", "manova", "MANOVA", "margins", "maxLik", "mboostLSS",
    "mclogit", "mcp1", "mcp2", "mmclogit", "mcmc", "mcmc.list",
    "MCMCglmm", "mediate", "merMod", "merModList", "meta_bma",
    "meta_fixed", "meta_random", "meta_ordered", "metaplus",
    "mhurdle", "mipo", "mira", "mixed", "mixor", "MixMod", "mjoint",
    "mle", "mle2", "mlergm", "mlm", "mlma", "mlogit", "model_fit",
    "multinom", "mvmeta", "mvord", "mvr", "marginaleffects",
    "marginaleffects.summary", "mblogit", "mmrm", "mmrm_fit",
    "mmrm_tmb", "multinom_weightit", "mmlogit", "med1way", "mcp12",

    # n --------------------
    "negbin", "negbinmfx", "negbinirr", "nlmerMod", "nlreg", "nlrq", "nls",
    "nparLD", "nestedLogit",

    # o --------------------
    "objectiveML", "ols", "osrt", "orcutt", "ordinal_weightit", "oohbchoice",
    "onesampb", "orm",

    # p --------------------
    "pairwise.htest", "pb1", "pb2", "pgmm", "plm", "plmm", "PMCMR",
    "poissonmfx", "poissonirr", "polr", "pseudoglm", "psm", "probitmfx",
    "phyloglm", "phylolm",

    # q --------------------
    "qr", "QRNLMM", "QRLMM",

    # r --------------------
    "rankFD", "Rchoice", "rdrobust", "ridgelm", "riskRegression",
    "rjags", "rlm", "rlme", "rlmerMod", "RM", "rma", "rma.mv", "rmanovab",
    "rma.uni", "rms", "robmixglm", "robtab", "rq", "rqs", "rqss", "rrvglm",

    # s --------------------
    "Sarlm", "scam", "selection", "sem", "SemiParBIV", "serp", "slm", "slopes",
    "speedlm", "speedglm", "splmm", "spml", "stanmvreg", "stanreg", "summary.lm",
    "survfit", "survreg", "survPresmooth", "svychisq", "svyglm", "svy_vglm",
    "svyolr", "svytable", "systemfit", "svy2lme", "seqanova.svyglm", "sdmTMB",
    "stanfit", "semLME",

    # t --------------------
    "t1way", "t2way", "t3way", "test_mediation", "tobit", "trendPMCMR",
    "trimcibt", "truncreg",

    # v --------------------
    "varest", "vgam", "vglm",

    # w --------------------
    "wbm", "wblm", "wbgee", "wmcpAKP",

    # y --------------------
    "yuen", "yuend",

    # z --------------------
    "zcpglm", "zeroinfl", "zerotrunc",
})

# Objects that are models but not regression models
NON_REGRESSION_TYPES = frozenset({
    "emmGrid", "emm_list", "htest", "pairwise.htest", "summary.lm",
    "marginaleffects", "marginaleffects.summary", "ggcomparisons",
})

REGRESSION_TYPES = MODEL_TYPES - NON_REGRESSION_TYPES


def as_class_list(type_tag: str | Iterable[str], name: str = "type_tag") -> tuple[str, ...]:
    """
    Normalize a type tag or class hierarchy to a tuple of tags.
    
    The first element is the concrete type; later elements are the
    classes it inherits from.
    
    Raises:
        ValidationError: If type_tag is neither a str nor a sequence of str
    """
    if isinstance(type_tag, str):
        tags = (type_tag,)
    elif isinstance(type_tag, Iterable):
        tags = tuple(type_tag)
    else:
        raise ValidationError(
            f"{name}: expected str or sequence of str, got {type(type_tag).__name__}"
        )
    
    if not tags or not all(isinstance(t, str) and t for t in tags):
        raise ValidationError(f"{name}: must be one or more non-empty strings, got {tags!r}")
    return tags


def is_model(type_tag: str | Iterable[str]) -> bool:
    """
    Check whether a type tag (or any class in a hierarchy) is a supported model.
    
    Examples:
        >>> is_model("lm")
        True
        >>> is_model(("lmerModLmerTest", "lmerMod"))
        True
        >>> is_model("data.frame")
        False
    """
    return any(t in MODEL_TYPES for t in as_class_list(type_tag))


def is_regression_model(type_tag: str | Iterable[str]) -> bool:
    """
    Stricter than is_model(): False for test objects and reference grids.
    """
    return any(t in REGRESSION_TYPES for t in as_class_list(type_tag))


def check_model(type_tag: str | Iterable[str]) -> tuple[str, ...]:
    """
    Gate for all model-fact queries.
    
    Returns:
        The normalized class list
        
    Raises:
        NotAModelError: If no class in the hierarchy is a supported model
    """
    tags = as_class_list(type_tag)
    if not is_model(tags):
        raise NotAModelError(
            f"The entered object is not a model object: {tags[0]!r} "
            f"is not a supported model type",
            type_tag=tags if len(tags) > 1 else tags[0],
        )
    return tags
