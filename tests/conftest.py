"""
pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def sleepstudy_rstanarm():
    """rstanarm names of a random intercept-slope model (sleepstudy)."""
    return [
        "(Intercept)",
        "Days",
        "b[(Intercept) Subject:308]",
        "b[Days Subject:308]",
        "b[(Intercept) Subject:309]",
        "b[Days Subject:309]",
        "sigma",
        "Sigma[Subject:(Intercept),(Intercept)]",
        "Sigma[Subject:Days,(Intercept)]",
        "Sigma[Subject:Days,Days]",
    ]


@pytest.fixture
def sleepstudy_brms():
    """brms names of a random intercept-slope model (sleepstudy)."""
    return [
        "b_Intercept",
        "b_Days",
        "sd_Subject__Intercept",
        "sd_Subject__Days",
        "cor_Subject__Intercept__Days",
        "sigma",
        "r_Subject[308,Intercept]",
        "r_Subject[308,Days]",
        "lp__",
    ]


@pytest.fixture
def zero_inflated_brms():
    """brms names of a zero-inflated Poisson model with random intercepts."""
    return [
        "b_Intercept",
        "b_zi_Intercept",
        "b_child",
        "b_zi_camper",
        "sd_persons__Intercept",
        "sd_persons__zi_Intercept",
        "r_persons[1,Intercept]",
        "r_persons__zi[1,Intercept]",
    ]
