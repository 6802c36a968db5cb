"""
Parameter taxonomy decoder.

Turns the raw parameter identifiers of a fitted model into canonical
taxonomy records (effects, component, group, response, function, level,
cleaned name), using the naming scheme of the back-end that produced
them.

Usage:
    from pyinsight.parameters import clean_parameters

    sol = clean_parameters(
        ["b[(Intercept) Subject:308]", "Sigma[Subject:(Intercept),(Intercept)]"],
        scheme='stan-rstanarm',
    )
    sol.to_dict()
"""

from pyinsight.parameters._common import ParameterTable, TaxonomyRecord
from pyinsight.parameters.design import ParameterDesign
from pyinsight.parameters.schemes import SCHEMES, get_scheme, scheme_for_model
from pyinsight.parameters.solution import ParameterSolution
from pyinsight.parameters.solvers import clean_parameters, decode

__all__ = [
    'TaxonomyRecord',
    'ParameterTable',
    'ParameterDesign',
    'ParameterSolution',
    'SCHEMES',
    'get_scheme',
    'scheme_for_model',
    'decode',
    'clean_parameters',
]
