"""
PyInsight: backend-independent introspection of fitted statistical models.

Given facts a fitting back-end already exposes (raw parameter names,
its type tag, its fitted family), PyInsight normalizes them into a
single schema that reporting and inference tools can rely on.

Submodules:
    parameters: Parameter taxonomy decoder (clean_parameters, decode)
    statistic: Statistic family classifier (classify)
    models: Supported-model registry (is_model)
    links: Link functions (link_function, link_inverse)
"""

__version__ = "0.1.0"

from pyinsight import links, models, parameters, statistic
from pyinsight.links import link_function, link_inverse
from pyinsight.models import is_model, is_regression_model
from pyinsight.parameters import clean_parameters, decode
from pyinsight.statistic import classify, statistic_label

__all__ = [
    "__version__",
    "parameters",
    "statistic",
    "models",
    "links",
    "clean_parameters",
    "decode",
    "classify",
    "statistic_label",
    "is_model",
    "is_regression_model",
    "link_function",
    "link_inverse",
]
