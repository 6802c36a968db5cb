"""
Link functions of supported models.
"""

from pyinsight.links._links import (
    Link,
    IdentityLink,
    LogitLink,
    ProbitLink,
    CauchitLink,
    CloglogLink,
    LogLink,
    InverseLink,
    InverseSquareLink,
    SqrtLink,
)
from pyinsight.links.solvers import (
    LinkInverse,
    make_link,
    link_function,
    link_inverse,
)

__all__ = [
    'Link',
    'IdentityLink',
    'LogitLink',
    'ProbitLink',
    'CauchitLink',
    'CloglogLink',
    'LogLink',
    'InverseLink',
    'InverseSquareLink',
    'SqrtLink',
    'LinkInverse',
    'make_link',
    'link_function',
    'link_inverse',
]
