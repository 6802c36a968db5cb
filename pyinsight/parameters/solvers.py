"""
Public entry points for the parameter taxonomy decoder.

decode() is the bare order-preserving mapping from raw identifiers to
TaxonomyRecords. clean_parameters() wraps the same computation in a
Result envelope with timing and diagnostics and returns a
ParameterSolution.
"""

from __future__ import annotations

import warnings
from collections import Counter
from collections.abc import Iterable, Mapping

from pyinsight.core.compute.timing import Timer
from pyinsight.core.result import Result
from pyinsight.parameters._common import ParameterTable, TaxonomyRecord
from pyinsight.parameters._postprocess import (
    fix_random_effect_smooths,
    normalize_interactions,
)
from pyinsight.parameters._rules import DecodeContext, RuleScheme
from pyinsight.parameters.design import ParameterDesign
from pyinsight.parameters.schemes import GENERIC_SCHEME, SCHEMES, get_scheme
from pyinsight.parameters.solution import ParameterSolution


def _decode_names(
    design: ParameterDesign,
    naming: RuleScheme,
    context: DecodeContext,
) -> list[TaxonomyRecord]:
    return [naming.decode_one(parameter, context) for parameter in design.parameters]


def _post_process(
    records: list[TaxonomyRecord],
    design: ParameterDesign,
    naming: RuleScheme,
) -> list[TaxonomyRecord]:
    records = normalize_interactions(records, naming.interaction_separator)
    return fix_random_effect_smooths(records, design.terms)


def decode(
    raw_parameters: Iterable[str],
    scheme: str,
    **hints,
) -> tuple[TaxonomyRecord, ...]:
    """
    Decode raw parameter identifiers into taxonomy records.

    Pure and order-preserving: the i-th record describes the i-th input.

    Args:
        raw_parameters: Identifiers exactly as the back-end reports them.
        scheme: Registered naming scheme name.
        **hints: Structural hints accepted by `ParameterDesign.from_names`
            (responses, auxiliary, random_groups, terms, mixture,
            separate_levels, components, groups).

    Returns:
        Tuple of TaxonomyRecord, one per input identifier.

    Raises:
        UnsupportedBackendError: If `scheme` is not registered.
        ValidationError: On malformed input or hints.
        MalformedNameError: If a rule matches but extracts no name.
    """
    naming = get_scheme(scheme)
    design = ParameterDesign.from_names(raw_parameters, scheme, **hints)
    context = DecodeContext(design)
    records = _decode_names(design, naming, context)
    return tuple(_post_process(records, design, naming))


def clean_parameters(
    raw_parameters: Iterable[str] | ParameterDesign,
    scheme: str = GENERIC_SCHEME,
    *,
    fallback: bool = False,
    responses: Iterable[str] | None = None,
    auxiliary: Iterable[str] | None = None,
    random_groups: Iterable[str] | None = None,
    terms: Iterable[str] | None = None,
    mixture: bool = False,
    separate_levels: bool = False,
    components: Mapping[str, str] | None = None,
    groups: Mapping[str, str] | None = None,
) -> ParameterSolution:
    """
    Build the taxonomy table for one model's parameters.

    Parameters
    ----------
    raw_parameters : iterable of str or ParameterDesign
        Raw identifiers in model order, or a prepared design (in which
        case the remaining design arguments are ignored).
    scheme : str
        Naming scheme: 'stan-brms', 'stan-rstanarm', 'bamlss',
        'bayesfactor' or 'generic' (default).
    fallback : bool
        If True, an unregistered scheme degrades to 'generic' with a
        warning instead of raising UnsupportedBackendError.
    responses, auxiliary, random_groups, terms, mixture, separate_levels,
    components, groups
        Structural hints, see `ParameterDesign.from_names`.

    Returns
    -------
    ParameterSolution

    Warns
    -----
    UserWarning
        When falling back to the generic scheme, when a parameter occurs
        more than once, or when a declared random group never occurs.
    """
    if isinstance(raw_parameters, ParameterDesign):
        design = raw_parameters
    else:
        design = ParameterDesign.from_names(
            raw_parameters, scheme,
            responses=responses,
            auxiliary=auxiliary,
            random_groups=random_groups,
            terms=terms,
            mixture=mixture,
            separate_levels=separate_levels,
            components=components,
            groups=groups,
        )

    warn_list = []
    requested = design.scheme
    if requested not in SCHEMES:
        if not fallback:
            get_scheme(requested)
        msg = (
            f"No naming scheme registered for {requested!r}; "
            f"decoding with {GENERIC_SCHEME!r} instead"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)
        warn_list.append(msg)
        design = design.with_scheme(GENERIC_SCHEME)

    naming = get_scheme(design.scheme)
    context = DecodeContext(design)

    timer = Timer()
    timer.start()

    with timer.section('decode'):
        records = _decode_names(design, naming, context)

    with timer.section('post_passes'):
        records = _post_process(records, design, naming)

    timer.stop()

    duplicates = [p for p, n in Counter(design.parameters).items() if n > 1]
    if duplicates:
        msg = f"Parameters occur more than once: {', '.join(duplicates)}"
        warnings.warn(msg, UserWarning, stacklevel=2)
        warn_list.append(msg)

    unseen = [g for g in design.random_groups if g not in context.groups_seen]
    if unseen:
        msg = (
            f"Declared random groups not found in any parameter name: "
            f"{', '.join(unseen)}"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)
        warn_list.append(msg)

    result = Result(
        params=ParameterTable(records=tuple(records)),
        info={
            'scheme': naming.name,
            'requested_scheme': requested,
            'n_parameters': len(records),
            'rule_counts': dict(context.rule_counts),
            'components': tuple(sorted(context.components_seen)),
            'groups': tuple(sorted(context.groups_seen)),
        },
        timing=timer.result(),
        backend_name=naming.name,
        warnings=tuple(warn_list),
    )
    return ParameterSolution(_result=result, _design=design)
