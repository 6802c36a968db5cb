"""
Vocabulary constants for PyInsight.

This module is the SINGLE SOURCE OF TRUTH for the labels that appear in
taxonomy tables and classifier output. Import from here, never use raw
strings.

Usage:
    from pyinsight.core.vocabulary import (
        EFFECTS_RANDOM,
        COMPONENT_ZERO_INFLATED,
        STATISTIC_T,
    )
    
    if record.effects == EFFECTS_RANDOM:
        ...
"""

# Effects column
EFFECTS_FIXED = 'fixed'
EFFECTS_RANDOM = 'random'

ALL_EFFECTS = frozenset({EFFECTS_FIXED, EFFECTS_RANDOM})

# Component column (open set; schemes may emit distributional-parameter names)
COMPONENT_CONDITIONAL = 'conditional'
COMPONENT_ZERO_INFLATED = 'zero_inflated'
COMPONENT_DISPERSION = 'dispersion'
COMPONENT_SIGMA = 'sigma'
COMPONENT_SMOOTH_TERMS = 'smooth_terms'
COMPONENT_SMOOTH_SD = 'smooth_sd'
COMPONENT_SIMPLEX = 'simplex'
COMPONENT_PRIORS = 'priors'
COMPONENT_AUXILIARY = 'auxiliary'
COMPONENT_BETA = 'beta'
COMPONENT_CAR = 'car'
COMPONENT_MIX = 'mix'
COMPONENT_SHIFTPROP = 'shiftprop'
COMPONENT_ALPHA = 'alpha'
COMPONENT_EXTRA = 'extra'

# Function column
FUNCTION_SMOOTH = 'smooth'

# Canonical labels produced by normalization passes
INTERCEPT_LABEL = '(Intercept)'
INTERACTION_SEPARATOR = ':'
CORRELATION_SEPARATOR = ' ~ '
GROUP_PREFIX_SD_COR = 'SD/Cor: '
GROUP_PREFIX_VAR_COV = 'Var/Cov: '

# Component labels understood from back-end "find parameters" hints, in
# the order they are searched for inside a hint label
HINT_COMPONENTS = (
    'zero_inflated', 'dispersion', 'nonlinear', 'instruments', 'phi', 'mu',
    'extra', 'scale', 'marginal', 'intercept', 'correlation', 'ip', 'tau',
    'beta', 'precision', 'selection', 'auxiliary', 'outcome', 'full',
    'infrequent_purchase', 'delta', 'shape', 'survival',
)

# Taxonomy table columns, in output order
COLUMN_PARAMETER = 'Parameter'
COLUMN_EFFECTS = 'Effects'
COLUMN_COMPONENT = 'Component'
COLUMN_GROUP = 'Group'
COLUMN_RESPONSE = 'Response'
COLUMN_FUNCTION = 'Function'
COLUMN_LEVEL = 'Level'
COLUMN_CLEANED = 'Cleaned_Parameter'

ALL_COLUMNS = (
    COLUMN_PARAMETER,
    COLUMN_EFFECTS,
    COLUMN_COMPONENT,
    COLUMN_GROUP,
    COLUMN_RESPONSE,
    COLUMN_FUNCTION,
    COLUMN_LEVEL,
    COLUMN_CLEANED,
)

# Columns dropped from a table when empty for every row
OPTIONAL_COLUMNS = frozenset({
    COLUMN_GROUP,
    COLUMN_RESPONSE,
    COLUMN_FUNCTION,
    COLUMN_LEVEL,
})

# Statistic family tokens. "Unsupported" is represented by None.
STATISTIC_T = 't'
STATISTIC_Z = 'z'
STATISTIC_F = 'F'
STATISTIC_CHI_SQUARED = 'chi-squared'

ALL_STATISTICS = frozenset({
    STATISTIC_T,
    STATISTIC_Z,
    STATISTIC_F,
    STATISTIC_CHI_SQUARED,
})

__all__ = [
    'EFFECTS_FIXED',
    'EFFECTS_RANDOM',
    'ALL_EFFECTS',
    'COMPONENT_CONDITIONAL',
    'COMPONENT_ZERO_INFLATED',
    'COMPONENT_DISPERSION',
    'COMPONENT_SIGMA',
    'COMPONENT_SMOOTH_TERMS',
    'COMPONENT_SMOOTH_SD',
    'COMPONENT_SIMPLEX',
    'COMPONENT_PRIORS',
    'COMPONENT_AUXILIARY',
    'COMPONENT_BETA',
    'COMPONENT_CAR',
    'COMPONENT_MIX',
    'COMPONENT_SHIFTPROP',
    'COMPONENT_ALPHA',
    'COMPONENT_EXTRA',
    'FUNCTION_SMOOTH',
    'INTERCEPT_LABEL',
    'INTERACTION_SEPARATOR',
    'CORRELATION_SEPARATOR',
    'GROUP_PREFIX_SD_COR',
    'GROUP_PREFIX_VAR_COV',
    'HINT_COMPONENTS',
    'COLUMN_PARAMETER',
    'COLUMN_EFFECTS',
    'COLUMN_COMPONENT',
    'COLUMN_GROUP',
    'COLUMN_RESPONSE',
    'COLUMN_FUNCTION',
    'COLUMN_LEVEL',
    'COLUMN_CLEANED',
    'ALL_COLUMNS',
    'OPTIONAL_COLUMNS',
    'STATISTIC_T',
    'STATISTIC_Z',
    'STATISTIC_F',
    'STATISTIC_CHI_SQUARED',
    'ALL_STATISTICS',
]
