"""
Rule engine shared by all naming schemes.

A naming scheme is a priority-ordered tuple of DecodeRule objects. Rules
are tried top to bottom against one raw identifier and the first rule
whose pattern matches (and whose extractor does not decline) wins.
Anything no rule claims falls back to a fixed, conditional record whose
cleaned name is the identifier itself.

Schemes hold only read-only rule tables. Everything accumulated while
decoding one batch of names lives on the DecodeContext for that call.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass

from pyinsight.core.exceptions import MalformedNameError
from pyinsight.core.vocabulary import (
    EFFECTS_FIXED,
    EFFECTS_RANDOM,
    COMPONENT_CONDITIONAL,
    INTERCEPT_LABEL,
)
from pyinsight.parameters._common import TaxonomyRecord
from pyinsight.parameters.design import ParameterDesign

FALLBACK_RULE = 'fallback'


@dataclass(frozen=True)
class Fragment:
    """What a rule extracts from one identifier."""
    cleaned: str
    component: str = COMPONENT_CONDITIONAL
    effects: str = EFFECTS_FIXED
    group: str = ''
    level: str = ''
    function: str = ''


@dataclass(frozen=True)
class DecodeRule:
    """
    One entry of a scheme's rule table.

    Attributes:
        name: Rule identifier, reported in match counts and errors.
        pattern: Compiled regex, applied with `search()`.
        extract: Builds a Fragment from the match. May return None to
            decline, in which case the next rule is tried.
    """
    name: str
    pattern: re.Pattern
    extract: Callable[[re.Match, 'DecodeContext'], Fragment | None]


class DecodeContext:
    """
    Call-scoped state for one decode pass.

    Attributes:
        design: The validated design being decoded.
        rule_counts: How many identifiers each rule claimed.
        groups_seen: Grouping factors found in random-effect records.
        components_seen: Components emitted so far.
    """

    def __init__(self, design: ParameterDesign):
        self.design = design
        self.rule_counts: Counter[str] = Counter()
        self.groups_seen: set[str] = set()
        self.components_seen: set[str] = set()

    def note_group(self, factor: str) -> None:
        self.groups_seen.add(factor)

    def record(self, rule: str, record: TaxonomyRecord) -> None:
        self.rule_counts[rule] += 1
        self.components_seen.add(record.component)


def rule(name: str, pattern: str, flags: int = 0):
    """Decorator turning an extractor function into a DecodeRule."""
    compiled = re.compile(pattern, flags)

    def wrap(extract: Callable[[re.Match, DecodeContext], Fragment | None]) -> DecodeRule:
        return DecodeRule(name=name, pattern=compiled, extract=extract)

    return wrap


class RuleScheme:
    """
    Base class for rule-table naming schemes.

    Subclasses set `name`, `rules` and, where their back-end joins
    interaction operands with something other than ':', the
    `interaction_separator`. Multivariate back-ends override
    `split_response()`.
    """
    name: str = ''
    rules: tuple[DecodeRule, ...] = ()
    interaction_separator: str | None = None

    # Cleaned names equal to one of these, or ending in the suffix, are
    # rewritten to INTERCEPT_LABEL
    intercept_names: frozenset[str] = frozenset()
    intercept_suffix: str | None = None

    def split_response(self, parameter: str, context: DecodeContext) -> tuple[str, str]:
        """Strip a multivariate response marker. Returns (text, response)."""
        return parameter, ''

    def normalize_intercept(self, cleaned: str) -> str:
        if cleaned in self.intercept_names:
            return INTERCEPT_LABEL
        if self.intercept_suffix and cleaned.endswith(self.intercept_suffix):
            return INTERCEPT_LABEL
        return cleaned

    def decode_one(self, parameter: str, context: DecodeContext) -> TaxonomyRecord:
        text, response = self.split_response(parameter, context)

        for decode_rule in self.rules:
            match = decode_rule.pattern.search(text)
            if match is None:
                continue
            fragment = decode_rule.extract(match, context)
            if fragment is None:
                continue
            record = self._build(parameter, response, fragment, decode_rule.name)
            context.record(decode_rule.name, record)
            return record

        record = TaxonomyRecord(
            parameter=parameter,
            effects=EFFECTS_FIXED,
            component=COMPONENT_CONDITIONAL,
            cleaned_parameter=text,
            response=response,
        )
        context.record(FALLBACK_RULE, record)
        return record

    def _build(
        self,
        parameter: str,
        response: str,
        fragment: Fragment,
        rule_name: str,
    ) -> TaxonomyRecord:
        cleaned = self.normalize_intercept(fragment.cleaned)
        if not cleaned:
            raise MalformedNameError(
                f"Rule {rule_name!r} of scheme {self.name!r} matched "
                f"{parameter!r} but extracted an empty name",
                parameter=parameter, scheme=self.name, rule=rule_name,
            )
        if (fragment.effects == EFFECTS_RANDOM) != bool(fragment.group):
            raise MalformedNameError(
                f"Rule {rule_name!r} of scheme {self.name!r} produced "
                f"effects={fragment.effects!r} with group={fragment.group!r} "
                f"for {parameter!r}",
                parameter=parameter, scheme=self.name, rule=rule_name,
            )
        return TaxonomyRecord(
            parameter=parameter,
            effects=fragment.effects,
            component=fragment.component,
            cleaned_parameter=cleaned,
            group=fragment.group,
            response=response,
            function=fragment.function,
            level=fragment.level,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, rules={len(self.rules)})"
