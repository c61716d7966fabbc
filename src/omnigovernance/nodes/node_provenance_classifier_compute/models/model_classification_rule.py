# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Ordered classification rules.

A rule table is a tuple of ClassificationRule evaluated in order; the
first rule whose predicate holds decides the result. Tables end with an
unconditional default rule so evaluation is total.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

RecordT = TypeVar("RecordT")
ResultT = TypeVar("ResultT")


@dataclass(frozen=True, slots=True)
class ClassificationRule(Generic[RecordT, ResultT]):
    """One named rule of an ordered classification table.

    Attributes:
        name: Stable identifier reported by the explain functions.
        predicate: Whether the rule applies to the record.
        result: Derives the classification from a matching record.
    """

    name: str
    predicate: Callable[[RecordT], bool]
    result: Callable[[RecordT], ResultT]


def first_matching_rule(
    rules: Sequence[ClassificationRule[RecordT, ResultT]],
    record: RecordT,
) -> ClassificationRule[RecordT, ResultT]:
    """Return the first rule whose predicate holds for ``record``.

    Raises:
        LookupError: If no rule matches. Rule tables end with a default
            rule, so this only fires for a malformed table.
    """
    for rule in rules:
        if rule.predicate(record):
            return rule
    raise LookupError("Classification rule table has no default rule")


__all__ = ["ClassificationRule", "first_matching_rule"]
