# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Provenance derivation - ordered rules, first match wins.

Provenance rules:
    explicit_provenance   provenance is CANONICAL or LEGACY_OBSERVED -> as-is
    explicit_flag         is_canonical is a boolean -> CANONICAL / LEGACY_OBSERVED
    canonical_source      source_system contains a canonical marker -> CANONICAL
    observed_via          observed_via present -> LEGACY_OBSERVED
    default               -> LEGACY_OBSERVED

The default is never CANONICAL: a record without evidence is untrusted.
"""

from __future__ import annotations

import logging

from omnigovernance.constants import CANONICAL_SOURCE_MARKERS
from omnigovernance.enums import EnumProvenanceType
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_rule import (
    ClassificationRule,
    first_matching_rule,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_provenance_record import (
    ModelProvenanceRecord,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload

logger = logging.getLogger(__name__)

_PROVENANCE_BY_VALUE: dict[str, EnumProvenanceType] = {
    member.value: member for member in EnumProvenanceType
}


def parse_provenance(value: object) -> EnumProvenanceType | None:
    """Exact-match a provenance value. Unknown text yields None."""
    if isinstance(value, EnumProvenanceType):
        return value
    if isinstance(value, str):
        return _PROVENANCE_BY_VALUE.get(value)
    return None


def _has_canonical_source(record: ModelProvenanceRecord) -> bool:
    if not record.source_system:
        return False
    source = record.source_system.lower()
    return any(marker in source for marker in CANONICAL_SOURCE_MARKERS)


def _explicit_provenance(record: ModelProvenanceRecord) -> EnumProvenanceType:
    provenance = parse_provenance(record.provenance)
    # Predicate guarantees a known value.
    return provenance if provenance is not None else EnumProvenanceType.LEGACY_OBSERVED


def _legacy(_record: ModelProvenanceRecord) -> EnumProvenanceType:
    return EnumProvenanceType.LEGACY_OBSERVED


PROVENANCE_RULES: tuple[
    ClassificationRule[ModelProvenanceRecord, EnumProvenanceType], ...
] = (
    ClassificationRule(
        name="explicit_provenance",
        predicate=lambda record: parse_provenance(record.provenance) is not None,
        result=_explicit_provenance,
    ),
    ClassificationRule(
        name="explicit_flag",
        predicate=lambda record: record.is_canonical is not None,
        result=lambda record: (
            EnumProvenanceType.CANONICAL
            if record.is_canonical
            else EnumProvenanceType.LEGACY_OBSERVED
        ),
    ),
    ClassificationRule(
        name="canonical_source",
        predicate=_has_canonical_source,
        result=lambda _record: EnumProvenanceType.CANONICAL,
    ),
    ClassificationRule(
        name="observed_via",
        predicate=lambda record: bool(record.observed_via),
        result=_legacy,
    ),
    ClassificationRule(
        name="default",
        predicate=lambda _record: True,
        result=_legacy,
    ),
)


def _as_provenance_record(record: object) -> ModelProvenanceRecord:
    coerced = coerce_payload(ModelProvenanceRecord, record)
    return coerced if coerced is not None else ModelProvenanceRecord()


def evaluate_provenance(record: object) -> tuple[EnumProvenanceType, str]:
    """Return the derived provenance and the name of the deciding rule."""
    typed = _as_provenance_record(record)
    rule = first_matching_rule(PROVENANCE_RULES, typed)
    result = rule.result(typed)
    logger.debug("Provenance %s decided by rule %s", result.value, rule.name)
    return result, rule.name


def derive_provenance(record: ModelProvenanceRecord | object | None) -> EnumProvenanceType:
    """Classify a record's origin. Accepts a model, a mapping or None."""
    return evaluate_provenance(record)[0]


def explain_provenance(record: ModelProvenanceRecord | object | None) -> str:
    """Name of the provenance rule that decides for ``record``."""
    return evaluate_provenance(record)[1]


__all__ = [
    "PROVENANCE_RULES",
    "derive_provenance",
    "evaluate_provenance",
    "explain_provenance",
    "parse_provenance",
]
