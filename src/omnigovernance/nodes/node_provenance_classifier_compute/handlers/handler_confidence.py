# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Metric confidence derivation - ordered rules, first match wins.

SAFE requires explicit evidence (an explicit SAFE confidence or a
validated status). Absence of evidence yields CONDITIONAL, never SAFE.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from omnigovernance.enums import EnumMetricConfidence, EnumProvenanceType
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_provenance import (
    parse_provenance,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_rule import (
    ClassificationRule,
    first_matching_rule,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_metric_metadata import (
    ModelMetricMetadata,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload

logger = logging.getLogger(__name__)

VALIDATION_STATUS_VALIDATED = "validated"
VALIDATION_STATUS_PENDING = "pending"
VALIDATION_STATUS_FAILED = "failed"

_CONFIDENCE_BY_VALUE: dict[str, EnumMetricConfidence] = {
    member.value: member for member in EnumMetricConfidence
}


def parse_confidence(value: object) -> EnumMetricConfidence | None:
    """Case-insensitive confidence lookup. Unknown text yields None."""
    if isinstance(value, EnumMetricConfidence):
        return value
    if isinstance(value, str):
        return _CONFIDENCE_BY_VALUE.get(value.strip().upper())
    return None


def _explicit_confidence(metric: ModelMetricMetadata) -> EnumMetricConfidence:
    confidence = parse_confidence(metric.confidence)
    return confidence if confidence is not None else EnumMetricConfidence.CONDITIONAL


def _constant(
    value: EnumMetricConfidence,
) -> Callable[[ModelMetricMetadata], EnumMetricConfidence]:
    return lambda _metric: value


CONFIDENCE_RULES: tuple[
    ClassificationRule[ModelMetricMetadata, EnumMetricConfidence], ...
] = (
    ClassificationRule(
        name="explicit_confidence",
        predicate=lambda metric: parse_confidence(metric.confidence) is not None,
        result=_explicit_confidence,
    ),
    ClassificationRule(
        name="validated",
        predicate=lambda metric: (
            metric.validation_status == VALIDATION_STATUS_VALIDATED
            or metric.is_validated is True
        ),
        result=_constant(EnumMetricConfidence.SAFE),
    ),
    ClassificationRule(
        name="validation_pending",
        predicate=lambda metric: metric.validation_status == VALIDATION_STATUS_PENDING,
        result=_constant(EnumMetricConfidence.CONDITIONAL),
    ),
    ClassificationRule(
        name="validation_failed",
        predicate=lambda metric: (
            metric.validation_status == VALIDATION_STATUS_FAILED
            or metric.is_validated is False
        ),
        result=_constant(EnumMetricConfidence.BLOCKED),
    ),
    ClassificationRule(
        name="legacy_provenance",
        predicate=lambda metric: (
            parse_provenance(metric.provenance) is EnumProvenanceType.LEGACY_OBSERVED
        ),
        result=_constant(EnumMetricConfidence.CONDITIONAL),
    ),
    ClassificationRule(
        name="default",
        predicate=lambda _metric: True,
        result=_constant(EnumMetricConfidence.CONDITIONAL),
    ),
)


def evaluate_confidence(metric: object) -> tuple[EnumMetricConfidence, str]:
    """Return the derived confidence and the name of the deciding rule."""
    coerced = coerce_payload(ModelMetricMetadata, metric)
    typed = coerced if coerced is not None else ModelMetricMetadata()
    rule = first_matching_rule(CONFIDENCE_RULES, typed)
    result = rule.result(typed)
    logger.debug("Confidence %s decided by rule %s", result.value, rule.name)
    return result, rule.name


def derive_confidence(metric: ModelMetricMetadata | object | None) -> EnumMetricConfidence:
    """Classify how far a metric may be trusted."""
    return evaluate_confidence(metric)[0]


def explain_confidence(metric: ModelMetricMetadata | object | None) -> str:
    """Name of the confidence rule that decides for ``metric``."""
    return evaluate_confidence(metric)[1]


__all__ = [
    "CONFIDENCE_RULES",
    "VALIDATION_STATUS_FAILED",
    "VALIDATION_STATUS_PENDING",
    "VALIDATION_STATUS_VALIDATED",
    "derive_confidence",
    "evaluate_confidence",
    "explain_confidence",
    "parse_confidence",
]
