# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Combined provenance and confidence classification of one record."""

from __future__ import annotations

from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_confidence import (
    evaluate_confidence,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_provenance import (
    evaluate_provenance,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_input import (
    ModelClassificationInput,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_record_classification import (
    ModelRecordClassification,
)


def classify_record(record: object) -> ModelRecordClassification:
    """Derive provenance and confidence from the same record.

    The record's own ``provenance`` field feeds the confidence rules; the
    derived provenance does not.
    """
    provenance, provenance_rule = evaluate_provenance(record)
    confidence, confidence_rule = evaluate_confidence(record)
    return ModelRecordClassification(
        provenance=provenance,
        provenance_rule=provenance_rule,
        confidence=confidence,
        confidence_rule=confidence_rule,
    )


def handle_record_classification(
    input_data: ModelClassificationInput,
) -> ModelRecordClassification:
    return classify_record(input_data.record)


__all__ = ["classify_record", "handle_record_classification"]
