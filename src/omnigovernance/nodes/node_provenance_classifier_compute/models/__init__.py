# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for ProvenanceClassifierCompute node."""

from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_input import (
    ModelClassificationInput,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_rule import (
    ClassificationRule,
    first_matching_rule,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_lead_record import (
    ModelLeadRecord,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_metric_metadata import (
    ModelMetricMetadata,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_provenance_record import (
    ModelProvenanceRecord,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_record_classification import (
    ModelRecordClassification,
)

__all__ = [
    "ClassificationRule",
    "ModelClassificationInput",
    "ModelLeadRecord",
    "ModelMetricMetadata",
    "ModelProvenanceRecord",
    "ModelRecordClassification",
    "first_matching_rule",
]
