# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NodeProvenanceClassifierCompute: record provenance and metric confidence.

It is a COMPUTE node: pure, deterministic, zero I/O.
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_record_classification import (
    handle_record_classification,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_classification_input import (
    ModelClassificationInput,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models.model_record_classification import (
    ModelRecordClassification,
)


class NodeProvenanceClassifierCompute(
    NodeCompute[ModelClassificationInput, ModelRecordClassification]
):
    """Pure COMPUTE node for provenance and confidence classification.

    This node is a thin declarative shell delegating to
    handle_record_classification.
    """

    async def compute(
        self, input_data: ModelClassificationInput
    ) -> ModelRecordClassification:
        """Classify the input record."""
        return handle_record_classification(input_data)


__all__ = ["NodeProvenanceClassifierCompute"]
