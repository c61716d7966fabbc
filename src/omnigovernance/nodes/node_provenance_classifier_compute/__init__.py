# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ProvenanceClassifierCompute node package."""

from omnigovernance.nodes.node_provenance_classifier_compute.node import (
    NodeProvenanceClassifierCompute,
)

__all__ = ["NodeProvenanceClassifierCompute"]
