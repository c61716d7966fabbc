# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for ProvenanceClassifierCompute node."""

from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_confidence import (
    CONFIDENCE_RULES,
    derive_confidence,
    evaluate_confidence,
    explain_confidence,
    parse_confidence,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_lead_qualification import (
    FILLER_EMAIL_PATTERNS,
    QUALIFIED_STATES,
    is_qualified_lead,
    is_valid_lead_email,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_provenance import (
    PROVENANCE_RULES,
    derive_provenance,
    evaluate_provenance,
    explain_provenance,
    parse_provenance,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_record_classification import (
    classify_record,
    handle_record_classification,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers.handler_trust_presentation import (
    CONFIDENCE_LABELS,
    CONFIDENCE_STYLES,
    PROVENANCE_LABELS,
    PROVENANCE_STYLES,
    get_confidence_label,
    get_confidence_style,
    get_provenance_label,
    get_provenance_style,
)

__all__ = [
    "CONFIDENCE_LABELS",
    "CONFIDENCE_RULES",
    "CONFIDENCE_STYLES",
    "FILLER_EMAIL_PATTERNS",
    "PROVENANCE_LABELS",
    "PROVENANCE_RULES",
    "PROVENANCE_STYLES",
    "QUALIFIED_STATES",
    "classify_record",
    "derive_confidence",
    "derive_provenance",
    "evaluate_confidence",
    "evaluate_provenance",
    "explain_confidence",
    "explain_provenance",
    "get_confidence_label",
    "get_confidence_style",
    "get_provenance_label",
    "get_provenance_style",
    "handle_record_classification",
    "is_qualified_lead",
    "is_valid_lead_email",
    "parse_confidence",
    "parse_provenance",
]
