# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Static labels and badge styles for provenance and confidence."""

from __future__ import annotations

from omnigovernance.enums import EnumMetricConfidence, EnumProvenanceType
from omnigovernance.models import ModelStyleDescriptor

PROVENANCE_LABELS: dict[EnumProvenanceType, str] = {
    EnumProvenanceType.CANONICAL: "Canonical",
    EnumProvenanceType.LEGACY_OBSERVED: "Legacy (Observed)",
}

PROVENANCE_STYLES: dict[EnumProvenanceType, ModelStyleDescriptor] = {
    EnumProvenanceType.CANONICAL: ModelStyleDescriptor(
        bg="#DBEAFE", text="#1E40AF", border="#93C5FD"
    ),
    EnumProvenanceType.LEGACY_OBSERVED: ModelStyleDescriptor(
        bg="#FEF3C7", text="#92400E", border="#FCD34D"
    ),
}

CONFIDENCE_LABELS: dict[EnumMetricConfidence, str] = {
    EnumMetricConfidence.SAFE: "Safe",
    EnumMetricConfidence.CONDITIONAL: "Conditional",
    EnumMetricConfidence.BLOCKED: "Blocked",
}

CONFIDENCE_STYLES: dict[EnumMetricConfidence, ModelStyleDescriptor] = {
    EnumMetricConfidence.SAFE: ModelStyleDescriptor(
        bg="#D1FAE5", text="#065F46", border="#6EE7B7"
    ),
    EnumMetricConfidence.CONDITIONAL: ModelStyleDescriptor(
        bg="#FEF3C7", text="#92400E", border="#FCD34D"
    ),
    EnumMetricConfidence.BLOCKED: ModelStyleDescriptor(
        bg="#F3F4F6", text="#9CA3AF", border="#D1D5DB", muted=True
    ),
}


def _provenance_or_legacy(value: object) -> EnumProvenanceType:
    try:
        return EnumProvenanceType(value)
    except ValueError:
        return EnumProvenanceType.LEGACY_OBSERVED


def _confidence_or_blocked(value: object) -> EnumMetricConfidence:
    try:
        return EnumMetricConfidence(value)
    except ValueError:
        return EnumMetricConfidence.BLOCKED


def get_provenance_label(provenance: EnumProvenanceType | str) -> str:
    return PROVENANCE_LABELS[_provenance_or_legacy(provenance)]


def get_provenance_style(provenance: EnumProvenanceType | str) -> ModelStyleDescriptor:
    """Pill style for a provenance. Unknown values render as legacy."""
    return PROVENANCE_STYLES[_provenance_or_legacy(provenance)]


def get_confidence_label(confidence: EnumMetricConfidence | str) -> str:
    return CONFIDENCE_LABELS[_confidence_or_blocked(confidence)]


def get_confidence_style(confidence: EnumMetricConfidence | str) -> ModelStyleDescriptor:
    """Badge style for a confidence. Unknown values render as BLOCKED."""
    return CONFIDENCE_STYLES[_confidence_or_blocked(confidence)]


__all__ = [
    "CONFIDENCE_LABELS",
    "CONFIDENCE_STYLES",
    "PROVENANCE_LABELS",
    "PROVENANCE_STYLES",
    "get_confidence_label",
    "get_confidence_style",
    "get_provenance_label",
    "get_provenance_style",
]
