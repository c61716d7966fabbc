# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation metadata carried by a metric."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from omnigovernance.enums import EnumMetricConfidence, EnumProvenanceType


class ModelMetricMetadata(BaseModel):
    """Confidence evidence attached to a metric value."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    confidence: EnumMetricConfidence | str | None = Field(
        default=None,
        description="Explicit confidence, matched case-insensitively.",
    )
    validation_status: str | None = Field(
        default=None,
        description="validated, pending or failed.",
    )
    provenance: EnumProvenanceType | str | None = Field(
        default=None,
        description="Provenance of the metric's source data.",
    )
    is_validated: StrictBool | None = Field(
        default=None,
        description="Explicit validation flag.",
    )


__all__ = ["ModelMetricMetadata"]
