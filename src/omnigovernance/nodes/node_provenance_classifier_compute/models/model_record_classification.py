# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output model for ProvenanceClassifierCompute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.enums import EnumMetricConfidence, EnumProvenanceType


class ModelRecordClassification(BaseModel):
    """Provenance and confidence of one record, with the deciding rules."""

    model_config = ConfigDict(frozen=True)

    provenance: EnumProvenanceType = Field(description="Derived provenance.")
    provenance_rule: str = Field(description="Name of the deciding provenance rule.")
    confidence: EnumMetricConfidence = Field(description="Derived confidence.")
    confidence_rule: str = Field(description="Name of the deciding confidence rule.")


__all__ = ["ModelRecordClassification"]
