# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for ProvenanceClassifierCompute."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelClassificationInput(BaseModel):
    """A raw record to classify.

    The record is kept as an untyped mapping. Provenance and confidence
    fields are extracted leniently during classification.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    record: dict[str, Any] | None = Field(
        default=None,
        description="Arbitrary record carrying provenance and validation metadata.",
    )


__all__ = ["ModelClassificationInput"]
