# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Provenance metadata carried by an inbound record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from omnigovernance.enums import EnumProvenanceType


class ModelProvenanceRecord(BaseModel):
    """Origin metadata of an arbitrary data record.

    Only the fields used for classification are read; anything else on the
    record is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    provenance: EnumProvenanceType | str | None = Field(
        default=None,
        description="Explicit provenance. Trusted as-is when it is a known value.",
    )
    is_canonical: StrictBool | None = Field(
        default=None,
        description="Explicit canonical flag.",
    )
    source_system: str | None = Field(
        default=None,
        description="Name of the system the record came from.",
    )
    observed_via: str | None = Field(
        default=None,
        description="Channel the record was observed through, if legacy.",
    )


__all__ = ["ModelProvenanceRecord"]
