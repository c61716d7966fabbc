# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for PrimaryActionSelectorCompute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelPrimaryActionInput(BaseModel):
    """Governance state plus caller capabilities."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    state: str | None = Field(
        default=None,
        description="Governance state value. Unrecognized values are treated as BLOCKED.",
    )
    can_submit: bool = Field(
        default=False,
        description="Whether the caller may submit a draft for approval.",
    )
    can_approve: bool = Field(
        default=False,
        description="Accepted for interface parity; approval is never offered.",
    )


__all__ = ["ModelPrimaryActionInput"]
