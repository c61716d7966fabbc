# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for GovernanceStateMapperCompute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelGovernanceStateInput(BaseModel):
    """Raw lifecycle status snapshot from the execution authority.

    ``status`` is deliberately an unconstrained string: unknown values are
    legal input and map to BLOCKED.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: str | None = Field(
        default=None,
        description="Legacy status string (DRAFT, PENDING_REVIEW, RUNNABLE, ...).",
    )
    is_runnable: bool = Field(
        default=False,
        description="Backend-provided runnable flag. Only consulted for RUNNABLE.",
    )


__all__ = ["ModelGovernanceStateInput"]
