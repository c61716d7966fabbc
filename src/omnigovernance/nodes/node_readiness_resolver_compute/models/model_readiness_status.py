# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Readiness snapshot reported by the execution authority."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ModelReadinessStatus(BaseModel):
    """Readiness snapshot for one campaign.

    Every field is optional. A field that is absent (or was discarded during
    lenient payload coercion) is treated as unknown by the readiness checks.
    Boolean flags are strict: the string ``"true"`` is not a boolean.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    is_ready: StrictBool | None = Field(
        default=None,
        description="Backend's own overall readiness verdict.",
    )
    blocking_reasons: tuple[str, ...] | None = Field(
        default=None,
        description="Machine reason codes, e.g. MISSING_HUMAN_APPROVAL.",
    )
    mailbox_healthy: StrictBool | None = Field(
        default=None,
        description="Whether the sending mailbox is healthy.",
    )
    deliverability_score: float | None = Field(
        default=None,
        ge=0.0,
        le=100.0,
        allow_inf_nan=False,
        description="Deliverability score as a percentage (0-100).",
    )
    kill_switch_enabled: StrictBool | None = Field(
        default=None,
        description="Campaign-level kill switch.",
    )
    last_checked: datetime | None = Field(
        default=None,
        description="When the backend last computed this snapshot.",
    )


__all__ = ["ModelReadinessStatus"]
