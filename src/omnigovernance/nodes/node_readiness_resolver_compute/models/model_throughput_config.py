# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Sending-throughput configuration reported by the execution authority."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ModelThroughputConfig(BaseModel):
    """Daily and hourly sending limits for one campaign.

    ``daily_limit`` and ``current_daily_usage`` drive the throughput check.
    When either is absent or non-finite the configuration is treated as
    unavailable, unless ``is_blocked`` is set. The hourly and mailbox fields are carried
    for display only.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    campaign_id: str | None = Field(default=None, description="Owning campaign.")
    daily_limit: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Maximum sends per day. Non-positive means no capacity.",
    )
    current_daily_usage: float | None = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Sends used today.",
    )
    hourly_limit: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    current_hourly_usage: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    mailbox_limit: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    is_blocked: StrictBool = Field(
        default=False,
        description="Hard block set by the backend regardless of usage.",
    )
    block_reason: str | None = Field(
        default=None,
        description="Reason code for a hard block, e.g. DAILY_LIMIT_EXCEEDED.",
    )

    @property
    def has_daily_usage(self) -> bool:
        """True when both daily figures needed for the usage check are usable."""
        return (
            self.daily_limit is not None
            and self.current_daily_usage is not None
            and math.isfinite(self.daily_limit)
            and math.isfinite(self.current_daily_usage)
        )


__all__ = ["ModelThroughputConfig"]
