# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Threshold configuration for readiness resolution."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelReadinessThresholds(BaseModel):
    """Numeric thresholds used by the deliverability and throughput checks.

    Attributes:
        deliverability_minimum: Minimum passing deliverability score.
        throughput_warning_percent: Usage percentage at which throughput is
            reported as limited (still passing, with a warning).
        throughput_blocking_percent: Usage percentage at which throughput
            is exhausted and the check fails.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    deliverability_minimum: float = Field(default=95.0, ge=0.0, le=100.0)
    throughput_warning_percent: float = Field(default=80.0, ge=0.0)
    throughput_blocking_percent: float = Field(default=100.0, ge=0.0)

    @model_validator(mode="after")
    def _check_throughput_order(self) -> ModelReadinessThresholds:
        if self.throughput_warning_percent > self.throughput_blocking_percent:
            raise ValueError(
                "throughput_warning_percent must not exceed throughput_blocking_percent"
            )
        return self


DEFAULT_READINESS_THRESHOLDS = ModelReadinessThresholds()


__all__ = ["DEFAULT_READINESS_THRESHOLDS", "ModelReadinessThresholds"]
