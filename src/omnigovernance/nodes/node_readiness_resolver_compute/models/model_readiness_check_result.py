# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result of a single readiness check."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.enums import EnumCheckSeverity, EnumReadinessCheck


class ModelReadinessCheckResult(BaseModel):
    """Outcome of one of the four readiness checks."""

    model_config = ConfigDict(frozen=True)

    check: EnumReadinessCheck = Field(description="Which check produced this result.")
    passed: bool = Field(description="Whether the check passed.")
    status: str = Field(description="Short status text, e.g. Healthy or 98%.")
    message: str = Field(description="Full human-readable explanation.")
    severity: EnumCheckSeverity | None = Field(
        default=None,
        description="Set on failures, on passing warnings, and on informational passes.",
    )
    value: bool | int | float | str | None = Field(
        default=None,
        description="Observed value, e.g. the score or a used/limit pair.",
    )
    threshold: int | float | str | None = Field(
        default=None,
        description="Threshold the value was compared against.",
    )


__all__ = ["ModelReadinessCheckResult"]
