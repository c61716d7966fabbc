# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Aggregate readiness resolution."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.enums import EnumReadinessState
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_check_result import (
    ModelReadinessCheckResult,
)


class ModelReadinessResolution(BaseModel):
    """READY or NOT_READY, with the per-check results behind the verdict.

    Invariants:
        - ``checks`` always holds exactly four results, in the order
          mailbox_health, deliverability, throughput, kill_switch.
        - ``state`` is READY iff every check passed.
        - ``has_incomplete_data`` is True iff ``missing_fields`` is non-empty.
    """

    model_config = ConfigDict(frozen=True)

    state: EnumReadinessState = Field(description="Overall readiness verdict.")
    checks: tuple[ModelReadinessCheckResult, ...] = Field(
        description="The four check results in fixed order."
    )
    blocking_reasons: tuple[str, ...] = Field(
        default=(),
        description="Failed check messages, then humanized backend reason codes, de-duplicated.",
    )
    summary: str = Field(description="One-line summary of the verdict.")
    resolved_at: datetime = Field(description="UTC timestamp of the resolution.")
    has_incomplete_data: bool = Field(
        description="Whether any evaluated input was missing."
    )
    missing_fields: tuple[str, ...] = Field(
        default=(),
        description="Identifiers of the inputs that were missing.",
    )

    @property
    def is_ready(self) -> bool:
        return self.state is EnumReadinessState.READY

    @property
    def failed_checks(self) -> tuple[ModelReadinessCheckResult, ...]:
        return tuple(check for check in self.checks if not check.passed)


__all__ = ["ModelReadinessResolution"]
