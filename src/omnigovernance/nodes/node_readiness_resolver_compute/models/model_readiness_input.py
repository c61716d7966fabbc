# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for ReadinessResolverCompute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_status import (
    ModelReadinessStatus,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_thresholds import (
    ModelReadinessThresholds,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_throughput_config import (
    ModelThroughputConfig,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload


class ModelReadinessInput(BaseModel):
    """Readiness and throughput snapshots to resolve.

    Raw mappings are accepted for ``readiness`` and ``throughput``. Fields
    that fail validation are dropped rather than rejected, so construction
    never fails on a malformed backend payload.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    readiness: ModelReadinessStatus | None = Field(
        default=None,
        description="Backend readiness snapshot, if available.",
    )
    throughput: ModelThroughputConfig | None = Field(
        default=None,
        description="Backend throughput configuration, if available.",
    )
    global_kill_switch_active: bool | None = Field(
        default=None,
        description="Global kill switch. None reads it from the environment.",
    )
    thresholds: ModelReadinessThresholds = Field(
        default_factory=ModelReadinessThresholds,
        description="Check thresholds.",
    )

    @field_validator("readiness", mode="before")
    @classmethod
    def _coerce_readiness(cls, value: object) -> ModelReadinessStatus | None:
        return coerce_payload(ModelReadinessStatus, value)

    @field_validator("throughput", mode="before")
    @classmethod
    def _coerce_throughput(cls, value: object) -> ModelThroughputConfig | None:
        return coerce_payload(ModelThroughputConfig, value)


__all__ = ["ModelReadinessInput"]
