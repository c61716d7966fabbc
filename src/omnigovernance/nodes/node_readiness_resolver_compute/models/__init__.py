# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for ReadinessResolverCompute node."""

from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_check_result import (
    ModelReadinessCheckResult,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_input import (
    ModelReadinessInput,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_resolution import (
    ModelReadinessResolution,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_status import (
    ModelReadinessStatus,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_thresholds import (
    DEFAULT_READINESS_THRESHOLDS,
    ModelReadinessThresholds,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_throughput_config import (
    ModelThroughputConfig,
)

__all__ = [
    "DEFAULT_READINESS_THRESHOLDS",
    "ModelReadinessCheckResult",
    "ModelReadinessInput",
    "ModelReadinessResolution",
    "ModelReadinessStatus",
    "ModelReadinessThresholds",
    "ModelThroughputConfig",
]
