# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NodeReadinessResolverCompute: operational readiness verdict.

It is a COMPUTE node: pure, deterministic, zero I/O beyond reading the
global kill switch from the environment when the input leaves it unset.

Runs the mailbox health, deliverability, throughput and kill switch
checks and aggregates them into READY or NOT_READY.
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_resolver import (
    handle_readiness_resolution,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_input import (
    ModelReadinessInput,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_resolution import (
    ModelReadinessResolution,
)


class NodeReadinessResolverCompute(
    NodeCompute[ModelReadinessInput, ModelReadinessResolution]
):
    """Pure COMPUTE node for readiness resolution.

    This node is a thin declarative shell delegating to
    handle_readiness_resolution.
    """

    async def compute(self, input_data: ModelReadinessInput) -> ModelReadinessResolution:
        """Resolve readiness for the input snapshots."""
        return handle_readiness_resolution(input_data)


__all__ = ["NodeReadinessResolverCompute"]
