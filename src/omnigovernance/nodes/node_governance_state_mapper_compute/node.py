# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NodeGovernanceStateMapperCompute: legacy status to governance state.

It is a COMPUTE node: pure, deterministic, zero I/O.

Maps the execution authority's raw lifecycle status (plus its runnable
flag) into one of five canonical governance states, failing safe to
BLOCKED for anything unrecognized.
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omnigovernance.nodes.node_governance_state_mapper_compute.handlers.handler_governance_state import (
    handle_governance_state_mapping,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_input import (
    ModelGovernanceStateInput,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_output import (
    ModelGovernanceStateOutput,
)


class NodeGovernanceStateMapperCompute(
    NodeCompute[ModelGovernanceStateInput, ModelGovernanceStateOutput]
):
    """Pure COMPUTE node for governance state mapping.

    This node is a thin declarative shell delegating to
    handle_governance_state_mapping.
    """

    async def compute(
        self, input_data: ModelGovernanceStateInput
    ) -> ModelGovernanceStateOutput:
        """Map the input status to its governance state."""
        return handle_governance_state_mapping(input_data)


__all__ = ["NodeGovernanceStateMapperCompute"]
