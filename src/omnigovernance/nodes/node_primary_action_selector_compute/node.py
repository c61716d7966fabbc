# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NodePrimaryActionSelectorCompute: governance state to UI action.

It is a COMPUTE node: pure, deterministic, zero I/O. It reports what a UI
may request; it never performs a transition.
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omnigovernance.nodes.node_primary_action_selector_compute.handlers.handler_primary_action import (
    handle_primary_action_selection,
)
from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action import (
    ModelPrimaryAction,
)
from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action_input import (
    ModelPrimaryActionInput,
)


class NodePrimaryActionSelectorCompute(
    NodeCompute[ModelPrimaryActionInput, ModelPrimaryAction]
):
    """Pure COMPUTE node for primary action selection.

    This node is a thin declarative shell delegating to
    handle_primary_action_selection.
    """

    async def compute(self, input_data: ModelPrimaryActionInput) -> ModelPrimaryAction:
        """Select the primary action for the input state."""
        return handle_primary_action_selection(input_data)


__all__ = ["NodePrimaryActionSelectorCompute"]
