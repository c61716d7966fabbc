# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for PrimaryActionSelectorCompute node."""

from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action import (
    ModelPrimaryAction,
)
from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action_input import (
    ModelPrimaryActionInput,
)

__all__ = ["ModelPrimaryAction", "ModelPrimaryActionInput"]
