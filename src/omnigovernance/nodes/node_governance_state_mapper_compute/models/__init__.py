# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for GovernanceStateMapperCompute node."""

from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_input import (
    ModelGovernanceStateInput,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_output import (
    ModelGovernanceStateOutput,
)

__all__ = ["ModelGovernanceStateInput", "ModelGovernanceStateOutput"]
