# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GovernanceStateMapperCompute node package."""

from omnigovernance.nodes.node_governance_state_mapper_compute.node import (
    NodeGovernanceStateMapperCompute,
)

__all__ = ["NodeGovernanceStateMapperCompute"]
