# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for GovernanceStateMapperCompute node."""

from omnigovernance.nodes.node_governance_state_mapper_compute.handlers.handler_governance_state import (
    coerce_governance_state,
    handle_governance_state_mapping,
    map_governance_state,
    parse_legacy_status,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.handlers.handler_state_presentation import (
    GOVERNANCE_STATE_LABELS,
    GOVERNANCE_STATE_STYLES,
    get_governance_state_label,
    get_governance_state_style,
)

__all__ = [
    "GOVERNANCE_STATE_LABELS",
    "GOVERNANCE_STATE_STYLES",
    "coerce_governance_state",
    "get_governance_state_label",
    "get_governance_state_style",
    "handle_governance_state_mapping",
    "map_governance_state",
    "parse_legacy_status",
]
