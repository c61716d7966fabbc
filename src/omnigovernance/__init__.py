# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniGovernance - ONEX governance and readiness evaluation nodes.

Deterministic, side-effect-free evaluation of whether a campaign may be
acted upon: governance state mapping, operational readiness resolution,
provenance/confidence classification and primary action selection.

Quick Start - Readiness:
    >>> from omnigovernance import resolve_readiness
    >>> resolution = resolve_readiness(
    ...     {"mailbox_healthy": True, "deliverability_score": 98, "kill_switch_enabled": False},
    ...     {"daily_limit": 100, "current_daily_usage": 25, "is_blocked": False},
    ...     global_kill_switch_active=False,
    ... )
    >>> resolution.state.value
    'READY'
"""

from omnigovernance.nodes.node_governance_state_mapper_compute.handlers import (
    coerce_governance_state,
    get_governance_state_label,
    get_governance_state_style,
    map_governance_state,
)
from omnigovernance.nodes.node_primary_action_selector_compute.handlers import (
    select_primary_action,
)
from omnigovernance.nodes.node_provenance_classifier_compute.handlers import (
    classify_record,
    derive_confidence,
    derive_provenance,
    is_qualified_lead,
    is_valid_lead_email,
)
from omnigovernance.nodes.node_readiness_resolver_compute.handlers import (
    compute_readiness_level,
    resolve_readiness,
)
from omnigovernance.runtime import (
    RuntimeGatingSettings,
    can_runtime_execute,
    guard_runtime_action,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "RuntimeGatingSettings",
    # Main API
    "can_runtime_execute",
    "classify_record",
    "coerce_governance_state",
    "compute_readiness_level",
    "derive_confidence",
    "derive_provenance",
    "get_governance_state_label",
    "get_governance_state_style",
    "guard_runtime_action",
    "is_qualified_lead",
    "is_valid_lead_email",
    "map_governance_state",
    "resolve_readiness",
    "select_primary_action",
]
