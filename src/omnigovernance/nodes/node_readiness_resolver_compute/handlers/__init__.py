# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for ReadinessResolverCompute node."""

from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_checks import (
    check_deliverability,
    check_kill_switch,
    check_mailbox_health,
    check_throughput,
)
from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_level import (
    compute_readiness_level,
)
from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_presentation import (
    CHECK_LABELS,
    READINESS_STATE_LABELS,
    READINESS_STATE_STYLES,
    get_check_label,
    get_check_result_style,
    get_readiness_state_label,
    get_readiness_state_style,
)
from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_resolver import (
    collect_blocking_reasons,
    collect_missing_fields,
    handle_readiness_resolution,
    resolve_readiness,
)

__all__ = [
    "CHECK_LABELS",
    "READINESS_STATE_LABELS",
    "READINESS_STATE_STYLES",
    "check_deliverability",
    "check_kill_switch",
    "check_mailbox_health",
    "check_throughput",
    "collect_blocking_reasons",
    "collect_missing_fields",
    "compute_readiness_level",
    "get_check_label",
    "get_check_result_style",
    "get_readiness_state_label",
    "get_readiness_state_style",
    "handle_readiness_resolution",
    "resolve_readiness",
]
