# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for PrimaryActionSelectorCompute node."""

from omnigovernance.nodes.node_primary_action_selector_compute.handlers.handler_primary_action import (
    NOT_READY_TO_SUBMIT_ACTION,
    OBSERVE_ONLY_ACTIONS,
    SUBMIT_ACTION,
    handle_primary_action_selection,
    select_primary_action,
)

__all__ = [
    "NOT_READY_TO_SUBMIT_ACTION",
    "OBSERVE_ONLY_ACTIONS",
    "SUBMIT_ACTION",
    "handle_primary_action_selection",
    "select_primary_action",
]
