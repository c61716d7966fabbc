# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Primary action selection - one descriptor per governance state.

Only a DRAFT can offer an enabled action, and only when the caller may
submit. Every other state is observe-only: approval and execution happen
in the execution authority and are observed on the next evaluation.
"""

from __future__ import annotations

import logging

from omnigovernance.enums import EnumGovernanceState, EnumPrimaryAction
from omnigovernance.nodes.node_governance_state_mapper_compute.handlers.handler_governance_state import (
    coerce_governance_state,
)
from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action import (
    ModelPrimaryAction,
)
from omnigovernance.nodes.node_primary_action_selector_compute.models.model_primary_action_input import (
    ModelPrimaryActionInput,
)

logger = logging.getLogger(__name__)

SUBMIT_ACTION = ModelPrimaryAction(
    label="Submit for Approval",
    action=EnumPrimaryAction.SUBMIT_FOR_APPROVAL,
    disabled=False,
    explanation=(
        "Submit this campaign for governance review before execution can be scheduled."
    ),
)

NOT_READY_TO_SUBMIT_ACTION = ModelPrimaryAction(
    label="Not Ready to Submit",
    action=None,
    disabled=True,
    explanation="Complete required fields before submitting for approval.",
)

OBSERVE_ONLY_ACTIONS: dict[EnumGovernanceState, ModelPrimaryAction] = {
    EnumGovernanceState.PENDING_APPROVAL: ModelPrimaryAction(
        label="Pending Approval",
        action=EnumPrimaryAction.PENDING,
        disabled=True,
        explanation=(
            "This campaign is awaiting governance approval. "
            "Execution cannot be initiated from this UI."
        ),
    ),
    EnumGovernanceState.APPROVED_READY: ModelPrimaryAction(
        label="Approved (Execution Observed)",
        action=EnumPrimaryAction.APPROVED_OBSERVED,
        disabled=True,
        explanation=(
            "This campaign is approved. Execution is managed by backend "
            "systems and observed in this UI."
        ),
    ),
    EnumGovernanceState.BLOCKED: ModelPrimaryAction(
        label="Blocked",
        action=EnumPrimaryAction.BLOCKED,
        disabled=True,
        explanation=(
            "This campaign is blocked due to unresolved governance or readiness issues."
        ),
    ),
    EnumGovernanceState.EXECUTED: ModelPrimaryAction(
        label="Executed (Read-Only)",
        action=EnumPrimaryAction.READ_ONLY,
        disabled=True,
        explanation=(
            "This campaign has been executed. View run history for observability data."
        ),
    ),
}


def select_primary_action(
    state: EnumGovernanceState | str | None,
    can_submit: bool = False,
    can_approve: bool = False,
) -> ModelPrimaryAction:
    """Select the primary action descriptor for a governance state.

    Args:
        state: Governance state or its string value. Unrecognized values
            are treated as BLOCKED.
        can_submit: Caller capability to submit a draft.
        can_approve: Ignored. Approval is never initiated from here.

    Returns:
        The action descriptor. Disabled for every state except a DRAFT
        the caller may submit.
    """
    resolved = coerce_governance_state(state)
    if resolved is EnumGovernanceState.DRAFT:
        return SUBMIT_ACTION if can_submit is True else NOT_READY_TO_SUBMIT_ACTION
    action = OBSERVE_ONLY_ACTIONS[resolved]
    logger.debug(
        "Primary action for %s is %s (can_approve=%s ignored)",
        resolved.value,
        action.action.value if action.action is not None else None,
        can_approve,
    )
    return action


def handle_primary_action_selection(
    input_data: ModelPrimaryActionInput,
) -> ModelPrimaryAction:
    return select_primary_action(
        input_data.state,
        can_submit=input_data.can_submit,
        can_approve=input_data.can_approve,
    )


__all__ = [
    "NOT_READY_TO_SUBMIT_ACTION",
    "OBSERVE_ONLY_ACTIONS",
    "SUBMIT_ACTION",
    "handle_primary_action_selection",
    "select_primary_action",
]
