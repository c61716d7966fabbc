# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Static label and style tables for governance states."""

from __future__ import annotations

from omnigovernance.enums import EnumGovernanceState
from omnigovernance.models import ModelStyleDescriptor

GOVERNANCE_STATE_LABELS: dict[EnumGovernanceState, str] = {
    EnumGovernanceState.DRAFT: "Draft",
    EnumGovernanceState.PENDING_APPROVAL: "Pending Approval",
    EnumGovernanceState.APPROVED_READY: "Approved (Execution Observed)",
    EnumGovernanceState.BLOCKED: "Blocked",
    EnumGovernanceState.EXECUTED: "Executed (Read-Only)",
}

GOVERNANCE_STATE_STYLES: dict[EnumGovernanceState, ModelStyleDescriptor] = {
    EnumGovernanceState.DRAFT: ModelStyleDescriptor(
        bg="#FEF3C7", text="#92400E", border="#FCD34D"
    ),
    EnumGovernanceState.PENDING_APPROVAL: ModelStyleDescriptor(
        bg="#DBEAFE", text="#1E40AF", border="#93C5FD"
    ),
    EnumGovernanceState.APPROVED_READY: ModelStyleDescriptor(
        bg="#D1FAE5", text="#065F46", border="#6EE7B7"
    ),
    EnumGovernanceState.BLOCKED: ModelStyleDescriptor(
        bg="#FEE2E2", text="#991B1B", border="#FECACA"
    ),
    EnumGovernanceState.EXECUTED: ModelStyleDescriptor(
        bg="#F3F4F6", text="#4B5563", border="#D1D5DB"
    ),
}


def get_governance_state_label(state: EnumGovernanceState) -> str:
    """Human-readable label for a governance state."""
    return GOVERNANCE_STATE_LABELS.get(state, str(state))


def get_governance_state_style(state: EnumGovernanceState) -> ModelStyleDescriptor:
    """Badge style for a governance state. Falls back to the BLOCKED style."""
    return GOVERNANCE_STATE_STYLES.get(
        state, GOVERNANCE_STATE_STYLES[EnumGovernanceState.BLOCKED]
    )


__all__ = [
    "GOVERNANCE_STATE_LABELS",
    "GOVERNANCE_STATE_STYLES",
    "get_governance_state_label",
    "get_governance_state_style",
]
