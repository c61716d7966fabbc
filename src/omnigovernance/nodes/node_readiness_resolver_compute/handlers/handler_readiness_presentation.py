# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Static presentation lookups for readiness states and check results."""

from __future__ import annotations

from omnigovernance.enums import (
    EnumCheckSeverity,
    EnumReadinessCheck,
    EnumReadinessState,
)
from omnigovernance.models import ModelStyleDescriptor
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_check_result import (
    ModelReadinessCheckResult,
)

READINESS_STATE_LABELS: dict[EnumReadinessState, str] = {
    EnumReadinessState.READY: "Ready",
    EnumReadinessState.NOT_READY: "Not Ready",
}

READINESS_STATE_STYLES: dict[EnumReadinessState, ModelStyleDescriptor] = {
    EnumReadinessState.READY: ModelStyleDescriptor(
        bg="#D1FAE5", text="#065F46", border="#6EE7B7", icon="✓"
    ),
    EnumReadinessState.NOT_READY: ModelStyleDescriptor(
        bg="#FEE2E2", text="#991B1B", border="#FECACA", icon="✕"
    ),
}

CHECK_LABELS: dict[EnumReadinessCheck, str] = {
    EnumReadinessCheck.MAILBOX_HEALTH: "Mailbox Health",
    EnumReadinessCheck.DELIVERABILITY: "Deliverability Score",
    EnumReadinessCheck.THROUGHPUT: "Throughput Capacity",
    EnumReadinessCheck.KILL_SWITCH: "Kill Switch",
}

_PASSED_STYLE = ModelStyleDescriptor(bg="#D1FAE5", text="#065F46", icon="✓")
_WARNING_STYLE = ModelStyleDescriptor(bg="#FEF3C7", text="#92400E", icon="⚠")
_ERROR_STYLE = ModelStyleDescriptor(bg="#FEE2E2", text="#991B1B", icon="✕")
_INFO_STYLE = ModelStyleDescriptor(bg="#EFF6FF", text="#1E40AF", icon="ℹ")


def get_readiness_state_label(state: EnumReadinessState | str) -> str:
    """Display label for a readiness verdict. Unknown values render as NOT_READY."""
    try:
        return READINESS_STATE_LABELS[EnumReadinessState(state)]
    except ValueError:
        return READINESS_STATE_LABELS[EnumReadinessState.NOT_READY]


def get_readiness_state_style(state: EnumReadinessState | str) -> ModelStyleDescriptor:
    """Badge style for a readiness verdict. Unknown values render as NOT_READY."""
    try:
        return READINESS_STATE_STYLES[EnumReadinessState(state)]
    except ValueError:
        return READINESS_STATE_STYLES[EnumReadinessState.NOT_READY]


def get_check_label(check: EnumReadinessCheck | str) -> str:
    """Display label for a check id. Unknown ids are returned unchanged."""
    try:
        return CHECK_LABELS[EnumReadinessCheck(check)]
    except ValueError:
        return str(check)


def get_check_result_style(result: ModelReadinessCheckResult) -> ModelStyleDescriptor:
    """Row style for a check result.

    A passing check is green unless it carries a warning. A failing check
    is red for errors, amber for warnings and blue otherwise.
    """
    if result.passed:
        if result.severity is EnumCheckSeverity.WARNING:
            return _WARNING_STYLE
        return _PASSED_STYLE
    if result.severity is EnumCheckSeverity.ERROR:
        return _ERROR_STYLE
    if result.severity is EnumCheckSeverity.WARNING:
        return _WARNING_STYLE
    return _INFO_STYLE


__all__ = [
    "CHECK_LABELS",
    "READINESS_STATE_LABELS",
    "READINESS_STATE_STYLES",
    "get_check_label",
    "get_check_result_style",
    "get_readiness_state_label",
    "get_readiness_state_style",
]
