# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Governance state mapping - pure functions, no I/O.

Mapping rules (total order, first match wins):

  1. DRAFT                                  -> DRAFT
  2. PENDING_REVIEW                         -> PENDING_APPROVAL
  3. RUNNABLE                               -> APPROVED_READY if is_runnable
                                               else BLOCKED
  4. RUNNING / COMPLETED / FAILED / ARCHIVED -> EXECUTED
  5. anything else                          -> BLOCKED

The function is total over every input, not just the seven legacy values.
Unknown input never maps to a permissive state. Status matching is exact:
``"draft"`` is not ``DRAFT``.

Blocking reasons do not participate. Readiness is an orthogonal concern
resolved by the readiness resolver.
"""

from __future__ import annotations

import logging

from omnigovernance.enums import (
    TERMINAL_LEGACY_STATUSES,
    EnumGovernanceState,
    EnumLegacyStatus,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.handlers.handler_state_presentation import (
    get_governance_state_label,
    get_governance_state_style,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_input import (
    ModelGovernanceStateInput,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models.model_governance_state_output import (
    ModelGovernanceStateOutput,
)

logger = logging.getLogger(__name__)

_LEGACY_BY_VALUE: dict[str, EnumLegacyStatus] = {
    member.value: member for member in EnumLegacyStatus
}

_GOVERNANCE_BY_VALUE: dict[str, EnumGovernanceState] = {
    member.value: member for member in EnumGovernanceState
}
# Older payloads spell the terminal state out in full.
_GOVERNANCE_BY_VALUE["EXECUTED_READ_ONLY"] = EnumGovernanceState.EXECUTED


def parse_legacy_status(status: object) -> EnumLegacyStatus | None:
    """Return the legacy status for an exact value match, else None."""
    if isinstance(status, EnumLegacyStatus):
        return status
    if not isinstance(status, str):
        return None
    return _LEGACY_BY_VALUE.get(status)


def map_governance_state(
    status: EnumLegacyStatus | str | None,
    is_runnable: bool = False,
) -> EnumGovernanceState:
    """Map a legacy lifecycle status to a canonical governance state.

    Args:
        status: Raw status from the execution authority. Any value is
            accepted; unrecognized values map to BLOCKED.
        is_runnable: Backend runnable flag. Only ``True`` itself counts.

    Returns:
        One of the five canonical governance states.
    """
    legacy = parse_legacy_status(status)

    if legacy is None:
        logger.debug("Unrecognized legacy status %r mapped to BLOCKED", status)
        return EnumGovernanceState.BLOCKED
    if legacy is EnumLegacyStatus.DRAFT:
        return EnumGovernanceState.DRAFT
    if legacy is EnumLegacyStatus.PENDING_REVIEW:
        return EnumGovernanceState.PENDING_APPROVAL
    if legacy is EnumLegacyStatus.RUNNABLE:
        if is_runnable is True:
            return EnumGovernanceState.APPROVED_READY
        return EnumGovernanceState.BLOCKED
    if legacy in TERMINAL_LEGACY_STATUSES:
        return EnumGovernanceState.EXECUTED

    # Unreachable while every legacy status is covered above.
    return EnumGovernanceState.BLOCKED


def coerce_governance_state(value: object) -> EnumGovernanceState:
    """Parse a governance state from an enum member or its string value.

    Accepts ``EXECUTED_READ_ONLY`` as an alias of EXECUTED. Anything else
    unrecognized resolves to BLOCKED.
    """
    if isinstance(value, EnumGovernanceState):
        return value
    if isinstance(value, str):
        state = _GOVERNANCE_BY_VALUE.get(value)
        if state is not None:
            return state
    logger.debug("Unrecognized governance state %r coerced to BLOCKED", value)
    return EnumGovernanceState.BLOCKED


def handle_governance_state_mapping(
    input_data: ModelGovernanceStateInput,
) -> ModelGovernanceStateOutput:
    """Map the input status and attach presentation attributes."""
    state = map_governance_state(input_data.status, input_data.is_runnable)
    return ModelGovernanceStateOutput(
        legacy_status=input_data.status,
        governance_state=state,
        label=get_governance_state_label(state),
        style=get_governance_state_style(state),
    )


__all__ = [
    "coerce_governance_state",
    "handle_governance_state_mapping",
    "map_governance_state",
    "parse_legacy_status",
]
