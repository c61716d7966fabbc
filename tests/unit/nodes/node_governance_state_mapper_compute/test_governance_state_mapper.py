# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the governance state mapper compute node.

Tests cover:
    - Every legacy status mapping
    - The runnable flag on RUNNABLE
    - Fail-safe BLOCKED for unknown, None, non-string and case-variant input
    - Governance state parsing, including the EXECUTED_READ_ONLY alias
    - Labels and styles
    - Node shell delegation
"""

from __future__ import annotations

import pytest
from omnibase_core.models.container.model_onex_container import ModelONEXContainer
from pydantic import ValidationError

from omnigovernance.enums import EnumGovernanceState, EnumLegacyStatus
from omnigovernance.nodes.node_governance_state_mapper_compute.handlers import (
    GOVERNANCE_STATE_STYLES,
    coerce_governance_state,
    get_governance_state_label,
    get_governance_state_style,
    handle_governance_state_mapping,
    map_governance_state,
    parse_legacy_status,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.models import (
    ModelGovernanceStateInput,
)
from omnigovernance.nodes.node_governance_state_mapper_compute.node import (
    NodeGovernanceStateMapperCompute,
)

# ---------------------------------------------------------------------------
# Legacy status mapping
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.governance
class TestMapGovernanceState:
    """Mapping of each legacy status."""

    def test_draft_maps_to_draft(self) -> None:
        assert map_governance_state("DRAFT") is EnumGovernanceState.DRAFT

    def test_pending_review_maps_to_pending_approval(self) -> None:
        assert (
            map_governance_state("PENDING_REVIEW")
            is EnumGovernanceState.PENDING_APPROVAL
        )

    def test_runnable_with_flag_is_approved_ready(self) -> None:
        assert (
            map_governance_state("RUNNABLE", is_runnable=True)
            is EnumGovernanceState.APPROVED_READY
        )

    def test_runnable_without_flag_is_blocked(self) -> None:
        assert map_governance_state("RUNNABLE") is EnumGovernanceState.BLOCKED
        assert (
            map_governance_state("RUNNABLE", is_runnable=False)
            is EnumGovernanceState.BLOCKED
        )

    @pytest.mark.parametrize("status", ["RUNNING", "COMPLETED", "FAILED", "ARCHIVED"])
    def test_terminal_statuses_are_executed(self, status: str) -> None:
        assert map_governance_state(status) is EnumGovernanceState.EXECUTED

    def test_accepts_enum_members(self) -> None:
        assert (
            map_governance_state(EnumLegacyStatus.PENDING_REVIEW)
            is EnumGovernanceState.PENDING_APPROVAL
        )

    @pytest.mark.parametrize("status", ["DRAFT", "PENDING_REVIEW", "RUNNING"])
    def test_runnable_flag_ignored_for_other_statuses(self, status: str) -> None:
        assert map_governance_state(status, True) is map_governance_state(status, False)


@pytest.mark.unit
@pytest.mark.governance
class TestFailSafeMapping:
    """Anything unrecognized maps to BLOCKED."""

    @pytest.mark.parametrize(
        "status",
        ["", "UNKNOWN", "draft", "Draft", " DRAFT", "APPROVED", "EXECUTED"],
    )
    def test_unrecognized_strings_are_blocked(self, status: str) -> None:
        assert map_governance_state(status) is EnumGovernanceState.BLOCKED

    def test_none_is_blocked(self) -> None:
        assert map_governance_state(None) is EnumGovernanceState.BLOCKED

    @pytest.mark.parametrize("status", [0, 1.5, ["DRAFT"], {"status": "DRAFT"}])
    def test_non_string_is_blocked(self, status: object) -> None:
        assert map_governance_state(status) is EnumGovernanceState.BLOCKED  # type: ignore[arg-type]

    def test_unknown_status_with_runnable_flag_is_blocked(self) -> None:
        assert map_governance_state("SCHEDULED", True) is EnumGovernanceState.BLOCKED

    def test_truthy_non_bool_runnable_flag_is_not_runnable(self) -> None:
        assert map_governance_state("RUNNABLE", "yes") is EnumGovernanceState.BLOCKED  # type: ignore[arg-type]

    def test_parse_legacy_status_is_exact(self) -> None:
        assert parse_legacy_status("RUNNING") is EnumLegacyStatus.RUNNING
        assert parse_legacy_status("running") is None
        assert parse_legacy_status(None) is None


# ---------------------------------------------------------------------------
# Governance state parsing
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.governance
class TestCoerceGovernanceState:
    """Parsing governance states from enum members and text."""

    @pytest.mark.parametrize("state", list(EnumGovernanceState))
    def test_round_trips_every_value(self, state: EnumGovernanceState) -> None:
        assert coerce_governance_state(state.value) is state
        assert coerce_governance_state(state) is state

    def test_executed_read_only_alias(self) -> None:
        assert (
            coerce_governance_state("EXECUTED_READ_ONLY")
            is EnumGovernanceState.EXECUTED
        )

    @pytest.mark.parametrize("value", [None, "", "approved_ready", "RUNNING", 7])
    def test_unknown_values_are_blocked(self, value: object) -> None:
        assert coerce_governance_state(value) is EnumGovernanceState.BLOCKED


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.governance
class TestStatePresentation:
    """Labels and styles for governance states."""

    def test_labels(self) -> None:
        assert get_governance_state_label(EnumGovernanceState.DRAFT) == "Draft"
        assert (
            get_governance_state_label(EnumGovernanceState.PENDING_APPROVAL)
            == "Pending Approval"
        )
        assert (
            get_governance_state_label(EnumGovernanceState.APPROVED_READY)
            == "Approved (Execution Observed)"
        )
        assert get_governance_state_label(EnumGovernanceState.BLOCKED) == "Blocked"
        assert (
            get_governance_state_label(EnumGovernanceState.EXECUTED)
            == "Executed (Read-Only)"
        )

    def test_every_state_has_a_style(self) -> None:
        assert set(GOVERNANCE_STATE_STYLES) == set(EnumGovernanceState)

    def test_blocked_style_colours(self) -> None:
        style = get_governance_state_style(EnumGovernanceState.BLOCKED)
        assert (style.bg, style.text, style.border) == ("#FEE2E2", "#991B1B", "#FECACA")

    def test_unknown_style_falls_back_to_blocked(self) -> None:
        assert get_governance_state_style("NOT_A_STATE") == get_governance_state_style(
            EnumGovernanceState.BLOCKED
        )


# ---------------------------------------------------------------------------
# Handler and node
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.governance
class TestGovernanceStateHandler:
    """Node input/output models and handler."""

    def test_handler_bundles_label_and_style(self) -> None:
        output = handle_governance_state_mapping(
            ModelGovernanceStateInput(status="RUNNABLE", is_runnable=True)
        )
        assert output.legacy_status == "RUNNABLE"
        assert output.governance_state is EnumGovernanceState.APPROVED_READY
        assert output.label == "Approved (Execution Observed)"
        assert output.style.bg == "#D1FAE5"
        assert output.is_read_only is False

    def test_executed_output_is_read_only(self) -> None:
        output = handle_governance_state_mapping(
            ModelGovernanceStateInput(status="ARCHIVED")
        )
        assert output.is_read_only is True

    def test_missing_status_is_blocked(self) -> None:
        output = handle_governance_state_mapping(ModelGovernanceStateInput())
        assert output.governance_state is EnumGovernanceState.BLOCKED

    def test_output_is_frozen(self) -> None:
        output = handle_governance_state_mapping(
            ModelGovernanceStateInput(status="DRAFT")
        )
        with pytest.raises(ValidationError):
            output.label = "changed"  # type: ignore[misc]

    @pytest.mark.asyncio
    async def test_node_compute_delegates_to_handler(self) -> None:
        container = ModelONEXContainer()
        node = NodeGovernanceStateMapperCompute(container)
        output = await node.compute(ModelGovernanceStateInput(status="PENDING_REVIEW"))
        assert output.governance_state is EnumGovernanceState.PENDING_APPROVAL
