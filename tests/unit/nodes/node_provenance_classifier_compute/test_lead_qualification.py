# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for lead email validation and lead qualification."""

from __future__ import annotations

from typing import Any

import pytest

from omnigovernance.nodes.node_provenance_classifier_compute.handlers import (
    is_qualified_lead,
    is_valid_lead_email,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models import (
    ModelLeadRecord,
)


@pytest.mark.unit
@pytest.mark.provenance
class TestIsValidLeadEmail:
    @pytest.mark.parametrize("email", [None, "", 42])
    def test_missing_email_is_invalid(self, email: Any) -> None:
        assert is_valid_lead_email(email) is False

    @pytest.mark.parametrize(
        "email",
        [
            "email_not_unlocked@domain.com",
            "no_email@company.com",
            "placeholder@test.com",
            "unknown@domain.com",
            "test@example.com",
            "someone@TEST.COM",
            "noreply@company.com",
            "DoNotReply@company.com",
        ],
    )
    def test_filler_emails_are_invalid(self, email: str) -> None:
        assert is_valid_lead_email(email) is False

    @pytest.mark.parametrize(
        "email",
        ["john.doe@company.com", "sales@enterprise.io", "example.com@company.com"],
    )
    def test_real_emails_are_valid(self, email: str) -> None:
        assert is_valid_lead_email(email) is True


@pytest.mark.unit
@pytest.mark.provenance
class TestIsQualifiedLead:
    def test_requires_valid_email(self) -> None:
        assert is_qualified_lead({"is_qualified": True}) is False
        assert (
            is_qualified_lead(
                {"email": "email_not_unlocked@domain.com", "is_qualified": True}
            )
            is False
        )

    @pytest.mark.parametrize(
        "record",
        [
            {"email": "john@company.com", "is_qualified": True},
            {"email": "john@company.com", "qualification_state": "qualified"},
            {"email": "john@company.com", "qualification_state": "Lead-Ready"},
            {"email": "john@company.com", "lead_status": "mql"},
            {"email": "john@company.com", "lead_status": "SQL"},
        ],
    )
    def test_qualified_leads(self, record: dict[str, Any]) -> None:
        assert is_qualified_lead(record) is True

    def test_explicit_flag_overrides_state(self) -> None:
        record = {
            "email": "john@company.com",
            "is_qualified": False,
            "qualification_state": "qualified",
        }
        assert is_qualified_lead(record) is False

    def test_qualification_state_takes_precedence_over_lead_status(self) -> None:
        record = {
            "email": "john@company.com",
            "qualification_state": "nurture",
            "lead_status": "mql",
        }
        assert is_qualified_lead(record) is False

    def test_no_indicators_is_not_qualified(self) -> None:
        assert is_qualified_lead({"email": "john@company.com"}) is False

    @pytest.mark.parametrize("record", [None, {}, "john@company.com"])
    def test_unusable_records_are_not_qualified(self, record: Any) -> None:
        assert is_qualified_lead(record) is False

    def test_accepts_typed_record(self) -> None:
        record = ModelLeadRecord(email="jane@company.com", lead_status="ready")
        assert is_qualified_lead(record) is True
