# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for lenient payload coercion."""

from __future__ import annotations

import logging

import pytest

from omnigovernance.nodes.node_readiness_resolver_compute.models import (
    ModelReadinessStatus,
    ModelThroughputConfig,
)
from omnigovernance.utils import coerce_payload


@pytest.mark.unit
class TestCoercePayload:
    def test_none_is_none(self) -> None:
        assert coerce_payload(ModelReadinessStatus, None) is None

    def test_instance_is_returned_unchanged(self) -> None:
        status = ModelReadinessStatus(mailbox_healthy=True)
        assert coerce_payload(ModelReadinessStatus, status) is status

    def test_valid_mapping(self) -> None:
        status = coerce_payload(
            ModelReadinessStatus, {"mailbox_healthy": True, "deliverability_score": 97.5}
        )
        assert status is not None
        assert status.deliverability_score == 97.5

    def test_invalid_fields_are_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            config = coerce_payload(
                ModelThroughputConfig,
                {"daily_limit": "lots", "current_daily_usage": -1, "is_blocked": True},
            )
        assert config is not None
        assert config.daily_limit is None
        assert config.current_daily_usage is None
        assert config.is_blocked is True
        assert "current_daily_usage" in caplog.text
        assert "daily_limit" in caplog.text

    def test_other_model_is_converted(self) -> None:
        status = ModelReadinessStatus(deliverability_score=90)
        config = coerce_payload(ModelThroughputConfig, status)
        assert config == ModelThroughputConfig()

    @pytest.mark.parametrize("payload", ["text", 3, [("mailbox_healthy", True)]])
    def test_unsupported_types_are_absent(self, payload: object) -> None:
        assert coerce_payload(ModelReadinessStatus, payload) is None
