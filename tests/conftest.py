# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for omnigovernance tests.

Shared fixtures for the governance, readiness and classification nodes.
"""

from typing import Any

import pytest

from omnigovernance.runtime.model_runtime_gating_settings import (
    RuntimeGatingSettings,
)
from omnigovernance.testing import mock_readiness_payload, mock_throughput_payload

_GATING_ENV_VARS = (
    "GOVERNANCE_RUNTIME_KILL_SWITCH",
    "GOVERNANCE_RUNTIME_ENABLED",
    "GOVERNANCE_READ_ONLY",
    "GOVERNANCE_API_MODE",
    "GOVERNANCE_UNKNOWN_KILL_SWITCH_BLOCKS",
)


# =========================================================================
# Environment Isolation
# =========================================================================


@pytest.fixture(autouse=True)
def _clean_gating_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with no runtime gating variables set."""
    for name in _GATING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# =========================================================================
# Settings Fixtures
# =========================================================================


@pytest.fixture
def default_settings() -> RuntimeGatingSettings:
    """Settings with every flag at its default."""
    return RuntimeGatingSettings()


@pytest.fixture
def kill_switch_settings() -> RuntimeGatingSettings:
    """Settings with the global kill switch engaged."""
    return RuntimeGatingSettings(runtime_kill_switch=True)


# =========================================================================
# Payload Fixtures
# =========================================================================


@pytest.fixture
def ready_payload() -> dict[str, Any]:
    """Readiness payload that passes every readiness check."""
    return mock_readiness_payload("ready")


@pytest.fixture
def available_throughput_payload() -> dict[str, Any]:
    """Throughput payload at 25% daily usage."""
    return mock_throughput_payload("available")
