# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Testing utilities for omnigovernance.

This package provides canned payloads that can be imported from the test
suite and from downstream consumers' tests alike.

Modules:
    mock_readiness: Readiness and throughput snapshots by scenario
"""

from omnigovernance.testing.mock_readiness import (
    MOCK_CAMPAIGN_ID,
    ReadinessScenario,
    ThroughputScenario,
    mock_readiness_payload,
    mock_readiness_status,
    mock_throughput_config,
    mock_throughput_payload,
)

__all__ = [
    "MOCK_CAMPAIGN_ID",
    "ReadinessScenario",
    "ThroughputScenario",
    "mock_readiness_payload",
    "mock_readiness_status",
    "mock_throughput_config",
    "mock_throughput_payload",
]
