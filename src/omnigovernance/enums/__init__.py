# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Governance Enums Package.

Unified import location for all omnigovernance enums:

    from omnigovernance.enums import (
        EnumGovernanceState,
        EnumLegacyStatus,
        EnumReadinessState,
    )

Exports:
    Lifecycle Enums:
        - EnumLegacyStatus: Raw status vocabulary of the execution authority
        - EnumGovernanceState: Canonical governance states

    Data-Trust Enums:
        - EnumProvenanceType: CANONICAL / LEGACY_OBSERVED
        - EnumMetricConfidence: SAFE / CONDITIONAL / BLOCKED

    Readiness Enums:
        - EnumReadinessState: READY / NOT_READY
        - EnumReadinessLevel: READY / NOT_READY / UNKNOWN
        - EnumReadinessCheck: The four readiness check identifiers
        - EnumCheckSeverity: info / warning / error

    Action Enums:
        - EnumPrimaryAction: Primary UI action identifiers
"""

from omnigovernance.enums.enum_governance_state import (
    TERMINAL_LEGACY_STATUSES,
    EnumGovernanceState,
    EnumLegacyStatus,
)
from omnigovernance.enums.enum_primary_action import EnumPrimaryAction
from omnigovernance.enums.enum_provenance import (
    EnumMetricConfidence,
    EnumProvenanceType,
)
from omnigovernance.enums.enum_readiness import (
    EnumCheckSeverity,
    EnumReadinessCheck,
    EnumReadinessLevel,
    EnumReadinessState,
)

__all__ = [
    "TERMINAL_LEGACY_STATUSES",
    "EnumCheckSeverity",
    "EnumGovernanceState",
    "EnumLegacyStatus",
    "EnumMetricConfidence",
    "EnumPrimaryAction",
    "EnumProvenanceType",
    "EnumReadinessCheck",
    "EnumReadinessLevel",
    "EnumReadinessState",
]
