# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lifecycle status enums for governance state mapping.

``EnumLegacyStatus`` is the raw status vocabulary reported by the external
execution authority. ``EnumGovernanceState`` is the canonical governance
stage derived from it. Governance states are never persisted; they are
recomputed from the latest status snapshot on every evaluation.

Example:
    >>> EnumGovernanceState.PENDING_APPROVAL.value
    'PENDING_APPROVAL'
"""

from __future__ import annotations

from enum import Enum


class EnumLegacyStatus(str, Enum):
    """Raw campaign status values reported by the execution authority."""

    DRAFT = "DRAFT"
    PENDING_REVIEW = "PENDING_REVIEW"
    RUNNABLE = "RUNNABLE"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    ARCHIVED = "ARCHIVED"


class EnumGovernanceState(str, Enum):
    """Canonical governance states.

    Attributes:
        DRAFT: Being authored, editable.
        PENDING_APPROVAL: Submitted for review, awaiting external approval.
        APPROVED_READY: Approved; execution is observed externally.
        BLOCKED: Cannot proceed. Also the fail-safe for unknown input.
        EXECUTED: Terminal, read-only observability state.
    """

    DRAFT = "DRAFT"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED_READY = "APPROVED_READY"
    BLOCKED = "BLOCKED"
    EXECUTED = "EXECUTED"


# Legacy statuses that no longer permit a self-service transition.
TERMINAL_LEGACY_STATUSES: frozenset[EnumLegacyStatus] = frozenset(
    {
        EnumLegacyStatus.RUNNING,
        EnumLegacyStatus.COMPLETED,
        EnumLegacyStatus.FAILED,
        EnumLegacyStatus.ARCHIVED,
    }
)


__all__ = ["TERMINAL_LEGACY_STATUSES", "EnumGovernanceState", "EnumLegacyStatus"]
