# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Readiness enums.

``EnumReadinessState`` is the binary verdict of the readiness resolver.
``EnumReadinessLevel`` is the coarse three-valued level computed from a raw
readiness payload alone, where UNKNOWN means "not enough data to say".
"""

from __future__ import annotations

from enum import Enum


class EnumReadinessState(str, Enum):
    """Binary readiness verdict. READY iff every check passed."""

    READY = "READY"
    NOT_READY = "NOT_READY"


class EnumReadinessLevel(str, Enum):
    """Three-valued readiness level derived from the raw payload."""

    READY = "READY"
    NOT_READY = "NOT_READY"
    UNKNOWN = "UNKNOWN"


class EnumReadinessCheck(str, Enum):
    """Identifiers of the four operational readiness checks.

    Declaration order is the order checks appear in a resolution.
    """

    MAILBOX_HEALTH = "mailbox_health"
    DELIVERABILITY = "deliverability"
    THROUGHPUT = "throughput"
    KILL_SWITCH = "kill_switch"


class EnumCheckSeverity(str, Enum):
    """Severity attached to a check result.

    ERROR marks confirmed bad state. WARNING marks uncertainty (missing
    data) on a failed check, or limited capacity on a passing one. INFO is
    only attached to passing checks.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


__all__ = [
    "EnumCheckSeverity",
    "EnumReadinessCheck",
    "EnumReadinessLevel",
    "EnumReadinessState",
]
