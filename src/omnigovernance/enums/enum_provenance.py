# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data-trust enums: record provenance and metric confidence."""

from __future__ import annotations

from enum import Enum


class EnumProvenanceType(str, Enum):
    """Origin classification for a data record."""

    CANONICAL = "CANONICAL"
    """Record originates from a trusted canonical source."""

    LEGACY_OBSERVED = "LEGACY_OBSERVED"
    """Record was observed through an older pathway. Also the default."""


class EnumMetricConfidence(str, Enum):
    """Confidence classification for a metric.

    SAFE requires explicit validation evidence. Missing evidence yields
    CONDITIONAL, never SAFE.
    """

    SAFE = "SAFE"
    CONDITIONAL = "CONDITIONAL"
    BLOCKED = "BLOCKED"


__all__ = ["EnumMetricConfidence", "EnumProvenanceType"]
