# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for omnigovernance.

Constants used across multiple modules to avoid magic numbers.

Usage:
    from omnigovernance.constants import PERCENTAGE_MULTIPLIER

    usage_percent = used * PERCENTAGE_MULTIPLIER / limit
"""

# =============================================================================
# Percentage and Rate Calculations
# =============================================================================

PERCENTAGE_MULTIPLIER: int = 100
"""
Multiplier for converting ratios (0.0-1.0) to percentages (0-100).

Used by the throughput readiness check to turn daily usage into a
percentage of the daily limit.
"""

# =============================================================================
# Readiness Resolution
# =============================================================================

READINESS_CHECK_COUNT: int = 4
"""
Number of readiness checks in every resolution.

mailbox_health, deliverability, throughput and kill_switch always produce
exactly one result each, whether or not input data is available.
"""

# =============================================================================
# Provenance Heuristics
# =============================================================================

CANONICAL_SOURCE_MARKERS: tuple[str, ...] = ("ods", "canonical", "primary")
"""
Substrings that mark a ``source_system`` value as a trusted canonical source.

Matched case-insensitively. Only consulted when a record carries neither an
explicit ``provenance`` nor an ``is_canonical`` flag.
"""
