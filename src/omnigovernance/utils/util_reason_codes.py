# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Humanization of raw blocking-reason and throughput-block codes.

The execution authority reports reasons as SCREAMING_SNAKE_CASE codes
(``MISSING_HUMAN_APPROVAL``). These helpers turn them into the text shown
next to a readiness verdict.

Example:
    >>> humanize_reason_code("MISSING_HUMAN_APPROVAL")
    'Missing Human Approval'
    >>> humanize_reason_code("SMARTLEAD_NOT_CONFIGURED")
    'SmartLead Not Configured'
    >>> normalize_block_reason("DAILY_LIMIT_EXCEEDED")
    'daily limit exceeded'
"""

from __future__ import annotations

# Codes whose generic Title Case rendering is wrong or ambiguous.
BLOCKING_REASON_LABELS: dict[str, str] = {
    "MISSING_HUMAN_APPROVAL": "Missing Human Approval",
    "PERSISTENCE_ERRORS": "Persistence Errors",
    "NO_LEADS_PERSISTED": "No Leads Persisted",
    "KILL_SWITCH_ENABLED": "Kill Switch Enabled",
    "SMARTLEAD_NOT_CONFIGURED": "SmartLead Not Configured",
    "INSUFFICIENT_CREDITS": "Insufficient Credits",
}

THROUGHPUT_BLOCK_LABELS: dict[str, str] = {
    "DAILY_LIMIT_EXCEEDED": "Daily Limit Exceeded",
    "HOURLY_LIMIT_EXCEEDED": "Hourly Limit Exceeded",
    "MAILBOX_LIMIT_EXCEEDED": "Mailbox Limit Exceeded",
    "CONFIG_INACTIVE": "Configuration Inactive",
    "NO_CONFIG_FOUND": "No Configuration Found",
}

_UNKNOWN_BLOCK_REASON = "Unknown reason"


def _words(code: str) -> list[str]:
    return [part for part in code.replace("-", "_").split("_") if part]


def humanize_reason_code(code: str) -> str:
    """Convert a snake_case reason code to Title Case text.

    Known codes use their curated label. Unknown codes are split on
    underscores and each word is capitalised. Text that is not a code
    (already contains spaces) is returned stripped but otherwise unchanged.
    """
    stripped = code.strip()
    if not stripped:
        return ""
    label = BLOCKING_REASON_LABELS.get(stripped.upper())
    if label is not None:
        return label
    if " " in stripped:
        return stripped
    return " ".join(word.capitalize() for word in _words(stripped))


def normalize_block_reason(code: str | None) -> str:
    """Lower-case, space-separated form of a throughput block code.

    Used inside sentence-style check messages. Absent or empty codes yield
    ``"Unknown reason"``.
    """
    if not code or not code.strip():
        return _UNKNOWN_BLOCK_REASON
    return " ".join(word.lower() for word in _words(code.strip()))


def get_throughput_block_label(code: str | None) -> str:
    """Title Case label for a throughput block code."""
    if not code or not code.strip():
        return _UNKNOWN_BLOCK_REASON
    return THROUGHPUT_BLOCK_LABELS.get(
        code.strip().upper(),
        " ".join(word.capitalize() for word in _words(code.strip())),
    )


__all__ = [
    "BLOCKING_REASON_LABELS",
    "THROUGHPUT_BLOCK_LABELS",
    "get_throughput_block_label",
    "humanize_reason_code",
    "normalize_block_reason",
]
