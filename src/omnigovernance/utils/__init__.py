# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Utility helpers for omnigovernance."""

from omnigovernance.utils.util_payload_coercion import coerce_payload
from omnigovernance.utils.util_reason_codes import (
    BLOCKING_REASON_LABELS,
    THROUGHPUT_BLOCK_LABELS,
    get_throughput_block_label,
    humanize_reason_code,
    normalize_block_reason,
)

__all__ = [
    "BLOCKING_REASON_LABELS",
    "THROUGHPUT_BLOCK_LABELS",
    "coerce_payload",
    "get_throughput_block_label",
    "humanize_reason_code",
    "normalize_block_reason",
]
