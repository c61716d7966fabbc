# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Primary action identifiers reported to the presentation layer."""

from __future__ import annotations

from enum import Enum


class EnumPrimaryAction(str, Enum):
    """Action a UI may request of the external system for a governance state.

    Only SUBMIT_FOR_APPROVAL is ever enabled. The rest describe why no
    action is available.
    """

    SUBMIT_FOR_APPROVAL = "submit_for_approval"
    PENDING = "pending"
    APPROVED_OBSERVED = "approved_observed"
    BLOCKED = "blocked"
    READ_ONLY = "read_only"


__all__ = ["EnumPrimaryAction"]
