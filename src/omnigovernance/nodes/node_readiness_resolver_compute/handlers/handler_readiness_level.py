# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Coarse readiness level from the raw readiness payload alone.

Unlike the resolver this does not run the four checks. It answers the
quicker question "does the backend snapshot say we can go?" and admits
UNKNOWN when the snapshot does not say either way.
"""

from __future__ import annotations

from omnigovernance.enums import EnumReadinessLevel
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_status import (
    ModelReadinessStatus,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload


def compute_readiness_level(
    readiness: ModelReadinessStatus | object | None,
) -> EnumReadinessLevel:
    """Three-valued readiness level.

    Rules (first match wins):
        1. no payload                         -> UNKNOWN
        2. any blocking reason                -> NOT_READY
        3. campaign kill switch on            -> NOT_READY
        4. is_ready is False                  -> NOT_READY
        5. mailbox_healthy is False           -> NOT_READY
        6. is_ready and mailbox_healthy True  -> READY
        7. otherwise                          -> UNKNOWN
    """
    status = coerce_payload(ModelReadinessStatus, readiness)
    if status is None:
        return EnumReadinessLevel.UNKNOWN
    if status.blocking_reasons:
        return EnumReadinessLevel.NOT_READY
    if status.kill_switch_enabled is True:
        return EnumReadinessLevel.NOT_READY
    if status.is_ready is False:
        return EnumReadinessLevel.NOT_READY
    if status.mailbox_healthy is False:
        return EnumReadinessLevel.NOT_READY
    if status.is_ready is True and status.mailbox_healthy is True:
        return EnumReadinessLevel.READY
    return EnumReadinessLevel.UNKNOWN


__all__ = ["compute_readiness_level"]
