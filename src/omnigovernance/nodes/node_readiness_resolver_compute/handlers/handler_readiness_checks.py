# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""The four operational readiness checks - pure functions, no I/O.

Each check returns exactly one ModelReadinessCheckResult and never raises.
Missing data never passes a check, with one exception: an unknown
campaign kill switch is assumed inactive (reported with INFO severity)
unless ``unknown_kill_switch_blocks`` is requested.
"""

from __future__ import annotations

import math

from omnigovernance.constants import PERCENTAGE_MULTIPLIER
from omnigovernance.enums import EnumCheckSeverity, EnumReadinessCheck
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_check_result import (
    ModelReadinessCheckResult,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_status import (
    ModelReadinessStatus,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_thresholds import (
    DEFAULT_READINESS_THRESHOLDS,
    ModelReadinessThresholds,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_throughput_config import (
    ModelThroughputConfig,
)
from omnigovernance.utils.util_reason_codes import normalize_block_reason

STATUS_UNKNOWN = "Unknown"


def format_number(value: int | float) -> str:
    """Render a count or percentage without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def check_mailbox_health(
    readiness: ModelReadinessStatus | None,
) -> ModelReadinessCheckResult:
    """Pass iff the mailbox is reported healthy."""
    check = EnumReadinessCheck.MAILBOX_HEALTH
    healthy = readiness.mailbox_healthy if readiness is not None else None

    if healthy is None:
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status=STATUS_UNKNOWN,
            message="Mailbox health status is not available. Verification required.",
            severity=EnumCheckSeverity.WARNING,
        )
    if healthy:
        return ModelReadinessCheckResult(
            check=check,
            passed=True,
            status="Healthy",
            message="Mailbox is healthy and ready for sending.",
            value=True,
        )
    return ModelReadinessCheckResult(
        check=check,
        passed=False,
        status="Unhealthy",
        message="Mailbox is not healthy. Check mailbox configuration and warmup status.",
        severity=EnumCheckSeverity.ERROR,
        value=False,
    )


def check_deliverability(
    readiness: ModelReadinessStatus | None,
    thresholds: ModelReadinessThresholds = DEFAULT_READINESS_THRESHOLDS,
) -> ModelReadinessCheckResult:
    """Pass iff the deliverability score meets the configured minimum."""
    check = EnumReadinessCheck.DELIVERABILITY
    minimum = thresholds.deliverability_minimum
    score = readiness.deliverability_score if readiness is not None else None

    if score is None:
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status=STATUS_UNKNOWN,
            message="Deliverability score is not available. Verification required.",
            severity=EnumCheckSeverity.WARNING,
            threshold=minimum,
        )

    score_text = format_number(score)
    minimum_text = format_number(minimum)
    if score >= minimum:
        return ModelReadinessCheckResult(
            check=check,
            passed=True,
            status=f"{score_text}%",
            message=(
                f"Deliverability score ({score_text}%) meets the minimum "
                f"threshold ({minimum_text}%)."
            ),
            value=score,
            threshold=minimum,
        )
    return ModelReadinessCheckResult(
        check=check,
        passed=False,
        status=f"{score_text}%",
        message=(
            f"Deliverability score ({score_text}%) is below the minimum "
            f"threshold ({minimum_text}%)."
        ),
        severity=EnumCheckSeverity.ERROR,
        value=score,
        threshold=minimum,
    )


def check_throughput(
    throughput: ModelThroughputConfig | None,
    thresholds: ModelReadinessThresholds = DEFAULT_READINESS_THRESHOLDS,
) -> ModelReadinessCheckResult:
    """Classify remaining daily capacity.

    Order (first match wins): hard-blocked, unavailable, exhausted, limited
    (passes with a warning), available. Non-finite figures are unavailable
    and a usage percentage that cannot be computed counts as exhausted.
    """
    check = EnumReadinessCheck.THROUGHPUT
    limit = throughput.daily_limit if throughput is not None else None
    used = throughput.current_daily_usage if throughput is not None else None
    usage_text = (
        f"{format_number(used)}/{format_number(limit)}"
        if used is not None and limit is not None
        else None
    )

    if throughput is not None and throughput.is_blocked:
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status="Blocked",
            message=(
                "Throughput is blocked: "
                f"{normalize_block_reason(throughput.block_reason)}."
            ),
            severity=EnumCheckSeverity.ERROR,
            value=usage_text,
            threshold=limit,
        )
    if (
        limit is None
        or used is None
        or not (math.isfinite(limit) and math.isfinite(used))
    ):
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status=STATUS_UNKNOWN,
            message="Throughput configuration is not available.",
            severity=EnumCheckSeverity.WARNING,
        )

    remaining = max(limit - used, 0)
    usage_percent = used * PERCENTAGE_MULTIPLIER / limit if limit > 0 else math.inf

    if (
        limit <= 0
        or not math.isfinite(usage_percent)
        or usage_percent >= thresholds.throughput_blocking_percent
    ):
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status="Exhausted",
            message=f"Daily throughput limit reached ({usage_text}).",
            severity=EnumCheckSeverity.ERROR,
            value=usage_text,
            threshold=limit,
        )
    if usage_percent >= thresholds.throughput_warning_percent:
        return ModelReadinessCheckResult(
            check=check,
            passed=True,
            status="Limited",
            message=(
                f"Throughput is limited. {format_number(remaining)} remaining "
                f"({_round_half_up(usage_percent)}% used)."
            ),
            severity=EnumCheckSeverity.WARNING,
            value=usage_text,
            threshold=limit,
        )
    return ModelReadinessCheckResult(
        check=check,
        passed=True,
        status="Available",
        message=(
            f"Throughput capacity available: {format_number(remaining)} remaining "
            f"of {format_number(limit)} daily limit."
        ),
        value=usage_text,
        threshold=limit,
    )


def check_kill_switch(
    readiness: ModelReadinessStatus | None,
    *,
    global_kill_switch_active: bool = False,
    unknown_kill_switch_blocks: bool = False,
) -> ModelReadinessCheckResult:
    """Fail when the global or campaign kill switch is active.

    The global switch always wins. A present payload with no campaign flag
    counts as inactive. With no payload at all the switch is unknown and,
    by default, assumed inactive.
    """
    check = EnumReadinessCheck.KILL_SWITCH

    if global_kill_switch_active:
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status="Active (Global)",
            message="Global runtime kill switch is active. All execution is disabled.",
            severity=EnumCheckSeverity.ERROR,
            value=True,
        )
    if readiness is not None and readiness.kill_switch_enabled:
        return ModelReadinessCheckResult(
            check=check,
            passed=False,
            status="Active (Campaign)",
            message="Campaign-level kill switch is enabled. Execution is paused.",
            severity=EnumCheckSeverity.ERROR,
            value=True,
        )
    if readiness is None:
        if unknown_kill_switch_blocks:
            return ModelReadinessCheckResult(
                check=check,
                passed=False,
                status=STATUS_UNKNOWN,
                message="Kill switch status unknown. Verification required.",
                severity=EnumCheckSeverity.WARNING,
            )
        return ModelReadinessCheckResult(
            check=check,
            passed=True,
            status=STATUS_UNKNOWN,
            message="Kill switch status unknown. Assuming not active.",
            severity=EnumCheckSeverity.INFO,
        )
    return ModelReadinessCheckResult(
        check=check,
        passed=True,
        status="Inactive",
        message="Kill switch is not active.",
        value=False,
    )


__all__ = [
    "STATUS_UNKNOWN",
    "check_deliverability",
    "check_kill_switch",
    "check_mailbox_health",
    "check_throughput",
    "format_number",
]
