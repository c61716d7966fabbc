# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Readiness resolution - aggregates the four checks into one verdict.

The resolver is total: absent or malformed payloads are coerced leniently
and never raise. The verdict is READY iff all four checks passed. It is
independent of the backend's own ``is_ready`` flag and of its blocking
reasons, which are humanized and reported after the failed check
messages.

The only ambient input is the global kill switch, read from
RuntimeGatingSettings when the caller does not supply it. A malformed
gating environment engages the kill switch.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from omnigovernance.constants import READINESS_CHECK_COUNT
from omnigovernance.enums import EnumReadinessState
from omnigovernance.nodes.node_readiness_resolver_compute.handlers.handler_readiness_checks import (
    check_deliverability,
    check_kill_switch,
    check_mailbox_health,
    check_throughput,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_check_result import (
    ModelReadinessCheckResult,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_input import (
    ModelReadinessInput,
)
from omnigovernance.nodes.node_readiness_resolver_compute.models.model_readiness_resolution import (
    ModelReadinessResolution,
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
from omnigovernance.runtime.model_runtime_gating_settings import (
    RuntimeGatingSettings,
    load_runtime_gating_settings,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload
from omnigovernance.utils.util_reason_codes import humanize_reason_code

logger = logging.getLogger(__name__)

# Identifiers reported in ModelReadinessResolution.missing_fields.
MISSING_READINESS_STATUS = "readiness_status"
MISSING_MAILBOX_HEALTHY = "mailbox_healthy"
MISSING_DELIVERABILITY_SCORE = "deliverability_score"
MISSING_KILL_SWITCH_ENABLED = "kill_switch_enabled"
MISSING_THROUGHPUT_CONFIG = "throughput_config"


def collect_missing_fields(
    readiness: ModelReadinessStatus | None,
    throughput: ModelThroughputConfig | None,
) -> tuple[str, ...]:
    """List the evaluated inputs that were absent, in a stable order."""
    missing: list[str] = []
    if readiness is None:
        missing.extend(
            (
                MISSING_READINESS_STATUS,
                MISSING_MAILBOX_HEALTHY,
                MISSING_DELIVERABILITY_SCORE,
                MISSING_KILL_SWITCH_ENABLED,
            )
        )
    else:
        if readiness.mailbox_healthy is None:
            missing.append(MISSING_MAILBOX_HEALTHY)
        if readiness.deliverability_score is None:
            missing.append(MISSING_DELIVERABILITY_SCORE)
        if readiness.kill_switch_enabled is None:
            missing.append(MISSING_KILL_SWITCH_ENABLED)
    if throughput is None or not throughput.has_daily_usage:
        missing.append(MISSING_THROUGHPUT_CONFIG)
    return tuple(missing)


def collect_blocking_reasons(
    failed_checks: Sequence[ModelReadinessCheckResult],
    readiness: ModelReadinessStatus | None,
) -> tuple[str, ...]:
    """Failed check messages, then humanized backend reason codes.

    Blank codes are dropped. Duplicates are removed by exact text match,
    keeping the first occurrence.
    """
    reasons: dict[str, None] = {}
    for check in failed_checks:
        reasons.setdefault(check.message, None)
    if readiness is not None and readiness.blocking_reasons:
        for code in readiness.blocking_reasons:
            label = humanize_reason_code(code)
            if label:
                reasons.setdefault(label, None)
    return tuple(reasons)


def build_readiness_summary(failed_count: int) -> str:
    if failed_count == 0:
        return f"All {READINESS_CHECK_COUNT} readiness checks passed."
    return f"{failed_count} of {READINESS_CHECK_COUNT} readiness checks failed."


def resolve_readiness(
    readiness: ModelReadinessStatus | object | None,
    throughput: ModelThroughputConfig | object | None,
    *,
    global_kill_switch_active: bool | None = None,
    thresholds: ModelReadinessThresholds | None = None,
    settings: RuntimeGatingSettings | None = None,
) -> ModelReadinessResolution:
    """Run the four readiness checks and aggregate them.

    Args:
        readiness: Readiness snapshot, raw mapping, or None.
        throughput: Throughput configuration, raw mapping, or None.
        global_kill_switch_active: Global kill switch. None reads it from
            the environment via RuntimeGatingSettings.
        thresholds: Check thresholds. Defaults to 95 / 80 / 100.
        settings: Explicit settings, mainly for tests.

    Returns:
        Resolution with exactly four checks in fixed order.
    """
    readiness_status = coerce_payload(ModelReadinessStatus, readiness)
    throughput_config = coerce_payload(ModelThroughputConfig, throughput)
    resolved_thresholds = thresholds or DEFAULT_READINESS_THRESHOLDS
    resolved_settings = (
        settings if settings is not None else load_runtime_gating_settings()
    )

    global_kill = (
        resolved_settings.runtime_kill_switch
        if global_kill_switch_active is None
        else bool(global_kill_switch_active)
    )
    if global_kill:
        logger.warning("Global runtime kill switch is active; readiness is NOT_READY")

    checks = (
        check_mailbox_health(readiness_status),
        check_deliverability(readiness_status, resolved_thresholds),
        check_throughput(throughput_config, resolved_thresholds),
        check_kill_switch(
            readiness_status,
            global_kill_switch_active=global_kill,
            unknown_kill_switch_blocks=resolved_settings.unknown_kill_switch_blocks,
        ),
    )
    failed = [check for check in checks if not check.passed]
    state = EnumReadinessState.NOT_READY if failed else EnumReadinessState.READY
    missing_fields = collect_missing_fields(readiness_status, throughput_config)

    if failed:
        logger.info(
            "Readiness resolved NOT_READY: failed=%s missing=%s",
            [check.check.value for check in failed],
            list(missing_fields),
        )
    else:
        logger.debug("Readiness resolved READY (missing=%s)", list(missing_fields))

    return ModelReadinessResolution(
        state=state,
        checks=checks,
        blocking_reasons=collect_blocking_reasons(failed, readiness_status),
        summary=build_readiness_summary(len(failed)),
        resolved_at=datetime.now(tz=UTC),
        has_incomplete_data=bool(missing_fields),
        missing_fields=missing_fields,
    )


def handle_readiness_resolution(
    input_data: ModelReadinessInput,
    settings: RuntimeGatingSettings | None = None,
) -> ModelReadinessResolution:
    """Resolve readiness for a node input."""
    return resolve_readiness(
        input_data.readiness,
        input_data.throughput,
        global_kill_switch_active=input_data.global_kill_switch_active,
        thresholds=input_data.thresholds,
        settings=settings,
    )


__all__ = [
    "MISSING_DELIVERABILITY_SCORE",
    "MISSING_KILL_SWITCH_ENABLED",
    "MISSING_MAILBOX_HEALTHY",
    "MISSING_READINESS_STATUS",
    "MISSING_THROUGHPUT_CONFIG",
    "build_readiness_summary",
    "collect_blocking_reasons",
    "collect_missing_fields",
    "handle_readiness_resolution",
    "resolve_readiness",
]
