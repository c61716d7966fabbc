# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime permission gate.

Decides whether a runtime action (start, approve, reset, run) may be
requested of the execution authority from this environment. The gate only
reports; it never performs the action.

Evaluation order (first match wins):
    1. Global kill switch active      -> blocked (kill_switch)
    2. Runtime not permitted          -> blocked (not_permitted)
    3. Action not explicitly confirmed -> blocked (requires_confirmation)
    4. Otherwise                      -> allowed
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.runtime.exceptions import ReadOnlyViolationError
from omnigovernance.runtime.model_runtime_gating_settings import (
    RuntimeGatingSettings,
    load_runtime_gating_settings,
)

logger = logging.getLogger(__name__)

KILL_SWITCH_MESSAGE = "Runtime disabled by kill switch. No execution is possible."

ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "HEAD", "OPTIONS"})
FORBIDDEN_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class EnumRuntimeGuardReason(str, Enum):
    """Why a runtime action was allowed or blocked."""

    KILL_SWITCH = "kill_switch"
    NOT_PERMITTED = "not_permitted"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    ALLOWED = "allowed"


class ModelRuntimeGuardResult(BaseModel):
    """Outcome of a runtime action guard."""

    model_config = ConfigDict(frozen=True)

    allowed: bool = Field(description="Whether the action may be requested.")
    reason: EnumRuntimeGuardReason = Field(description="Deciding rule.")
    message: str = Field(description="Human-readable explanation.")


def _settings_or_default(settings: RuntimeGatingSettings | None) -> RuntimeGatingSettings:
    return settings if settings is not None else load_runtime_gating_settings()


def is_global_kill_switch_active(settings: RuntimeGatingSettings | None = None) -> bool:
    """Return the process-wide kill switch flag, read fresh from the environment."""
    return _settings_or_default(settings).runtime_kill_switch


def can_runtime_execute(settings: RuntimeGatingSettings | None = None) -> bool:
    """Single source of truth for runtime permission.

    True only when the kill switch is off, runtime is explicitly enabled,
    the deployment is not read-only and the API is enabled.
    """
    resolved = _settings_or_default(settings)
    if resolved.runtime_kill_switch:
        return False
    return resolved.runtime_enabled and not resolved.is_read_only


def guard_runtime_action(
    action_name: str,
    is_confirmed: bool = False,
    settings: RuntimeGatingSettings | None = None,
) -> ModelRuntimeGuardResult:
    """Guard a runtime action.

    Args:
        action_name: Name of the action being attempted (for messages).
        is_confirmed: Whether the user explicitly confirmed the action.
        settings: Gating settings. Loaded from the environment when None.

    Returns:
        ModelRuntimeGuardResult. Never raises.
    """
    resolved = _settings_or_default(settings)

    if resolved.runtime_kill_switch:
        logger.warning("Runtime action %r blocked by global kill switch", action_name)
        return ModelRuntimeGuardResult(
            allowed=False,
            reason=EnumRuntimeGuardReason.KILL_SWITCH,
            message=KILL_SWITCH_MESSAGE,
        )

    if not can_runtime_execute(resolved):
        return ModelRuntimeGuardResult(
            allowed=False,
            reason=EnumRuntimeGuardReason.NOT_PERMITTED,
            message=(
                f"Cannot {action_name}: Runtime execution is not permitted "
                "in this environment."
            ),
        )

    if not is_confirmed:
        return ModelRuntimeGuardResult(
            allowed=False,
            reason=EnumRuntimeGuardReason.REQUIRES_CONFIRMATION,
            message=f"{action_name} requires explicit confirmation before proceeding.",
        )

    return ModelRuntimeGuardResult(
        allowed=True,
        reason=EnumRuntimeGuardReason.ALLOWED,
        message=f"{action_name} confirmed and permitted.",
    )


def is_allowed_method(method: str) -> bool:
    """True if the HTTP method is read-only."""
    return method.strip().upper() in ALLOWED_METHODS


def assert_read_only_method(method: str, endpoint: str) -> None:
    """Raise ReadOnlyViolationError if ``method`` would mutate ``endpoint``.

    Raises:
        ReadOnlyViolationError: For POST, PUT, PATCH and DELETE.
    """
    if method.strip().upper() in FORBIDDEN_METHODS:
        error = ReadOnlyViolationError(method.strip().upper(), endpoint)
        logger.error(
            "Read-only violation: method=%s endpoint=%s at=%s",
            error.method,
            endpoint,
            error.occurred_at_utc,
        )
        raise error


__all__ = [
    "ALLOWED_METHODS",
    "FORBIDDEN_METHODS",
    "KILL_SWITCH_MESSAGE",
    "EnumRuntimeGuardReason",
    "ModelRuntimeGuardResult",
    "assert_read_only_method",
    "can_runtime_execute",
    "guard_runtime_action",
    "is_allowed_method",
    "is_global_kill_switch_active",
]
