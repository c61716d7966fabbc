# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime gating for omnigovernance.

Exports:
    RuntimeGatingSettings: Environment-driven gating flags (GOVERNANCE_ prefix)
    load_runtime_gating_settings: Settings loader falling back to fail-safe flags
    guard_runtime_action: Kill switch -> permission -> confirmation gate
    can_runtime_execute: Runtime permission check
    is_global_kill_switch_active: Process-wide kill switch flag
    assert_read_only_method: Read-only boundary check for HTTP methods
"""

from omnigovernance.runtime.exceptions import GovernanceError, ReadOnlyViolationError
from omnigovernance.runtime.model_runtime_gating_settings import (
    RuntimeGatingSettings,
    fail_safe_runtime_gating_settings,
    load_runtime_gating_settings,
)
from omnigovernance.runtime.runtime_guard import (
    ALLOWED_METHODS,
    FORBIDDEN_METHODS,
    KILL_SWITCH_MESSAGE,
    EnumRuntimeGuardReason,
    ModelRuntimeGuardResult,
    assert_read_only_method,
    can_runtime_execute,
    guard_runtime_action,
    is_allowed_method,
    is_global_kill_switch_active,
)

__all__ = [
    "ALLOWED_METHODS",
    "FORBIDDEN_METHODS",
    "KILL_SWITCH_MESSAGE",
    "EnumRuntimeGuardReason",
    "GovernanceError",
    "ModelRuntimeGuardResult",
    "ReadOnlyViolationError",
    "RuntimeGatingSettings",
    "assert_read_only_method",
    "can_runtime_execute",
    "fail_safe_runtime_gating_settings",
    "guard_runtime_action",
    "is_allowed_method",
    "is_global_kill_switch_active",
    "load_runtime_gating_settings",
]
