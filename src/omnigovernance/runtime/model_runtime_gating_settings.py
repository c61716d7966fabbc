# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime gating configuration loaded from the environment.

These flags are process-wide. The global kill switch overrides every other
readiness signal and every runtime permission.

Environment variables:
    GOVERNANCE_RUNTIME_KILL_SWITCH: bool (default False)
    GOVERNANCE_RUNTIME_ENABLED: bool (default False)
    GOVERNANCE_READ_ONLY: bool (default False)
    GOVERNANCE_API_MODE: "enabled" | "disabled" (default "enabled")
    GOVERNANCE_UNKNOWN_KILL_SWITCH_BLOCKS: bool (default False)

Settings are loaded per call by their consumers through
``load_runtime_gating_settings``. Nothing caches them, so an environment
change is picked up by the next evaluation. A malformed value never raises:
the whole environment is then treated as fail-safe (kill switch engaged).
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class RuntimeGatingSettings(BaseSettings):
    """Pydantic Settings for runtime gating, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GOVERNANCE_",
        extra="ignore",
        frozen=True,
    )

    runtime_kill_switch: bool = Field(
        default=False,
        description="Global kill switch. When true all runtime actions are blocked.",
    )
    runtime_enabled: bool = Field(
        default=False,
        description="Opt-in flag permitting runtime actions in this environment.",
    )
    read_only: bool = Field(
        default=False,
        description="Read-only deployment. Disables all runtime actions.",
    )
    api_mode: Literal["enabled", "disabled"] = Field(
        default="enabled",
        description="When 'disabled' no API calls are made and the deployment is read-only.",
    )
    unknown_kill_switch_blocks: bool = Field(
        default=False,
        description=(
            "Fail the kill_switch readiness check when no readiness payload is "
            "available, instead of treating the switch as inactive."
        ),
    )

    @property
    def is_api_disabled(self) -> bool:
        return self.api_mode == "disabled"

    @property
    def is_read_only(self) -> bool:
        """Read-only either explicitly or because the API is disabled."""
        return self.read_only or self.is_api_disabled


def fail_safe_runtime_gating_settings() -> RuntimeGatingSettings:
    """Most restrictive gating settings, built without reading the environment."""
    return RuntimeGatingSettings.model_construct(
        runtime_kill_switch=True,
        runtime_enabled=False,
        read_only=True,
        unknown_kill_switch_blocks=True,
    )


def load_runtime_gating_settings() -> RuntimeGatingSettings:
    """Load gating settings from the environment, never raising.

    Returns:
        The parsed settings, or the fail-safe settings when any
        GOVERNANCE_ variable does not validate.
    """
    try:
        return RuntimeGatingSettings()
    except ValidationError as exc:
        logger.warning(
            "Invalid runtime gating environment %s; engaging fail-safe kill switch",
            sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]}),
        )
        return fail_safe_runtime_gating_settings()


__all__ = [
    "RuntimeGatingSettings",
    "fail_safe_runtime_gating_settings",
    "load_runtime_gating_settings",
]
