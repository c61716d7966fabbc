# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output model for GovernanceStateMapperCompute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.enums import EnumGovernanceState
from omnigovernance.models import ModelStyleDescriptor


class ModelGovernanceStateOutput(BaseModel):
    """Mapped governance state with its static presentation attributes."""

    model_config = ConfigDict(frozen=True)

    legacy_status: str | None = Field(
        description="The raw status that was mapped, as received."
    )
    governance_state: EnumGovernanceState = Field(
        description="Canonical governance state."
    )
    label: str = Field(description="Human-readable label for the state.")
    style: ModelStyleDescriptor = Field(description="Badge styling for the state.")

    @property
    def is_read_only(self) -> bool:
        """True when no self-service transition is possible."""
        return self.governance_state is EnumGovernanceState.EXECUTED


__all__ = ["ModelGovernanceStateOutput"]
