# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Primary action descriptor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnigovernance.enums import EnumPrimaryAction


class ModelPrimaryAction(BaseModel):
    """The single action a UI may offer for a governance state."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Button label.")
    action: EnumPrimaryAction | None = Field(
        description="Action id, or None when nothing can be requested."
    )
    disabled: bool = Field(description="Whether the action is disabled.")
    explanation: str = Field(description="Why the action is (or is not) available.")


__all__ = ["ModelPrimaryAction"]
