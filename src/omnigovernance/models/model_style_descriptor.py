# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Styling descriptor shared by all static presentation lookups."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelStyleDescriptor(BaseModel):
    """Background/foreground/border colour triple for a badge or pill."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bg: str = Field(description="Background colour (hex).")
    text: str = Field(description="Foreground colour (hex).")
    border: str | None = Field(default=None, description="Border colour (hex).")
    muted: bool = Field(
        default=False,
        description="Whether the value should be rendered de-emphasised.",
    )
    icon: str | None = Field(default=None, description="Optional status glyph.")


__all__ = ["ModelStyleDescriptor"]
