# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Contact record evaluated for lead qualification."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ModelLeadRecord(BaseModel):
    """Qualification-relevant fields of a contact record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    email: str | None = Field(default=None, description="Contact email address.")
    lead_status: str | None = Field(default=None, description="CRM lead status.")
    is_qualified: StrictBool | None = Field(
        default=None,
        description="Explicit qualification flag. Overrides the state fields.",
    )
    qualification_state: str | None = Field(
        default=None,
        description="Qualification state, e.g. mql or lead-ready.",
    )


__all__ = ["ModelLeadRecord"]
