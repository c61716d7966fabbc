# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lead qualification - separates qualified leads from plain contacts.

A record is a lead only with a real email address and positive
qualification evidence. Anything uncertain is not a lead.
"""

from __future__ import annotations

import re

from omnigovernance.nodes.node_provenance_classifier_compute.models.model_lead_record import (
    ModelLeadRecord,
)
from omnigovernance.utils.util_payload_coercion import coerce_payload

# Placeholder addresses written by enrichment tools when no email is known.
FILLER_EMAIL_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"email_not_unlocked",
        r"no_email",
        r"placeholder",
        r"unknown@",
        r"@example\.com$",
        r"@test\.com$",
        r"noreply",
        r"donotreply",
    )
)

QUALIFIED_STATES: frozenset[str] = frozenset(
    {"qualified", "lead-ready", "ready", "mql", "sql"}
)


def is_valid_lead_email(email: object) -> bool:
    """False for empty, non-string, or filler/placeholder addresses."""
    if not isinstance(email, str) or not email:
        return False
    return not any(pattern.search(email) for pattern in FILLER_EMAIL_PATTERNS)


def is_qualified_lead(record: ModelLeadRecord | object | None) -> bool:
    """Whether a record qualifies as a lead rather than a contact.

    Order: valid email required; then explicit ``is_qualified``; then
    ``qualification_state``; then ``lead_status``. Default False.
    """
    lead = coerce_payload(ModelLeadRecord, record)
    if lead is None or not is_valid_lead_email(lead.email):
        return False
    if lead.is_qualified is not None:
        return lead.is_qualified
    if lead.qualification_state:
        return lead.qualification_state.lower() in QUALIFIED_STATES
    if lead.lead_status:
        return lead.lead_status.lower() in QUALIFIED_STATES
    return False


__all__ = [
    "FILLER_EMAIL_PATTERNS",
    "QUALIFIED_STATES",
    "is_qualified_lead",
    "is_valid_lead_email",
]
