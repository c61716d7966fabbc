# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for runtime gating.

Evaluation functions in this package never raise. The only error raised
here guards the read-only boundary: a mutating HTTP method must never be
issued from the presentation layer.

Error Codes:
    - GOV_001: Read-only violation (non-recoverable)
"""

from __future__ import annotations

from datetime import UTC, datetime


class GovernanceError(Exception):
    """Base exception for omnigovernance errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., GOV_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ReadOnlyViolationError(GovernanceError):
    """Raised when a mutating HTTP method is attempted against the execution authority.

    Error Code: GOV_001
    Recoverable: False

    Attributes:
        method: The HTTP method that was attempted.
        endpoint: The endpoint that was targeted.
        occurred_at_utc: ISO-8601 UTC timestamp of the attempt.

    Example:
        >>> raise ReadOnlyViolationError("POST", "/api/v1/campaigns/1/start")
        ReadOnlyViolationError: [READ-ONLY VIOLATION] Attempted POST to ...
    """

    def __init__(self, method: str, endpoint: str) -> None:
        super().__init__(
            f"[READ-ONLY VIOLATION] Attempted {method} to {endpoint}. "
            "Execution and mutations are managed by the execution authority.",
            code="GOV_001",
        )
        self.method = method
        self.endpoint = endpoint
        self.occurred_at_utc = datetime.now(tz=UTC).isoformat()


__all__ = ["GovernanceError", "ReadOnlyViolationError"]
