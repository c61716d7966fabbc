# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lenient coercion of raw JSON-like payloads into frozen pydantic models.

Inbound payloads come from external systems and may be partial or carry
ill-typed fields. Evaluation must never fail on them, so a field that does
not validate is dropped (treated as absent) instead of raising. Absent data
is then handled by each evaluator's conservative missing-data branch.

All target models are expected to declare every field optional.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# One pass to find the rejected fields, one pass without them.
_MAX_VALIDATION_ATTEMPTS = 2


def coerce_payload(model_cls: type[ModelT], payload: object) -> ModelT | None:
    """Coerce ``payload`` into ``model_cls``, dropping fields that fail validation.

    Args:
        model_cls: Target model. All of its fields must have defaults.
        payload: ``None``, an instance of ``model_cls``, another pydantic
            model, or a mapping. Any other value is treated as absent.

    Returns:
        The coerced model, or None when the payload is absent or unusable.
    """
    if payload is None:
        return None
    if isinstance(payload, model_cls):
        return payload
    if isinstance(payload, BaseModel):
        data: dict[str, Any] = payload.model_dump()
    elif isinstance(payload, Mapping):
        data = {str(key): value for key, value in payload.items()}
    else:
        logger.warning(
            "Discarding %s payload of unsupported type %s",
            model_cls.__name__,
            type(payload).__name__,
        )
        return None

    for _ in range(_MAX_VALIDATION_ATTEMPTS):
        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            rejected = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
            if not rejected:
                break
            logger.warning(
                "Discarding invalid %s field(s) %s",
                model_cls.__name__,
                sorted(rejected),
            )
            data = {key: value for key, value in data.items() if key not in rejected}

    logger.warning("Discarding unusable %s payload", model_cls.__name__)
    return None


__all__ = ["coerce_payload"]
