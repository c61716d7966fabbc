# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared models for omnigovernance."""

from omnigovernance.models.model_style_descriptor import ModelStyleDescriptor

__all__ = ["ModelStyleDescriptor"]
