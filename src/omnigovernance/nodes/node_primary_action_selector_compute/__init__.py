# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""PrimaryActionSelectorCompute node package."""

from omnigovernance.nodes.node_primary_action_selector_compute.node import (
    NodePrimaryActionSelectorCompute,
)

__all__ = ["NodePrimaryActionSelectorCompute"]
