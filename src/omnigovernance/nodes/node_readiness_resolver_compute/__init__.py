# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ReadinessResolverCompute node package."""

from omnigovernance.nodes.node_readiness_resolver_compute.node import (
    NodeReadinessResolverCompute,
)

__all__ = ["NodeReadinessResolverCompute"]
