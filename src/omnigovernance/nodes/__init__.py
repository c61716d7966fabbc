# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ONEX Governance Nodes.

This module provides lazy imports so that importing the package does not
load every node shell. Use explicit imports from submodules for
production use.

Example:
    # Recommended - direct import from a specific handler:
    from omnigovernance.nodes.node_readiness_resolver_compute.handlers import resolve_readiness

    # For convenience imports (loads the node shell):
    from omnigovernance.nodes import NodeReadinessResolverCompute
"""

from typing import TYPE_CHECKING

# Lazy imports for runtime - only loaded when accessed
_lazy_imports = {
    "NodeGovernanceStateMapperCompute": "omnigovernance.nodes.node_governance_state_mapper_compute",
    "NodePrimaryActionSelectorCompute": "omnigovernance.nodes.node_primary_action_selector_compute",
    "NodeProvenanceClassifierCompute": "omnigovernance.nodes.node_provenance_classifier_compute",
    "NodeReadinessResolverCompute": "omnigovernance.nodes.node_readiness_resolver_compute",
}

__all__ = [
    "NodeGovernanceStateMapperCompute",
    "NodePrimaryActionSelectorCompute",
    "NodeProvenanceClassifierCompute",
    "NodeReadinessResolverCompute",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Type checking imports for IDE support
if TYPE_CHECKING:
    from omnigovernance.nodes.node_governance_state_mapper_compute import (
        NodeGovernanceStateMapperCompute,
    )
    from omnigovernance.nodes.node_primary_action_selector_compute import (
        NodePrimaryActionSelectorCompute,
    )
    from omnigovernance.nodes.node_provenance_classifier_compute import (
        NodeProvenanceClassifierCompute,
    )
    from omnigovernance.nodes.node_readiness_resolver_compute import (
        NodeReadinessResolverCompute,
    )
