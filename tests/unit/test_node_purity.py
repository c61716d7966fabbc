# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""AST-based purity check for ONEX node files.

Every node.py must be a minimal shell: one NodeCompute subclass whose only
method is ``compute``, and whose ``compute`` body is a single delegating
return (after an optional docstring). All behavior lives in handlers.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

# Module-level marker: all tests in this file are unit tests
pytestmark = pytest.mark.unit


# =========================================================================
# Constants and Configuration
# =========================================================================

NODES_DIR = (
    Path(__file__).resolve().parents[2] / "src" / "omnigovernance" / "nodes"
)

NODE_FILES = sorted(NODES_DIR.glob("node_*/node.py"))

ALLOWED_TOP_LEVEL_TYPES = (
    ast.Import,
    ast.ImportFrom,
    ast.ClassDef,
    ast.Assign,
    ast.Expr,
)


# =========================================================================
# Helpers
# =========================================================================


def _parse(path: Path) -> ast.Module:
    return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))


def _node_classes(module: ast.Module) -> list[ast.ClassDef]:
    return [stmt for stmt in module.body if isinstance(stmt, ast.ClassDef)]


def _base_name(base: ast.expr) -> str:
    if isinstance(base, ast.Subscript):
        base = base.value
    if isinstance(base, ast.Name):
        return base.id
    if isinstance(base, ast.Attribute):
        return base.attr
    return ""


def _body_without_docstring(body: list[ast.stmt]) -> list[ast.stmt]:
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant):
        return body[1:]
    return body


# =========================================================================
# Tests
# =========================================================================


def test_all_nodes_discovered() -> None:
    assert {path.parent.name for path in NODE_FILES} == {
        "node_governance_state_mapper_compute",
        "node_primary_action_selector_compute",
        "node_provenance_classifier_compute",
        "node_readiness_resolver_compute",
    }


@pytest.mark.parametrize("path", NODE_FILES, ids=lambda p: p.parent.name)
def test_only_allowed_top_level_statements(path: Path) -> None:
    module = _parse(path)
    for stmt in module.body:
        assert isinstance(stmt, ALLOWED_TOP_LEVEL_TYPES), (
            f"{path.parent.name}: forbidden top-level {type(stmt).__name__}"
        )


@pytest.mark.parametrize("path", NODE_FILES, ids=lambda p: p.parent.name)
def test_single_compute_shell(path: Path) -> None:
    classes = _node_classes(_parse(path))
    assert len(classes) == 1
    node_class = classes[0]
    assert [_base_name(base) for base in node_class.bases] == ["NodeCompute"]

    methods = [
        stmt
        for stmt in node_class.body
        if isinstance(stmt, ast.FunctionDef | ast.AsyncFunctionDef)
    ]
    assert [method.name for method in methods] == ["compute"]
    compute = methods[0]
    assert isinstance(compute, ast.AsyncFunctionDef)

    body = _body_without_docstring(compute.body)
    assert len(body) == 1
    assert isinstance(body[0], ast.Return)
    assert isinstance(body[0].value, ast.Call)


@pytest.mark.parametrize("path", NODE_FILES, ids=lambda p: p.parent.name)
def test_no_environment_access(path: Path) -> None:
    source = path.read_text(encoding="utf-8")
    assert "os.environ" not in source
    assert "open(" not in source
