# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for provenance derivation and record classification."""

from __future__ import annotations

from typing import Any

import pytest
from omnibase_core.models.container.model_onex_container import ModelONEXContainer

from omnigovernance.enums import EnumMetricConfidence, EnumProvenanceType
from omnigovernance.nodes.node_provenance_classifier_compute.handlers import (
    PROVENANCE_RULES,
    classify_record,
    derive_provenance,
    explain_provenance,
    get_provenance_label,
    get_provenance_style,
)
from omnigovernance.nodes.node_provenance_classifier_compute.models import (
    ClassificationRule,
    ModelClassificationInput,
    ModelProvenanceRecord,
    first_matching_rule,
)
from omnigovernance.nodes.node_provenance_classifier_compute.node import (
    NodeProvenanceClassifierCompute,
)

# ---------------------------------------------------------------------------
# Rule precedence
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.provenance
class TestDeriveProvenance:
    def test_explicit_provenance_wins_over_heuristic(self) -> None:
        record = {"provenance": "CANONICAL", "source_system": "legacy_tool"}
        assert derive_provenance(record) is EnumProvenanceType.CANONICAL
        assert explain_provenance(record) == "explicit_provenance"

    def test_explicit_legacy_wins_over_canonical_source(self) -> None:
        record = {"provenance": "LEGACY_OBSERVED", "source_system": "ods"}
        assert derive_provenance(record) is EnumProvenanceType.LEGACY_OBSERVED

    def test_explicit_enum_member(self) -> None:
        record = ModelProvenanceRecord(provenance=EnumProvenanceType.CANONICAL)
        assert derive_provenance(record) is EnumProvenanceType.CANONICAL

    def test_unknown_explicit_provenance_falls_through(self) -> None:
        record = {"provenance": "canonical", "observed_via": "scraper"}
        assert derive_provenance(record) is EnumProvenanceType.LEGACY_OBSERVED
        assert explain_provenance(record) == "observed_via"

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            (True, EnumProvenanceType.CANONICAL),
            (False, EnumProvenanceType.LEGACY_OBSERVED),
        ],
    )
    def test_explicit_flag(self, flag: bool, expected: EnumProvenanceType) -> None:
        record = {"is_canonical": flag, "source_system": "primary-db"}
        assert derive_provenance(record) is expected
        assert explain_provenance(record) == "explicit_flag"

    @pytest.mark.parametrize("source", ["ODS", "canonical_store", "Primary CRM"])
    def test_canonical_source_markers(self, source: str) -> None:
        assert derive_provenance({"source_system": source}) is EnumProvenanceType.CANONICAL
        assert explain_provenance({"source_system": source}) == "canonical_source"

    def test_non_canonical_source_defaults_to_legacy(self) -> None:
        record = {"source_system": "spreadsheet"}
        assert derive_provenance(record) is EnumProvenanceType.LEGACY_OBSERVED
        assert explain_provenance(record) == "default"

    def test_observed_via(self) -> None:
        record = {"observed_via": "legacy_sync"}
        assert derive_provenance(record) is EnumProvenanceType.LEGACY_OBSERVED
        assert explain_provenance(record) == "observed_via"

    @pytest.mark.parametrize("record", [None, {}, "not a record", 12])
    def test_no_evidence_is_never_canonical(self, record: Any) -> None:
        assert derive_provenance(record) is EnumProvenanceType.LEGACY_OBSERVED
        assert explain_provenance(record) == "default"

    def test_ill_typed_flag_is_ignored(self) -> None:
        record = {"is_canonical": "yes", "source_system": "ods"}
        assert explain_provenance(record) == "canonical_source"


@pytest.mark.unit
@pytest.mark.provenance
class TestClassificationRules:
    def test_rule_table_ends_with_default(self) -> None:
        assert PROVENANCE_RULES[-1].name == "default"
        assert [rule.name for rule in PROVENANCE_RULES] == [
            "explicit_provenance",
            "explicit_flag",
            "canonical_source",
            "observed_via",
            "default",
        ]

    def test_first_matching_rule_raises_without_default(self) -> None:
        rules = (
            ClassificationRule(
                name="never", predicate=lambda _value: False, result=lambda _value: "x"
            ),
        )
        with pytest.raises(LookupError):
            first_matching_rule(rules, 1)


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.provenance
class TestProvenancePresentation:
    def test_labels(self) -> None:
        assert get_provenance_label(EnumProvenanceType.CANONICAL) == "Canonical"
        assert get_provenance_label("LEGACY_OBSERVED") == "Legacy (Observed)"

    def test_styles(self) -> None:
        assert get_provenance_style(EnumProvenanceType.CANONICAL).bg == "#DBEAFE"
        assert get_provenance_style(EnumProvenanceType.LEGACY_OBSERVED).bg == "#FEF3C7"

    def test_unknown_value_renders_as_legacy(self) -> None:
        assert get_provenance_label("SOMETHING") == "Legacy (Observed)"


# ---------------------------------------------------------------------------
# Record classification and node
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.provenance
class TestClassifyRecord:
    def test_bundles_both_classifications(self) -> None:
        classification = classify_record(
            {"source_system": "ods_warehouse", "validation_status": "validated"}
        )
        assert classification.provenance is EnumProvenanceType.CANONICAL
        assert classification.provenance_rule == "canonical_source"
        assert classification.confidence is EnumMetricConfidence.SAFE
        assert classification.confidence_rule == "validated"

    def test_empty_record(self) -> None:
        classification = classify_record({})
        assert classification.provenance is EnumProvenanceType.LEGACY_OBSERVED
        assert classification.confidence is EnumMetricConfidence.CONDITIONAL
        assert classification.confidence_rule == "default"

    def test_derived_provenance_does_not_feed_confidence(self) -> None:
        classification = classify_record({"observed_via": "scraper"})
        assert classification.provenance is EnumProvenanceType.LEGACY_OBSERVED
        assert classification.confidence_rule == "default"

    @pytest.mark.asyncio
    async def test_node_compute_delegates_to_handler(self) -> None:
        container = ModelONEXContainer()
        node = NodeProvenanceClassifierCompute(container)
        classification = await node.compute(
            ModelClassificationInput(
                record={"provenance": "CANONICAL", "confidence": "blocked"}
            )
        )
        assert classification.provenance is EnumProvenanceType.CANONICAL
        assert classification.confidence is EnumMetricConfidence.BLOCKED
