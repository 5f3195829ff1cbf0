"""Tests for grouping, metrics, coverage and result combination."""

from __future__ import annotations

import pytest

from aears.parser import parse_document
from aears.processor.aggregation import (
    calculate_coverage,
    calculate_metrics,
    combine_results,
    empty_result,
    generate_groups,
)
from aears.processor.core import process_record
from aears.processor.models import SUPPORTED_DOMAINS, ExtractionResult, ProcessedRequirement


pytestmark = pytest.mark.unit


def _processed(text: str) -> list[ProcessedRequirement]:
    parsed = parse_document(text)
    return [process_record(r, i) for i, r in enumerate(parsed.requirements)]


def _result(requirements: list[ProcessedRequirement]) -> ExtractionResult:
    return ExtractionResult(
        requirements=requirements,
        groups=generate_groups(requirements),
        metrics=calculate_metrics(requirements),
        coverage=calculate_coverage(requirements),
    )


@pytest.fixture
def sample_requirements(sample_document: str) -> list[ProcessedRequirement]:
    return _processed(sample_document)


# ---------------------------------------------------------------------------
# generate_groups
# ---------------------------------------------------------------------------


class TestGenerateGroups:
    def test_categories_in_first_seen_order(self, sample_requirements):
        groups = generate_groups(sample_requirements)
        assert [g.name for g in groups] == ["security", "data", "user-interface", "business"]

    def test_themes(self, sample_requirements):
        groups = {g.name: g.theme for g in generate_groups(sample_requirements)}
        assert groups == {
            "security": "security-UB",
            "data": "data-EV",
            "user-interface": "user-interface-ST",
            "business": "business-UW",
        }

    def test_members_partition_ids(self, sample_requirements):
        groups = generate_groups(sample_requirements)
        member_ids = [rid for g in groups for rid in g.requirements]
        assert sorted(member_ids) == sorted(r.id for r in sample_requirements)
        assert len(member_ids) == len(set(member_ids))

    def test_ui_members(self, sample_requirements):
        groups = {g.name: g.requirements for g in generate_groups(sample_requirements)}
        assert groups["user-interface"] == ["req_003", "req_004", "req_007"]

    def test_empty(self):
        assert generate_groups([]) == []


# ---------------------------------------------------------------------------
# calculate_metrics
# ---------------------------------------------------------------------------


class TestCalculateMetrics:
    def test_totals(self, sample_requirements):
        metrics = calculate_metrics(sample_requirements)
        assert metrics.total_requirements == 7
        assert metrics.valid_requirements == 7

    def test_average_and_quality(self, sample_requirements):
        metrics = calculate_metrics(sample_requirements)
        assert metrics.average_confidence == pytest.approx(6.4 / 7)
        assert metrics.quality_score == pytest.approx(6.4 / 7)

    def test_pattern_distribution(self, sample_requirements):
        metrics = calculate_metrics(sample_requirements)
        assert metrics.pattern_distribution == {"UB": 2, "EV": 1, "ST": 1, "OP": 2, "UW": 1}
        assert sum(metrics.pattern_distribution.values()) == metrics.total_requirements

    def test_low_confidence_not_valid(self, ub_record):
        weak = process_record(ub_record.model_copy(update={"entity": ""}), 0)
        strong = process_record(ub_record, 1)
        metrics = calculate_metrics([weak, strong])
        assert weak.confidence == pytest.approx(0.5)
        assert metrics.valid_requirements == 1
        assert metrics.quality_score == pytest.approx(0.5 * (1.3 / 2))

    def test_empty_is_zero_not_nan(self):
        metrics = calculate_metrics([])
        assert metrics.total_requirements == 0
        assert metrics.valid_requirements == 0
        assert metrics.average_confidence == 0.0
        assert metrics.quality_score == 0.0
        assert metrics.pattern_distribution == {}


# ---------------------------------------------------------------------------
# calculate_coverage
# ---------------------------------------------------------------------------


class TestCalculateCoverage:
    def test_defaults_to_supported_domains(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements)
        assert list(coverage.domain_coverage) == list(SUPPORTED_DOMAINS)

    def test_domain_percentages(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements)
        assert coverage.domain_coverage["security"] == pytest.approx(100 / 7)
        assert coverage.domain_coverage["data"] == pytest.approx(100 / 7)
        assert coverage.domain_coverage["user-interface"] == pytest.approx(300 / 7)
        assert coverage.domain_coverage["business"] == pytest.approx(200 / 7)
        assert coverage.domain_coverage["performance"] == 0.0

    def test_overall_is_mean_of_domains(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements)
        assert coverage.overall_coverage == pytest.approx(12.5)

    def test_restricted_domains(self, sample_requirements):
        coverage = calculate_coverage(
            sample_requirements, ["system", "user-interface", "security", "performance"]
        )
        assert set(coverage.domain_coverage) == {"system", "user-interface", "security", "performance"}
        assert coverage.overall_coverage == pytest.approx((400 / 7) / 4)

    def test_pattern_coverage_lists_every_pattern(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements)
        assert set(coverage.pattern_coverage) == {"UB", "EV", "UW", "ST", "OP", "HY"}
        assert coverage.pattern_coverage["HY"] == 0.0
        assert coverage.pattern_coverage["OP"] == pytest.approx(200 / 7)
        assert sum(coverage.pattern_coverage.values()) == pytest.approx(100.0)

    def test_values_within_bounds(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements)
        for value in [*coverage.domain_coverage.values(), *coverage.pattern_coverage.values()]:
            assert 0.0 <= value <= 100.0

    def test_empty_is_zero(self):
        coverage = calculate_coverage([])
        assert coverage.overall_coverage == 0.0
        assert all(v == 0.0 for v in coverage.domain_coverage.values())

    def test_no_domains(self, sample_requirements):
        coverage = calculate_coverage(sample_requirements, [])
        assert coverage.domain_coverage == {}
        assert coverage.overall_coverage == 0.0


# ---------------------------------------------------------------------------
# combine_results
# ---------------------------------------------------------------------------


class TestCombineResults:
    def test_empty_list(self):
        assert combine_results([]) == empty_result()

    def test_single_result_returned_as_is(self, sample_requirements):
        result = _result(sample_requirements)
        assert combine_results([result]) is result

    def test_concatenates_in_order(self, sample_requirements):
        first = _result(sample_requirements[:3])
        second = _result(sample_requirements[3:])
        combined = combine_results([first, second])
        assert [r.id for r in combined.requirements] == [r.id for r in sample_requirements]
        assert len(combined.groups) == len(first.groups) + len(second.groups)

    def test_metrics_recomputed_over_union(self, sample_requirements):
        result = _result(sample_requirements)
        combined = combine_results([result, result])
        expected = calculate_metrics(sample_requirements + sample_requirements)
        assert combined.metrics == expected
        assert combined.metrics.total_requirements == 14

    def test_coverage_weighted_average(self, sample_requirements):
        first = _result(sample_requirements[:1])   # one security requirement
        second = _result(sample_requirements[1:2])  # one data requirement
        combined = combine_results([first, second])
        assert combined.coverage.domain_coverage["security"] == pytest.approx(50.0)
        assert combined.coverage.domain_coverage["data"] == pytest.approx(50.0)
        assert combined.coverage.overall_coverage == pytest.approx(100.0 / len(SUPPORTED_DOMAINS))

    def test_inputs_not_modified(self, sample_requirements):
        first = _result(sample_requirements[:2])
        second = _result(sample_requirements[2:])
        before = (first.model_copy(deep=True), second.model_copy(deep=True))
        combine_results([first, second])
        assert (first, second) == before
