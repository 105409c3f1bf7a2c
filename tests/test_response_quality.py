"""검색어 검증 및 결과 품질 분류 테스트."""

import pytest

from app.core.planner_policy import PlannerPolicyConfig
from app.schemas.enums import ResponseQualityStatus
from app.services.response_quality import analyze_response_quality, validate_input
from tests.mocks.sample_trips import make_destination

CONFIG = PlannerPolicyConfig()


def test_validate_input_empty_mentions_destination() -> None:
    assert "destination" in validate_input("")
    assert "destination" in validate_input("   ")
    assert "destination" in validate_input(None)


def test_validate_input_short_query() -> None:
    assert "short" in validate_input("Hi")
    assert "short" in validate_input("  ab  ")


@pytest.mark.parametrize("query", ["???", "!!!!", "@#$%^"])
def test_validate_input_rejects_nonsense(query) -> None:
    assert validate_input(query) == "Please use valid text characters."


@pytest.mark.parametrize("query", ["Kandy", "Beaches near Galle!", "캔디 사원"])
def test_validate_input_accepts_real_queries(query) -> None:
    assert validate_input(query) is None


def test_validate_input_messages_are_distinct() -> None:
    assert len({validate_input(""), validate_input("Hi"), validate_input("???")}) == 3


def test_analyze_empty_results() -> None:
    report = analyze_response_quality([], config=CONFIG)

    assert report.status == ResponseQualityStatus.EMPTY
    assert "broader" in report.message


def test_analyze_single_high_confidence_result_is_partial() -> None:
    report = analyze_response_quality([make_destination("a", confidence=0.95)], config=CONFIG)

    assert report.status == ResponseQualityStatus.PARTIAL_CONTENT
    assert report.message


def test_analyze_low_confidence_top_result() -> None:
    report = analyze_response_quality(
        [make_destination("a", confidence=0.3), make_destination("b", confidence=0.9)],
        config=CONFIG,
    )

    assert report.status == ResponseQualityStatus.LOW_CONFIDENCE
    assert "alternatives" in report.message


def test_analyze_missing_confidence_counts_as_low() -> None:
    report = analyze_response_quality([make_destination("a", confidence=None)], config=CONFIG)

    assert report.status == ResponseQualityStatus.LOW_CONFIDENCE


def test_analyze_two_confident_results_is_ok() -> None:
    report = analyze_response_quality(
        [make_destination("a", confidence=0.8), make_destination("b", confidence=0.7)],
        config=CONFIG,
    )

    assert report.status == ResponseQualityStatus.OK
    assert report.message is None


def test_analyze_respects_configured_thresholds() -> None:
    strict = PlannerPolicyConfig(low_confidence_threshold=0.6, partial_content_max_results=2)
    results = [make_destination("a", confidence=0.55), make_destination("b", confidence=0.5)]

    assert analyze_response_quality(results, config=strict).status == ResponseQualityStatus.LOW_CONFIDENCE
    assert (
        analyze_response_quality([make_destination("a", confidence=0.9)] * 2, config=strict).status
        == ResponseQualityStatus.PARTIAL_CONTENT
    )
