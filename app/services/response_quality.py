"""검색어 검증 및 검색 결과 품질 분류 서비스."""

from __future__ import annotations

from typing import Sequence

from app.core.planner_policy import PlannerPolicyConfig, resolve_planner_policy
from app.schemas.enums import ResponseQualityStatus
from app.schemas.trip import QualityReport, TripDestination

_MIN_QUERY_LENGTH = 3

EMPTY_QUERY_MESSAGE = "Please enter a destination or interest."
SHORT_QUERY_MESSAGE = "Query is too short. Please be more specific."
INVALID_QUERY_MESSAGE = "Please use valid text characters."

EMPTY_RESULT_MESSAGE = 'No places found. Try a broader search like "Beaches" or "Kandy".'
LOW_CONFIDENCE_MESSAGE = "We couldn't find exact matches, but here are some popular alternatives you might like."
PARTIAL_CONTENT_MESSAGE = "We found a few great spots, but you might need to add more for a full trip."


def validate_input(query: str | None) -> str | None:
    """검색어가 안전하면 None을, 아니면 사용자 안내 메시지를 반환합니다."""
    text = (query or "").strip()
    if not text:
        return EMPTY_QUERY_MESSAGE
    if len(text) < _MIN_QUERY_LENGTH:
        return SHORT_QUERY_MESSAGE
    if not any(char.isalnum() for char in text):
        return INVALID_QUERY_MESSAGE
    return None


def analyze_response_quality(
    destinations: Sequence[TripDestination],
    *,
    config: PlannerPolicyConfig | None = None,
) -> QualityReport:
    """이미 순위가 매겨진 검색 결과의 품질 상태를 분류합니다.

    첫 번째 결과를 최상위 결과로 간주하며 다시 정렬하지 않습니다.
    """
    resolved_config = resolve_planner_policy(config)

    if not destinations:
        return QualityReport(status=ResponseQualityStatus.EMPTY, message=EMPTY_RESULT_MESSAGE)

    if destinations[0].confidence < resolved_config.low_confidence_threshold:
        return QualityReport(status=ResponseQualityStatus.LOW_CONFIDENCE, message=LOW_CONFIDENCE_MESSAGE)

    if len(destinations) <= resolved_config.partial_content_max_results:
        return QualityReport(status=ResponseQualityStatus.PARTIAL_CONTENT, message=PARTIAL_CONTENT_MESSAGE)

    return QualityReport(status=ResponseQualityStatus.OK, message=None)
