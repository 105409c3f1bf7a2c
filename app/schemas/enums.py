"""일정 엔진 공용 Enum 정의."""

from enum import StrEnum


class Category(StrEnum):
    """장소 카테고리."""

    ADVENTURE = "adventure"
    RELAXATION = "relaxation"
    CULTURE = "culture"
    SHOPPING = "shopping"
    FOOD = "food"


class ExplanationKind(StrEnum):
    """설명 문구 템플릿 종류."""

    REORDER = "REORDER"
    DELAY_DROP = "DELAY_DROP"
    DAY_GROUPING = "DAY_GROUPING"
    PREFERENCE_MATCH = "PREFERENCE_MATCH"


class ResponseQualityStatus(StrEnum):
    """검색 결과 품질 상태."""

    EMPTY = "EMPTY"
    LOW_CONFIDENCE = "LOW_CONFIDENCE"
    PARTIAL_CONTENT = "PARTIAL_CONTENT"
    OK = "OK"


class ChangeType(StrEnum):
    """일정 수정 요청 유형."""

    REORDER = "REORDER"
    DELAY = "DELAY"
    ADD_PLACE = "ADD_PLACE"
    REMOVE_PLACE = "REMOVE_PLACE"
