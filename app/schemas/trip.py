"""여행 일정 값 객체 스키마.

모든 모델은 불변(frozen)이며, 변경은 `model_copy(update=...)`로 새 인스턴스를 만들어 수행합니다.
외부(JSON)에서는 camelCase 필드명을, 파이썬 코드에서는 snake_case 필드명을 사용합니다.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.enums import Category, ResponseQualityStatus


class _ValueModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Coordinates(_ValueModel):
    """장소 위경도 좌표."""

    latitude: float = Field(..., ge=-90.0, le=90.0, description="위도")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="경도")


class DestinationMetadata(_ValueModel):
    """장소 부가 정보."""

    duration: str = Field(..., description="소요 시간 자유 텍스트 (예: 2 hours, Half day, Full day)")
    category: Category = Field(..., description="장소 카테고리")
    best_time_to_visit: str | None = Field(default=None, description="추천 방문 시간대 (예: Morning, Night)")


class TripDestination(_ValueModel):
    """후보 장소 또는 일정 내 방문 장소."""

    id: str = Field(..., min_length=1, description="일정 내 고유 식별자")
    order: int = Field(default=0, ge=0, description="일정 내 방문 순서 (1부터 시작, 미배치 후보는 0)")
    place_name: str = Field(..., min_length=1, description="장소 이름")
    short_description: str = Field(default="", description="장소 한 줄 설명")
    coordinates: Coordinates | None = Field(default=None, description="좌표 (없으면 거리 계산에서 제외)")
    metadata: DestinationMetadata = Field(..., description="소요 시간/카테고리 등 부가 정보")
    confidence_score: float | None = Field(default=None, ge=0.0, le=1.0, description="검색 신뢰도 (0~1)")

    @property
    def confidence(self) -> float:
        """신뢰도 점수. 값이 없으면 0으로 취급합니다."""
        return self.confidence_score or 0.0


class TripPlan(_ValueModel):
    """단일 여행 일정."""

    trip_id: str = Field(..., description="여행 ID")
    title: str = Field(default="", description="여행 제목")
    destinations: list[TripDestination] = Field(default_factory=list, description="순서대로 정렬된 방문 장소")


class DayPlan(_ValueModel):
    """하루 단위 일정."""

    day_number: int = Field(..., ge=1, description="여행 N일차")
    destinations: list[TripDestination] = Field(default_factory=list, description="해당 일자에 배정된 장소")
    total_hours: float = Field(default=0.0, ge=0.0, description="배정된 장소의 총 예상 소요 시간")
    grouping_reason: str | None = Field(default=None, description="장소를 한 날로 묶은 이유")


class UserPreferenceProfile(_ValueModel):
    """개인화 가중치에 사용하는 사용자 이력."""

    liked_categories: list[Category] = Field(default_factory=list, description="선호 카테고리 목록")
    previously_visited_ids: list[str] = Field(default_factory=list, description="이전에 방문/직접 추가한 장소 ID")


class AdjustmentResult(_ValueModel):
    """일정 수정 결과."""

    updated_plan: TripPlan = Field(..., description="수정된 일정 (입력과 별개의 새 인스턴스)")
    explanation: str = Field(..., description="수정 내용 설명")
    warnings: list[str] = Field(default_factory=list, description="경고 메시지 목록")


class QualityReport(_ValueModel):
    """검색 결과 품질 분석 결과."""

    status: ResponseQualityStatus = Field(..., description="품질 상태")
    message: str | None = Field(default=None, description="대체 안내 메시지")
