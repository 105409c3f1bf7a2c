"""일정 계획/수정 API 요청·응답 스키마."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.schemas.enums import ChangeType
from app.schemas.trip import DayPlan, QualityReport, TripDestination, TripPlan, UserPreferenceProfile


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScheduleRequest(_ApiModel):
    """다일차 일정 생성 요청 모델.

    Fields:
        query: 사용자가 입력한 검색어 (있으면 검증 후 진행)
        destinations: 검색 단계에서 받은 후보 장소 목록
        number_of_days: 요청 일수
        preferences: 개인화 가중치용 사용자 이력
    """

    query: str | None = Field(default=None, description="사용자 검색어")
    destinations: list[TripDestination] = Field(default_factory=list, description="신뢰도 점수가 포함된 후보 장소")
    number_of_days: int = Field(..., ge=1, le=30, description="요청 일수")
    preferences: UserPreferenceProfile | None = Field(default=None, description="사용자 선호/이력")


class ScheduleResponse(_ApiModel):
    """다일차 일정 생성 응답 모델."""

    input_error: str | None = Field(default=None, description="검색어 검증 실패 메시지")
    quality: QualityReport | None = Field(default=None, description="검색 결과 품질 분석")
    days: list[DayPlan] = Field(default_factory=list, description="일차별 일정")


class TripChange(_ApiModel):
    """일정 변경 내용.

    Fields:
        type: 변경 유형
        reason: 사용자가 남긴 변경 사유
        value: DELAY 시 지연 시간(분)
        from_index: REORDER 시 이동할 장소 위치 (0-based)
        to_index: REORDER 시 도착 위치 (0-based)
        destination: ADD_PLACE 시 추가할 장소
        destination_id: REMOVE_PLACE 시 삭제할 장소 ID
    """

    type: ChangeType = Field(..., description="변경 유형 (REORDER / DELAY / ADD_PLACE / REMOVE_PLACE)")
    reason: str | None = Field(default=None, description="변경 사유")
    value: int | None = Field(default=None, ge=0, description="지연 시간(분)")
    from_index: int | None = Field(default=None, ge=0, description="이동할 장소 위치")
    to_index: int | None = Field(default=None, ge=0, description="도착 위치")
    destination: TripDestination | None = Field(default=None, description="추가할 장소")
    destination_id: str | None = Field(default=None, description="삭제할 장소 ID")

    @model_validator(mode="after")
    def validate_required_fields(self):
        required = {
            ChangeType.REORDER: ("from_index", "to_index"),
            ChangeType.DELAY: ("value",),
            ChangeType.ADD_PLACE: ("destination",),
            ChangeType.REMOVE_PLACE: ("destination_id",),
        }[self.type]
        missing = [name for name in required if getattr(self, name) is None]
        if missing:
            raise ValueError(f"{self.type} 변경에는 {', '.join(missing)} 값이 필요합니다.")
        return self


class TripUpdateRequest(_ApiModel):
    """일정 수정 요청 모델."""

    trip_id: str = Field(..., min_length=1, description="여행 ID")
    change: TripChange = Field(..., description="변경 내용")
    current_plan: TripPlan = Field(..., description="현재 일정")

    @model_validator(mode="after")
    def validate_trip_id_matches_plan(self):
        if self.trip_id != self.current_plan.trip_id:
            raise ValueError("trip_id가 current_plan의 trip_id와 일치하지 않습니다.")
        return self


class TripUpdateResponse(_ApiModel):
    """일정 수정 응답 모델."""

    trip_id: str = Field(..., description="여행 ID")
    updated_plan: TripPlan = Field(..., description="수정된 일정")
    explanation: str = Field(..., description="수정 내용 설명")
    warnings: list[str] = Field(default_factory=list, description="경고 메시지 목록")
    state_message: str = Field(..., description="진행 상태 문구")


class QueryValidationRequest(_ApiModel):
    """검색어 검증 요청 모델."""

    query: str = Field(default="", description="사용자 검색어")


class QueryValidationResponse(_ApiModel):
    """검색어 검증 응답 모델."""

    valid: bool = Field(..., description="검증 통과 여부")
    message: str | None = Field(default=None, description="검증 실패 안내 메시지")
