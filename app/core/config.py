"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    SERVICE_SECRET: str = ""
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type,x-service-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True

    PLANNER_MIN_CONFIDENCE: float = 0.4
    PLANNER_MAX_HOURS_PER_DAY: float = 7.0
    PLANNER_DEFAULT_ACTIVITY_HOURS: int = 2
    PLANNER_DELAY_DROP_MINUTES: int = 120
    PLANNER_DELAY_MIN_STOPS: int = 2
    PLANNER_LOW_CONFIDENCE_THRESHOLD: float = 0.5
    PLANNER_PARTIAL_CONTENT_MAX_RESULTS: int = 1
    PLANNER_LIKED_CATEGORY_MULTIPLIER: float = 1.15
    PLANNER_VISITED_BOOST: float = 0.25

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("PLANNER_MIN_CONFIDENCE", "PLANNER_LOW_CONFIDENCE_THRESHOLD", mode="before")
    @classmethod
    def _clamp_confidence_threshold(cls, value: object, info: ValidationInfo) -> float:
        default = cls.model_fields[info.field_name].default
        try:
            numeric = float(value) if value is not None else default
        except (TypeError, ValueError):
            numeric = default
        return min(1.0, max(0.0, numeric))

    @field_validator("PLANNER_MAX_HOURS_PER_DAY", mode="before")
    @classmethod
    def _clamp_max_hours_per_day(cls, value: object) -> float:
        try:
            numeric = float(value) if value is not None else 7.0
        except (TypeError, ValueError):
            numeric = 7.0
        return min(24.0, max(1.0, numeric))


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
