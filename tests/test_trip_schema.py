"""일정 값 객체 스키마 검증 테스트."""

import pytest
from pydantic import ValidationError

from app.schemas.trip import TripDestination


def test_destination_requires_place_name() -> None:
    with pytest.raises(ValidationError):
        TripDestination(
            id="blank",
            place_name="",
            metadata={"duration": "2 hours", "category": "culture"},
        )


def test_destination_accepts_camel_case_payload() -> None:
    destination = TripDestination.model_validate(
        {
            "id": "lake",
            "placeName": "Kandy Lake",
            "metadata": {"duration": "1 hour", "category": "relaxation", "bestTimeToVisit": "Evening"},
            "confidenceScore": 0.7,
        }
    )

    assert destination.place_name == "Kandy Lake"
    assert destination.metadata.best_time_to_visit == "Evening"
    assert destination.confidence == 0.7
