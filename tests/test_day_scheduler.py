"""다일차 일정 배정 알고리즘 테스트."""

import random

import pytest

from app.core.planner_policy import PlannerPolicyConfig
from app.schemas.trip import UserPreferenceProfile
from app.services.candidate_filter import parse_duration_hours
from app.services.day_scheduler import schedule_days
from tests.mocks.sample_trips import make_destination

CONFIG = PlannerPolicyConfig()


@pytest.fixture()
def kandy_candidates():
    """캔디 근교 후보와 멀리 떨어진 요새, 신뢰도가 낮은 장소."""
    return [
        make_destination("1", "Main Temple", latitude=7.29, longitude=80.64, confidence=0.99, duration="3 hours"),
        make_destination("2", "Nearby Lake", latitude=7.292, longitude=80.642, confidence=0.8, duration="2 hours"),
        make_destination("3", "Far Away Fort", latitude=8.0, longitude=81.0, confidence=0.95, duration="4 hours"),
        make_destination("TRASH", "Trash Place", latitude=7.29, longitude=80.64, confidence=0.1, duration="1 hour"),
    ]


def test_groups_nearby_places_and_filters_noise(kandy_candidates) -> None:
    days = schedule_days(kandy_candidates, 2, config=CONFIG, rng=random.Random(0))

    assert [[d.place_name for d in day.destinations] for day in days] == [
        ["Main Temple", "Nearby Lake"],
        ["Far Away Fort"],
    ]
    assert [day.day_number for day in days] == [1, 2]
    assert days[0].total_hours == 5
    assert days[0].grouping_reason
    assert days[1].grouping_reason is None


def test_first_day_starts_with_highest_confidence(kandy_candidates) -> None:
    days = schedule_days(list(reversed(kandy_candidates)), 3, config=CONFIG)

    assert days[0].destinations[0].id == "1"


def test_confidence_ties_keep_input_order() -> None:
    candidates = [
        make_destination("first", latitude=7.0, longitude=80.0, confidence=0.8, duration="Full day"),
        make_destination("second", latitude=7.0, longitude=80.0, confidence=0.8, duration="Full day"),
    ]

    days = schedule_days(candidates, 2, config=CONFIG)

    assert [day.destinations[0].id for day in days] == ["first", "second"]


def test_every_day_respects_hour_budget() -> None:
    candidates = [
        make_destination(str(i), latitude=7.0 + i * 0.01, longitude=80.0, confidence=0.5 + i * 0.01, duration=f"{1 + i % 3} hours")
        for i in range(12)
    ]

    days = schedule_days(candidates, 5, config=CONFIG)

    for day in days:
        hours = sum(parse_duration_hours(d.metadata.duration) for d in day.destinations)
        assert hours <= CONFIG.max_hours_per_day
        assert hours == day.total_hours


def test_never_schedules_ineligible_destinations() -> None:
    candidates = [
        make_destination("ok", confidence=0.9),
        make_destination("low", confidence=0.2),
        make_destination("unknown", confidence=None),
        make_destination("nowhere", latitude=None, longitude=None, confidence=1.0),
    ]

    days = schedule_days(candidates, 3, config=CONFIG)
    scheduled = [d.id for day in days for d in day.destinations]

    assert scheduled == ["ok"]


def test_nearest_neighbor_follows_last_added_stop() -> None:
    candidates = [
        make_destination("anchor", latitude=0.0, longitude=0.0, confidence=0.99, duration="1 hour"),
        make_destination("far", latitude=0.0, longitude=0.3, confidence=0.9, duration="1 hour"),
        make_destination("mid", latitude=0.0, longitude=0.1, confidence=0.5, duration="1 hour"),
        make_destination("next", latitude=0.0, longitude=0.2, confidence=0.5, duration="1 hour"),
    ]

    days = schedule_days(candidates, 1, config=CONFIG)

    assert [d.id for d in days[0].destinations] == ["anchor", "mid", "next", "far"]


def test_skips_candidates_that_would_overflow_the_day() -> None:
    candidates = [
        make_destination("anchor", latitude=0.0, longitude=0.0, confidence=0.99, duration="4 hours"),
        make_destination("close-long", latitude=0.0, longitude=0.01, confidence=0.9, duration="Half day"),
        make_destination("far-short", latitude=0.0, longitude=0.5, confidence=0.9, duration="3 hours"),
    ]

    days = schedule_days(candidates, 2, config=CONFIG)

    assert [d.id for d in days[0].destinations] == ["anchor", "far-short"]
    assert [d.id for d in days[1].destinations] == ["close-long"]


def test_returns_fewer_days_when_pool_runs_out(kandy_candidates) -> None:
    days = schedule_days(kandy_candidates, 10, config=CONFIG)

    assert len(days) == 2


def test_empty_pool_returns_empty_list() -> None:
    assert schedule_days([], 3, config=CONFIG) == []
    assert schedule_days([make_destination("x", confidence=0.1)], 3, config=CONFIG) == []


def test_rejects_non_positive_day_count(kandy_candidates) -> None:
    with pytest.raises(ValueError):
        schedule_days(kandy_candidates, 0, config=CONFIG)


def test_repeated_calls_on_same_objects_are_independent(kandy_candidates) -> None:
    first = schedule_days(kandy_candidates, 2, config=CONFIG)
    second = schedule_days(kandy_candidates, 2, config=CONFIG)

    assert [[d.id for d in day.destinations] for day in first] == [[d.id for d in day.destinations] for day in second]


def test_preference_profile_changes_priority() -> None:
    candidates = [
        make_destination("culture-1", "Ancient Temple", latitude=0.0, longitude=0.0, confidence=0.6, category="culture"),
        make_destination("food-1", "Street Food Market", latitude=0.0, longitude=1.0, confidence=0.6, category="food"),
    ]

    foodie = schedule_days(candidates, 1, profile=UserPreferenceProfile(liked_categories=["food"]), config=CONFIG)
    historian = schedule_days(candidates, 1, profile=UserPreferenceProfile(liked_categories=["culture"]), config=CONFIG)

    assert foodie[0].destinations[0].place_name == "Street Food Market"
    assert historian[0].destinations[0].place_name == "Ancient Temple"


def test_previously_visited_place_survives_threshold() -> None:
    gem = make_destination("gem-1", "Hidden Gem", confidence=0.3, category="relaxation")

    assert schedule_days([gem], 1, config=CONFIG) == []

    days = schedule_days([gem], 1, profile=UserPreferenceProfile(previously_visited_ids=["gem-1"]), config=CONFIG)
    assert days[0].destinations[0].place_name == "Hidden Gem"
