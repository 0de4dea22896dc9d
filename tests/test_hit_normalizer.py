import pytest

from application.hit_normalizer import (
    END_FIELDS,
    START_FIELDS,
    HitNormalizer,
    looks_like_milliseconds,
    normalize,
)
from domain import NormalizedRange


def test_missing_fields_give_zero_range():
    assert normalize({"text": "hello", "score": 0.9}, 120.0) == NormalizedRange(0.0, 0.0)
    assert normalize({}, None) == NormalizedRange(0.0, 0.0)


def test_non_mapping_hit_is_treated_as_empty():
    assert normalize(None, 10.0) == NormalizedRange(0.0, 0.0)
    assert normalize(["start", 3], 10.0) == NormalizedRange(0.0, 0.0)


def test_clock_strings():
    assert normalize({"start": "1:30", "end": "1:45"}, 200.0) == NormalizedRange(90.0, 105.0)


def test_end_before_start_is_equalized():
    result = normalize({"start": 50, "end": 20}, 100.0)
    assert result.start == 50.0
    assert result.end == 50.0


def test_missing_end_defaults_to_start():
    assert normalize({"start": 12.5}, 100.0) == NormalizedRange(12.5, 12.5)


@pytest.mark.parametrize("start_field, end_field", list(zip(START_FIELDS, END_FIELDS)))
def test_every_alias_is_recognized(start_field, end_field):
    assert normalize({start_field: "10", end_field: "12s"}, 100.0) == NormalizedRange(10.0, 12.0)


def test_alias_priority_and_skip_of_unparseable_values():
    hit = {"start": "garbage", "start_time": 7, "startTime": 9, "end": None, "end_ts": "0:08"}
    assert normalize(hit, 100.0) == NormalizedRange(7.0, 8.0)


def test_custom_accessor_list_is_additive():
    normalizer = HitNormalizer(
        start_accessors=[lambda hit: hit.get("from")],
        end_accessors=[lambda hit: hit.get("to")],
    )
    assert normalizer.normalize({"from": 3, "to": 4}, 10.0) == NormalizedRange(3.0, 4.0)


@pytest.mark.parametrize("duration, value", [
    (185.4, 90_000),
    (10.0, 12_000),
    (3600.0, 5_400_000),
    (30.0, 44.5 * 1000),
])
def test_milliseconds_detected_against_duration(duration, value):
    assert value > 1.5 * duration and value / 1000 <= 1.5 * duration
    result = normalize({"start": value}, duration)
    assert result.start == pytest.approx(min(max(value / 1000, 0.0), duration))


def test_both_bounds_share_the_unit_decision():
    # only end looks like milliseconds, both are divided
    result = normalize({"start": 50, "end": 95_000}, 100.0)
    assert result == NormalizedRange(0.05, 95.0)


def test_milliseconds_without_duration():
    assert normalize({"start": 90_000, "end": 105_000}, None) == NormalizedRange(90.0, 105.0)


def test_seconds_without_duration_stay_seconds():
    assert normalize({"start": 120, "end": 180}, None) == NormalizedRange(120.0, 180.0)


def test_seconds_within_duration_are_not_rescaled():
    # 1200 s is plausible for a one hour clip
    assert normalize({"start": 1200, "end": 1260}, 3600.0) == NormalizedRange(1200.0, 1260.0)


def test_known_approximation_for_ten_minute_clips_without_duration():
    # A genuine 620 s offset cannot be told apart from 620 ms without a duration
    assert normalize({"start": 620}, None).start == pytest.approx(0.62)


def test_renormalizing_without_duration_is_not_stable():
    # Same approximation: once rescaled, 700 s reads as milliseconds again
    once = normalize({"start": 700_000}, None)
    assert once.start == pytest.approx(700.0)
    assert normalize({"start": once.start}, None).start == pytest.approx(0.7)


def test_undecided_against_duration_falls_back_to_bare_rule():
    assert looks_like_milliseconds(50_000, 10.0) is True
    assert normalize({"start": 50_000}, 10.0) == NormalizedRange(10.0, 10.0)


@pytest.mark.parametrize("hint", [None, 0, -5, float("nan"), float("inf"), "abc"])
def test_unusable_duration_hints_only_floor_at_zero(hint):
    assert normalize({"start": -3, "end": 40}, hint) == NormalizedRange(0.0, 40.0)


@pytest.mark.parametrize("hit", [
    {"start": 0, "end": 500},
    {"start": -10, "end": -2},
    {"start": "9:59", "end": "10:30"},
    {"start": 1e9, "end": 2e9},
    {"start": 199.9, "end": 250},
])
def test_clamp_law(hit):
    duration = 200.0
    result = normalize(hit, duration)
    assert 0.0 <= result.start <= duration
    assert 0.0 <= result.end <= duration
    assert result.end >= result.start


@pytest.mark.parametrize("hit, duration", [
    ({"start": "1:30", "end": "1:45"}, 200.0),
    ({"start": 90_000, "end": 95_000}, 185.4),
    ({"start": 500, "end": 10}, 600.0),
    ({"start_ts": "12.3s"}, 30.0),
])
def test_normalizing_twice_changes_nothing(hit, duration):
    once = normalize(hit, duration)
    twice = normalize({"start": once.start, "end": once.end}, duration)
    assert twice == once
