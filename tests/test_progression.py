import pytest

from liftlog.progression import (
    TREND_DECREASING,
    TREND_INCREASING,
    TREND_STABLE,
    analyze_progression,
    detect_trend,
    increment_for_trend,
)


def test_empty_history_has_no_analysis() -> None:
    assert analyze_progression([]) is None


def test_single_session_is_stable() -> None:
    result = analyze_progression([50])
    assert result is not None
    assert result.trend == TREND_STABLE
    assert result.suggested_increase == 2.5
    assert result.average_weight == 50
    assert result.last_weight == 50
    assert result.session_count == 1


def test_rising_weights_are_increasing() -> None:
    # second half 60 vs first half (50 + 55) / 2 = 52.5
    result = analyze_progression([50, 55, 60])
    assert result is not None
    assert result.trend == TREND_INCREASING
    # 2.5 * 1.5 = 3.75
    assert result.suggested_increase == 4.0
    assert result.average_weight == 55
    assert result.last_weight == 60
    assert result.session_count == 3


def test_falling_weights_hold_the_load() -> None:
    result = analyze_progression([60, 55, 50])
    assert result is not None
    assert result.trend == TREND_DECREASING
    assert result.suggested_increase == 0


def test_average_is_rounded_to_half_kg() -> None:
    result = analyze_progression([50, 52.6])
    assert result is not None
    assert result.average_weight == 51.5


def test_custom_increment() -> None:
    stable = analyze_progression([100, 100], standard_increment=5)
    rising = analyze_progression([90, 100], standard_increment=5)
    assert stable is not None and rising is not None
    assert stable.suggested_increase == 5
    assert rising.suggested_increase == 7.5


class TestDetectTrend:
    @pytest.mark.parametrize(
        ("weights", "expected"),
        [
            ([100, 100.5], TREND_STABLE),
            ([100, 101], TREND_STABLE),
            ([100, 101.5], TREND_INCREASING),
            ([100, 99], TREND_STABLE),
            ([100, 98.5], TREND_DECREASING),
        ],
    )
    def test_threshold_is_more_than_one_kg(self, weights: list[float], expected: str) -> None:
        assert detect_trend(weights) == expected

    def test_odd_middle_element_belongs_to_first_half(self) -> None:
        # [50, 53] vs [51] is stable; [50] vs [53, 51] would be increasing
        assert detect_trend([50, 53, 51]) == TREND_STABLE

    def test_uneven_long_history(self) -> None:
        assert detect_trend([60, 60, 60, 61, 61]) == TREND_STABLE
        assert detect_trend([60, 60, 62.5, 65, 67.5]) == TREND_INCREASING

    def test_fewer_than_two_samples_is_stable(self) -> None:
        assert detect_trend([]) == TREND_STABLE
        assert detect_trend([42.5]) == TREND_STABLE


def test_increment_policy() -> None:
    assert increment_for_trend(TREND_INCREASING, 1) == 1.5
    assert increment_for_trend(TREND_STABLE, 1) == 1
    assert increment_for_trend(TREND_DECREASING, 10) == 0


def test_zero_means_are_compared_as_zero() -> None:
    assert detect_trend([0, 0]) == TREND_STABLE
    assert detect_trend([0, 2]) == TREND_INCREASING
    assert detect_trend([2, 0]) == TREND_DECREASING
    result = analyze_progression([0.0, 0.0])
    assert result is not None
    assert result.average_weight == 0
