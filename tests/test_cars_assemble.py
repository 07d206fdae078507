import pytest

from practice_kit.cars_assemble import (
    calculate_cost,
    calculate_working_cars_per_hour,
    calculate_working_cars_per_minute,
)


@pytest.mark.parametrize(
    "rate, success, expected",
    [
        (0, 100, 0.0),
        (221, 100, 221.0),
        (426, 80, 340.8),
        (6824, 20.5, 1398.92),
        (8000, 0, 0.0),
    ],
)
def test_working_cars_per_hour(rate, success, expected):
    assert calculate_working_cars_per_hour(rate, success) == pytest.approx(
        expected, rel=1e-9, abs=1e-9
    )


@pytest.mark.parametrize(
    "rate, success, expected",
    [
        (0, 100, 0),
        (221, 100, 3),
        (426, 80, 5),
        (6824, 20.5, 23),
        (8000, 0, 0),
    ],
)
def test_working_cars_per_minute(rate, success, expected):
    assert calculate_working_cars_per_minute(rate, success) == expected


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, 0),
        (1, 10000),
        (2, 20000),
        (9, 90000),
        (10, 95000),
        (100, 950000),
        (21, 200000),
        (37, 355000),
        (56, 535000),
        (148, 1410000),
    ],
)
def test_calculate_cost(count, expected):
    assert calculate_cost(count) == expected