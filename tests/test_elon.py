import pytest

from practice_kit.elon import Car


def test_new_car_starts_full_and_unmoved():
    car = Car(speed=5, battery_drain=2)
    assert car.battery == 100
    assert car.distance == 0


@pytest.mark.parametrize(
    "car, expected",
    [
        (Car(5, 2, 100, 0), Car(5, 2, 98, 5)),
        (Car(5, 7, 3, 0), Car(5, 7, 3, 0)),
    ],
    ids=["drive once", "battery below drain"],
)
def test_drive(car, expected):
    car.drive()
    assert car == expected


def test_display_distance():
    assert Car(5, 2, 100, 0).display_distance() == "Driven 0 meters"


def test_display_battery():
    assert Car(5, 2, 100, 0).display_battery() == "Battery at 100%"


@pytest.mark.parametrize(
    "car, track, expected",
    [
        (Car(speed=5, battery_drain=2, battery=100), 100, True),
        (Car(speed=5, battery_drain=2, battery=40), 100, True),
        (Car(speed=3, battery_drain=3, battery=60), 61, False),
        (Car(speed=5, battery_drain=2, battery=30), 100, False),
    ],
)
def test_can_finish(car, track, expected):
    assert car.can_finish(track) is expected