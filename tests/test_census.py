import pytest

from practice_kit.census import Resident, count


def test_new_resident_with_no_data():
    resident = Resident()
    assert (resident.name, resident.age, resident.address) == ("", 0, None)


def test_new_resident_with_all_data():
    resident = Resident("Matthew Sanabria", 29, {"street": "Main St."})
    assert resident == Resident(
        name="Matthew Sanabria", age=29, address={"street": "Main St."}
    )


@pytest.mark.parametrize(
    "resident, expected",
    [
        (Resident(), False),
        (Resident("Matthew Sanabria", 29, {"street": "Main St."}), True),
        (Resident("", 29, {"street": "Main St."}), False),
        (Resident("Rob Pike", 0, None), False),
        (Resident("Rob Pike", 0, {}), False),
        (Resident("Hossein", 30, {"street": ""}), False),
        (Resident("Rob Pike", 0, {"street": "Main St."}), True),
        (Resident("Rob Pike", 0, {"unknown key": "with value"}), False),
    ],
)
def test_has_required_info(resident, expected):
    assert resident.has_required_info() is expected


@pytest.mark.parametrize(
    "resident",
    [
        Resident(),
        Resident("Matthew Sanabria", 29, {"street": "Main St."}),
        Resident("Rob Pike", 0, {}),
    ],
)
def test_delete(resident):
    resident.delete()
    assert resident == Resident()
    assert resident.address is None


def test_count_no_data():
    assert count([Resident()]) == 0


def test_count_all_data():
    assert count([Resident("Matthew Sanabria", 29, {"street": "Main St."})]) == 1


def test_count_some_data():
    residents = [
        Resident("Matthew Sanabria", 29, {"street": "Main St."}),
        Resident("Rob Pike", 0, {}),
        Resident("", 0, {}),
        Resident("", 0, {"street": "Main St."}),
        Resident("", 0, {"city": "London"}),
    ]
    assert count(residents) == 1