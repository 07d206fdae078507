"""Bills in gross-store units."""

from typing import Mapping, MutableMapping, Optional

_UNITS = {
    "quarter_of_a_dozen": 3,
    "half_of_a_dozen": 6,
    "dozen": 12,
    "small_gross": 120,
    "gross": 144,
    "great_gross": 1728,
}


def units() -> dict[str, int]:
    """Return the store's units and their quantities."""
    return dict(_UNITS)


def new_bill() -> dict[str, int]:
    """Return an empty bill."""
    return {}


def add_item(bill: MutableMapping[str, int], units: Mapping[str, int], item: str, unit: str) -> bool:
    """Add one ``unit`` of ``item`` to the bill; False if the unit is unknown."""
    quantity = units.get(unit)
    if quantity is None:
        return False
    bill[item] = bill.get(item, 0) + quantity
    return True


def remove_item(bill: MutableMapping[str, int], units: Mapping[str, int], item: str, unit: str) -> bool:
    """Remove one ``unit`` of ``item`` from the bill.

    Returns False if the unit is unknown or zero, the item is not on the bill,
    or the bill holds less than one unit of it. An item reduced to zero is deleted.
    """
    quantity = units.get(unit)
    if not quantity:
        return False
    current = bill.get(item)
    if current is None:
        return False
    if current == quantity:
        del bill[item]
    elif current > quantity:
        bill[item] = current - quantity
    return current >= quantity


def get_item(bill: Mapping[str, int], item: str) -> Optional[int]:
    """Return the quantity of ``item`` on the bill, or None if it is absent."""
    return bill.get(item)