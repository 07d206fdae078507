"""Collecting census data about residents."""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class Resident:
    """A resident of the city."""

    name: str = ""
    age: int = 0
    address: Optional[dict[str, str]] = None

    def has_required_info(self) -> bool:
        """Tell whether the resident has a name and a non-empty street."""
        if not self.name or not self.address:
            return False
        return bool(self.address.get("street"))

    def delete(self) -> None:
        """Erase all of the resident's information."""
        self.name = ""
        self.age = 0
        self.address = None


def count(residents: Iterable[Resident]) -> int:
    """Count the residents that have provided the required information."""
    return sum(1 for resident in residents if resident.has_required_info())