"""A remote-controlled toy car."""

from dataclasses import dataclass


@dataclass
class Car:
    """A remote-controlled car with a draining battery."""

    speed: int
    battery_drain: int
    battery: int = 100
    distance: int = 0

    def drive(self) -> None:
        """Drive once if the battery allows it, draining the battery."""
        if self.battery >= self.battery_drain:
            self.distance = self.speed
            self.battery -= self.battery_drain

    def display_distance(self) -> str:
        """Describe the distance driven."""
        return f"Driven {self.distance} meters"

    def display_battery(self) -> str:
        """Describe the battery charge."""
        return f"Battery at {self.battery}%"

    def can_finish(self, track_distance: int) -> bool:
        """Tell whether the remaining battery covers ``track_distance``."""
        reachable = (self.battery // self.battery_drain) * self.speed
        return reachable >= track_distance