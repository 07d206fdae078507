"""Production figures for a car assembly line."""

_CARS_PER_BATCH = 10
_BATCH_COST = 95_000
_SINGLE_COST = 10_000


def calculate_working_cars_per_hour(production_rate: int, success_rate: float) -> float:
    """Return how many working cars are produced per hour."""
    return production_rate * success_rate / 100


def calculate_working_cars_per_minute(production_rate: int, success_rate: float) -> int:
    """Return how many whole working cars are produced per minute."""
    return int(calculate_working_cars_per_hour(production_rate, success_rate) / 60)


def calculate_cost(cars_count: int) -> int:
    """Return the cost of producing ``cars_count`` cars.

    Groups of ten are cheaper than single cars.
    """
    batches, singles = divmod(cars_count, _CARS_PER_BATCH)
    return batches * _BATCH_COST + singles * _SINGLE_COST