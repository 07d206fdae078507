"""Counting birds seen per day."""

_DAYS_PER_WEEK = 7


def total_bird_count(birds_per_day: list[int]) -> int:
    """Return the sum of all daily counts."""
    return sum(birds_per_day)


def birds_in_week(birds_per_day: list[int], week: int) -> int:
    """Return the total count for the given 1-based week.

    Raises IndexError if the week is not fully inside the log.
    """
    start = (week - 1) * _DAYS_PER_WEEK
    end = week * _DAYS_PER_WEEK
    if start < 0 or end > len(birds_per_day):
        raise IndexError(f"week {week} is outside a log of {len(birds_per_day)} days")
    return total_bird_count(birds_per_day[start:end])


def fix_bird_count_log(birds_per_day: list[int]) -> list[int]:
    """Add one bird to every other day, starting with the first.

    The list is changed in place and returned.
    """
    for day in range(0, len(birds_per_day), 2):
        birds_per_day[day] += 1
    return birds_per_day