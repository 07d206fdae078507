"""Random helpers for a game of animal magic."""

import random

_ANIMALS = ("ant", "beaver", "cat", "dog", "elephant", "fox", "giraffe", "hedgehog")


def roll_a_die() -> int:
    """Return a random int d with 1 <= d <= 19."""
    return random.randrange(19) + 1


def generate_wand_energy() -> float:
    """Return a random float f with 0.0 <= f < 12.0."""
    return random.randrange(12) + random.random()


def shuffle_animals() -> list[str]:
    """Return all eight animal names in random order."""
    animals = list(_ANIMALS)
    random.shuffle(animals)
    return animals