"""Detecting isograms."""

_IGNORED = frozenset("- ")


def is_isogram(word: str) -> bool:
    """Tell whether no letter repeats in ``word``, ignoring case, hyphens and spaces."""
    letters = [char.lower() for char in word if char not in _IGNORED]
    return len(letters) == len(set(letters))