"""Hamming distance between two strands."""


def distance(a: str, b: str) -> int:
    """Return the number of positions at which ``a`` and ``b`` differ.

    Raises ValueError if the strands differ in length.
    """
    first, second = a.encode(), b.encode()
    if len(first) != len(second):
        raise ValueError("strands must be of equal length")
    return sum(1 for x, y in zip(first, second) if x != y)