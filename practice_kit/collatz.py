"""Steps of the Collatz sequence."""


def collatz_conjecture(n: int) -> int:
    """Return the number of steps needed to reach 1 from ``n``.

    Raises ValueError if ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError(f"input must be positive, got {n}")
    steps = 0
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        steps += 1
    return steps