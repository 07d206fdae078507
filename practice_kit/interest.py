"""Interest on a bank balance."""

import struct


def _single(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_NEGATIVE_RATE = _single(3.213)
_LOW_RATE = _single(0.5)
_MIDDLE_RATE = _single(1.621)
_HIGH_RATE = _single(2.475)


def interest_rate(balance: float) -> float:
    """Return the interest rate in percent, in single precision."""
    if balance < 0:
        return _NEGATIVE_RATE
    if balance < 1000:
        return _LOW_RATE
    if balance < 5000:
        return _MIDDLE_RATE
    return _HIGH_RATE


def interest(balance: float) -> float:
    """Return one year's interest on ``balance``."""
    return interest_rate(balance) * balance / 100


def annual_balance_update(balance: float) -> float:
    """Return the balance after one year of interest."""
    return balance + interest(balance)


def years_before_desired_balance(balance: float, target_balance: float) -> int:
    """Return how many years it takes for ``balance`` to reach ``target_balance``."""
    years = 0
    while balance < target_balance:
        balance = annual_balance_update(balance)
        years += 1
    return years