"""Simple list manipulations for a card trick."""


def favorite_cards() -> list[int]:
    """Return the favourite cards 2, 6 and 9, in that order."""
    return [2, 6, 9]


def _in_range(cards: list[int], index: int) -> bool:
    return 0 <= index < len(cards)


def get_item(cards: list[int], index: int) -> int:
    """Return the card at ``index``, or -1 if the index is out of range."""
    if not _in_range(cards, index):
        return -1
    return cards[index]


def set_item(cards: list[int], index: int, value: int) -> list[int]:
    """Overwrite the card at ``index`` in place and return the list.

    If the index is out of range, a new list with ``value`` appended is returned.
    """
    if not _in_range(cards, index):
        return [*cards, value]
    cards[index] = value
    return cards


def prepend_items(cards: list[int], *args: int) -> list[int]:
    """Return a new list with ``args`` placed in front of ``cards``."""
    return [*args, *cards]


def remove_item(cards: list[int], index: int) -> list[int]:
    """Remove the card at ``index`` in place and return the list.

    An out-of-range index leaves the list unchanged.
    """
    if _in_range(cards, index):
        del cards[index]
    return cards