"""First-turn decisions in blackjack."""

_CARD_VALUES = {
    "ace": 11,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "jack": 10,
    "queen": 10,
    "king": 10,
}


def parse_card(card: str) -> int:
    """Return the blackjack value of a card, or 0 for an unknown card."""
    return _CARD_VALUES.get(card, 0)


def first_turn(card1: str, card2: str, dealer_card: str) -> str:
    """Return the first-turn decision: "P" split, "W" win, "S" stand, "H" hit."""
    first, second = parse_card(card1), parse_card(card2)
    total = first + second
    dealer = parse_card(dealer_card)

    if first == 11 and second == 11:
        return "P"
    if total == 21:
        return "S" if dealer >= 10 else "W"
    if 17 <= total <= 20:
        return "S"
    if 12 <= total <= 16:
        return "H" if dealer >= 7 else "S"
    if total <= 11:
        return "H"
    return "S"