"""Decisions for Annalyn's rescue mission."""


def can_fast_attack(knight_is_awake: bool) -> bool:
    """A fast attack works only while the knight sleeps."""
    return not knight_is_awake


def can_spy(knight_is_awake: bool, archer_is_awake: bool, prisoner_is_awake: bool) -> bool:
    """Spying works if at least one character is awake."""
    return knight_is_awake or archer_is_awake or prisoner_is_awake


def can_signal_prisoner(archer_is_awake: bool, prisoner_is_awake: bool) -> bool:
    """Signalling works if the prisoner is awake and the archer sleeps."""
    return prisoner_is_awake and not archer_is_awake


def can_free_prisoner(
    knight_is_awake: bool,
    archer_is_awake: bool,
    prisoner_is_awake: bool,
    pet_dog_is_present: bool,
) -> bool:
    """Freeing works if the prisoner is awake and both guards sleep,
    or if the dog is present and the archer sleeps."""
    return (prisoner_is_awake and not knight_is_awake and not archer_is_awake) or (
        pet_dog_is_present and not archer_is_awake
    )