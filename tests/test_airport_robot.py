import pytest

from practice_kit.airport_robot import Greeter, Italian, Portuguese, say_hello


@pytest.mark.parametrize(
    "name, want",
    [
        ("Flora", "I can speak Italian: Ciao Flora!"),
        ("Tomaso Giulio Micheli", "I can speak Italian: Ciao Tomaso Giulio Micheli!"),
    ],
)
def test_say_hello_italian(name, want):
    assert say_hello(name, Italian()) == want


@pytest.mark.parametrize(
    "name, want",
    [
        ("Fabrício", "I can speak Portuguese: Olá Fabrício!"),
        ("Manuela Alberto", "I can speak Portuguese: Olá Manuela Alberto!"),
    ],
)
def test_say_hello_portuguese(name, want):
    assert say_hello(name, Portuguese()) == want


def test_language_names():
    assert Italian().language_name() == "Italian"
    assert Portuguese().language_name() == "Portuguese"


def test_greet_alone():
    assert Italian().greet("Ada") == "Ciao Ada!"
    assert Portuguese().greet("Ada") == "Olá Ada!"


def test_custom_greeter_is_used():
    class Pirate(Greeter):
        def language_name(self):
            return "Pirate"

        def greet(self, name):
            return f"Ahoy {name}!"

    assert say_hello("Jack", Pirate()) == "I can speak Pirate: Ahoy Jack!"


def test_greeter_is_abstract():
    with pytest.raises(TypeError):
        Greeter()