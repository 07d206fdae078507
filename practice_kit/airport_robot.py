"""Greetings in several languages for the airport robot."""

from abc import ABC, abstractmethod


class Greeter(ABC):
    """Something that can greet a visitor in one language."""

    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the language this greeter speaks."""

    @abstractmethod
    def greet(self, name: str) -> str:
        """Return a greeting for ``name``."""


class Italian(Greeter):
    """Greets in Italian."""

    def language_name(self) -> str:
        return "Italian"

    def greet(self, name: str) -> str:
        return f"Ciao {name}!"


class Portuguese(Greeter):
    """Greets in Portuguese."""

    def language_name(self) -> str:
        return "Portuguese"

    def greet(self, name: str) -> str:
        return f"Olá {name}!"


def say_hello(name: str, greeter: Greeter) -> str:
    """Announce the greeter's language and greet ``name`` in it."""
    return f"I can speak {greeter.language_name()}: {greeter.greet(name)}"