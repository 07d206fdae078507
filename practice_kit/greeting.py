"""The classic greeting."""


def hello_world() -> str:
    """Greet the world."""
    return "Hello, World!"