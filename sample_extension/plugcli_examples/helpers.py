"""Not a command: no Extension class."""


def shout(text: str) -> str:
    """Return `text` in upper case."""
    return text.upper()
