"""
Exceptions raised by the transform engines.

All of them signal a contract violation by the caller. The mathematics has no
recoverable failure path, so nothing in this package catches them.
"""


class FourierError(ValueError):
    """Base class for invalid transform arguments."""


class InvalidLengthError(FourierError):
    """Raised when a power-of-two-only path receives another length."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Radix-2 transform requires a power-of-two length, got {length}")


class EmptyInputError(FourierError):
    """Raised for None or zero-length sample sequences."""

    def __init__(self, name: str = "samples"):
        self.name = name
        super().__init__(f"{name} must be a non-empty sequence")
