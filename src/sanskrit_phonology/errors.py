"""Exceptions raised by the phonology engine.

Only malformed calls raise. Unrecognized characters are flagged on the
token, and classifier lookups return None for anything outside the
phoneme inventory.
"""


class SanskritPhonologyError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(SanskritPhonologyError, TypeError):
    """Argument is not a string, or is empty where a word is required."""


class UnknownScriptError(SanskritPhonologyError, ValueError):
    """Script detection failed and the caller needs a definite script."""

    def __init__(self, text: str, message: str = None):
        self.text = text
        super().__init__(message or f"Could not determine script of {text!r}")
