from __future__ import annotations

INVALID_INPUT_MESSAGE = "Input must be a string"


class CasekitError(Exception):
    """Base class for errors raised by casekit."""


class InvalidInputError(CasekitError, TypeError):
    """
    Raised when a conversion receives something other than ``str``.
    Subclasses ``TypeError`` so callers catching the builtin keep working.
    """

    def __init__(self, received: object = None, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.received_type: type = type(received)
