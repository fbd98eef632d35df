class FounderPostError(Exception):
    """Base class for errors raised inside the app."""


class FormValidationError(FounderPostError):
    """A required form field is empty; the agent must not be called."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class AgentTransportError(FounderPostError):
    """The remote agent call could not complete (network, HTTP or decoding failure)."""
