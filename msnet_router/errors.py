"""
Exception types raised by the dispatcher.

Construction failures are fatal and subclass ``RuntimeError``; bad call
arguments subclass ``ValueError`` so callers that already catch the builtin
types keep working.
"""


class MSNetError(Exception):
    """Base class for all dispatcher errors."""


class DispatcherInitError(MSNetError, RuntimeError):
    """The dispatcher could not be constructed."""


class NoExpertsFoundError(DispatcherInitError):
    """Model discovery produced no expert models."""


class ModelLoadError(DispatcherInitError):
    """The router or an expert model failed to load."""

    def __init__(self, model_name: str, path, cause: Exception):
        self.model_name = model_name
        self.path = path
        super().__init__(f"Failed to load model '{model_name}' from {path}: {cause}")


class InvalidInputError(MSNetError, ValueError):
    """The input buffer does not match the configured input tensor size."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Input buffer has {actual} values, expected {expected} "
            f"(channels x height x width)"
        )


class LogitShapeError(MSNetError, RuntimeError):
    """Model outputs have an unexpected length."""
