"""Exception types raised by AIRAC Explorer."""


class AiracError(Exception):
    """Base class for AIRAC Explorer errors."""


class CatalogGenerationError(AiracError):
    """Raised when the cycle catalog cannot be generated or fails validation.

    This is never recoverable: consumers should abort instead of rendering
    partial data.
    """


class InvalidCycleIdentifierError(AiracError, ValueError):
    """Raised when a cycle identifier supplied by a user cannot be parsed."""


class ExportError(AiracError):
    """Raised when cycles cannot be exported."""
