"""Error kinds surfaced by the matching services."""


class ResumatchError(Exception):
    """Base class for all service errors."""


class ValidationError(ResumatchError, ValueError):
    """Input rejected before any computation (empty text, bad document, ...)."""


class CollaboratorError(ResumatchError):
    """The AI service call failed or returned content that could not be parsed."""


class StorageReadError(ResumatchError):
    """Persisted history is corrupt or unreadable."""


class NotFoundError(ResumatchError):
    """No history entry or active practice session with the given id."""
