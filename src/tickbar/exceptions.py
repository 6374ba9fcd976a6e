"""Custom exceptions for tickbar."""


class TickbarError(Exception):
    """Base exception for all tickbar errors."""

    pass


class ConfigurationError(TickbarError):
    """Raised when configuration is invalid or missing."""

    pass


class AdapterCopyError(TickbarError, TypeError):
    """Raised when a progress adapter is copied, deep-copied or pickled.

    Cursors keep a back-reference to the adapter instance that created them,
    so a duplicate would leave that relation ambiguous.
    """

    pass


class StaleCursorError(TickbarError, RuntimeError):
    """Raised when a cursor from a superseded traversal is advanced."""

    pass


class SequenceResizedError(TickbarError, RuntimeError):
    """Raised when a borrowed sequence changes size during traversal."""

    def __init__(self, message="", expected=None, actual=None):
        """Initialize SequenceResizedError with the observed lengths.

        Args:
            message: Error message
            expected: Length recorded when the traversal began
            actual: Length observed while advancing
        """
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ReadOnlySequenceError(TickbarError, TypeError):
    """Raised when writing through a read-only holder."""

    pass
