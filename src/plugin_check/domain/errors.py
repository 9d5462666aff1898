"""Domain error types. All are ValueErrors: bad input, never retryable."""


class InvalidAnnotationError(ValueError):
    """Raised when an Annotation is constructed with an empty rule id."""


class InvalidLocationError(ValueError):
    """Raised when a FileLocation fails validation at its own boundary."""


class WireFormatError(ValueError):
    """Raised when a wire message (dict or JSON text) is malformed."""
