"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StoreTransportError(ApplicationError):
    """Raised when the record store is unreachable or rejected the request. Propagated unchanged."""


class RecordNotFoundError(ApplicationError):
    """Raised when a delete targets an identifier the store cannot resolve."""


class MalformedRecordError(ApplicationError):
    """Raised by mapper helpers for a record that cannot become an entity. Never reaches repository callers."""
