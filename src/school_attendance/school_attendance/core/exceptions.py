class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SourceError(Exception):
    """Base exception for failures talking to an external data source."""


class TransportError(SourceError):
    """Raised on network errors or non-2xx responses."""


class MalformedPayloadError(SourceError):
    """Raised when a response body cannot be used (HTML page, bad JSON, wrong shape)."""


class ReportUnavailableError(DomainError):
    """Raised when a report export could not be downloaded."""
