"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class TransportError(ServiceError):
    """Raised when the thesaurus service cannot deliver a usable response body."""


class ResponseParseError(ServiceError):
    """Raised inside the parser when a response document is structurally unusable."""
