# agronomy/errors.py


class ServiceError(Exception):
    """Base class for failures talking to an external service."""
    kind = 'service'


class NetworkError(ServiceError):
    """The request could not be made or came back with a non-success status."""
    kind = 'network'

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ServiceError):
    """The response body is not JSON or lacks the expected fields."""
    kind = 'parse'


class ProviderError(ServiceError):
    """The service rejected the request with a message of its own."""
    kind = 'provider'

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


ERROR_KINDS = {cls.kind: cls for cls in (NetworkError, ParseError, ProviderError)}
