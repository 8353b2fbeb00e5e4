from typing import Any, List, Optional


class DirectusClientError(Exception):
    pass


class InvalidArgumentError(DirectusClientError, ValueError):
    """Raised when a required input is empty or malformed."""


class NotInitializedError(DirectusClientError, RuntimeError):
    """Raised when a builder is used before a base URI was supplied."""


class ConfigurationError(DirectusClientError):
    pass


class ApiRequestError(DirectusClientError):
    """
    Raised by the HTTP transport when the server answers with an error status
    or the request could not be sent at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
