import logging
from enum import Enum


class ErrorKind(Enum):
    VALIDATION = 'validation'
    CONFIGURATION = 'configuration'
    UPSTREAM = 'upstream'
    DELIVERY = 'delivery'


class RelayError(Exception):
    """
    Base class for failures that are reported to the caller as `{"error": message}`.
    Only `message` is ever sent back, never the chained cause.
    """

    kind: ErrorKind
    status_code = 500
    log_level = logging.WARNING

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Malformed or missing caller input."""

    kind = ErrorKind.VALIDATION
    status_code = 400
    log_level = logging.INFO


class ConfigurationError(RelayError):
    """A deployment secret is missing."""

    kind = ErrorKind.CONFIGURATION
    log_level = logging.ERROR


class UpstreamError(RelayError):
    """The generation API was reached but did not produce a usable response."""

    kind = ErrorKind.UPSTREAM


class DeliveryError(RelayError):
    """The mail transport rejected or failed to submit the message."""

    kind = ErrorKind.DELIVERY


__all__ = ['ConfigurationError', 'DeliveryError', 'ErrorKind', 'RelayError', 'UpstreamError', 'ValidationError']
