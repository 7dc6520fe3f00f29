# assessment/errors.py
from enum import Enum


class ApiError(Exception):
    """Base error raised by PsychometricApiClient."""

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = list(errors or [])


class AuthenticationError(ApiError):
    pass


class NetworkError(ApiError):
    pass


class ValidationRejectedError(ApiError):
    pass


class ServerError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class FailureKind(Enum):
    AUTHENTICATION = 'authentication'
    NETWORK = 'network'
    VALIDATION_REJECTED = 'validation_rejected'
    SERVER = 'server'


# Shown to the user instead of the underlying transport error
FAILURE_MESSAGES = {
    FailureKind.AUTHENTICATION: "Your session has expired. Please log in again.",
    FailureKind.NETWORK: "Could not reach the server. Check your connection and try again.",
    FailureKind.VALIDATION_REJECTED: "Some answers were not accepted. Please review them and try again.",
    FailureKind.SERVER: "Something went wrong while saving your results. Please try again shortly.",
}


def classify(error):
    """Map any exception raised during submission onto a FailureKind."""
    if isinstance(error, AuthenticationError):
        return FailureKind.AUTHENTICATION
    if isinstance(error, NetworkError):
        return FailureKind.NETWORK
    if isinstance(error, ValidationRejectedError):
        return FailureKind.VALIDATION_REJECTED
    return FailureKind.SERVER
