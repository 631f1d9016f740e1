"""
Application exceptions.

Domain errors raised by services and translated into API responses by
the handlers registered in event_booking.main.
"""


class EventBookingException(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationException(EventBookingException):
    """User-correctable request error (duplicate email, account state...)."""


class AuthenticationException(EventBookingException):
    """Bad credentials or an invalid token."""


class UserNotFoundException(EventBookingException):
    """No user matches the given email.

    Never surfaced directly: the authentication gate turns it into an
    AuthenticationException.
    """


class ConfigurationError(EventBookingException):
    """Missing reference data or a broken invariant. Not user-correctable."""
