"""Custom exceptions for the ShiftORL backend."""


class ShiftOrlError(Exception):
    """Base exception for the ShiftORL backend."""


class ConfigurationError(ShiftOrlError):
    """Configuration-related errors."""


class MailerNotConfiguredError(ConfigurationError):
    """No e-mail provider API key is available."""


class ValidationError(ShiftOrlError):
    """Submitted form data was rejected."""


class StorageError(ShiftOrlError):
    """Storage-related errors."""


class DuplicateRecordError(StorageError):
    """A unique constraint rejected the insert."""


class EmailDeliveryError(ShiftOrlError):
    """The e-mail provider refused or failed the send."""

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
