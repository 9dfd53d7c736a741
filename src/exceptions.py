"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class CrossDeviceError(FileRepositoryError):
    """Exception raised when an atomic rename would cross storage devices."""

    pass


class CodecError(BaseAppError):
    """Exception raised when a digest or compression transform fails."""

    pass


class HostInfoError(BaseAppError):
    """Exception raised when a host fact cannot be queried."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvalidInputError(BaseAppError):
    """Exception raised when a command is malformed or its preconditions fail."""

    pass


class OperationFailedError(BaseAppError):
    """Exception raised when a well-formed command fails while executing."""

    pass
