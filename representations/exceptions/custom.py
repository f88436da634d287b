"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"
    # Whether the instance message may be shown to clients outside debug mode
    public = True

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class NotFoundException(FrameworkException):
    """
    Representation not found exception

    Raised when a representation name doesn't resolve to a file

    Example:
        raise NotFoundException("The requested representation could not be found: users", name='users')
    """
    status_code = 404
    message = "Resource not found"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, status_code)
        self.name = name


class OutOfBoundsException(FrameworkException, LookupError):
    """
    Raised when a representation variable is read but was never set

    Example:
        raise OutOfBoundsException("Representation variable is not set: user", key='user')
    """
    message = "Variable is not set"

    def __init__(
        self,
        message: Optional[str] = None,
        key: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, status_code)
        self.key = key


class InvalidArgumentException(FrameworkException, ValueError):
    """Raised when an argument has an unsupported type or value"""
    message = "Invalid argument"


class ConfigurationException(FrameworkException):
    """Raised when an object is used before it is fully configured"""
    message = "Configuration error"


class RepresentationExecutionException(FrameworkException):
    """
    Raised when a representation file fails while executing

    The original error is chained as __cause__. Its text is only shown
    to clients in debug mode.

    Example:
        raise RepresentationExecutionException(str(e)) from e
    """
    message = "Representation failed to execute"
    public = False
