"""Shared exceptions module."""

from typing import Optional


class CradleException(Exception):
    """Base exception for Cradle services."""

    pass


class PermissionException(CradleException):
    """Exception raised when a caller is not allowed to perform an action."""

    def __init__(
        self,
        message: Optional[str] = "User does not have the right to perform this action",
    ):
        """Create a new PermissionException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class AuthenticationException(CradleException):
    """Exception raised when a request carries no valid credentials."""

    def __init__(self, message: Optional[str] = "Not authenticated"):
        """Create a new AuthenticationException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class NotFoundException(CradleException):
    """Exception raised when an object is not found."""

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class BadRequestError(CradleException):
    """Raised when the caller supplied an invalid argument."""

    pass


class InvalidStateError(CradleException):
    """Raised when an operation is not allowed in the current state."""

    pass
