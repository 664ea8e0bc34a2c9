"""Usage domain exceptions."""

from datetime import datetime
from typing import Optional, Union

from cradle.core.exceptions import BadRequestError, InvalidStateError
from cradle.domains.usage.types import PHOTO_QUOTA


class UsageLimitExceededError(InvalidStateError):
    """Raised by request handlers when a quota check came back denied."""

    def __init__(
        self,
        limit_type: str,
        remaining: Optional[Union[int, float]] = 0,
        reset_time: Optional[datetime] = None,
        message: Optional[str] = None,
    ) -> None:
        """Initialize with the quota that was hit and when it resets."""
        if message is None:
            if limit_type == PHOTO_QUOTA:
                message = "Photo storage limit reached. Upgrade to Premium for unlimited photos."
            else:
                message = (
                    f"Daily {limit_type} limit reached. "
                    "Upgrade to Premium for unlimited access."
                )
        self.limit_type = limit_type
        self.remaining = remaining
        self.reset_time = reset_time
        super().__init__(message)

    @property
    def error_code(self) -> str:
        """Machine-readable code returned to clients."""
        return "photo_limit_reached" if self.limit_type == PHOTO_QUOTA else "limit_reached"


class InvalidUsageAmountError(BadRequestError):
    """Raised when a usage increment is not strictly positive."""

    def __init__(self, amount: Union[int, float], message: Optional[str] = None) -> None:
        """Initialize with the rejected amount."""
        if message is None:
            message = f"Usage amount must be positive, got {amount}"
        self.amount = amount
        super().__init__(message)
