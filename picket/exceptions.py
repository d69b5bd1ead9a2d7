"""
Exceptions raised by the Picket client.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from picket.types import ErrorResponse


class PicketError(Exception):
    """Base class for all Picket client errors."""


class ConfigurationError(PicketError):
    """Raised when the client is constructed with missing or invalid settings."""


class PicketValidationError(PicketError, ValueError):
    """Raised before any request is sent when a required field is missing.

    Attributes:
        field: Name of the offending parameter.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class PicketApiError(PicketError):
    """Raised when the API answers with a status outside the 2xx range.

    Attributes:
        status_code: The HTTP status code.
        error: The decoded error body.
    """

    def __init__(self, error: "ErrorResponse", status_code: int) -> None:
        super().__init__(f"{error.code or 'error'} ({status_code}): {error.msg}")
        self.error = error
        self.status_code = status_code

    @property
    def code(self) -> Optional[str]:
        return self.error.code

    @property
    def msg(self) -> str:
        return self.error.msg
