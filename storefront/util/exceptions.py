"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across the deals service
    - Prevent leaking internal errors
    - Maintain consistent API error format
"""

# Constants
from ..base import constants





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None
    ):
        """
        Args:
            error_code (str): Unique business error identifier
            message (str): User-friendly error message
            status_code (int): HTTP status code (default: 400)
            details (str): Optional internal/debug details
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        """

        response = {
            "success": False,
            "error_code": self.error_code,
            "message": self.message
        }

        # Internal details never leave a production deployment
        if self.details and constants.APP_ENV != "production":
            response["details"] = self.details

        return response





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class ValidationException(AppException):
    """
    Raised when validation fails.
    """

    def __init__(self, message: str, details: str = None):
        super().__init__(
            error_code = "VALIDATION_ERROR",
            message = message,
            status_code = 400,
            details = details
        )





class NotFoundException(AppException):
    """
    Raised when resource is not found.
    """

    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            error_code = "NOT_FOUND",
            message = message,
            status_code = 404
        )





class RemoteServiceException(AppException):
    """
    Raised when the media host rejects an upload or delete.
    """

    def __init__(self, error_code: str, message: str, details: str = None):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 500,
            details = details
        )





class PersistenceException(AppException):
    """
    Raised when a database read or write fails.
    """

    def __init__(self, error_code: str, message: str, details: str = None):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 500,
            details = details
        )





class InternalServerException(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = "Something went wrong. Please try again later.",
            status_code = 500,
            details  = details
        )
