# healthfinder/errors.py
from typing import Optional

GENERIC_SEARCH_ERROR = "Failed to search facilities. Please check your connection and try again."


class FacilityDirectoryError(Exception):
    """
    Base class for errors raised by the facility directory.
    `public_message` is what HTTP callers see; `str(error)` may carry detail that is only logged.
    """

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, public_message: Optional[str] = None):
        super().__init__(message or public_message or self.public_message)
        if public_message is not None:
            self.public_message = public_message


class InvalidInputError(FacilityDirectoryError):
    status_code = 400
    public_message = "Search query is required"


class HistoryValidationError(FacilityDirectoryError):
    public_message = "Failed to save search history"


class ConfigurationError(FacilityDirectoryError):
    public_message = "Facility search is not configured"

    def __init__(self, message: Optional[str] = None):
        # Operator-facing: the configuration problem itself is the message.
        super().__init__(message, public_message=message)


class UpstreamError(FacilityDirectoryError):
    public_message = GENERIC_SEARCH_ERROR


class FacilityNotFoundError(FacilityDirectoryError):
    status_code = 404
    public_message = "Facility not found"


class UserExistsError(FacilityDirectoryError):
    status_code = 409
    public_message = "Username already exists"
