# storefront/errors.py
from typing import Dict, Optional


class StorefrontError(Exception):
    """Base class for errors that map onto an HTTP status"""

    status_code: int = 500
    default_message: str = "Internal Server Error"
    retryable: bool = False

    def __init__(self, message: Optional[str] = None,
                 errors: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationError(StorefrontError):
    status_code = 400
    default_message = "Validation failed"


class NotFound(StorefrontError):
    status_code = 404
    default_message = "Record not found"


class Conflict(StorefrontError):
    status_code = 409
    default_message = "Duplicate entry"


class InvalidReference(StorefrontError):
    status_code = 400
    default_message = "Referenced record does not exist"


class InvalidAssetType(StorefrontError):
    status_code = 400
    default_message = "Only image files are allowed!"


class AssetTooLarge(StorefrontError):
    status_code = 400
    default_message = "File too large. Max 5MB"


class StorageUnavailable(StorefrontError):
    status_code = 502
    default_message = "Storage unavailable, try again later"
    retryable = True


class StorageTimeout(StorefrontError):
    status_code = 504
    default_message = "Storage timed out, try again later"
    retryable = True


class Internal(StorefrontError):
    status_code = 500
