"""
Error classes for Bouncer.

Validation failures (bad signature, expired, revoked, malformed input) are
reported as ``False`` results and never raised. The exceptions below cover
configuration problems and codec failures surfaced by lower-level APIs.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Structured error codes for Bouncer."""

    # Configuration errors
    INVALID_KEY = "invalid_key"
    KEY_MISMATCH = "key_mismatch"
    UNSUPPORTED_KEY_TYPE = "unsupported_key_type"
    MISSING_KEY = "missing_key"
    INVALID_CONFIG = "invalid_config"

    # Token errors
    MALFORMED_TOKEN = "malformed_token"

    # Store errors
    STORAGE_ERROR = "storage_error"


class BouncerError(Exception):
    """Base error for all Bouncer exceptions."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_CONFIG,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "error": self.error_code.value,
            "error_description": self.message,
        }

        if self.details:
            result["details"] = self.details

        if self.cause:
            result["caused_by"] = str(self.cause)

        return result


class ConfigurationError(BouncerError):
    """Key material or configuration is unusable. Always fatal."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_CONFIG,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, error_code, details, cause)


class MalformedTokenError(BouncerError):
    """Token string or payload cannot be parsed."""

    def __init__(
        self,
        message: str = "Token is malformed",
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, ErrorCode.MALFORMED_TOKEN, details, cause)


class TokenStoreError(BouncerError):
    """Token store rejected an operation."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, ErrorCode.STORAGE_ERROR, details, cause)
