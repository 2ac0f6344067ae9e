"""
Typed-data error taxonomy.
Every failure is a caller input defect: no retries, no partial digests.
"""

import re
from typing import Dict, Any, Optional


class TypedDataError(Exception):
    """Base exception for typed-data hashing."""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class UnknownType(TypedDataError):
    """Referenced type is neither a primitive nor defined in the type set."""
    
    def __init__(self, type_name: str, details: Optional[Dict[str, Any]] = None):
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}", "UNKNOWN_TYPE", {"type": type_name, **(details or {})})


class MissingField(TypedDataError):
    """Data object lacks a field required by its type definition."""
    
    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(
            f"Missing field '{field_name}' for type {type_name}",
            "MISSING_FIELD",
            {"type": type_name, "field": field_name},
        )


class UnsupportedType(TypedDataError):
    """Primitive type outside the supported encoding set."""
    
    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unsupported type: {type_name}", "UNSUPPORTED_TYPE", {"type": type_name})


class MalformedValue(TypedDataError):
    """Value cannot be parsed as its declared primitive type."""
    
    def __init__(self, type_name: str, value: Any, reason: str = "cannot be parsed"):
        self.type_name = type_name
        self.value = value
        super().__init__(
            f"Malformed {type_name} value {value!r}: {reason}",
            "MALFORMED_VALUE",
            {"type": type_name, "value": repr(value), "reason": reason},
        )


class DepthLimitExceeded(TypedDataError):
    """Struct nesting went past the configured limit."""
    
    def __init__(self, type_name: str, limit: int):
        super().__init__(
            f"Struct nesting exceeds {limit} levels at type {type_name}",
            "DEPTH_LIMIT",
            {"type": type_name, "limit": limit},
        )


class SigningError(TypedDataError):
    """Digest could not be signed."""
    
    def __init__(self, message: str = "Signing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "SIGNING_ERROR", details)


def sanitize_error_message(message: str) -> str:
    """Sanitize error messages to prevent key material leaking into output."""
    sensitive_patterns = ["private_key", "secret", "password"]
    
    sanitized = message
    for pattern in sensitive_patterns:
        sanitized = re.sub(re.escape(pattern), "***", sanitized, flags=re.IGNORECASE)
    
    return sanitized


def create_structured_error_response(error: Exception) -> Dict[str, Any]:
    """Create structured error response for logging and CLI output."""
    if isinstance(error, TypedDataError):
        return {
            "error_type": error.error_code,
            "message": sanitize_error_message(error.message),
            "details": error.details,
        }
    else:
        return {
            "error_type": "UNKNOWN_ERROR",
            "message": sanitize_error_message(str(error)),
            "details": {},
        }
