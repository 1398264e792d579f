#!/usr/bin/env python3
"""
Standardized exception hierarchy for the news client.

Transport and payload faults raised by the API client, plus configuration
and validation errors raised while wiring the application together.
"""

from typing import Optional, Dict, Any


class NewsClientError(Exception):
    """Base exception for all news client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'context': self.context
        }


# Transport-related exceptions
class TransportError(NewsClientError):
    """Base exception for faults raised while talking to the news API."""
    pass


class TransportConnectionError(TransportError):
    """Failed to reach the news API."""

    def __init__(self, endpoint: str, original_error: Exception):
        message = f"Failed to connect to {endpoint}: {original_error}"
        context = {
            'endpoint': endpoint,
            'original_error': str(original_error)
        }
        super().__init__(message, context=context)


class TransportTimeoutError(TransportError):
    """No response arrived within the read timeout."""

    def __init__(self, endpoint: str, timeout_seconds: float):
        message = f"Timeout reading from {endpoint} after {timeout_seconds}s"
        context = {
            'endpoint': endpoint,
            'timeout_seconds': timeout_seconds
        }
        super().__init__(message, context=context)


class PayloadParseError(TransportError):
    """Response payload could not be decoded into a NewsResponse."""

    def __init__(self, endpoint: str, original_error: Exception):
        message = f"Failed to parse response payload from {endpoint}"
        context = {
            'endpoint': endpoint,
            'original_error': str(original_error)
        }
        super().__init__(message, context=context)


# Configuration-related exceptions
class ConfigurationError(NewsClientError):
    """Configuration is invalid or missing."""

    def __init__(self, config_key: str, issue: str):
        message = f"Configuration error for {config_key}: {issue}"
        context = {
            'config_key': config_key,
            'issue': issue
        }
        super().__init__(message, context=context)


# Validation-related exceptions
class ValidationError(NewsClientError):
    """Data validation failed."""

    def __init__(self, field: str, value: Any, expected: str):
        message = f"Validation failed for {field}: expected {expected}, got {type(value).__name__}"
        context = {
            'field': field,
            'value': str(value),
            'expected': expected,
            'actual_type': type(value).__name__
        }
        super().__init__(message, context=context)
