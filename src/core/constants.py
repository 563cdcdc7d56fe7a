"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import RESPONSE_BODY_MAX_LENGTH
    >>> snippet = response.text[:RESPONSE_BODY_MAX_LENGTH]
"""

# =============================================================================
# Timeouts
# =============================================================================

PROCESSOR_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for payment processor API calls in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of processor response bodies kept in error details."""
