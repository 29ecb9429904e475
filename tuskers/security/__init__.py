"""Security package for the Tuskers API."""

from .config import (
    configure_security_headers,
    is_password_strong,
    validate_input_length,
)

__all__ = ['configure_security_headers', 'is_password_strong', 'validate_input_length']
