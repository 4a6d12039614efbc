"""
Exception classes for the domain recovery engine.

All exceptions inherit from DomainRecoveryError and provide structured
error information with codes, messages, and optional details.
"""

from typing import Optional


class DomainRecoveryError(Exception):
    """Base exception for all domain recovery errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainRecoveryError):
    """Raised when a domain string cannot be normalized."""

    pass


class SignalError(DomainRecoveryError):
    """Raised when a collaborator hands over malformed data (bad dates, broken RDAP)."""

    pass


class ConfigurationError(DomainRecoveryError):
    """Raised when configuration cannot be read or is invalid."""

    pass


class TemplateError(DomainRecoveryError):
    """Raised when a guide or email template that must exist is missing."""

    pass
