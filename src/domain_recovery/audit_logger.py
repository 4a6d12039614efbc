"""
Audit Logger module for the domain recovery engine.

Provides structured logging with dual-format output (JSON and human-readable text),
minimum-level filtering, optional audit mode with HMAC signing, and masking of
secrets and registrant personal data.
"""

import hmac
import hashlib
import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, TextIO

from domain_recovery.config import LoggingConfig
from domain_recovery.enums import LogLevel


LEVEL_ORDER = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
}


@dataclass
class LogEntry:
    """Represents a single log entry with all metadata."""

    timestamp: str
    level: LogLevel
    component: str
    message: str
    data: dict = field(default_factory=dict)
    signature: Optional[str] = None

    def to_dict(self, include_signature: bool = True) -> dict:
        obj = {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "component": self.component,
            "message": self.message,
            "data": self.data,
        }
        if include_signature and self.signature:
            obj["signature"] = self.signature
        return obj


class AuditLogger:
    """
    Audit logger with dual-format output and optional signing.

    Supports:
    - JSON and human-readable text output formats
    - Minimum level filtering (entries below it are dropped)
    - Audit mode with HMAC-SHA256 signing of log entries
    - Masking of secrets and registrant personal data
    """

    # Keys whose values are masked; matched as substrings of the lowercased key
    SENSITIVE_KEYS = frozenset({
        'token', 'secret', 'password', 'api_key', 'signing_key',
        'authorization', 'credential', 'private_key', 'access_token',
        'refresh_token', 'session_token', 'api_secret',
        # Registrant personal data from WHOIS/RDAP
        'registrant_email', 'registrant_phone', 'registrant_name',
        'registrant_address', 'registrant_organization', 'abuse_email',
        'abuse_phone',
    })

    MASK_VALUE = "***MASKED***"

    def __init__(
        self,
        output_format: str = "both",
        output_stream: Optional[TextIO] = None,
        min_level: LogLevel = LogLevel.INFO,
    ):
        """
        Initialize the audit logger.

        Args:
            output_format: Output format - 'json', 'text', or 'both'
            output_stream: Output stream for log entries (defaults to sys.stderr)
            min_level: Entries below this level are dropped
        """
        if output_format not in ("json", "text", "both"):
            raise ValueError(f"Invalid output_format: {output_format}")

        self._output_format = output_format
        self._output_stream = output_stream or sys.stderr
        self._min_level = min_level
        self._audit_mode = False
        self._signing_key: Optional[bytes] = None
        self._entries: list[LogEntry] = []

    @classmethod
    def from_config(cls, config: LoggingConfig, output_stream: Optional[TextIO] = None) -> "AuditLogger":
        """
        Create a logger from a LoggingConfig.

        Args:
            config: Logging configuration
            output_stream: Output stream (defaults to sys.stderr)

        Returns:
            Configured AuditLogger, in audit mode if a signing key is set
        """
        logger = cls(
            output_format=config.output_format,
            output_stream=output_stream,
            min_level=LogLevel(config.level),
        )
        if config.audit_mode and config.audit_signing_key:
            logger.enable_audit_mode(config.audit_signing_key)
        return logger

    @property
    def output_format(self) -> str:
        """Get the current output format."""
        return self._output_format

    @property
    def min_level(self) -> LogLevel:
        """Get the minimum level that is recorded."""
        return self._min_level

    @property
    def audit_mode(self) -> bool:
        """Check if audit mode is enabled."""
        return self._audit_mode

    @property
    def entries(self) -> list[LogEntry]:
        """Get all recorded entries."""
        return self._entries.copy()

    def enable_audit_mode(self, signing_key: str) -> None:
        """
        Enable audit mode with HMAC signing of log entries.

        Args:
            signing_key: Secret key for HMAC-SHA256 signing
        """
        if not signing_key:
            raise ValueError("Signing key cannot be empty")

        self._audit_mode = True
        self._signing_key = signing_key.encode('utf-8')

    def disable_audit_mode(self) -> None:
        """Disable audit mode."""
        self._audit_mode = False
        self._signing_key = None

    def is_enabled_for(self, level: LogLevel) -> bool:
        return LEVEL_ORDER[level] >= LEVEL_ORDER[self._min_level]

    def log(
        self,
        level: LogLevel,
        component: str,
        message: str,
        data: Optional[dict] = None,
    ) -> Optional[LogEntry]:
        """
        Log an entry in the configured format(s).

        Args:
            level: Log severity level
            component: Component name generating the log
            message: Human-readable log message
            data: Optional additional data to include

        Returns:
            The created LogEntry, or None if the level is filtered out
        """
        if not self.is_enabled_for(level):
            return None

        entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=level,
            component=component,
            message=message,
            data=self.mask_sensitive_data(data or {}),
            signature=None,
        )

        if self._audit_mode and self._signing_key:
            entry.signature = self._sign_entry(entry)

        self._entries.append(entry)
        self._output_entry(entry)

        return entry

    def log_error(
        self,
        component: str,
        message: str,
        error: Optional[Exception] = None,
        domain: Optional[str] = None,
        additional_data: Optional[dict] = None,
    ) -> Optional[LogEntry]:
        """
        Log an error with full context.

        Args:
            component: Component name generating the log
            message: Human-readable error message
            error: Optional exception object (DomainRecoveryError codes are included)
            domain: Optional domain being processed
            additional_data: Optional additional context data

        Returns:
            The created LogEntry object
        """
        data = additional_data.copy() if additional_data else {}

        if error is not None:
            data["error_message"] = str(error)
            data["error_type"] = type(error).__name__
            code = getattr(error, "code", None)
            if code is not None:
                data["error_code"] = code

        if domain is not None:
            data["domain"] = domain

        return self.log(LogLevel.ERROR, component, message, data)

    def mask_sensitive_data(self, data: dict) -> dict:
        """
        Recursively mask sensitive data in a dictionary.

        Args:
            data: Dictionary potentially containing sensitive data

        Returns:
            New dictionary with sensitive values masked
        """
        if not isinstance(data, dict):
            return data

        masked = {}
        for key, value in data.items():
            key_lower = str(key).lower()

            is_sensitive = any(
                sensitive_key in key_lower
                for sensitive_key in self.SENSITIVE_KEYS
            )

            if is_sensitive:
                masked[key] = self.MASK_VALUE
            elif isinstance(value, dict):
                masked[key] = self.mask_sensitive_data(value)
            elif isinstance(value, list):
                masked[key] = [
                    self.mask_sensitive_data(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                masked[key] = value

        return masked

    def _sign_entry(self, entry: LogEntry) -> str:
        """Hex HMAC-SHA256 over the entry's sorted JSON form, signature excluded."""
        if not self._signing_key:
            raise RuntimeError("Signing key not set")

        content = json.dumps(
            entry.to_dict(include_signature=False),
            sort_keys=True,
            ensure_ascii=False,
            default=str,
        )
        return hmac.new(self._signing_key, content.encode('utf-8'), hashlib.sha256).hexdigest()

    def verify_signature(self, entry: LogEntry) -> bool:
        """
        Verify the signature of a log entry.

        Args:
            entry: Log entry to verify

        Returns:
            True if the entry is signed with this logger's key and unchanged
        """
        if not entry.signature or not self._signing_key:
            return False
        return hmac.compare_digest(entry.signature, self._sign_entry(entry))

    def _output_entry(self, entry: LogEntry) -> None:
        lines = []
        if self._output_format in ("json", "both"):
            lines.append(json.dumps(entry.to_dict(), ensure_ascii=False, default=str))
        if self._output_format in ("text", "both"):
            lines.append(format_text(entry))

        for line in lines:
            self._output_stream.write(line + "\n")
        self._output_stream.flush()

    def clear_entries(self) -> None:
        """Clear all stored log entries."""
        self._entries.clear()


def format_text(entry: LogEntry) -> str:
    """
    Render an entry as one human-readable line.

    Format: [TIMESTAMP] LEVEL [COMPONENT] <domain> MESSAGE {data} [sig:...]
    The domain marker appears only when the entry's data names a domain.
    """
    parts = [f"[{entry.timestamp}]", entry.level.value.upper(), f"[{entry.component}]"]

    domain = entry.data.get("domain")
    if isinstance(domain, str) and domain:
        parts.append(f"<{domain}>")

    parts.append(entry.message)
    if entry.data:
        parts.append(json.dumps(entry.data, ensure_ascii=False, default=str))

    text = " ".join(parts)
    if entry.signature:
        text += f" [sig:{entry.signature[:16]}...]"
    return text
