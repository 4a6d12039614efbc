"""
Enumeration types for the domain recovery engine.

These enums provide type-safe constants for lifecycle states, ratings,
guide metadata, error codes, and configuration options throughout the system.
"""

from enum import Enum


class DomainStatus(Enum):
    """Lifecycle state of a domain. Closed set, no other values are valid."""

    AVAILABLE = "AVAILABLE"
    ACTIVE_IN_USE = "ACTIVE_IN_USE"
    ACTIVE_PARKED = "ACTIVE_PARKED"
    ACTIVE_FOR_SALE = "ACTIVE_FOR_SALE"
    ACTIVE_HOSTING_ISSUE = "ACTIVE_HOSTING_ISSUE"
    EXPIRED_GRACE = "EXPIRED_GRACE"
    EXPIRED_REDEMPTION = "EXPIRED_REDEMPTION"
    PENDING_DELETE = "PENDING_DELETE"
    RESERVED = "RESERVED"
    UNKNOWN = "UNKNOWN"


class RecoveryDifficulty(Enum):
    """Five-level ordinal rating of how hard a domain is to obtain."""

    EASY = "EASY"
    MODERATE = "MODERATE"
    HARD = "HARD"
    VERY_HARD = "VERY_HARD"
    IMPOSSIBLE = "IMPOSSIBLE"


class ClassificationType(Enum):
    """Brand/premium classifier tiers."""

    MAJOR_BRAND = "MAJOR_BRAND"
    PREMIUM = "PREMIUM"
    VALUABLE = "VALUABLE"
    STANDARD = "STANDARD"
    LOW_VALUE = "LOW_VALUE"


class Confidence(Enum):
    """Confidence level attached to a classifier value estimate."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class FactorImpact(Enum):
    """Qualitative direction of a valuation factor."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ValuationGrade(Enum):
    """Letter grade derived from the composite valuation score."""

    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C_PLUS = "C+"
    C = "C"
    D = "D"
    F = "F"


class Urgency(Enum):
    """How soon a recovery step must be acted on."""

    IMMEDIATE = "immediate"
    SOON = "soon"
    WHEN_READY = "when-ready"


class StepDifficulty(Enum):
    """Effort rating of a single recovery step."""

    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class HeadlineColor(Enum):
    """Semantic color tag of a recovery guide headline."""

    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    BLUE = "blue"
    GRAY = "gray"


class GuidePhase(Enum):
    """Lifecycle timeline phase a recovery guide is positioned at."""

    AVAILABLE = "available"
    GRACE_PERIOD = "grace-period"
    REDEMPTION_PERIOD = "redemption-period"
    PENDING_DELETE = "pending-delete"
    ACTIVE = "active"
    ACTIVE_PARKED = "active-parked"
    ACTIVE_FOR_SALE = "active-for-sale"
    RESERVED = "reserved"
    UNKNOWN = "unknown"


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class DomainValidationErrorCode(Enum):
    """Error codes for domain validation failures."""

    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    FORBIDDEN_CHARS = "forbidden_chars"
    INVALID_FORMAT = "invalid_format"
    IDNA_ERROR = "idna_error"


class SignalErrorCode(Enum):
    """Error codes for malformed collaborator input."""

    INVALID_DATE = "invalid_date"
    INVALID_RDAP = "invalid_rdap"
    INVALID_FIELD = "invalid_field"
