"""
Signal records consumed by the engine.

The engine performs no I/O. WHOIS/RDAP lookups, archive queries, DNS
resolution, live-site probes and SEO/security enrichment are done by
collaborators, which hand their normalized output over as the records
below. Every field is optional: absence means "no evidence", never an error.

Malformed values (an unparseable date, a negative snapshot count, a wrong
type) are contract violations and fail fast with SignalError at the point
where they are consumed.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional

from domain_recovery.enums import SignalErrorCode
from domain_recovery.exceptions import SignalError


# Registrar value some WHOIS servers return for unregistered names
PLACEHOLDER_REGISTRARS = frozenset({"available", "n/a", "none", "-"})


def parse_timestamp(value: Any, field_name: str = "date") -> Optional[datetime]:
    """
    Parse a collaborator-supplied timestamp into an aware UTC datetime.

    Args:
        value: None, '', a datetime, a date, or an ISO-8601 string
        field_name: Name of the field, used in the error message

    Returns:
        Timezone-aware datetime, or None when the value is absent

    Raises:
        SignalError: If the value is present but not a valid timestamp
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise SignalError(
                code=SignalErrorCode.INVALID_DATE.value,
                message=f"Invalid date for '{field_name}': {value!r}",
                details={"field": field_name, "value": value},
            )
    else:
        raise SignalError(
            code=SignalErrorCode.INVALID_DATE.value,
            message=f"Invalid date type for '{field_name}': {type(value).__name__}",
            details={"field": field_name, "value": repr(value)},
        )

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SignalError(
            code=SignalErrorCode.INVALID_FIELD.value,
            message=f"Field '{key}' must be a string",
            details={"field": key, "value": repr(value)},
        )
    value = value.strip()
    return value or None


def _optional_bool(data: dict, key: str) -> Optional[bool]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise SignalError(
        code=SignalErrorCode.INVALID_FIELD.value,
        message=f"Field '{key}' must be a boolean",
        details={"field": key, "value": repr(value)},
    )


def _number(data: dict, key: str, default: float = 0) -> float:
    value = data.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SignalError(
            code=SignalErrorCode.INVALID_FIELD.value,
            message=f"Field '{key}' must be a number",
            details={"field": key, "value": repr(value)},
        )
    return value


def _str_tuple(data: dict, key: str) -> tuple[str, ...]:
    value = data.get(key) or []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise SignalError(
            code=SignalErrorCode.INVALID_FIELD.value,
            message=f"Field '{key}' must be a list of strings",
            details={"field": key, "value": repr(value)},
        )
    return tuple(str(item).strip() for item in value if str(item).strip())


@dataclass(frozen=True)
class RegistrationSignals:
    """Normalized WHOIS/RDAP registration record."""

    registrar: Optional[str] = None
    registrar_url: Optional[str] = None
    registrar_abuse_email: Optional[str] = None
    registrar_abuse_phone: Optional[str] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    registrant_name: Optional[str] = None
    registrant_organization: Optional[str] = None
    registrant_email: Optional[str] = None
    registrant_redacted: bool = False
    nameservers: tuple[str, ...] = ()
    status_flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for field_name in ("created_date", "updated_date", "expiry_date"):
            object.__setattr__(self, field_name, parse_timestamp(getattr(self, field_name), field_name))

    @property
    def has_registrar(self) -> bool:
        """True when a registrar other than a placeholder value is present."""
        return bool(self.registrar) and self.registrar.strip().lower() not in PLACEHOLDER_REGISTRARS

    @property
    def has_registrant(self) -> bool:
        """True when any registrant identity is present, redacted or not."""
        return bool(
            self.registrant_name
            or self.registrant_email
            or self.registrant_organization
            or self.registrant_redacted
        )

    @property
    def is_registered(self) -> bool:
        """Registration evidence: registrar, creation date, or registrant identity."""
        return self.has_registrar or self.created_date is not None or self.has_registrant

    @property
    def is_transfer_locked(self) -> bool:
        return any("transferprohibited" in flag.replace(" ", "").lower() for flag in self.status_flags)


@dataclass(frozen=True)
class ArchiveSignals:
    """Historical archive (Wayback Machine) presence."""

    snapshot_count: int = 0
    first_snapshot: Optional[datetime] = None
    last_snapshot: Optional[datetime] = None
    available: bool = False

    def __post_init__(self) -> None:
        if self.snapshot_count < 0:
            raise SignalError(
                code=SignalErrorCode.INVALID_FIELD.value,
                message="Snapshot count cannot be negative",
                details={"field": "snapshot_count", "value": self.snapshot_count},
            )
        for field_name in ("first_snapshot", "last_snapshot"):
            object.__setattr__(self, field_name, parse_timestamp(getattr(self, field_name), field_name))

    @property
    def has_content(self) -> bool:
        return self.available or self.snapshot_count > 0


@dataclass(frozen=True)
class WebsiteSignals:
    """Live website probe result. is_online None means the probe did not run."""

    is_online: Optional[bool] = None
    http_status: Optional[int] = None
    ssl_valid: Optional[bool] = None


@dataclass(frozen=True)
class DnsSignals:
    """DNS presence. has_a_records None means DNS was not queried."""

    has_a_records: Optional[bool] = None
    a_records: tuple[str, ...] = ()

    @property
    def resolves(self) -> bool:
        return bool(self.has_a_records) or bool(self.a_records)


@dataclass(frozen=True)
class SeoSignals:
    """SEO enrichment. Zero means no signal."""

    domain_authority: float = 0
    backlinks: int = 0
    monthly_traffic: int = 0


@dataclass(frozen=True)
class SecuritySignals:
    """Security/reputation enrichment."""

    reputation_score: Optional[int] = None
    reputation_level: Optional[str] = None
    domain_age_years: Optional[float] = None


def registration_from_dict(data: Optional[dict]) -> Optional[RegistrationSignals]:
    """
    Build RegistrationSignals from a plain mapping.

    Args:
        data: Mapping with snake_case keys, or None

    Returns:
        RegistrationSignals, or None when data is None

    Raises:
        SignalError: If a date is invalid or a field has the wrong type
    """
    if data is None:
        return None
    if not isinstance(data, dict):
        raise SignalError(
            code=SignalErrorCode.INVALID_FIELD.value,
            message="Registration signals must be an object",
            details={"value": repr(data)},
        )

    return RegistrationSignals(
        registrar=_optional_str(data, "registrar"),
        registrar_url=_optional_str(data, "registrar_url"),
        registrar_abuse_email=_optional_str(data, "registrar_abuse_email"),
        registrar_abuse_phone=_optional_str(data, "registrar_abuse_phone"),
        created_date=parse_timestamp(data.get("created_date"), "created_date"),
        updated_date=parse_timestamp(data.get("updated_date"), "updated_date"),
        expiry_date=parse_timestamp(data.get("expiry_date"), "expiry_date"),
        registrant_name=_optional_str(data, "registrant_name"),
        registrant_organization=_optional_str(data, "registrant_organization"),
        registrant_email=_optional_str(data, "registrant_email"),
        registrant_redacted=bool(_optional_bool(data, "registrant_redacted")),
        nameservers=tuple(ns.lower() for ns in _str_tuple(data, "nameservers")),
        status_flags=_str_tuple(data, "status_flags"),
    )


def archive_from_dict(data: Optional[dict]) -> Optional[ArchiveSignals]:
    """Build ArchiveSignals from a plain mapping."""
    if data is None:
        return None
    return ArchiveSignals(
        snapshot_count=int(_number(data, "snapshot_count")),
        first_snapshot=parse_timestamp(data.get("first_snapshot"), "first_snapshot"),
        last_snapshot=parse_timestamp(data.get("last_snapshot"), "last_snapshot"),
        available=bool(_optional_bool(data, "available")),
    )


def website_from_dict(data: Optional[dict]) -> Optional[WebsiteSignals]:
    """Build WebsiteSignals from a plain mapping."""
    if data is None:
        return None
    status = data.get("http_status")
    return WebsiteSignals(
        is_online=_optional_bool(data, "is_online"),
        http_status=int(_number(data, "http_status")) if status is not None else None,
        ssl_valid=_optional_bool(data, "ssl_valid"),
    )


def dns_from_dict(data: Optional[dict]) -> Optional[DnsSignals]:
    """Build DnsSignals from a plain mapping."""
    if data is None:
        return None
    return DnsSignals(
        has_a_records=_optional_bool(data, "has_a_records"),
        a_records=_str_tuple(data, "a_records"),
    )


def seo_from_dict(data: Optional[dict]) -> Optional[SeoSignals]:
    """Build SeoSignals from a plain mapping."""
    if data is None:
        return None
    return SeoSignals(
        domain_authority=_number(data, "domain_authority"),
        backlinks=int(_number(data, "backlinks")),
        monthly_traffic=int(_number(data, "monthly_traffic")),
    )


def security_from_dict(data: Optional[dict]) -> Optional[SecuritySignals]:
    """Build SecuritySignals from a plain mapping."""
    if data is None:
        return None
    score = data.get("reputation_score")
    age = data.get("domain_age_years")
    return SecuritySignals(
        reputation_score=int(_number(data, "reputation_score")) if score is not None else None,
        reputation_level=_optional_str(data, "reputation_level"),
        domain_age_years=_number(data, "domain_age_years") if age is not None else None,
    )
