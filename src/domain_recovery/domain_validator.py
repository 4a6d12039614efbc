"""
Domain validation and normalization module.

Provides strict validation of user-supplied domain strings and the lenient
normalization every engine entry point applies to its input:
- Trimmed, lowercased canonical form
- Protocol, www prefix, path, query, fragment and port stripped
- IDNA encoding for international characters
- Rejection of forbidden characters and malformed names
"""

import re
from dataclasses import dataclass
from typing import Optional

import idna

from domain_recovery.enums import DomainValidationErrorCode
from domain_recovery.exceptions import ValidationError


MAX_DOMAIN_LENGTH = 253

# Characters never valid in a hostname once protocol and path are removed
FORBIDDEN_CHARS_PATTERN = re.compile(
    r'[\x00-\x1f\x7f'           # Control characters
    r'\s'                        # Whitespace
    r'!@#$%^&*()+=\[\]{}|\\;"\'<>,`~_]'
)

PROTOCOL_PATTERN = re.compile(r'^[a-z][a-z0-9+.-]*://')

LABEL_PATTERN = re.compile(r'^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$')
TLD_PATTERN = re.compile(r'^([a-z]{2,63}|xn--[a-z0-9-]{1,59})$')


@dataclass
class DomainValidationError:
    """Structured error information for domain validation failures."""

    code: DomainValidationErrorCode
    message: str
    details: dict


@dataclass
class DomainValidationResult:
    """Result of domain validation operation."""

    valid: bool
    canonical_domain: Optional[str]
    error: Optional[DomainValidationError]


def strip_domain(raw: str) -> str:
    """
    Reduce a URL-ish string to a bare lowercase host name.

    Args:
        raw: Input such as 'HTTPS://www.Example.com/path?q=1'

    Returns:
        The host part, e.g. 'example.com'
    """
    domain = raw.strip().lower()
    domain = PROTOCOL_PATTERN.sub("", domain)
    for separator in ("/", "?", "#"):
        domain = domain.split(separator, 1)[0]
    # user@host and host:port
    domain = domain.rsplit("@", 1)[-1]
    domain = domain.split(":", 1)[0]
    if domain.startswith("www."):
        domain = domain[4:]
    return domain.rstrip(".")


def normalize_domain(raw: str) -> str:
    """Lenient normalization used by the engine components. Never raises."""
    return strip_domain(raw or "")


def split_domain(domain: str) -> tuple[str, str]:
    """
    Split a normalized domain into its name and TLD.

    The name is the first label; the TLD is everything after it, so
    'example.co.uk' yields ('example', 'co.uk'). A dotless string yields
    an empty TLD.
    """
    name, _, tld = domain.partition(".")
    return name, tld


class DomainValidator:
    """
    Validates and normalizes domain names.

    Handles:
    - Conversion to lowercase canonical form
    - Removal of protocol, path and port from pasted URLs
    - IDNA encoding for international characters
    - Rejection of forbidden characters and names without a TLD
    """

    def validate(self, raw_domain: str) -> DomainValidationResult:
        """
        Validate and normalize a domain string.

        Args:
            raw_domain: The raw domain string to validate

        Returns:
            DomainValidationResult with validation status and canonical form or error
        """
        try:
            canonical = self.normalize(raw_domain)
        except ValidationError as e:
            return DomainValidationResult(
                valid=False,
                canonical_domain=None,
                error=DomainValidationError(
                    code=DomainValidationErrorCode(e.code),
                    message=e.message,
                    details=e.details,
                ),
            )

        return DomainValidationResult(
            valid=True,
            canonical_domain=canonical,
            error=None,
        )

    def normalize(self, raw_domain: str) -> str:
        """
        Convert a domain to canonical form, raising on invalid input.

        Args:
            raw_domain: Domain string to normalize

        Returns:
            Canonical form of the domain (lowercase, IDNA if needed)

        Raises:
            ValidationError: If the input is empty, too long, contains
                forbidden characters, is malformed, or fails IDNA encoding
        """
        if not raw_domain or not raw_domain.strip():
            raise ValidationError(
                code=DomainValidationErrorCode.EMPTY_INPUT.value,
                message="Domain input is empty",
                details={"raw_input": raw_domain},
            )

        domain = strip_domain(raw_domain)

        if not domain:
            raise ValidationError(
                code=DomainValidationErrorCode.EMPTY_INPUT.value,
                message="Domain input is empty",
                details={"raw_input": raw_domain},
            )

        forbidden_found = FORBIDDEN_CHARS_PATTERN.findall(domain)
        if forbidden_found:
            raise ValidationError(
                code=DomainValidationErrorCode.FORBIDDEN_CHARS.value,
                message="Domain contains forbidden characters",
                details={"raw_input": raw_domain, "forbidden_chars": forbidden_found},
            )

        canonical = self._encode_idna(domain)

        if len(canonical) > MAX_DOMAIN_LENGTH:
            raise ValidationError(
                code=DomainValidationErrorCode.TOO_LONG.value,
                message=f"Domain too long (max {MAX_DOMAIN_LENGTH} characters)",
                details={"raw_input": raw_domain, "length": len(canonical)},
            )

        if not self.is_well_formed(canonical):
            raise ValidationError(
                code=DomainValidationErrorCode.INVALID_FORMAT.value,
                message="Invalid domain format",
                details={"raw_input": raw_domain, "canonical": canonical},
            )

        return canonical

    def is_well_formed(self, domain: str) -> bool:
        """
        Check that a canonical domain has valid labels and an alphabetic TLD.

        Args:
            domain: Canonical domain (e.g., 'example.com')

        Returns:
            True if the structure is valid, False otherwise
        """
        if "." not in domain:
            return False

        labels = domain.split(".")
        *names, tld = labels
        if not TLD_PATTERN.match(tld):
            return False
        return all(LABEL_PATTERN.match(label) for label in names)

    def _encode_idna(self, domain: str) -> str:
        """IDNA-encode a lowercase domain if it contains non-ASCII characters."""
        if all(ord(c) <= 127 for c in domain):
            return domain

        try:
            return idna.encode(domain, uts46=True).decode("ascii")
        except idna.IDNAError as e:
            raise ValidationError(
                code=DomainValidationErrorCode.IDNA_ERROR.value,
                message=f"IDNA encoding failed: {e}",
                details={"domain": domain, "idna_error": str(e)},
            )
