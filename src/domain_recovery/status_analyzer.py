"""
Domain Status Analyzer for lifecycle classification.

Classifies a domain into exactly one lifecycle state from registration and
activity signals, and attaches a recovery difficulty, cost range, time
estimate and success rate.

Decision order (first match wins):
1. Reserved names (documentation/example domains, RFC 2606 TLDs) -> RESERVED
2. Major brands -> ACTIVE_IN_USE, IMPOSSIBLE
3. No registration evidence -> AVAILABLE
4. Passed expiry date -> EXPIRED_GRACE / EXPIRED_REDEMPTION / PENDING_DELETE
5. DNS A-records present but website down -> ACTIVE_HOSTING_ISSUE
6. Active sub-classification -> ACTIVE_PARKED / ACTIVE_FOR_SALE / ACTIVE_IN_USE

Step 5 runs before the archive check of step 6: a resolving domain whose
server is down is reported as a hosting issue even when archived content
exists.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain_recovery.classifier import DomainClassifier
from domain_recovery.domain_validator import normalize_domain, split_domain
from domain_recovery.enums import DomainStatus, RecoveryDifficulty
from domain_recovery.models import Classification, CostRange, DomainStatusReport, DomainValuation, RegistrarContact
from domain_recovery.registrar_directory import find_registrar
from domain_recovery.scoring import clamp, round_half_up
from domain_recovery.signals import DnsSignals, RegistrationSignals


RESERVED_DOMAINS = frozenset({
    "example.com",
    "example.net",
    "example.org",
    "localhost",
    "test.com",
    "invalid.com",
})

# RFC 2606 reserved top-level names
RESERVED_TLDS = frozenset({"test", "example", "invalid", "localhost"})

# Nameserver substrings of parking and aftermarket providers
PARKING_NAMESERVERS = (
    "sedoparking",
    "parkingcrew",
    "bodis",
    "afternic",
    "sedo",
    "above.com",
    "parklogic",
)

# Days after expiry; inclusive upper bounds
GRACE_PERIOD_END_DAYS = 45
REDEMPTION_PERIOD_END_DAYS = 75
REDEMPTION_DELETION_OFFSET_DAYS = 75
PENDING_DELETE_DELETION_OFFSET_DAYS = 90

DIFFICULTY_MULTIPLIERS = {
    RecoveryDifficulty.EASY: 1.0,
    RecoveryDifficulty.MODERATE: 0.8,
    RecoveryDifficulty.HARD: 0.6,
    RecoveryDifficulty.VERY_HARD: 0.3,
    RecoveryDifficulty.IMPOSSIBLE: 0.0,
}

EARLY_EXPIRY_BONUS_DAYS = 30
EARLY_EXPIRY_BONUS = 10

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY


def is_reserved_domain(domain: str) -> bool:
    """Check whether a domain is on the registry-reserved block list."""
    clean = normalize_domain(domain)
    if clean in RESERVED_DOMAINS:
        return True
    _, tld = split_domain(clean)
    return tld.rsplit(".", 1)[-1] in RESERVED_TLDS or clean in RESERVED_TLDS


def is_parking_nameserver(nameservers: tuple[str, ...]) -> bool:
    """Check whether any nameserver belongs to a known parking/for-sale provider."""
    return any(
        indicator in ns.lower()
        for ns in nameservers
        for indicator in PARKING_NAMESERVERS
    )


def expiry_bucket(days_since_expiry: int) -> DomainStatus:
    """
    Map days since expiry to a post-expiry lifecycle state.

    Buckets are contiguous: [0, 45] grace, [46, 75] redemption, 76+ pending delete.
    """
    if days_since_expiry <= GRACE_PERIOD_END_DAYS:
        return DomainStatus.EXPIRED_GRACE
    if days_since_expiry <= REDEMPTION_PERIOD_END_DAYS:
        return DomainStatus.EXPIRED_REDEMPTION
    return DomainStatus.PENDING_DELETE


class DomainStatusAnalyzer:
    """
    Lifecycle classifier for domains.

    Holds only a classifier; no mutable state.
    """

    def __init__(self, classifier: Optional[DomainClassifier] = None) -> None:
        """
        Initialize the status analyzer.

        Args:
            classifier: Brand/premium classifier (a default one is created if omitted)
        """
        self._classifier = classifier or DomainClassifier()

    def classify(
        self,
        domain: str,
        registration: Optional[RegistrationSignals] = None,
        has_archived_content: Optional[bool] = None,
        is_website_live: Optional[bool] = None,
        dns: Optional[DnsSignals] = None,
        *,
        now: Optional[datetime] = None,
        valuation: Optional[DomainValuation] = None,
    ) -> DomainStatusReport:
        """
        Classify the lifecycle state of a domain.

        Args:
            domain: Domain to classify
            registration: WHOIS/RDAP registration record, if any
            has_archived_content: Whether the archive holds snapshots (None = unknown)
            is_website_live: Live-site probe result (None = not probed)
            dns: DNS signals (None = not queried)
            now: Reference time (defaults to the current UTC time)
            valuation: Optional valuation used as baseline cost when activity is unknown

        Returns:
            DomainStatusReport for the domain
        """
        now = now or datetime.now(timezone.utc)
        clean = normalize_domain(domain)

        classification = self._classifier.classify(clean, self._age_years(registration, now))
        is_registered = registration is not None and registration.is_registered

        if not is_registered:
            return self._available(clean, classification)

        if is_reserved_domain(clean):
            return self._reserved(clean, classification, is_registered)

        if classification.is_major_brand:
            return self._major_brand(clean, classification, registration)

        registrar, contact = self._registrar_fields(registration)
        common = dict(
            domain=clean,
            is_registered=True,
            registrar=registrar,
            registrar_contact=contact,
            classification=classification,
        )

        expiry = registration.expiry_date
        days_until_expiry = None
        if expiry is not None:
            # Signed floor: a partial day past expiry counts as a whole day
            diff = math.floor((expiry - now).total_seconds() / SECONDS_PER_DAY)
            if now >= expiry:
                return self._expired(common, expiry, -diff)
            days_until_expiry = diff

        common.update(expiry_date=expiry, days_until_expiry=days_until_expiry)

        if is_website_live is False and dns is not None and dns.resolves:
            return self._hosting_issue(common)

        no_activity_signals = (
            is_website_live is None and has_archived_content is None and dns is None
        )
        if no_activity_signals:
            return self._registered_unknown_activity(common, classification, valuation)

        if is_website_live is False and not has_archived_content:
            return self._parked(common)

        if is_parking_nameserver(registration.nameservers):
            return self._for_sale(common)

        return self._in_use(common)

    def recovery_score(self, report: DomainStatusReport) -> int:
        """
        Calculate the overall recovery score (0-100) of a report.

        The success rate is scaled by a per-difficulty multiplier; domains
        within 30 days of expiry earn an urgency bonus.

        Args:
            report: Status report to score

        Returns:
            Recovery score clamped to [0, 100]
        """
        score = report.success_rate * DIFFICULTY_MULTIPLIERS[report.recovery_difficulty]

        if report.days_since_expiry is not None and report.days_since_expiry < EARLY_EXPIRY_BONUS_DAYS:
            score += EARLY_EXPIRY_BONUS

        return int(clamp(round_half_up(score), 0, 100))

    # -- branches -------------------------------------------------------

    def _reserved(
        self,
        domain: str,
        classification: Classification,
        is_registered: bool,
    ) -> DomainStatusReport:
        return DomainStatusReport(
            domain=domain,
            status=DomainStatus.RESERVED,
            is_registered=is_registered,
            is_active=False,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.IMPOSSIBLE,
            estimated_cost=CostRange(min=0, max=0),
            estimated_time_weeks=0,
            success_rate=0,
            classification=classification,
            reasons=("Domain is reserved by registry",),
            warnings=("Reserved domains cannot be registered by the public",),
            opportunities=("Choose a different, unreserved domain name",),
        )

    def _major_brand(
        self,
        domain: str,
        classification: Classification,
        registration: Optional[RegistrationSignals],
    ) -> DomainStatusReport:
        registrar, contact = self._registrar_fields(registration)
        return DomainStatusReport(
            domain=domain,
            status=DomainStatus.ACTIVE_IN_USE,
            is_registered=True,
            is_active=True,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.IMPOSSIBLE,
            estimated_cost=classification.estimated_value,
            estimated_time_weeks=0,
            success_rate=0,
            expiry_date=registration.expiry_date if registration else None,
            registrar=registrar,
            registrar_contact=contact,
            classification=classification,
            reasons=classification.reasons + ("Domain is owned and actively used by the brand",),
            warnings=(
                "This domain cannot be acquired through normal means",
                "Domain is protected by trademark law and extensive legal resources",
                "Any attempt to register similar domains may result in legal action",
            ),
            opportunities=(
                "This domain is not available for recovery",
                "Consider alternative domain names or variations",
                "Explore official partnership opportunities with the company",
            ),
        )

    def _available(self, domain: str, classification: Classification) -> DomainStatusReport:
        return DomainStatusReport(
            domain=domain,
            status=DomainStatus.AVAILABLE,
            is_registered=False,
            is_active=False,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.EASY,
            estimated_cost=CostRange(min=10, max=50),
            estimated_time_weeks=0,
            success_rate=100,
            classification=classification,
            reasons=("Domain appears to be available for registration",),
            opportunities=("Register immediately at any domain registrar",),
        )

    def _expired(self, common: dict, expiry: datetime, days_since: int) -> DomainStatusReport:
        status = expiry_bucket(days_since)
        fields = dict(common, expiry_date=expiry, days_since_expiry=days_since, status=status)

        if status == DomainStatus.EXPIRED_GRACE:
            return DomainStatusReport(
                **fields,
                is_active=False,
                is_parked=False,
                is_for_sale=False,
                recovery_difficulty=RecoveryDifficulty.MODERATE,
                estimated_cost=CostRange(min=500, max=2000),
                estimated_time_weeks=1,
                success_rate=70,
                reasons=(f"Domain expired {days_since} days ago", "Currently in grace period"),
                warnings=("Grace period is time-sensitive - act quickly",),
                opportunities=(
                    "Contact previous owner immediately",
                    "Set up backorder service as backup",
                ),
            )

        if status == DomainStatus.EXPIRED_REDEMPTION:
            return DomainStatusReport(
                **fields,
                is_active=False,
                is_parked=False,
                is_for_sale=False,
                recovery_difficulty=RecoveryDifficulty.HARD,
                estimated_cost=CostRange(min=1000, max=5000),
                estimated_time_weeks=2,
                success_rate=50,
                deletion_date=expiry + timedelta(days=REDEMPTION_DELETION_OFFSET_DAYS),
                reasons=(f"Domain expired {days_since} days ago", "Currently in redemption period"),
                warnings=("Redemption fees are very expensive ($200-$1000+)",),
                opportunities=(
                    "Contact previous owner (redemption fee required)",
                    "Wait for deletion and use backorder service",
                ),
            )

        return DomainStatusReport(
            **fields,
            is_active=False,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.HARD,
            estimated_cost=CostRange(min=69, max=500),
            estimated_time_weeks=1,
            success_rate=30,
            deletion_date=expiry + timedelta(days=PENDING_DELETE_DELETION_OFFSET_DAYS),
            reasons=("Domain is pending deletion", "Will be released to public soon"),
            warnings=(
                "High competition expected for popular domains",
                "Success rate depends on domain popularity",
            ),
            opportunities=(
                "Use domain backorder service (SnapNames, DropCatch, etc.)",
                "Use multiple backorder services to increase chances",
            ),
        )

    def _hosting_issue(self, common: dict) -> DomainStatusReport:
        return DomainStatusReport(
            **common,
            status=DomainStatus.ACTIVE_HOSTING_ISSUE,
            is_active=True,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.MODERATE,
            estimated_cost=CostRange(min=0, max=100),
            estimated_time_weeks=0,
            success_rate=90,
            reasons=("Domain is registered and DNS is configured, but the website is not responding",),
            opportunities=(
                "Your domain registration is fine - this appears to be a hosting issue",
                "Check your web server or hosting provider for outages",
                "Verify your hosting account is active and properly configured",
            ),
        )

    def _registered_unknown_activity(
        self,
        common: dict,
        classification: Classification,
        valuation: Optional[DomainValuation],
    ) -> DomainStatusReport:
        if valuation is not None:
            baseline = CostRange(
                min=valuation.estimated_value.low,
                max=valuation.estimated_value.high,
                currency=valuation.estimated_value.currency,
            )
        else:
            baseline = classification.estimated_value

        return DomainStatusReport(
            **common,
            status=DomainStatus.ACTIVE_PARKED,
            is_active=True,
            is_parked=True,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.MODERATE,
            estimated_cost=baseline,
            estimated_time_weeks=4,
            success_rate=60,
            reasons=("Domain is registered", "No website, archive or DNS data was available"),
            opportunities=(
                "Contact owner with purchase offer",
                "Check WHOIS for owner contact information",
            ),
        )

    def _parked(self, common: dict) -> DomainStatusReport:
        return DomainStatusReport(
            **common,
            status=DomainStatus.ACTIVE_PARKED,
            is_active=True,
            is_parked=True,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.MODERATE,
            estimated_cost=CostRange(min=1000, max=10000),
            estimated_time_weeks=4,
            success_rate=60,
            reasons=("Domain is registered but appears parked/inactive",),
            opportunities=(
                "Contact owner with purchase offer",
                "Check if domain is listed for sale on aftermarket",
                "Contact registrar for owner information",
            ),
        )

    def _for_sale(self, common: dict) -> DomainStatusReport:
        return DomainStatusReport(
            **common,
            status=DomainStatus.ACTIVE_FOR_SALE,
            is_active=True,
            is_parked=False,
            is_for_sale=True,
            recovery_difficulty=RecoveryDifficulty.MODERATE,
            estimated_cost=CostRange(min=500, max=50000),
            estimated_time_weeks=2,
            success_rate=80,
            reasons=("Domain appears to be for sale",),
            warnings=("Price may be negotiable, especially for older listings",),
            opportunities=(
                "Contact owner directly via listing",
                "Negotiate price or use domain broker",
            ),
        )

    def _in_use(self, common: dict) -> DomainStatusReport:
        return DomainStatusReport(
            **common,
            status=DomainStatus.ACTIVE_IN_USE,
            is_active=True,
            is_parked=False,
            is_for_sale=False,
            recovery_difficulty=RecoveryDifficulty.VERY_HARD,
            estimated_cost=CostRange(min=5000, max=100000),
            estimated_time_weeks=12,
            success_rate=20,
            reasons=("Domain is actively used",),
            warnings=("Owner may not be willing to sell", "Price will likely be very high"),
            opportunities=(
                "Contact current owner with purchase offer",
                "Use domain broker for negotiation",
                "Consider legal options if trademark infringement",
            ),
        )

    # -- helpers --------------------------------------------------------

    @staticmethod
    def _age_years(registration: Optional[RegistrationSignals], now: datetime) -> Optional[float]:
        if registration is None or registration.created_date is None:
            return None
        return (now - registration.created_date).total_seconds() / SECONDS_PER_YEAR

    @staticmethod
    def _registrar_fields(
        registration: Optional[RegistrationSignals],
    ) -> tuple[Optional[str], Optional[RegistrarContact]]:
        """Registrar name and contact; the directory fills a missing phone/email."""
        if registration is None or not registration.has_registrar:
            return None, None

        email = registration.registrar_abuse_email
        phone = registration.registrar_abuse_phone
        if not (email and phone):
            entry = find_registrar(registration.registrar)
            if entry is not None:
                email = email or entry.support_email
                phone = phone or entry.support_phone

        contact = RegistrarContact(email=email, phone=phone) if (email or phone) else None
        return registration.registrar, contact
