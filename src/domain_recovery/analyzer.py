"""
Domain Analyzer for the domain recovery engine.

This module wires the engine's components into a single analysis run:
- Domain validation and normalization
- Valuation (seven weighted factors, comparables, grade)
- Lifecycle classification with recovery estimates
- Recovery score
- Personalized recovery guide with context overlays

All inputs are signal records gathered by the caller beforehand; the
analyzer performs no I/O of its own apart from optional audit logging.
"""

from datetime import datetime, timezone
from typing import Optional

from domain_recovery.audit_logger import AuditLogger
from domain_recovery.config import EngineConfig
from domain_recovery.domain_validator import DomainValidator
from domain_recovery.enums import LogLevel
from domain_recovery.exceptions import ValidationError
from domain_recovery.models import AnalysisResult, RecoveryContext
from domain_recovery.recovery_guide import GuideGenerator
from domain_recovery.signals import (
    ArchiveSignals,
    DnsSignals,
    RegistrationSignals,
    SecuritySignals,
    SeoSignals,
    WebsiteSignals,
)
from domain_recovery.status_analyzer import DomainStatusAnalyzer
from domain_recovery.valuation import DomainValuationEngine


class DomainAnalyzer:
    """
    Runs the full analysis pipeline for one domain at a time.

    Components are created once and hold no per-request state, so one
    analyzer may serve many requests.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize the domain analyzer.

        Args:
            config: Engine options passed to the valuation engine
            logger: Optional audit logger for logging
        """
        self._config = config or EngineConfig()
        self._logger = logger

        self._domain_validator = DomainValidator()
        self._valuation_engine = DomainValuationEngine(self._config)
        self._status_analyzer = DomainStatusAnalyzer()
        self._guide_generator = GuideGenerator()

    def analyze(
        self,
        domain: str,
        registration: Optional[RegistrationSignals] = None,
        archive: Optional[ArchiveSignals] = None,
        website: Optional[WebsiteSignals] = None,
        dns: Optional[DnsSignals] = None,
        seo: Optional[SeoSignals] = None,
        security: Optional[SecuritySignals] = None,
        context: Optional[RecoveryContext] = None,
        now: Optional[datetime] = None,
    ) -> AnalysisResult:
        """
        Perform a complete domain analysis.

        This is the main entry point. It:
        1. Validates and normalizes the domain
        2. Values the domain
        3. Classifies its lifecycle state, using the valuation as baseline cost
        4. Scores how recoverable it is
        5. Generates the recovery guide from the status report

        Args:
            domain: The domain to analyze (can be a pasted URL)
            registration: WHOIS/RDAP registration record
            archive: Historical archive presence
            website: Live website probe result
            dns: DNS resolution result
            seo: SEO enrichment
            security: Security/reputation enrichment
            context: Situational flags for the guide overlays
            now: Reference time (defaults to the current UTC time)

        Returns:
            AnalysisResult combining report, valuation, guide and score

        Raises:
            ValidationError: If the domain cannot be normalized
        """
        now = now or datetime.now(timezone.utc)

        try:
            canonical_domain = self._domain_validator.normalize(domain)
        except ValidationError as e:
            self._log_error(
                "DomainValidator",
                f"Domain validation failed: {e.message}",
                {"domain": domain, "code": e.code, "error": e.details},
            )
            raise

        self._log_info(
            "DomainAnalyzer",
            f"Starting analysis for domain: {canonical_domain}",
            {
                "raw_domain": domain,
                "canonical": canonical_domain,
                "has_registration": registration is not None,
                "has_archive": archive is not None,
                "has_website": website is not None,
                "has_dns": dns is not None,
            },
        )

        valuation = self._valuation_engine.estimate(
            canonical_domain,
            whois=registration,
            seo=seo,
            security=security,
            website=website,
            now=now,
        )

        report = self._status_analyzer.classify(
            canonical_domain,
            registration,
            has_archived_content=archive.has_content if archive is not None else None,
            is_website_live=website.is_online if website is not None else None,
            dns=dns,
            now=now,
            valuation=valuation,
        )

        recovery_score = self._status_analyzer.recovery_score(report)

        guide = self._guide_generator.generate_from_report(
            report,
            archive=archive,
            context=context,
            now=now,
        )

        self._log_info(
            "DomainAnalyzer",
            f"Analysis complete for {canonical_domain}: {report.status.value}",
            {
                "domain": canonical_domain,
                "status": report.status.value,
                "difficulty": report.recovery_difficulty.value,
                "grade": valuation.grade.value,
                "estimated_value": valuation.estimated_value.mid,
                "recovery_score": recovery_score,
                "guide_steps": len(guide.steps),
            },
        )

        return AnalysisResult(
            domain=canonical_domain,
            status_report=report,
            valuation=valuation,
            recovery_guide=guide,
            recovery_score=recovery_score,
            timestamp=now.isoformat(),
        )

    def _log_info(self, component: str, message: str, data: dict) -> None:
        """Log an info message if logger is available."""
        if self._logger:
            self._logger.log(LogLevel.INFO, component, message, data)

    def _log_error(self, component: str, message: str, data: dict) -> None:
        """Log an error message if logger is available."""
        if self._logger:
            self._logger.log(LogLevel.ERROR, component, message, data)

    @property
    def valuation_engine(self) -> DomainValuationEngine:
        """Get the valuation engine instance."""
        return self._valuation_engine

    @property
    def status_analyzer(self) -> DomainStatusAnalyzer:
        """Get the status analyzer instance."""
        return self._status_analyzer

    @property
    def guide_generator(self) -> GuideGenerator:
        """Get the guide generator instance."""
        return self._guide_generator

    @property
    def config(self) -> EngineConfig:
        """Get the engine configuration."""
        return self._config
