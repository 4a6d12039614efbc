"""
Property-based tests for the Domain Analyzer pipeline.

Uses Hypothesis for property-based testing to verify that the combined
analysis is consistent across its parts.
"""

from datetime import datetime, timedelta, timezone
from io import StringIO

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_recovery.analyzer import DomainAnalyzer
from domain_recovery.audit_logger import AuditLogger
from domain_recovery.config import EngineConfig
from domain_recovery.enums import DomainStatus, GuidePhase, LogLevel
from domain_recovery.exceptions import ValidationError
from domain_recovery.models import RecoveryContext
from domain_recovery.signals import ArchiveSignals, RegistrationSignals, WebsiteSignals


NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def registration(expiry_offset_days: int) -> RegistrationSignals:
    return RegistrationSignals(
        registrar="Namecheap",
        created_date=NOW - timedelta(days=3000),
        expiry_date=NOW + timedelta(days=expiry_offset_days),
    )


class TestAnalysisConsistencyProperty:
    """
    Property-based tests for the combined analysis.

    **Feature: domain-recovery-engine, Property 40: The guide matches the classified state**
    """

    @given(
        offset=st.integers(min_value=-200, max_value=400),
        online=st.one_of(st.none(), st.booleans()),
        snapshots=st.one_of(st.none(), st.integers(min_value=0, max_value=50)),
    )
    @settings(max_examples=100)
    def test_result_is_consistent(self, offset: int, online, snapshots) -> None:
        """
        *For any* registration and activity signals, the result SHALL
        carry the canonical domain, a score in range and a guide whose
        steps are numbered from 1.
        """
        archive = ArchiveSignals(snapshot_count=snapshots) if snapshots is not None else None
        website = WebsiteSignals(is_online=online) if online is not None else None

        result = DomainAnalyzer().analyze(
            "https://www.CloudRecovery.com/",
            registration=registration(offset),
            archive=archive,
            website=website,
            now=NOW,
        )

        assert result.domain == "cloudrecovery.com"
        assert result.status_report.domain == result.domain
        assert result.valuation.domain == result.domain
        assert 0 <= result.recovery_score <= 100
        assert result.recovery_guide.steps[0].number == 1
        assert result.timestamp == NOW.isoformat()
        if offset < 0:
            assert result.status_report.status in {
                DomainStatus.EXPIRED_GRACE,
                DomainStatus.EXPIRED_REDEMPTION,
                DomainStatus.PENDING_DELETE,
            }

    def test_unregistered_domain_is_available(self) -> None:
        result = DomainAnalyzer().analyze("cloudrecovery.com", now=NOW)

        assert result.status_report.status == DomainStatus.AVAILABLE
        assert result.recovery_guide.phase == GuidePhase.AVAILABLE

    def test_expired_with_archive(self) -> None:
        result = DomainAnalyzer().analyze(
            "cloudrecovery.com",
            registration=registration(-10),
            archive=ArchiveSignals(snapshot_count=8),
            now=NOW,
        )

        assert result.status_report.status == DomainStatus.EXPIRED_GRACE
        assert result.status_report.days_since_expiry == 10
        assert result.recovery_guide.show_script_downloads
        assert result.recovery_guide.registrar_name == "Namecheap"

    def test_context_reaches_guide(self) -> None:
        result = DomainAnalyzer().analyze(
            "cloudrecovery.com",
            registration=registration(-10),
            context=RecoveryContext(emergency_mode=True),
            now=NOW,
        )

        assert result.recovery_guide.is_emergency_mode

    def test_config_is_passed_to_valuation(self) -> None:
        analyzer = DomainAnalyzer(config=EngineConfig(comparables_limit=2))

        result = analyzer.analyze("cloudrecovery.com", now=NOW)

        assert analyzer.config.comparables_limit == 2
        assert len(result.valuation.comparables) <= 2


class TestAnalyzerLoggingProperty:
    """
    Tests for analyzer logging.

    **Feature: domain-recovery-engine, Property 41: Analyses are logged at start and completion**
    """

    def test_success_logs_start_and_end(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        DomainAnalyzer(logger=logger).analyze("cloudrecovery.com", now=NOW)

        messages = [entry.message for entry in logger.entries]
        assert messages[0] == "Starting analysis for domain: cloudrecovery.com"
        assert messages[-1] == "Analysis complete for cloudrecovery.com: AVAILABLE"
        assert logger.entries[-1].data["status"] == "AVAILABLE"

    def test_invalid_domain_is_logged_and_raised(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        with pytest.raises(ValidationError):
            DomainAnalyzer(logger=logger).analyze("not a domain!", now=NOW)

        assert logger.entries[-1].level == LogLevel.ERROR
        assert logger.entries[-1].component == "DomainValidator"
