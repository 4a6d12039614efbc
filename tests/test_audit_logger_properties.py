"""
Property-based tests for Audit Logger module.

Uses Hypothesis for property-based testing to verify output formats,
signing, level filtering and masking of secrets and registrant data.
"""

import json
from dataclasses import replace
from io import StringIO

import pytest
from hypothesis import given, settings, assume
from hypothesis import strategies as st

from domain_recovery.audit_logger import AuditLogger
from domain_recovery.config import LoggingConfig
from domain_recovery.enums import LogLevel
from domain_recovery.exceptions import SignalError


@st.composite
def component_name_strategy(draw) -> str:
    """Generate valid component names."""
    return draw(st.text(
        alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"),
        min_size=1,
        max_size=50,
    ))


@st.composite
def message_strategy(draw) -> str:
    """Generate valid log messages."""
    return draw(st.text(
        alphabet=st.characters(
            whitelist_categories=('L', 'N', 'P', 'S', 'Z'),
            blacklist_characters='\x00\n\r',
        ),
        min_size=1,
        max_size=200,
    ))


@st.composite
def non_sensitive_key_strategy(draw) -> str:
    """Generate keys that do not contain any sensitive pattern."""
    key = draw(st.text(
        alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz_"),
        min_size=1,
        max_size=20,
    ))
    for pattern in AuditLogger.SENSITIVE_KEYS:
        assume(pattern not in key)
    return key


@st.composite
def non_sensitive_data_strategy(draw) -> dict:
    """Generate dictionaries of plain values under non-sensitive keys."""
    return draw(st.dictionaries(
        keys=non_sensitive_key_strategy(),
        values=st.one_of(
            st.integers(min_value=-1000, max_value=1000),
            st.text(max_size=30),
            st.booleans(),
            st.none(),
        ),
        max_size=5,
    ))


sensitive_key_strategy = st.sampled_from([
    'token', 'api_key', 'signing_key', 'password', 'Authorization',
    'registrant_email', 'registrant_phone', 'REGISTRANT_NAME',
    'registrant_address', 'abuse_email', 'abuse_phone', 'private_key',
])

signing_key_strategy = st.text(min_size=1, max_size=64)


class TestDualFormatProperty:
    """
    Property-based tests for output formats.

    **Feature: domain-recovery-engine, Property 32: Log entries in JSON and text form**
    """

    @given(
        level=st.sampled_from(list(LogLevel)),
        component=component_name_strategy(),
        message=message_strategy(),
        data=non_sensitive_data_strategy(),
    )
    @settings(max_examples=100)
    def test_dual_format_produces_both_outputs(
        self, level: LogLevel, component: str, message: str, data: dict
    ) -> None:
        """
        *For any* log entry when output_format is "both", the logger SHALL
        produce a JSON line followed by a human-readable text line.
        """
        output = StringIO()
        logger = AuditLogger(output_format="both", output_stream=output, min_level=LogLevel.DEBUG)

        logger.log(level, component, message, data)

        lines = output.getvalue().rstrip('\n').split('\n')
        assert len(lines) == 2

        parsed = json.loads(lines[0])
        assert parsed["level"] == level.value
        assert parsed["component"] == component
        assert parsed["message"] == message
        assert parsed["data"] == data

        assert level.value.upper() in lines[1]
        assert f"[{component}]" in lines[1]
        assert message in lines[1]

    @given(message=message_strategy())
    @settings(max_examples=100)
    def test_single_formats(self, message: str) -> None:
        json_out, text_out = StringIO(), StringIO()

        AuditLogger(output_format="json", output_stream=json_out).log(LogLevel.INFO, "analyzer", message)
        AuditLogger(output_format="text", output_stream=text_out).log(LogLevel.INFO, "analyzer", message)

        assert json.loads(json_out.getvalue())["message"] == message
        assert len(text_out.getvalue().rstrip('\n').split('\n')) == 1
        assert text_out.getvalue().startswith("[")

    def test_text_line_marks_domain(self) -> None:
        output = StringIO()
        logger = AuditLogger(output_format="text", output_stream=output)

        logger.log(LogLevel.INFO, "DomainAnalyzer", "Analysis complete", {"domain": "example.com"})

        assert "[DomainAnalyzer] <example.com> Analysis complete" in output.getvalue()

    def test_invalid_format_rejected(self) -> None:
        with pytest.raises(ValueError, match="xml"):
            AuditLogger(output_format="xml")


class TestLevelFilteringProperty:
    """
    Tests for minimum-level filtering.

    **Feature: domain-recovery-engine, Property 33: Entries below the minimum level are dropped**
    """

    @given(
        min_level=st.sampled_from(list(LogLevel)),
        level=st.sampled_from(list(LogLevel)),
    )
    @settings(max_examples=100)
    def test_filtering(self, min_level: LogLevel, level: LogLevel) -> None:
        """
        *For any* pair of levels, an entry SHALL be recorded exactly when
        its level is at or above the minimum level.
        """
        order = list(LogLevel)
        output = StringIO()
        logger = AuditLogger(output_format="json", output_stream=output, min_level=min_level)

        entry = logger.log(level, "status_analyzer", "classified")

        if order.index(level) >= order.index(min_level):
            assert entry is not None
            assert len(logger.entries) == 1
        else:
            assert entry is None
            assert logger.entries == []
            assert output.getvalue() == ""

    def test_clear_entries(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())
        logger.log(LogLevel.INFO, "analyzer", "one")

        logger.clear_entries()

        assert logger.entries == []


class TestAuditSigningProperty:
    """
    Property-based tests for audit mode signing.

    **Feature: domain-recovery-engine, Property 34: Audit mode signs log entries**
    """

    @given(
        message=message_strategy(),
        data=non_sensitive_data_strategy(),
        signing_key=signing_key_strategy,
    )
    @settings(max_examples=100)
    def test_audit_mode_signs_entries(self, message: str, data: dict, signing_key: str) -> None:
        """
        *For any* entry logged in audit mode, the entry SHALL carry a
        signature that verifies, and altering the entry SHALL break it.
        """
        output = StringIO()
        logger = AuditLogger(output_format="json", output_stream=output)
        logger.enable_audit_mode(signing_key)

        entry = logger.log(LogLevel.INFO, "analyzer", message, data)

        assert entry.signature is not None
        assert len(entry.signature) == 64
        assert logger.verify_signature(entry)
        assert json.loads(output.getvalue())["signature"] == entry.signature

        tampered = replace(entry, message=message + "x")
        assert not logger.verify_signature(tampered)

    @given(message=message_strategy())
    @settings(max_examples=100)
    def test_no_signature_without_audit_mode(self, message: str) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        entry = logger.log(LogLevel.INFO, "analyzer", message)

        assert entry.signature is None
        assert not logger.verify_signature(entry)

    def test_empty_key_rejected(self) -> None:
        logger = AuditLogger(output_stream=StringIO())
        with pytest.raises(ValueError):
            logger.enable_audit_mode("")

        assert not logger.audit_mode

    def test_disable_audit_mode(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())
        logger.enable_audit_mode("k")
        logger.disable_audit_mode()

        assert logger.log(LogLevel.INFO, "analyzer", "m").signature is None

    def test_from_config(self) -> None:
        config = LoggingConfig(level="warn", audit_mode=True, audit_signing_key="key", output_format="json")

        logger = AuditLogger.from_config(config, output_stream=StringIO())

        assert logger.output_format == "json"
        assert logger.min_level == LogLevel.WARN
        assert logger.audit_mode

    def test_from_config_without_key(self) -> None:
        config = LoggingConfig(audit_mode=True, audit_signing_key=None)

        assert not AuditLogger.from_config(config, output_stream=StringIO()).audit_mode


class TestSensitiveDataMaskingProperty:
    """
    Property-based tests for masking.

    **Feature: domain-recovery-engine, Property 35: Secrets and registrant data are masked**
    """

    @given(key=sensitive_key_strategy, value=st.text(min_size=1, max_size=40))
    @settings(max_examples=100)
    def test_sensitive_data_masked(self, key: str, value: str) -> None:
        """
        *For any* sensitive key, at the top level or nested in dicts and
        lists, the logged value SHALL be replaced by the mask.
        """
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        entry = logger.log(
            LogLevel.INFO,
            "rdap_parser",
            "parsed",
            {key: value, "contact": {key: value}, "entities": [{key: value}, "plain"]},
        )

        assert entry.data[key] == AuditLogger.MASK_VALUE
        assert entry.data["contact"][key] == AuditLogger.MASK_VALUE
        assert entry.data["entities"][0][key] == AuditLogger.MASK_VALUE
        assert entry.data["entities"][1] == "plain"

    @given(data=non_sensitive_data_strategy())
    @settings(max_examples=100)
    def test_non_sensitive_data_not_masked(self, data: dict) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        assert logger.mask_sensitive_data(data) == data

    def test_domain_and_registrar_are_kept(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        masked = logger.mask_sensitive_data({"domain": "example.com", "registrar": "Namecheap", "author": "x"})

        assert masked == {"domain": "example.com", "registrar": "Namecheap", "author": "x"}


class TestErrorContextProperty:
    """
    Tests for error logging.

    **Feature: domain-recovery-engine, Property 36: Error logs carry the error context**
    """

    @given(domain=st.from_regex(r"\A[a-z]{1,20}\.com\Z"))
    @settings(max_examples=100)
    def test_error_logs_include_error_context(self, domain: str) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())
        error = SignalError(code="invalid_date", message="bad date")

        entry = logger.log_error("signals", "parse failed", error=error, domain=domain,
                                 additional_data={"field": "expiry_date"})

        assert entry.level == LogLevel.ERROR
        assert entry.data["error_type"] == "SignalError"
        assert entry.data["error_code"] == "invalid_date"
        assert entry.data["domain"] == domain
        assert entry.data["field"] == "expiry_date"

    def test_plain_exception_has_no_code(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        entry = logger.log_error("cli", "failed", error=ValueError("boom"))

        assert entry.data["error_message"] == "boom"
        assert "error_code" not in entry.data

    def test_error_logs_with_minimal_context(self) -> None:
        logger = AuditLogger(output_format="json", output_stream=StringIO())

        assert logger.log_error("cli", "failed").data == {}
