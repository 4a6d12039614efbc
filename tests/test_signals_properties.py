"""
Property-based tests for signal records and RDAP parsing.

Uses Hypothesis for property-based testing to verify that collaborator
data is accepted when absent or well formed, and rejected fail-fast when
malformed.
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_recovery.exceptions import SignalError
from domain_recovery.rdap_parser import (
    parse_nameservers,
    parse_vcard,
    registration_from_rdap,
)
from domain_recovery.signals import (
    ArchiveSignals,
    DnsSignals,
    RegistrationSignals,
    archive_from_dict,
    dns_from_dict,
    parse_timestamp,
    registration_from_dict,
    security_from_dict,
    seo_from_dict,
    website_from_dict,
)


# Strategies for generating test data

aware_datetimes = st.datetimes(
    min_value=datetime(1990, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
)


def vcard(**fields) -> list:
    """Build a jCard array from keyword fields (fn, org, email, tel)."""
    properties = [["version", {}, "text", "4.0"]]
    for key, value in fields.items():
        properties.append([key, {}, "text", value])
    return ["vcard", properties]


def rdap_payload(**overrides) -> dict:
    """Build a representative RDAP domain object."""
    payload = {
        "objectClassName": "domain",
        "ldhName": "example.com",
        "events": [
            {"eventAction": "registration", "eventDate": "2005-03-01T00:00:00Z"},
            {"eventAction": "last changed", "eventDate": "2023-01-10T12:00:00Z"},
            {"eventAction": "expiration", "eventDate": "2026-03-01T00:00:00Z"},
        ],
        "status": ["client transfer prohibited", "active"],
        "nameservers": [
            {"objectClassName": "nameserver", "ldhName": "NS1.EXAMPLE.NET."},
            {"objectClassName": "nameserver", "ldhName": "ns2.example.net"},
        ],
        "entities": [
            {
                "objectClassName": "entity",
                "roles": ["registrar"],
                "vcardArray": vcard(fn="Example Registrar, Inc."),
                "entities": [
                    {
                        "roles": ["abuse"],
                        "vcardArray": vcard(email="abuse@registrar.example", tel="tel:+1.5555550100"),
                    }
                ],
            },
            {
                "objectClassName": "entity",
                "roles": ["registrant"],
                "vcardArray": vcard(fn="REDACTED FOR PRIVACY"),
            },
        ],
    }
    payload.update(overrides)
    return payload


class TestTimestampParsingProperty:
    """
    Property-based tests for timestamp parsing.

    **Feature: domain-recovery-engine, Property 4: Collaborator dates parse to aware UTC or fail fast**
    """

    @given(moment=aware_datetimes)
    @settings(max_examples=100)
    def test_iso_string_round_trip(self, moment: datetime) -> None:
        """
        Property 4a: ISO-8601 strings parse back to the same instant.

        *For any* UTC datetime, parsing its ISO-8601 form (with '+00:00' or
        'Z') SHALL yield the same aware datetime.
        """
        assert parse_timestamp(moment.isoformat()) == moment
        assert parse_timestamp(moment.isoformat().replace("+00:00", "Z")) == moment

    @given(moment=st.datetimes(min_value=datetime(1990, 1, 1), max_value=datetime(2100, 1, 1)))
    @settings(max_examples=100)
    def test_naive_values_are_utc(self, moment: datetime) -> None:
        """
        Property 4b: Naive values are taken as UTC.
        """
        parsed = parse_timestamp(moment)

        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timedelta(0)
        assert parsed.replace(tzinfo=None) == moment

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_values(self, value) -> None:
        assert parse_timestamp(value) is None

    def test_date_becomes_midnight_utc(self) -> None:
        assert parse_timestamp(date(2024, 2, 29)) == datetime(2024, 2, 29, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self) -> None:
        parsed = parse_timestamp("2024-01-01T02:00:00+02:00")

        assert parsed == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45", "yesterday", 12345, 3.5, ["2024-01-01"]])
    def test_malformed_values_raise(self, value) -> None:
        with pytest.raises(SignalError) as exc_info:
            parse_timestamp(value, "expiry_date")

        assert exc_info.value.code == "invalid_date"
        assert exc_info.value.details["field"] == "expiry_date"

    @given(moment=st.datetimes(min_value=datetime(1990, 1, 1), max_value=datetime(2100, 1, 1)))
    @settings(max_examples=100)
    def test_records_store_aware_dates(self, moment: datetime) -> None:
        """
        *For any* naive datetime passed straight to a record, the stored
        value SHALL be the same instant as an aware UTC datetime.
        """
        registration = RegistrationSignals(created_date=moment, updated_date=moment, expiry_date=moment)
        archive = ArchiveSignals(snapshot_count=1, first_snapshot=moment, last_snapshot=moment)

        expected = moment.replace(tzinfo=timezone.utc)
        assert registration.created_date == expected
        assert registration.updated_date == expected
        assert registration.expiry_date == expected
        assert archive.first_snapshot == expected
        assert archive.last_snapshot == expected
        assert registration.expiry_date.tzinfo is not None

    def test_records_accept_iso_strings(self) -> None:
        registration = RegistrationSignals(expiry_date="2025-12-01")

        assert registration.expiry_date == datetime(2025, 12, 1, tzinfo=timezone.utc)

    def test_records_reject_bad_dates(self) -> None:
        with pytest.raises(SignalError) as exc_info:
            ArchiveSignals(last_snapshot="last week")

        assert exc_info.value.details["field"] == "last_snapshot"


class TestRegistrationSignalsProperty:
    """
    Tests for registration evidence derived from WHOIS/RDAP records.

    **Feature: domain-recovery-engine, Property 5: Registration evidence requires registrar, creation date or registrant**
    """

    @pytest.mark.parametrize("placeholder", ["available", "N/A", "none", "-", ""])
    def test_placeholder_registrars_are_not_evidence(self, placeholder: str) -> None:
        signals = RegistrationSignals(registrar=placeholder)

        assert not signals.has_registrar
        assert not signals.is_registered

    @given(
        registrar=st.one_of(st.none(), st.just("GoDaddy")),
        created=st.one_of(st.none(), aware_datetimes),
        redacted=st.booleans(),
    )
    @settings(max_examples=100)
    def test_is_registered_matches_evidence(self, registrar, created, redacted: bool) -> None:
        """
        *For any* combination of evidence, is_registered SHALL be true iff
        at least one piece of evidence is present.
        """
        signals = RegistrationSignals(
            registrar=registrar,
            created_date=created,
            registrant_redacted=redacted,
        )

        expected = registrar is not None or created is not None or redacted
        assert signals.is_registered == expected

    def test_transfer_lock_flag(self) -> None:
        assert RegistrationSignals(status_flags=("clientTransferProhibited",)).is_transfer_locked
        assert RegistrationSignals(status_flags=("client transfer prohibited",)).is_transfer_locked
        assert not RegistrationSignals(status_flags=("active",)).is_transfer_locked

    def test_registration_from_dict(self) -> None:
        signals = registration_from_dict({
            "registrar": "  Namecheap  ",
            "created_date": "2010-05-01",
            "expiry_date": "2025-05-01T00:00:00Z",
            "nameservers": ["DNS1.REGISTRAR-SERVERS.COM", ""],
            "status_flags": "clientTransferProhibited",
        })

        assert signals.registrar == "Namecheap"
        assert signals.created_date == datetime(2010, 5, 1, tzinfo=timezone.utc)
        assert signals.expiry_date == datetime(2025, 5, 1, tzinfo=timezone.utc)
        assert signals.nameservers == ("dns1.registrar-servers.com",)
        assert signals.status_flags == ("clientTransferProhibited",)

    def test_missing_keys_are_absent(self) -> None:
        signals = registration_from_dict({})

        assert signals == RegistrationSignals()
        assert registration_from_dict(None) is None

    @pytest.mark.parametrize("data", [
        {"registrar": 42},
        {"registrant_redacted": "yes"},
        {"nameservers": 7},
        {"expiry_date": "soon"},
    ])
    def test_wrong_types_raise(self, data: dict) -> None:
        with pytest.raises(SignalError):
            registration_from_dict(data)

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(SignalError):
            registration_from_dict(["registrar"])


class TestOtherSignalsProperty:
    """
    Tests for archive, website, DNS, SEO and security records.

    **Feature: domain-recovery-engine, Property 6: Missing fields mean no evidence**
    """

    @given(count=st.integers(min_value=0, max_value=10_000), available=st.booleans())
    @settings(max_examples=100)
    def test_archive_has_content(self, count: int, available: bool) -> None:
        archive = ArchiveSignals(snapshot_count=count, available=available)

        assert archive.has_content == (available or count > 0)

    def test_negative_snapshot_count_raises(self) -> None:
        with pytest.raises(SignalError):
            ArchiveSignals(snapshot_count=-1)

    def test_archive_from_dict(self) -> None:
        archive = archive_from_dict({"snapshot_count": 12, "first_snapshot": "2001-01-01"})

        assert archive.snapshot_count == 12
        assert archive.first_snapshot == datetime(2001, 1, 1, tzinfo=timezone.utc)
        assert archive.has_content

    def test_website_from_dict(self) -> None:
        website = website_from_dict({"is_online": False, "http_status": 503})

        assert website.is_online is False
        assert website.http_status == 503
        assert website.ssl_valid is None
        assert website_from_dict({}).is_online is None

    def test_dns_resolves(self) -> None:
        assert dns_from_dict({"a_records": ["192.0.2.1"]}).resolves
        assert dns_from_dict({"has_a_records": True}).resolves
        assert not DnsSignals().resolves
        assert not dns_from_dict({"has_a_records": False}).resolves

    def test_seo_defaults_to_zero(self) -> None:
        seo = seo_from_dict({"backlinks": 1500})

        assert seo.backlinks == 1500
        assert seo.domain_authority == 0
        assert seo.monthly_traffic == 0

    def test_seo_rejects_non_numbers(self) -> None:
        with pytest.raises(SignalError):
            seo_from_dict({"backlinks": "many"})
        with pytest.raises(SignalError):
            seo_from_dict({"monthly_traffic": True})

    def test_security_from_dict(self) -> None:
        security = security_from_dict({"domain_age_years": 12.5, "reputation_level": "good"})

        assert security.domain_age_years == 12.5
        assert security.reputation_level == "good"
        assert security.reputation_score is None


class TestRDAPParsingProperty:
    """
    Tests for mapping RDAP domain objects to registration records.

    **Feature: domain-recovery-engine, Property 7: RDAP fields map onto registration signals**
    """

    def test_full_payload(self) -> None:
        signals = registration_from_rdap(rdap_payload())

        assert signals.registrar == "Example Registrar, Inc."
        assert signals.registrar_abuse_email == "abuse@registrar.example"
        assert signals.registrar_abuse_phone == "+1.5555550100"
        assert signals.created_date == datetime(2005, 3, 1, tzinfo=timezone.utc)
        assert signals.updated_date == datetime(2023, 1, 10, 12, tzinfo=timezone.utc)
        assert signals.expiry_date == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert signals.nameservers == ("ns1.example.net", "ns2.example.net")
        assert signals.is_transfer_locked
        assert signals.registrant_redacted
        assert signals.registrant_name is None
        assert signals.is_registered

    def test_visible_registrant(self) -> None:
        payload = rdap_payload(entities=[
            {
                "roles": ["registrant"],
                "vcardArray": vcard(fn="Jane Doe", org="Doe Holdings", email="jane@doe.example"),
            },
        ])

        signals = registration_from_rdap(payload)

        assert not signals.registrant_redacted
        assert signals.registrant_name == "Jane Doe"
        assert signals.registrant_organization == "Doe Holdings"
        assert signals.registrant_email == "jane@doe.example"
        assert signals.registrar is None

    def test_empty_registrant_vcard_is_redacted(self) -> None:
        payload = rdap_payload(entities=[{"roles": ["registrant"], "vcardArray": ["vcard", []]}])

        assert registration_from_rdap(payload).registrant_redacted

    def test_minimal_payload(self) -> None:
        signals = registration_from_rdap({"objectClassName": "domain"})

        assert signals == RegistrationSignals()
        assert not signals.is_registered

    @pytest.mark.parametrize("payload", [None, "domain", [], 3])
    def test_non_object_payload_raises(self, payload) -> None:
        with pytest.raises(SignalError) as exc_info:
            registration_from_rdap(payload)

        assert exc_info.value.code == "invalid_rdap"

    def test_wrong_object_class_raises(self) -> None:
        with pytest.raises(SignalError) as exc_info:
            registration_from_rdap({"objectClassName": "nameserver"})

        assert exc_info.value.code == "invalid_rdap"

    def test_invalid_event_date_raises(self) -> None:
        payload = rdap_payload(events=[{"eventAction": "expiration", "eventDate": "never"}])

        with pytest.raises(SignalError) as exc_info:
            registration_from_rdap(payload)

        assert exc_info.value.code == "invalid_date"

    @given(names=st.lists(
        st.from_regex(r"\Ans[0-9]\.[a-z]{3,10}\.(com|net)\Z"),
        min_size=0,
        max_size=5,
    ))
    @settings(max_examples=100)
    def test_nameservers_are_lowercased(self, names: list[str]) -> None:
        """
        *For any* list of nameserver objects, parsing SHALL return their
        lowercased host names in order.
        """
        payload = {"nameservers": [{"ldhName": name.upper()} for name in names]}

        assert parse_nameservers(payload) == names

    def test_vcard_structured_values(self) -> None:
        contact = parse_vcard(["vcard", [
            ["fn", {}, "text", ""],
            ["org", {}, "text", ["Acme", "Domains"]],
            ["tel", {"type": "voice"}, "uri", "tel:+49.123"],
            ["broken"],
        ]])

        assert contact.name is None
        assert contact.organization == "Acme Domains"
        assert contact.phone == "+49.123"

    def test_malformed_vcard_is_empty(self) -> None:
        assert parse_vcard(None).is_empty
        assert parse_vcard(["vcard"]).is_empty
        assert parse_vcard(["vcard", "nope"]).is_empty
