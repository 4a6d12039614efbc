"""
Property-based tests for email templates.

Uses Hypothesis for property-based testing to verify that every template
renders for any domain and that aliases resolve.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_recovery.email_templates import (
    EMAIL_TEMPLATES,
    TEMPLATE_ALIASES,
    TEMPLATE_KEYS,
    get_all_template_keys,
    render_email_template,
    resolve_template_key,
)


domain_strategy = st.from_regex(r"\A[a-z0-9]{1,20}\.(com|net|org|io)\Z")


class TestEmailTemplateRenderingProperty:
    """
    Property-based tests for template rendering.

    **Feature: domain-recovery-engine, Property 24: Every template renders for any domain**
    """

    @given(key=st.sampled_from(sorted(TEMPLATE_KEYS)), domain=domain_strategy)
    @settings(max_examples=100)
    def test_renders_with_domain(self, key: str, domain: str) -> None:
        """
        *For any* template key and domain, rendering SHALL produce text
        with a subject line mentioning the domain and no unfilled fields.
        """
        text = render_email_template(key, domain)

        assert text is not None
        assert text.startswith("Subject: ")
        assert domain in text.splitlines()[0]
        assert "{" not in text and "}" not in text

    @given(key=st.sampled_from(sorted(TEMPLATE_KEYS)), registrar=st.sampled_from(["Namecheap", "GoDaddy"]))
    @settings(max_examples=100)
    def test_registrar_is_substituted(self, key: str, registrar: str) -> None:
        text = render_email_template(key, "example.com", registrar=registrar)

        if "{registrar}" in EMAIL_TEMPLATES[key]:
            assert registrar in text

    def test_defaults_fill_missing_options(self) -> None:
        assert "Dear your registrar Support Team" in render_email_template("redemption-request", "a.com")
        assert "My name is [Your Name]" in render_email_template("purchase-offer", "a.com")
        assert '"[Your Trademark Name]"' in render_email_template("cease-and-desist", "a.com")

    def test_options_override_defaults(self) -> None:
        text = render_email_template("purchase-offer", "a.com", name="Ada Lovelace")

        assert "My name is Ada Lovelace" in text
        assert "[Your Name]" not in text

    def test_empty_options_keep_defaults(self) -> None:
        text = render_email_template("trademark-dispute", "a.com", mark="")

        assert "[Your Trademark Name]" in text

    def test_unknown_key(self) -> None:
        assert render_email_template("no-such-template", "a.com") is None


class TestEmailTemplateKeysProperty:
    """
    Tests for template keys and aliases.

    **Feature: domain-recovery-engine, Property 25: Aliases resolve to canonical keys**
    """

    def test_canonical_keys(self) -> None:
        assert TEMPLATE_KEYS == {
            "redemption-request",
            "purchase-offer",
            "trademark-dispute",
            "cease-and-desist",
            "hijacking-report",
            "transfer-dispute",
            "registrar-transfer",
        }
        assert get_all_template_keys() == set(TEMPLATE_KEYS)

    @pytest.mark.parametrize("alias,key", sorted(TEMPLATE_ALIASES.items()))
    def test_alias_renders_same_text(self, alias: str, key: str) -> None:
        assert resolve_template_key(alias) == key
        assert render_email_template(alias, "a.com") == render_email_template(key, "a.com")

    def test_resolve_unknown(self) -> None:
        assert resolve_template_key("bogus") is None
        assert resolve_template_key("purchase-offer") == "purchase-offer"
