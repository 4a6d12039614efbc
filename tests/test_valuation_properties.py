"""
Property-based tests for the valuation engine and comparable-sales index.

Uses Hypothesis for property-based testing to verify factor weights,
range ordering, grade mapping and determinism.
"""

import math
import string
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_recovery.comparables import (
    COMPARABLE_SALES,
    FALLBACK_MEDIAN_PRICE,
    find_comparable_sales,
    get_all_sales,
    get_median_price,
)
from domain_recovery.config import EngineConfig
from domain_recovery.enums import FactorImpact, ValuationGrade
from domain_recovery.signals import RegistrationSignals, SecuritySignals, SeoSignals, WebsiteSignals
from domain_recovery.valuation import (
    FACTOR_WEIGHTS,
    GRADE_THRESHOLDS,
    VALUE_FLOOR,
    DomainValuationEngine,
    score_to_grade,
)


NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


@st.composite
def domain_strategy(draw) -> str:
    """Generate plausible domains for valuation."""
    name = draw(st.text(
        alphabet=string.ascii_lowercase + string.digits + "-",
        min_size=1,
        max_size=24,
    ).filter(lambda s: not s.startswith("-") and not s.endswith("-")))
    tld = draw(st.sampled_from(["com", "net", "org", "io", "ai", "xyz", "biz", "co.uk"]))
    return f"{name}.{tld}"


@st.composite
def seo_strategy(draw):
    """Generate optional SEO enrichment."""
    return draw(st.one_of(
        st.none(),
        st.builds(
            SeoSignals,
            domain_authority=st.floats(min_value=0, max_value=100),
            backlinks=st.integers(min_value=0, max_value=10_000_000),
            monthly_traffic=st.integers(min_value=0, max_value=100_000_000),
        ),
    ))


class TestValuationFactorsProperty:
    """
    Property-based tests for valuation factors.

    **Feature: domain-recovery-engine, Property 13: Seven factors with weights summing to 1.0**
    """

    def test_weights_sum_to_one(self) -> None:
        assert len(FACTOR_WEIGHTS) == 7
        assert math.isclose(sum(FACTOR_WEIGHTS.values()), 1.0, abs_tol=1e-9)

    @given(domain=domain_strategy(), seo=seo_strategy())
    @settings(max_examples=100)
    def test_factor_scores_and_weights(self, domain: str, seo) -> None:
        """
        *For any* domain, the valuation SHALL contain the seven named
        factors with scores in 0-100 and weights summing to 1.0.
        """
        valuation = DomainValuationEngine().estimate(domain, seo=seo, now=NOW)

        assert [f.name for f in valuation.factors] == list(FACTOR_WEIGHTS)
        assert math.isclose(sum(f.weight for f in valuation.factors), 1.0, abs_tol=1e-9)
        for factor in valuation.factors:
            assert 0 <= factor.score <= 100
            assert isinstance(factor.impact, FactorImpact)
            assert factor.detail

    def test_keyword_scores(self) -> None:
        engine = DomainValuationEngine()

        assert engine.score_keywords("insurance").score == 95
        assert engine.score_keywords("blue").score == 80
        assert engine.score_keywords("q").score == 90
        assert engine.score_keywords("qz").score == 85
        assert engine.score_keywords("qzv").score == 75
        assert engine.score_keywords("cloudbank").score == 75
        assert engine.score_keywords("bestcloudx").score == 60
        assert engine.score_keywords("xqzvbn").score == 15

    def test_length_ladder(self) -> None:
        engine = DomainValuationEngine()

        assert engine.score_length("a").score == 100
        assert engine.score_length("abcd").score == 78
        assert engine.score_length("ab-cd").score == 78
        assert engine.score_length("a" * 25).score == 3

    def test_tld_scores(self) -> None:
        engine = DomainValuationEngine()

        assert engine.score_tld("com").score == 100
        assert engine.score_tld("io").score == 40
        assert engine.score_tld("unknown").score == 8

    def test_age_ladder(self) -> None:
        engine = DomainValuationEngine()

        def age_score(created: datetime) -> int:
            return engine.score_age(RegistrationSignals(created_date=created), None, NOW).score

        assert age_score(datetime(2000, 1, 1, tzinfo=timezone.utc)) == 100
        assert age_score(NOW - timedelta(days=365 * 12)) == 75
        assert age_score(NOW - timedelta(days=180)) == 10
        assert engine.score_age(None, None, NOW).score == 30
        assert engine.score_age(None, SecuritySignals(domain_age_years=7), NOW).score == 55

    def test_creation_date_wins_over_security_age(self) -> None:
        whois = RegistrationSignals(created_date=NOW - timedelta(days=400))
        security = SecuritySignals(domain_age_years=25)

        age = DomainValuationEngine.domain_age_years(whois, security, NOW)

        assert 1 < age < 2

    def test_seo_scores(self) -> None:
        engine = DomainValuationEngine()

        assert engine.score_seo(None).score == 25
        assert engine.score_seo(SeoSignals()).score == 0
        strong = engine.score_seo(SeoSignals(domain_authority=100, backlinks=10**7, monthly_traffic=10**8))
        assert strong.score == 100
        assert strong.impact == FactorImpact.POSITIVE


class TestValuationRangeProperty:
    """
    Property-based tests for the value estimate.

    **Feature: domain-recovery-engine, Property 14: low <= mid <= high with low = mid/2 and high = 2*mid**
    """

    @given(domain=domain_strategy(), seo=seo_strategy())
    @settings(max_examples=100)
    def test_range_is_ordered(self, domain: str, seo) -> None:
        valuation = DomainValuationEngine().estimate(domain, seo=seo, now=NOW)
        value = valuation.estimated_value

        assert VALUE_FLOOR // 2 <= value.low <= value.mid <= value.high
        assert value.mid >= VALUE_FLOOR
        assert abs(value.low - value.mid / 2) <= 1
        assert abs(value.high - value.mid * 2) <= 1
        assert 0 <= valuation.composite_score <= 100
        assert valuation.grade == score_to_grade(valuation.composite_score)

    @given(
        low_score=st.floats(min_value=0, max_value=100),
        high_score=st.floats(min_value=0, max_value=100),
        name=st.sampled_from(["a", "ab", "cloud", "bestcloudhosting", "my-site-24"]),
        tld=st.sampled_from(["com", "io", "xyz"]),
    )
    @settings(max_examples=100)
    def test_dollar_value_monotonic_in_score(
        self, low_score: float, high_score: float, name: str, tld: str
    ) -> None:
        """
        *For any* two composite scores, without a comparables anchor the
        higher score SHALL never produce a lower value.
        """
        if low_score > high_score:
            low_score, high_score = high_score, low_score

        _, low_mid, _ = DomainValuationEngine.score_to_dollar_value(low_score, name, tld)
        _, high_mid, _ = DomainValuationEngine.score_to_dollar_value(high_score, name, tld)

        assert low_mid <= high_mid

    def test_anchor_ignored_for_low_scores(self) -> None:
        without = DomainValuationEngine.score_to_dollar_value(30, "cloud", "com")
        with_anchor = DomainValuationEngine.score_to_dollar_value(30, "cloud", "com", anchor=1_000_000)

        assert without == with_anchor

    def test_anchor_capped_at_ten_times(self) -> None:
        _, base_mid, _ = DomainValuationEngine.score_to_dollar_value(60, "cloud", "com")
        _, anchored_mid, _ = DomainValuationEngine.score_to_dollar_value(
            60, "cloud", "com", anchor=10**12
        )

        weight = min(0.35, 60 / 250)
        assert anchored_mid == pytest.approx(base_mid * (1 - weight) + base_mid * 10 * weight)

    @pytest.mark.parametrize("domain", ["ab.com", "q.com", "xy-.com"])
    def test_ultra_short_com_floor(self, domain: str) -> None:
        valuation = DomainValuationEngine().estimate(domain, now=NOW)

        assert valuation.composite_score >= 82

    def test_three_letter_com_floor(self) -> None:
        assert DomainValuationEngine().estimate("qzv.com", now=NOW).composite_score >= 72
        assert DomainValuationEngine().estimate("qzv.net", now=NOW).composite_score < 72


class TestValuationGradeProperty:
    """
    Tests for the composite-to-grade mapping.

    **Feature: domain-recovery-engine, Property 15: Grades follow the compressed thresholds**
    """

    @pytest.mark.parametrize("score,grade", [
        (100, ValuationGrade.A_PLUS),
        (78, ValuationGrade.A_PLUS),
        (77.99, ValuationGrade.A),
        (68, ValuationGrade.A),
        (58, ValuationGrade.B_PLUS),
        (48, ValuationGrade.B),
        (38, ValuationGrade.C_PLUS),
        (28, ValuationGrade.C),
        (18, ValuationGrade.D),
        (17.99, ValuationGrade.F),
        (0, ValuationGrade.F),
    ])
    def test_thresholds(self, score: float, grade: ValuationGrade) -> None:
        assert score_to_grade(score) == grade

    @given(a=st.floats(min_value=0, max_value=100), b=st.floats(min_value=0, max_value=100))
    @settings(max_examples=100)
    def test_grade_monotonic(self, a: float, b: float) -> None:
        order = [grade for _, grade in GRADE_THRESHOLDS] + [ValuationGrade.F]
        if a > b:
            a, b = b, a

        assert order.index(score_to_grade(b)) <= order.index(score_to_grade(a))


class TestValuationConfidenceProperty:
    """
    Tests for confidence from available enrichment.

    **Feature: domain-recovery-engine, Property 16: More enrichment never lowers confidence**
    """

    def test_baseline_confidence(self) -> None:
        assert DomainValuationEngine.calculate_confidence(None, None, None, None) == 25

    def test_full_enrichment(self) -> None:
        confidence = DomainValuationEngine.calculate_confidence(
            RegistrationSignals(created_date=NOW),
            SeoSignals(domain_authority=30, monthly_traffic=100),
            SecuritySignals(),
            WebsiteSignals(is_online=True),
        )

        assert confidence == 95

    @given(
        has_whois=st.booleans(),
        has_seo=st.booleans(),
        has_security=st.booleans(),
        has_website=st.booleans(),
    )
    @settings(max_examples=100)
    def test_confidence_bounds(self, has_whois, has_seo, has_security, has_website) -> None:
        confidence = DomainValuationEngine.calculate_confidence(
            RegistrationSignals() if has_whois else None,
            SeoSignals() if has_seo else None,
            SecuritySignals() if has_security else None,
            WebsiteSignals() if has_website else None,
        )

        assert 25 <= confidence <= 100


class TestValuationOutputProperty:
    """
    Tests for configuration-driven valuation output.

    **Feature: domain-recovery-engine, Property 17: Valuation is deterministic for a fixed reference time**
    """

    @given(domain=domain_strategy())
    @settings(max_examples=100)
    def test_deterministic(self, domain: str) -> None:
        engine = DomainValuationEngine()

        assert engine.estimate(domain, now=NOW) == engine.estimate(domain, now=NOW)

    def test_domain_is_normalized(self) -> None:
        valuation = DomainValuationEngine().estimate("HTTPS://www.CloudBank.com/", now=NOW)

        assert valuation.domain == "cloudbank.com"
        assert valuation.timestamp == NOW.isoformat()

    def test_currency_and_comparables_from_config(self) -> None:
        engine = DomainValuationEngine(EngineConfig(currency="EUR", comparables_limit=3))
        valuation = engine.estimate("cloudbank.com", now=NOW)

        assert valuation.estimated_value.currency == "EUR"
        assert len(valuation.comparables) == 3
        for reference in valuation.comparables:
            assert 0 <= reference.similarity <= 100

    def test_comparables_can_be_omitted(self) -> None:
        engine = DomainValuationEngine(EngineConfig(include_comparables=False))

        assert engine.estimate("cloudbank.com", now=NOW).comparables == ()


class TestComparableSalesProperty:
    """
    Tests for the comparable-sales index.

    **Feature: domain-recovery-engine, Property 18: Comparable lookups are ranked and bounded**
    """

    @given(domain=domain_strategy(), limit=st.integers(min_value=-2, max_value=20))
    @settings(max_examples=100)
    def test_ranked_and_bounded(self, domain: str, limit: int) -> None:
        results = find_comparable_sales(domain, limit)

        assert len(results) == min(max(limit, 0), len(COMPARABLE_SALES))
        similarities = [result.similarity for result in results]
        assert similarities == sorted(similarities, reverse=True)
        assert all(0 <= s <= 100 for s in similarities)

    def test_exact_sale_scores_high(self) -> None:
        top = find_comparable_sales("voice.com", 1)[0]

        assert top.similarity >= 70
        assert top.sale.tld == "com"

    def test_median_fallbacks(self) -> None:
        assert get_median_price("zzz", 5) == FALLBACK_MEDIAN_PRICE
        com_prices = sorted(s.sale_price for s in COMPARABLE_SALES if s.tld == "com")
        assert min(com_prices) <= get_median_price("com", 50) <= max(com_prices)

    def test_get_all_sales_is_a_copy(self) -> None:
        sales = get_all_sales()
        sales.clear()

        assert len(get_all_sales()) == len(COMPARABLE_SALES)
