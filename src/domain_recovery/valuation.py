"""
Domain valuation engine.

Produces a market-value estimate from seven weighted factors:

| Factor             | Weight |
|--------------------|--------|
| Domain Length      | 0.20   |
| TLD Value          | 0.15   |
| Keyword Value      | 0.15   |
| Domain Age         | 0.10   |
| SEO Metrics        | 0.20   |
| Brandability       | 0.10   |
| Market Comparables | 0.10   |

The composite score (0-100) is mapped to dollars on a logarithmic scale,
adjusted by TLD, length and cleanliness multipliers, and blended with a
comparable-sales anchor. Enrichment inputs are optional: without them the
engine falls back to heuristics and reports a lower confidence.
"""

import math
import re
from datetime import datetime, timezone
from typing import Optional

from domain_recovery.brandability import score_brandability
from domain_recovery.comparables import ScoredSale, find_comparable_sales, get_median_price
from domain_recovery.config import EngineConfig
from domain_recovery.domain_validator import normalize_domain, split_domain
from domain_recovery.enums import FactorImpact, ValuationGrade
from domain_recovery.models import ComparableReference, DomainValuation, EstimatedValue, ValuationFactor
from domain_recovery.scoring import clamp, round_half_up
from domain_recovery.signals import RegistrationSignals, SecuritySignals, SeoSignals, WebsiteSignals


FACTOR_WEIGHTS = {
    "Domain Length": 0.20,
    "TLD Value": 0.15,
    "Keyword Value": 0.15,
    "Domain Age": 0.10,
    "SEO Metrics": 0.20,
    "Brandability": 0.10,
    "Market Comparables": 0.10,
}

# TLD value tiers, higher multiplier = more valuable
TLD_VALUES = {
    "com": 1.0,
    "ai": 0.55,
    "io": 0.40,
    "co": 0.35,
    "net": 0.30,
    "org": 0.28,
    "dev": 0.25,
    "app": 0.25,
    "tv": 0.20,
    "me": 0.18,
    "uk": 0.15,
    "de": 0.15,
    "xyz": 0.12,
    "us": 0.12,
    "ca": 0.12,
    "info": 0.10,
    "biz": 0.08,
}

DEFAULT_TLD_VALUE = 0.08

# Single words with strong commercial intent
PREMIUM_KEYWORDS = frozenset({
    # Finance
    'insurance', 'mortgage', 'credit', 'loan', 'bank', 'invest', 'fund',
    'finance', 'money', 'pay', 'trade', 'stock', 'wealth', 'capital',
    # Tech
    'cloud', 'data', 'crypto', 'blockchain', 'ai', 'app', 'code', 'tech',
    'digital', 'software', 'cyber', 'web', 'mobile', 'api', 'nft',
    # Health
    'health', 'medical', 'doctor', 'pharmacy', 'dental', 'fitness',
    'therapy', 'care',
    # Travel
    'hotel', 'travel', 'flight', 'booking', 'cruise', 'resort', 'vacation',
    # Real estate
    'house', 'home', 'property', 'estate', 'rent', 'apartment', 'land',
    # E-commerce
    'shop', 'store', 'buy', 'deal', 'market', 'sale', 'retail',
    # Other
    'car', 'auto', 'food', 'game', 'video', 'music', 'news', 'media',
    'sport', 'energy', 'power', 'gold', 'diamond', 'luxury', 'wine',
    'beer', 'casino', 'poker', 'sex', 'dating', 'jobs', 'career',
})

DICTIONARY_WORDS = PREMIUM_KEYWORDS | frozenset({
    'blue', 'green', 'red', 'black', 'white', 'dark', 'light', 'bright',
    'fast', 'quick', 'smart', 'simple', 'easy', 'clean', 'clear', 'fresh',
    'open', 'free', 'true', 'bold', 'pure', 'cool', 'hot', 'fire',
    'star', 'sun', 'moon', 'sky', 'air', 'water', 'ocean', 'lake',
    'rock', 'stone', 'iron', 'steel', 'wave', 'peak', 'edge', 'core',
    'link', 'hub', 'box', 'key', 'map', 'guide', 'path', 'flow',
    'snap', 'flex', 'zoom', 'glow', 'spark', 'pulse', 'beam', 'dash',
    'nest', 'hive', 'base', 'zone', 'grid', 'mesh', 'loop', 'node',
    'seed', 'bloom', 'grove', 'leaf', 'pine', 'oak', 'wolf', 'hawk',
    'fox', 'bear', 'lion', 'tiger', 'eagle', 'swift', 'brave', 'noble',
    'quest', 'venture', 'voyage', 'craft', 'forge', 'mint', 'vault',
})

# (minimum length, score, detail); first row whose bound holds wins
LENGTH_LADDER = (
    (1, 100, "Single character - extremely rare and valuable"),
    (2, 95, "Two characters - highly sought after"),
    (3, 88, "Three characters - premium short domain"),
    (4, 78, "Four characters - very desirable length"),
    (5, 68, "Five characters - strong brandable length"),
    (7, 55, "{n} characters - good length for branding"),
    (10, 38, "{n} characters - acceptable but not ideal"),
    (14, 22, "{n} characters - lengthy, harder to brand"),
    (20, 10, "{n} characters - very long, low brandability"),
)

# (minimum age in years, score, detail)
AGE_LADDER = (
    (20, 100, "{years} years old - veteran domain with maximum age authority"),
    (15, 90, "{years} years old - highly established domain"),
    (10, 75, "{years} years old - mature, well-established domain"),
    (5, 55, "{years} years old - established domain"),
    (2, 35, "{years} years old - relatively young"),
    (1, 20, "{months} months old - new domain"),
)

# (minimum median price, score)
COMPARABLES_LADDER = (
    (1_000_000, 95),
    (500_000, 85),
    (100_000, 70),
    (50_000, 55),
    (10_000, 40),
    (5_000, 30),
    (1_000, 20),
)

# (minimum composite, grade)
GRADE_THRESHOLDS = (
    (78, ValuationGrade.A_PLUS),
    (68, ValuationGrade.A),
    (58, ValuationGrade.B_PLUS),
    (48, ValuationGrade.B),
    (38, ValuationGrade.C_PLUS),
    (28, ValuationGrade.C),
    (18, ValuationGrade.D),
)

ULTRA_SHORT_FLOOR = 82
THREE_LETTER_FLOOR = 72

VALUE_FLOOR = 8
DIGIT_PATTERN = re.compile(r"\d")

SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60


def score_to_grade(score: float) -> ValuationGrade:
    """
    Map a composite score to a letter grade.

    Thresholds are compressed because missing SEO and age data caps the
    composite of an unenriched domain near 75-80.
    """
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return ValuationGrade.F


def _impact(score: int, positive: int, neutral: int) -> FactorImpact:
    if score >= positive:
        return FactorImpact.POSITIVE
    if score >= neutral:
        return FactorImpact.NEUTRAL
    return FactorImpact.NEGATIVE


class DomainValuationEngine:
    """
    Heuristic domain valuation engine.

    Stateless apart from its configuration; a single instance may be
    shared across threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        """
        Initialize the valuation engine.

        Args:
            config: Engine options (currency, number of comparables)
        """
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        """Get the engine configuration."""
        return self._config

    def estimate(
        self,
        domain: str,
        whois: Optional[RegistrationSignals] = None,
        seo: Optional[SeoSignals] = None,
        security: Optional[SecuritySignals] = None,
        website: Optional[WebsiteSignals] = None,
        now: Optional[datetime] = None,
    ) -> DomainValuation:
        """
        Produce a valuation for a domain.

        Args:
            domain: Domain to value
            whois: Optional registration record (creation date drives age)
            seo: Optional SEO enrichment
            security: Optional security enrichment (fallback age source)
            website: Optional live-site probe result
            now: Reference time (defaults to the current UTC time)

        Returns:
            DomainValuation with seven factors, estimate, grade and comparables
        """
        now = now or datetime.now(timezone.utc)
        clean = normalize_domain(domain)
        name, tld = split_domain(clean)

        factors = (
            self.score_length(name),
            self.score_tld(tld),
            self.score_keywords(name),
            self.score_age(whois, security, now),
            self.score_seo(seo),
            self.score_brandability(name),
            self.score_market_comparables(name, tld),
        )

        composite = sum(factor.score * factor.weight for factor in factors)
        composite = self.apply_scarcity_floor(composite, name, tld)
        composite = round(clamp(composite, 0, 100), 2)

        scored_sales = find_comparable_sales(clean, max(self._config.comparables_limit, 0))
        anchor = self.comparable_anchor(scored_sales)
        low, mid, high = self.score_to_dollar_value(composite, name, tld, anchor)

        comparables: tuple[ComparableReference, ...] = ()
        if self._config.include_comparables:
            comparables = tuple(
                ComparableReference(
                    domain=sale.domain,
                    sale_price=sale.sale_price,
                    date=sale.date,
                    similarity=sale.similarity,
                )
                for sale in scored_sales
            )

        return DomainValuation(
            domain=clean,
            estimated_value=EstimatedValue(
                low=round_half_up(low),
                mid=round_half_up(mid),
                high=round_half_up(high),
                currency=self._config.currency,
            ),
            confidence=self.calculate_confidence(whois, seo, security, website),
            factors=factors,
            comparables=comparables,
            grade=score_to_grade(composite),
            composite_score=composite,
            timestamp=now.isoformat(),
        )

    # -- factor scorers -------------------------------------------------

    def score_length(self, name: str) -> ValuationFactor:
        """Shorter is better; hyphens are not counted."""
        length = len(name.replace("-", ""))
        score, detail = 3, f"{length} characters - excessively long"
        for bound, ladder_score, template in LENGTH_LADDER:
            if length <= bound:
                score, detail = ladder_score, template.format(n=length)
                break

        return ValuationFactor(
            name="Domain Length",
            score=score,
            weight=FACTOR_WEIGHTS["Domain Length"],
            impact=_impact(score, 60, 30),
            detail=detail,
        )

    def score_tld(self, tld: str) -> ValuationFactor:
        value = TLD_VALUES.get(tld, DEFAULT_TLD_VALUE)
        score = round_half_up(value * 100)

        if tld == "com":
            detail = ".com - the most valuable and universally recognized TLD"
        elif value >= 0.40:
            detail = f".{tld} - premium alternative TLD with strong market demand"
        elif value >= 0.20:
            detail = f".{tld} - respectable TLD with moderate market value"
        else:
            detail = f".{tld} - lower-tier TLD, significantly less valuable than .com"

        return ValuationFactor(
            name="TLD Value",
            score=score,
            weight=FACTOR_WEIGHTS["TLD Value"],
            impact=_impact(score, 50, 20),
            detail=detail,
        )

    def score_keywords(self, name: str) -> ValuationFactor:
        """
        Score dictionary and commercial keyword content.

        Names of one to three characters get a scarcity score instead of
        keyword matching: their value comes from supply, not meaning.
        """
        clean = name.replace("-", "").lower()

        if len(clean) == 1:
            score, detail = 90, "Single-character domain - extreme scarcity drives value"
        elif len(clean) == 2:
            score, detail = 85, "Two-character domain - very scarce, high intrinsic value"
        elif len(clean) == 3 and not DIGIT_PATTERN.search(clean):
            score, detail = 75, "Three-letter domain - limited supply, inherently valuable"
        elif clean in PREMIUM_KEYWORDS:
            score, detail = 95, f'"{clean}" is a high-value commercial keyword'
        elif clean in DICTIONARY_WORDS:
            score, detail = 80, f'"{clean}" is a recognized dictionary/brand word'
        else:
            premium = sorted(kw for kw in PREMIUM_KEYWORDS if len(kw) >= 3 and kw in clean)
            dictionary = sorted(
                kw for kw in DICTIONARY_WORDS
                if len(kw) >= 3 and kw in clean and kw not in premium
            )
            if len(premium) >= 2:
                score, detail = 75, f"Contains premium keywords: {', '.join(premium[:3])}"
            elif premium:
                score, detail = 60, f'Contains premium keyword: "{premium[0]}"'
            elif len(dictionary) >= 2:
                score, detail = 50, f"Contains dictionary words: {', '.join(dictionary[:3])}"
            elif dictionary:
                score, detail = 40, f'Contains dictionary word: "{dictionary[0]}"'
            else:
                score, detail = 15, "No recognized keywords - value relies on other factors"

        return ValuationFactor(
            name="Keyword Value",
            score=score,
            weight=FACTOR_WEIGHTS["Keyword Value"],
            impact=_impact(score, 60, 30),
            detail=detail,
        )

    def score_age(
        self,
        whois: Optional[RegistrationSignals],
        security: Optional[SecuritySignals],
        now: datetime,
    ) -> ValuationFactor:
        """Older is more trustworthy. The creation date wins over the security age."""
        age_years = self.domain_age_years(whois, security, now)

        if age_years is None:
            score, detail = 30, "Domain age unknown - limited data available"
        else:
            score, detail = 10, "Less than 1 year old - very new domain"
            for bound, ladder_score, template in AGE_LADDER:
                if age_years >= bound:
                    score = ladder_score
                    detail = template.format(
                        years=math.floor(age_years),
                        months=math.floor(age_years * 12),
                    )
                    break

        return ValuationFactor(
            name="Domain Age",
            score=score,
            weight=FACTOR_WEIGHTS["Domain Age"],
            impact=_impact(score, 55, 25),
            detail=detail,
        )

    def score_seo(self, seo: Optional[SeoSignals]) -> ValuationFactor:
        if seo is None:
            return ValuationFactor(
                name="SEO Metrics",
                score=25,
                weight=FACTOR_WEIGHTS["SEO Metrics"],
                impact=FactorImpact.NEUTRAL,
                detail="No SEO data available - using baseline estimate",
            )

        raw = 0.0
        details = []

        # Domain authority is worth up to 40 points
        authority = clamp(seo.domain_authority or 0, 0, 100)
        raw += authority / 100 * 40
        if authority > 0:
            details.append(f"DA: {authority:g}")

        # Backlinks and traffic are worth up to 30 points each
        if seo.backlinks > 0:
            raw += min(30, math.log10(seo.backlinks + 1) * 6)
            details.append(f"~{seo.backlinks:,} backlinks")

        if seo.monthly_traffic > 0:
            raw += min(30, math.log10(seo.monthly_traffic + 1) * 5)
            details.append(f"~{seo.monthly_traffic:,} monthly visits")

        score = min(100, round_half_up(raw))

        return ValuationFactor(
            name="SEO Metrics",
            score=score,
            weight=FACTOR_WEIGHTS["SEO Metrics"],
            impact=_impact(score, 50, 20),
            detail=", ".join(details) if details else "Minimal SEO signals detected",
        )

    def score_brandability(self, name: str) -> ValuationFactor:
        result = score_brandability(name)
        score = result.score

        if score >= 80:
            detail = "Excellent brandability - short, clean, and pronounceable"
        elif score >= 60:
            detail = "Good brandability - easy to remember and share"
        elif score >= 40:
            detail = "Moderate brandability - some friction for branding"
        elif score >= 20:
            detail = "Low brandability - hyphens, numbers, or difficult pronunciation"
        else:
            detail = "Poor brandability - very hard to brand effectively"

        if result.flags:
            detail += f" ({'; '.join(result.flags[:3])})"

        return ValuationFactor(
            name="Brandability",
            score=score,
            weight=FACTOR_WEIGHTS["Brandability"],
            impact=_impact(score, 55, 30),
            detail=detail,
        )

    def score_market_comparables(self, name: str, tld: str) -> ValuationFactor:
        median = get_median_price(tld, len(name), "-" in name)

        score = 10
        for bound, ladder_score in COMPARABLES_LADDER:
            if median >= bound:
                score = ladder_score
                break

        return ValuationFactor(
            name="Market Comparables",
            score=score,
            weight=FACTOR_WEIGHTS["Market Comparables"],
            impact=_impact(score, 50, 25),
            detail=f"Comparable domains trade at a median of ${median:,}",
        )

    # -- aggregation ----------------------------------------------------

    @staticmethod
    def domain_age_years(
        whois: Optional[RegistrationSignals],
        security: Optional[SecuritySignals],
        now: datetime,
    ) -> Optional[float]:
        """Age in years from the creation date, else the security age; None if unknown."""
        if whois is not None and whois.created_date is not None:
            return (now - whois.created_date).total_seconds() / SECONDS_PER_YEAR
        if security is not None and security.domain_age_years:
            return float(security.domain_age_years)
        return None

    @staticmethod
    def apply_scarcity_floor(composite: float, name: str, tld: str) -> float:
        """Raise the composite of ultra-short .com names, whose value is scarcity-driven."""
        if tld != "com":
            return composite

        length = len(name.replace("-", ""))
        if length <= 2:
            return max(composite, ULTRA_SHORT_FLOOR)
        if length == 3 and "-" not in name and not DIGIT_PATTERN.search(name):
            return max(composite, THREE_LETTER_FLOOR)
        return composite

    def comparable_anchor(self, scored_sales: list[ScoredSale]) -> Optional[float]:
        """Similarity-weighted mean price of the sufficiently similar sales."""
        threshold = self._config.comparable_similarity_threshold
        relevant = [sale for sale in scored_sales if sale.similarity >= threshold]
        total_weight = sum(sale.similarity / 100 for sale in relevant)
        if not relevant or total_weight <= 0:
            return None
        return sum(sale.sale_price * (sale.similarity / 100) for sale in relevant) / total_weight

    @staticmethod
    def score_to_dollar_value(
        score: float,
        name: str,
        tld: str,
        anchor: Optional[float] = None,
    ) -> tuple[float, float, float]:
        """
        Convert a composite score to a (low, mid, high) dollar range.

        Scale: 0 -> the floor, 40 -> ~$300, 60 -> ~$5,600, 80 -> ~$100,000,
        before multipliers.

        Args:
            score: Composite score, 0-100
            name: Name part of the domain
            tld: TLD of the domain
            anchor: Optional comparable-sales anchor price

        Returns:
            Tuple (low, mid, high), unrounded
        """
        base = 10 ** (score / 16)
        tld_multiplier = TLD_VALUES.get(tld, DEFAULT_TLD_VALUE)

        length = len(name.replace("-", ""))
        if length == 1:
            length_multiplier = 40.0
        elif length == 2:
            length_multiplier = 20.0
        elif length == 3:
            length_multiplier = 8.0
        elif length == 4:
            length_multiplier = 3.0
        elif length == 5:
            length_multiplier = 1.5
        elif length >= 20:
            length_multiplier = 0.08
        elif length >= 15:
            length_multiplier = 0.15
        elif length >= 12:
            length_multiplier = 0.35
        else:
            length_multiplier = 1.0

        # Hyphen and digit penalties stack with length
        clean_penalty = 1.0
        hyphens = name.count("-")
        if hyphens:
            clean_penalty *= max(0.05, 0.3 - (hyphens - 1) * 0.08)
        if DIGIT_PATTERN.search(name) and length > 3:
            clean_penalty *= 0.4

        mid = base * tld_multiplier * length_multiplier * clean_penalty

        # Comparables only count for decent scores, capped at 10x the heuristic
        if anchor is not None and anchor > 0 and math.isfinite(anchor) and score > 40:
            weight = min(0.35, score / 250)
            capped = min(anchor, mid * 10)
            mid = mid * (1 - weight) + capped * weight

        mid = max(VALUE_FLOOR, mid)
        return mid * 0.5, mid, mid * 2.0

    @staticmethod
    def calculate_confidence(
        whois: Optional[RegistrationSignals],
        seo: Optional[SeoSignals],
        security: Optional[SecuritySignals],
        website: Optional[WebsiteSignals],
    ) -> int:
        """Confidence 0-100 from the amount of enrichment data available."""
        confidence = 25

        if whois is not None:
            confidence += 15
            if whois.created_date is not None:
                confidence += 5

        if seo is not None:
            confidence += 15
            if seo.domain_authority > 0:
                confidence += 5
            if seo.monthly_traffic > 0:
                confidence += 5

        if security is not None:
            confidence += 10

        if website is not None:
            confidence += 10
            if website.is_online:
                confidence += 5

        return min(100, confidence)
