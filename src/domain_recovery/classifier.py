"""
Brand/premium domain classifier.

Assigns a domain to one of five tiers and estimates a value range. Lookup
order, first match wins:
1. Curated set of major global brands -> MAJOR_BRAND (tier 1)
2. 1-3 letter .com names -> PREMIUM (tier 2)
3. Names containing a commercial keyword -> VALUABLE (tier 3)
4. Everything else -> STANDARD (tier 4), or LOW_VALUE (tier 5) when
   younger than a year

The classifier never raises: unrecognized input lands in the last branch.
"""

import re
from typing import Optional

from domain_recovery.domain_validator import normalize_domain, split_domain
from domain_recovery.enums import ClassificationType, Confidence
from domain_recovery.models import Classification, CostRange
from domain_recovery.scoring import round_half_up


MAJOR_BRANDS = frozenset({
    # Tech
    'google.com', 'apple.com', 'microsoft.com', 'amazon.com', 'meta.com', 'facebook.com',
    'tesla.com', 'nvidia.com', 'alphabet.com', 'netflix.com', 'adobe.com', 'salesforce.com',
    'oracle.com', 'ibm.com', 'intel.com', 'cisco.com', 'qualcomm.com', 'broadcom.com',
    # Social / platforms
    'twitter.com', 'x.com', 'instagram.com', 'linkedin.com', 'tiktok.com', 'snapchat.com',
    'reddit.com', 'pinterest.com', 'youtube.com', 'twitch.tv', 'discord.com', 'telegram.org',
    # E-commerce
    'ebay.com', 'walmart.com', 'target.com', 'alibaba.com', 'shopify.com', 'etsy.com',
    # Finance
    'visa.com', 'mastercard.com', 'paypal.com', 'stripe.com', 'jpmorgan.com',
    'bankofamerica.com', 'wellsfargo.com', 'goldmansachs.com', 'morganstanley.com', 'amex.com',
    # Media
    'disney.com', 'warnerbros.com', 'paramount.com', 'nbc.com', 'cbs.com', 'fox.com',
    'espn.com', 'cnn.com', 'nytimes.com', 'washingtonpost.com', 'reuters.com', 'bloomberg.com',
    # Travel
    'booking.com', 'airbnb.com', 'expedia.com', 'marriott.com', 'hilton.com', 'uber.com',
    # Consumer
    'nike.com', 'adidas.com', 'coca-cola.com', 'pepsi.com', 'mcdonalds.com', 'starbucks.com',
})

PREMIUM_PATTERNS = (
    re.compile(r'^[a-z]\.com$'),
    re.compile(r'^[a-z]{2}\.com$'),
    re.compile(r'^[a-z]{3}\.com$'),
)

COMMERCIAL_KEYWORDS = frozenset({
    'ai', 'crypto', 'nft', 'web3', 'bitcoin', 'ethereum', 'blockchain',
    'cloud', 'data', 'app', 'mobile', 'tech', 'digital', 'online',
    'shop', 'store', 'market', 'pay', 'bank', 'finance', 'money',
    'real', 'estate', 'property', 'invest', 'trade', 'stock',
    'health', 'medical', 'fitness', 'insurance', 'travel', 'hotel',
    'news', 'media', 'video', 'music', 'game', 'sport',
    'food', 'restaurant', 'delivery', 'car', 'auto', 'drive',
})

# name length -> (min, max) for .com premium names
PREMIUM_COM_PRICES = {
    1: (1_000_000, 10_000_000),
    2: (100_000, 1_000_000),
    3: (10_000, 100_000),
}
PREMIUM_DEFAULT_PRICE = (10_000, 100_000)


def is_major_brand(domain: str) -> bool:
    """Check a domain against the curated major-brand list."""
    return normalize_domain(domain) in MAJOR_BRANDS


class DomainClassifier:
    """
    Rule-based brand/premium classifier.

    Holds no state beyond the module-level tables; one instance can be
    shared freely.
    """

    def classify(
        self,
        domain: str,
        age_years: Optional[float] = None,
        traffic: Optional[int] = None,
        backlinks: Optional[int] = None,
    ) -> Classification:
        """
        Classify a domain's value tier.

        Args:
            domain: Domain to classify
            age_years: Optional registration age in years
            traffic: Optional estimated monthly visits
            backlinks: Optional estimated backlink count

        Returns:
            Classification with tier, value range and reasons
        """
        clean = normalize_domain(domain)

        if clean in MAJOR_BRANDS:
            return self._classify_major_brand(clean)

        if any(pattern.match(clean) for pattern in PREMIUM_PATTERNS):
            return self._classify_premium(clean, age_years)

        if self._has_commercial_keyword(clean):
            return self._classify_valuable(clean, age_years, traffic, backlinks)

        return self._classify_standard(clean, age_years, traffic)

    def _classify_major_brand(self, domain: str) -> Classification:
        return Classification(
            domain=domain,
            type=ClassificationType.MAJOR_BRAND,
            tier=1,
            is_major_brand=True,
            is_public_company=True,
            estimated_value=CostRange(min=1_000_000_000, max=10_000_000_000),
            confidence=Confidence.HIGH,
            reasons=(
                "Fortune 500 / Major global brand",
                "Domain tied to multi-billion dollar company",
                "Impossible to acquire through normal means",
                "Protected by extensive trademark and legal resources",
            ),
        )

    def _classify_premium(self, domain: str, age_years: Optional[float]) -> Classification:
        name, tld = split_domain(domain)
        low, high = PREMIUM_DEFAULT_PRICE
        if tld == "com":
            low, high = PREMIUM_COM_PRICES.get(len(name), PREMIUM_DEFAULT_PRICE)

        if age_years and age_years > 10:
            low *= 1.5
            high *= 1.5

        return Classification(
            domain=domain,
            type=ClassificationType.PREMIUM,
            tier=2,
            is_major_brand=False,
            is_public_company=False,
            estimated_value=CostRange(min=round_half_up(low), max=round_half_up(high)),
            confidence=Confidence.HIGH,
            reasons=(
                f"Ultra-short domain ({len(name)} characters)",
                "Highly sought after by investors and businesses",
                "Limited supply makes these extremely valuable",
                "Premium .com TLD" if tld == "com" else f"TLD: .{tld}",
            ),
        )

    def _classify_valuable(
        self,
        domain: str,
        age_years: Optional[float],
        traffic: Optional[int],
        backlinks: Optional[int],
    ) -> Classification:
        _, tld = split_domain(domain)
        low, high = 1000.0, 50000.0

        if tld == "com":
            low, high = low * 2, high * 2

        if age_years:
            if age_years > 15:
                low, high = low * 2, high * 2
            elif age_years > 10:
                low, high = low * 1.5, high * 1.5
            elif age_years > 5:
                low, high = low * 1.2, high * 1.2

        if traffic:
            if traffic > 100_000:
                low, high = low * 5, high * 10
            elif traffic > 10_000:
                low, high = low * 2, high * 3

        if backlinks and backlinks > 1000:
            low, high = low * 1.5, high * 2

        reasons = ["Contains premium keywords"]
        if tld == "com":
            reasons.append("Valuable .com extension")
        if age_years and age_years > 10:
            reasons.append(f"Mature domain ({age_years:g} years old)")
        if traffic and traffic > 10_000:
            reasons.append(f"Significant traffic ({traffic:,}/month)")

        return Classification(
            domain=domain,
            type=ClassificationType.VALUABLE,
            tier=3,
            is_major_brand=False,
            is_public_company=False,
            estimated_value=CostRange(min=round_half_up(low), max=round_half_up(high)),
            confidence=Confidence.MEDIUM,
            reasons=tuple(reasons),
        )

    def _classify_standard(
        self,
        domain: str,
        age_years: Optional[float],
        traffic: Optional[int],
    ) -> Classification:
        name, tld = split_domain(domain)
        low, high = 100.0, 5000.0

        if len(name) > 15:
            low, high = low / 2, high / 2

        if tld == "com":
            low, high = low * 2, high * 2
        elif tld in ("net", "org"):
            low, high = low * 1.2, high * 1.2

        if age_years and age_years > 5:
            low, high = low * 1.5, high * 1.5

        if traffic and traffic > 1000:
            low, high = low * 2, high * 3

        reasons = [f"{len(name)}-character domain"]
        if tld == "com":
            reasons.append(".com extension adds value")
        if age_years and age_years > 5:
            reasons.append(f"Established domain ({age_years:g} years)")

        low_value = bool(age_years) and age_years < 1
        return Classification(
            domain=domain,
            type=ClassificationType.LOW_VALUE if low_value else ClassificationType.STANDARD,
            tier=5 if low_value else 4,
            is_major_brand=False,
            is_public_company=False,
            estimated_value=CostRange(min=round_half_up(low), max=round_half_up(high)),
            confidence=Confidence.MEDIUM,
            reasons=tuple(reasons),
        )

    def _has_commercial_keyword(self, domain: str) -> bool:
        name, _ = split_domain(domain)
        return name in COMMERCIAL_KEYWORDS or any(keyword in name for keyword in COMMERCIAL_KEYWORDS)
