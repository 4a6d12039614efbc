"""
Comparable-sales index.

A static, read-only table of notable historical domain sales (sources:
DNJournal, NameBio, public reports) used to anchor valuations. Lookups
score every record by similarity to the queried domain.
"""

import re
from dataclasses import dataclass
from typing import Optional

from domain_recovery.domain_validator import normalize_domain, split_domain


@dataclass(frozen=True)
class ComparableSale:
    """A single historical sale."""

    domain: str
    sale_price: int
    date: str  # ISO-8601 date
    category: str
    length: int
    tld: str
    has_hyphens: bool
    has_numbers: bool
    is_one_word: bool


@dataclass(frozen=True)
class ScoredSale:
    """A sale with its similarity (0-100) to a queried domain."""

    sale: ComparableSale
    similarity: int

    @property
    def domain(self) -> str:
        return self.sale.domain

    @property
    def sale_price(self) -> int:
        return self.sale.sale_price

    @property
    def date(self) -> str:
        return self.sale.date

    @property
    def tld(self) -> str:
        return self.sale.tld


def _sale(domain: str, price: int, date: str, category: str, one_word: bool = True) -> ComparableSale:
    name, tld = split_domain(domain)
    return ComparableSale(
        domain=domain,
        sale_price=price,
        date=date,
        category=category,
        length=len(name),
        tld=tld,
        has_hyphens="-" in name,
        has_numbers=any(c.isdigit() for c in name),
        is_one_word=one_word,
    )


COMPARABLE_SALES: tuple[ComparableSale, ...] = (
    # Ultra-premium single-word .com
    _sale("voice.com", 30_000_000, "2019-06-01", "technology"),
    _sale("insurance.com", 35_600_000, "2010-10-01", "finance"),
    _sale("hotels.com", 11_000_000, "2001-12-01", "travel"),
    _sale("fund.com", 9_999_950, "2008-03-01", "finance"),
    _sale("sex.com", 13_000_000, "2010-11-01", "adult"),
    _sale("toys.com", 5_100_000, "2009-02-01", "retail"),
    _sale("candy.com", 3_000_000, "2014-06-01", "retail"),
    _sale("crypto.com", 12_000_000, "2018-07-01", "technology"),
    _sale("cloud.com", 3_250_000, "2016-08-01", "technology"),
    _sale("korea.com", 5_000_000, "2000-01-01", "geo"),
    # Short .com (2-3 letters)
    _sale("fb.com", 8_500_000, "2010-11-01", "technology"),
    _sale("ig.com", 4_700_000, "2016-09-01", "technology"),
    _sale("hg.com", 3_770_000, "2017-06-01", "generic"),
    _sale("we.com", 8_000_000, "2015-05-01", "generic"),
    _sale("ai.com", 4_500_000, "2018-01-01", "technology"),
    _sale("nft.com", 15_000_000, "2022-04-01", "technology"),
    _sale("eth.com", 2_000_000, "2017-09-01", "technology"),
    _sale("car.com", 872_000, "2015-10-01", "auto"),
    # Two-word .com
    _sale("creditcards.com", 2_750_000, "2004-01-01", "finance", False),
    _sale("webhosting.com", 495_000, "2013-04-01", "technology", False),
    _sale("realestate.com", 3_000_000, "2005-03-01", "real-estate", False),
    _sale("onlinegambling.com", 500_000, "2013-09-01", "gambling", False),
    _sale("healthinsurance.com", 2_000_000, "2008-03-01", "finance", False),
    _sale("cheapflights.com", 1_800_000, "2007-06-01", "travel", False),
    _sale("privatejet.com", 30_100_000, "2012-02-01", "travel", False),
    _sale("autoinsurance.com", 49_700_000, "2010-11-01", "finance", False),
    # Medium-value single-word .com
    _sale("beer.com", 7_000_000, "2004-02-01", "food-drink"),
    _sale("fish.com", 1_020_000, "2016-01-01", "food-drink"),
    _sale("park.com", 485_000, "2017-04-01", "generic"),
    _sale("taxi.com", 950_000, "2015-08-01", "transport"),
    _sale("color.com", 200_000, "2015-05-01", "generic"),
    _sale("nurse.com", 500_000, "2018-03-01", "health"),
    _sale("clean.com", 300_000, "2019-07-01", "generic"),
    _sale("ocean.com", 310_000, "2019-02-01", "generic"),
    # .io
    _sale("data.io", 75_000, "2018-11-01", "technology"),
    _sale("api.io", 50_000, "2019-05-01", "technology"),
    _sale("cloud.io", 40_000, "2019-08-01", "technology"),
    _sale("app.io", 35_000, "2020-02-01", "technology"),
    # .ai
    _sale("chat.ai", 100_000, "2023-02-01", "technology"),
    _sale("code.ai", 60_000, "2023-06-01", "technology"),
    _sale("trade.ai", 30_000, "2023-03-01", "finance"),
    # .net / .org
    _sale("diet.net", 200_000, "2014-05-01", "health"),
    _sale("poker.net", 75_000, "2016-12-01", "gambling"),
    _sale("phone.org", 60_000, "2017-01-01", "technology"),
    # Long, hyphenated, niche
    _sale("best-online-poker.com", 15_000, "2018-08-01", "gambling", False),
    _sale("my-travel-guide.com", 5_000, "2019-04-01", "travel", False),
    _sale("online-shop-24.com", 2_500, "2020-03-01", "retail", False),
    _sale("best-vpn-service.net", 3_000, "2020-06-01", "technology", False),
    _sale("cheap-flights-online.com", 8_000, "2019-11-01", "travel", False),
    # With numbers
    _sale("360.com", 17_000_000, "2015-02-01", "technology"),
    _sale("114.com", 2_100_000, "2013-12-01", "generic"),
    _sale("win365.com", 45_000, "2019-09-01", "technology", False),
    _sale("shop24.com", 25_000, "2020-01-01", "retail", False),
    # ccTLDs
    _sale("game.co", 55_000, "2018-07-01", "entertainment"),
    _sale("tech.co", 45_000, "2017-10-01", "technology"),
)

# Scanned in order; the first category with a contained keyword wins
KEYWORD_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("technology", ("tech", "code", "data", "cloud", "app", "web", "api", "cyber", "digital",
                    "soft", "dev", "ai", "ml", "crypto", "nft", "blockchain")),
    ("finance", ("bank", "pay", "money", "fund", "invest", "credit", "loan", "insurance",
                 "trade", "stock", "finance", "wealth")),
    ("health", ("health", "medical", "doctor", "nurse", "fitness", "diet", "pharma", "care",
                "therapy", "dental")),
    ("travel", ("travel", "hotel", "flight", "trip", "tour", "vacation", "booking", "cruise",
                "resort")),
    ("retail", ("shop", "store", "buy", "sell", "deal", "market", "retail", "mall", "outlet")),
    ("real-estate", ("house", "home", "property", "real", "estate", "rent", "land", "apartment")),
    ("food-drink", ("food", "restaurant", "pizza", "coffee", "beer", "wine", "cook", "eat",
                    "recipe", "cafe")),
    ("auto", ("car", "auto", "motor", "vehicle", "drive", "truck", "tire")),
    ("entertainment", ("game", "play", "music", "movie", "sport", "fun", "video", "media")),
    ("generic", ("best", "top", "pro", "go", "get", "my", "the", "one", "all")),
)

NEIGHBOUR_TLDS = frozenset({"net", "org"})

DIGIT_PATTERN = re.compile(r"\d")

FALLBACK_MEDIAN_PRICE = 1000


def detect_category(name: str) -> Optional[str]:
    """Return the first category whose keyword occurs in the name."""
    clean = name.replace("-", "").lower()
    for category, keywords in KEYWORD_CATEGORIES:
        if any(keyword in clean for keyword in keywords):
            return category
    return None


def similarity_score(sale: ComparableSale, name: str, tld: str, category: Optional[str]) -> int:
    """
    Score how similar a historical sale is to a domain.

    Args:
        sale: Historical sale
        name: Name part of the queried domain
        tld: TLD of the queried domain
        category: Detected category of the queried name, if any

    Returns:
        Similarity from 0 to 100
    """
    has_hyphens = "-" in name
    has_numbers = bool(DIGIT_PATTERN.search(name))
    similarity = 0

    if sale.tld == tld:
        similarity += 30
    elif (tld == "com" and sale.tld in NEIGHBOUR_TLDS) or (tld in NEIGHBOUR_TLDS and sale.tld == "com"):
        similarity += 10

    length_diff = abs(sale.length - len(name))
    if length_diff == 0:
        similarity += 25
    elif length_diff <= 1:
        similarity += 20
    elif length_diff <= 2:
        similarity += 15
    elif length_diff <= 4:
        similarity += 8
    else:
        similarity += max(0, 5 - length_diff)

    if sale.has_hyphens == has_hyphens:
        similarity += 10
    if sale.has_numbers == has_numbers:
        similarity += 5
    if category and sale.category == category:
        similarity += 20
    if sale.is_one_word == (not has_hyphens):
        similarity += 10

    return min(100, similarity)


def find_comparable_sales(domain: str, max_results: int = 5) -> list[ScoredSale]:
    """
    Find the historical sales most similar to a domain.

    Args:
        domain: Domain to compare against
        max_results: Maximum number of sales to return

    Returns:
        Scored sales, by similarity descending then most recent first
    """
    name, tld = split_domain(normalize_domain(domain))
    category = detect_category(name)

    scored = [
        ScoredSale(sale=sale, similarity=similarity_score(sale, name, tld, category))
        for sale in COMPARABLE_SALES
    ]
    # ISO dates sort lexicographically
    scored.sort(key=lambda s: (s.similarity, s.sale.date), reverse=True)
    return scored[:max(0, max_results)]


def get_median_price(tld: str, length: int, has_hyphens: bool = False) -> int:
    """
    Median sale price of sales with the same TLD, similar length and hyphenation.

    Falls back to all sales of the TLD, then to a fixed floor.
    """
    similar = [
        sale.sale_price
        for sale in COMPARABLE_SALES
        if sale.tld == tld and abs(sale.length - length) <= 2 and sale.has_hyphens == has_hyphens
    ]
    if not similar:
        similar = [sale.sale_price for sale in COMPARABLE_SALES if sale.tld == tld]
    if not similar:
        return FALLBACK_MEDIAN_PRICE

    prices = sorted(similar)
    return prices[len(prices) // 2]


def get_all_sales() -> list[ComparableSale]:
    """Return a copy of the full sales table."""
    return list(COMPARABLE_SALES)
