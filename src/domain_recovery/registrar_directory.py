"""
Registrar Directory - major domain registrars with support contacts and policies.

Used to point users at the right support team when recovering a domain:
- The status analyzer fills a missing registrar phone/email from here
- The guide generator prefers the directory's support URL
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegistrarEntry:
    """Support contacts and expiry policy of a registrar."""

    name: str
    alternate_names: tuple[str, ...]
    support_url: str
    support_phone: Optional[str] = None
    support_email: Optional[str] = None
    recovery_url: Optional[str] = None
    redemption_fee: Optional[str] = None
    grace_period_days: Optional[int] = None
    notes: Optional[str] = None

    @property
    def all_names(self) -> tuple[str, ...]:
        return (self.name,) + self.alternate_names


# ============================================================================
# LARGE RETAIL REGISTRARS
# ============================================================================
RETAIL_REGISTRARS = [
    RegistrarEntry(
        name="GoDaddy",
        alternate_names=(
            "GoDaddy.com, LLC", "GoDaddy.com LLC", "GoDaddy Operating Company, LLC",
            "Wild West Domains", "Wild West Domains, LLC",
        ),
        support_phone="+1-480-505-8877",
        support_url="https://www.godaddy.com/help",
        recovery_url="https://www.godaddy.com/help/recovering-expired-domain-names-6700",
        redemption_fee="$80",
        grace_period_days=18,
        notes=(
            "GoDaddy has an 18-day grace period followed by a 12-day auction period, "
            "then a 30-day redemption period. Domains may be auctioned during the "
            "post-expiration period."
        ),
    ),
    RegistrarEntry(
        name="Namecheap",
        alternate_names=("Namecheap, Inc.", "Namecheap Inc", "NAMECHEAP INC", "NameCheap"),
        support_email="support@namecheap.com",
        support_url="https://www.namecheap.com/support/",
        recovery_url=(
            "https://www.namecheap.com/support/knowledgebase/article.aspx/816/2210/"
            "what-happens-when-a-domain-expires/"
        ),
        redemption_fee="$80 (varies by TLD)",
        grace_period_days=30,
        notes=(
            "Namecheap provides a 30-day grace period for most TLDs. Auto-renewal is "
            "available and recommended. Live chat support is available 24/7."
        ),
    ),
    RegistrarEntry(
        name="Network Solutions",
        alternate_names=("Network Solutions, LLC", "Network Solutions LLC", "NetSol", "NETWORK SOLUTIONS"),
        support_phone="+1-866-391-4357",
        support_url="https://www.networksolutions.com/support/",
        recovery_url="https://www.networksolutions.com/support/what-happens-when-a-domain-name-expires/",
        redemption_fee="$150-$200",
        grace_period_days=30,
        notes=(
            "Network Solutions is one of the oldest registrars. Redemption fees tend to "
            "be higher than competitors. Phone support is available during business hours."
        ),
    ),
    RegistrarEntry(
        name="Name.com",
        alternate_names=("Name.com, Inc.", "Name.com Inc", "Name.com LLC", "NAME.COM", "Donuts (Name.com)"),
        support_phone="+1-720-249-2374",
        support_email="support@name.com",
        support_url="https://www.name.com/support",
        recovery_url="https://www.name.com/support/articles/205188488",
        redemption_fee="$100",
        grace_period_days=26,
        notes=(
            "Name.com is now part of the Identity Digital (formerly Donuts) family. "
            "They offer a 26-day grace period for most gTLDs."
        ),
    ),
    RegistrarEntry(
        name="Squarespace Domains",
        alternate_names=("Squarespace Domains LLC", "Squarespace", "SQUARESPACE", "Squarespace Domains II LLC"),
        support_url="https://support.squarespace.com/hc/en-us/categories/200337877-Domains",
        recovery_url="https://support.squarespace.com/hc/en-us/articles/205812378",
        grace_period_days=30,
        notes=(
            "Squarespace acquired Google Domains assets in 2023-2024. If your domain was "
            "originally on Google Domains, it may now be managed through Squarespace. "
            "Support is available via live chat and email."
        ),
    ),
    RegistrarEntry(
        name="Google Domains",
        alternate_names=("Google LLC", "Google Domains", "Google Inc.", "MarkMonitor Inc.", "MarkMonitor, Inc."),
        support_url="https://domains.google/support/",
        recovery_url="https://support.google.com/domains/answer/6339340",
        redemption_fee="Varies by TLD",
        grace_period_days=30,
        notes=(
            "Google Domains was partially transitioned to Squarespace in 2023-2024. Some "
            "domains may now be managed through Squarespace Domains. Check both platforms "
            "if you cannot locate your domain."
        ),
    ),
    RegistrarEntry(
        name="Bluehost / HostGator",
        alternate_names=(
            "Bluehost Inc.", "Bluehost", "BLUEHOST", "HostGator", "HostGator.com",
            "HostGator.com LLC", "Endurance International Group", "Newfold Digital",
            "Newfold Digital, Inc.", "BLUEHOST.COM", "HOSTGATOR.COM",
        ),
        support_phone="+1-888-401-4678",
        support_url="https://www.bluehost.com/help",
        recovery_url="https://www.bluehost.com/help/article/domain-renew",
        redemption_fee="$80-$150",
        grace_period_days=30,
        notes=(
            "Bluehost and HostGator are both owned by Newfold Digital (formerly Endurance "
            "International Group) and share the same backend domain infrastructure. If your "
            "domain was registered through either, you can contact the same parent company. "
            "Phone support is available 24/7."
        ),
    ),
]


# ============================================================================
# BUDGET AND INVESTOR REGISTRARS
# ============================================================================
BUDGET_REGISTRARS = [
    RegistrarEntry(
        name="Cloudflare Registrar",
        alternate_names=("Cloudflare, Inc.", "Cloudflare Inc", "CLOUDFLARE", "Cloudflare Registrar"),
        support_url="https://support.cloudflare.com",
        recovery_url="https://developers.cloudflare.com/registrar/",
        grace_period_days=40,
        notes=(
            "Cloudflare sells domains at wholesale cost with no markup. Support is primarily "
            "through their online portal and community forums. Grace period is typically "
            "40 days for most TLDs."
        ),
    ),
    RegistrarEntry(
        name="Dynadot",
        alternate_names=("Dynadot, LLC", "Dynadot LLC", "Dynadot Inc", "DYNADOT"),
        support_email="support@dynadot.com",
        support_url="https://www.dynadot.com/community/help",
        recovery_url="https://www.dynadot.com/community/help/question/grace-period",
        redemption_fee="$80",
        grace_period_days=30,
        notes=(
            "Dynadot is a smaller registrar popular with domain investors due to competitive "
            "pricing and a clean interface. Support is primarily via email and help center."
        ),
    ),
    RegistrarEntry(
        name="Porkbun",
        alternate_names=("Porkbun LLC", "Porkbun, LLC", "PORKBUN", "Porkbun.com"),
        support_email="support@porkbun.com",
        support_url="https://kb.porkbun.com",
        recovery_url="https://kb.porkbun.com/article/7-what-happens-when-my-domain-expires",
        redemption_fee="Varies by TLD",
        grace_period_days=30,
        notes=(
            "Porkbun is known for competitive pricing, free WHOIS privacy, and free SSL "
            "certificates. They have responsive email support and an active knowledge base."
        ),
    ),
    RegistrarEntry(
        name="NameSilo",
        alternate_names=("NameSilo, LLC", "NameSilo LLC", "NAMESILO", "NameSilo.com"),
        support_email="support@namesilo.com",
        support_url="https://www.namesilo.com/support",
        recovery_url="https://www.namesilo.com/support/v2/articles/domain-manager/renew-domain",
        redemption_fee="$80",
        grace_period_days=30,
        notes=(
            "NameSilo is popular with domain investors for low prices and free WHOIS privacy. "
            "They offer no-frills service with competitive renewal rates. Support is "
            "primarily via email."
        ),
    ),
]


# ============================================================================
# WHOLESALE AND RESELLER BACKENDS
# ============================================================================
WHOLESALE_REGISTRARS = [
    RegistrarEntry(
        name="Tucows / Hover",
        alternate_names=(
            "Tucows Domains Inc.", "Tucows Domains Inc", "Tucows, Inc.", "TUCOWS", "Hover",
            "Hover.com", "OpenSRS", "Tucows (Hover)",
        ),
        support_phone="+1-416-535-0123",
        support_email="help@hover.com",
        support_url="https://help.hover.com",
        recovery_url="https://help.hover.com/hc/en-us/articles/217282457",
        redemption_fee="$80-$100",
        grace_period_days=40,
        notes=(
            "Tucows operates the Hover retail brand and OpenSRS wholesale platform. Many "
            "smaller registrars use Tucows/OpenSRS as their backend. If your WHOIS shows "
            "Tucows, your retail registrar may be Hover or another reseller."
        ),
    ),
    RegistrarEntry(
        name="eNom",
        alternate_names=("eNom, LLC", "eNom LLC", "eNom, Inc.", "ENOM", "eNom Inc", "Tucows (eNom)"),
        support_url="https://www.enom.com/help",
        recovery_url="https://www.enom.com/help/domain-renewals",
        redemption_fee="$80-$160",
        grace_period_days=30,
        notes=(
            "eNom was acquired by Tucows in 2017. Many resellers and web hosting companies "
            "use eNom as their backend registrar. If WHOIS shows eNom, your actual provider "
            "may be a hosting company or reseller."
        ),
    ),
]


# ============================================================================
# EUROPEAN REGISTRARS
# ============================================================================
EUROPE_REGISTRARS = [
    RegistrarEntry(
        name="1&1 IONOS",
        alternate_names=(
            "1&1 IONOS SE", "1&1 IONOS Inc.", "IONOS SE", "IONOS", "1&1 Internet AG",
            "1&1", "United Internet", "IONOS Inc",
        ),
        support_phone="+1-484-254-5555",
        support_url="https://www.ionos.com/help",
        recovery_url="https://www.ionos.com/help/domains/domain-expiration/",
        redemption_fee="$100-$150",
        grace_period_days=30,
        notes=(
            "1&1 IONOS is a large European registrar and hosting provider. They offer phone "
            "support and have bundled hosting and domain packages. Domain management can be "
            "found in their control panel."
        ),
    ),
    RegistrarEntry(
        name="Gandi",
        alternate_names=("Gandi SAS", "GANDI SAS", "Gandi.net", "GANDI"),
        support_email="support@gandi.net",
        support_url="https://docs.gandi.net",
        recovery_url="https://docs.gandi.net/en/domain_names/renew/",
        redemption_fee="Varies by TLD (typically included in renewal cost)",
        grace_period_days=30,
        notes=(
            "Gandi is a French registrar that includes WHOIS privacy free with all domains. "
            "Support is available via email and their documentation is thorough."
        ),
    ),
    RegistrarEntry(
        name="OVH / OVHcloud",
        alternate_names=("OVH SAS", "OVH", "OVHcloud", "OVH Hosting", "OVH, SAS"),
        support_phone="+1-855-684-5463",
        support_url="https://help.ovhcloud.com",
        recovery_url="https://help.ovhcloud.com/csm/en-gb-documentation-domains",
        redemption_fee="Varies by TLD",
        grace_period_days=30,
        notes=(
            "OVH is a major European hosting and domain provider with data centers worldwide "
            "and competitive domain pricing. Support is available via phone and their help "
            "center."
        ),
    ),
]


# ============================================================================
# COMBINE ALL REGISTRARS
# ============================================================================
REGISTRAR_DIRECTORY: tuple[RegistrarEntry, ...] = tuple(
    RETAIL_REGISTRARS +
    BUDGET_REGISTRARS +
    WHOLESALE_REGISTRARS +
    EUROPE_REGISTRARS
)

# Total count for reference
REGISTRAR_COUNT = len(REGISTRAR_DIRECTORY)


def find_registrar(registrar_name: Optional[str]) -> Optional[RegistrarEntry]:
    """
    Find a registrar by the name string a WHOIS lookup returned.

    Matching is case-insensitive: exact primary name first, then exact
    alternate name, then substring containment in either direction where
    the closest length wins.

    Args:
        registrar_name: Registrar name from WHOIS/RDAP

    Returns:
        Matching RegistrarEntry, or None if nothing matches
    """
    if not registrar_name or not registrar_name.strip():
        return None

    query = registrar_name.strip().lower()

    for registrar in REGISTRAR_DIRECTORY:
        if registrar.name.lower() == query:
            return registrar

    for registrar in REGISTRAR_DIRECTORY:
        if any(alt.lower() == query for alt in registrar.alternate_names):
            return registrar

    best_match: Optional[RegistrarEntry] = None
    best_score: Optional[int] = None
    for registrar in REGISTRAR_DIRECTORY:
        for name in registrar.all_names:
            name_lower = name.lower()
            if query in name_lower or name_lower in query:
                score = abs(len(name_lower) - len(query))
                if best_score is None or score < best_score:
                    best_score = score
                    best_match = registrar

    return best_match


def get_all_registrars() -> list[RegistrarEntry]:
    """Return all directory entries."""
    return list(REGISTRAR_DIRECTORY)
