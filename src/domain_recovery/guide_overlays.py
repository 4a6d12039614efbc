"""
Context overlays for recovery guides.

Every overlay is a pure function RecoveryGuide -> RecoveryGuide. The guide
generator composes them as a left fold in a fixed order:

1. Replacement (hijacking, else contractual dispute)
2. Prepend lost-credentials steps
3. Prepend content-recovery steps (requested, or archived content exists)
4. Emergency filter
5. Renumbering, always last
"""

from dataclasses import replace
from functools import partial, reduce
from typing import Callable

from domain_recovery.enums import HeadlineColor, StepDifficulty, Urgency
from domain_recovery.guide_templates import TemplateInputs, build_contractual_dispute_guide, build_stolen_hijacked_guide
from domain_recovery.models import GuideLink, RecoveryContext, RecoveryGuide, RecoveryStep


EMERGENCY_PREFIX = "EMERGENCY: "

Overlay = Callable[[RecoveryGuide], RecoveryGuide]


def apply_replacement(guide: RecoveryGuide, context: RecoveryContext, inputs: TemplateInputs) -> RecoveryGuide:
    """
    Replace the base guide with a situational narrative.

    Hijacking takes precedence over a contractual dispute. The base guide's
    archived-content flag is carried over so content recovery still applies.
    """
    if context.stolen_or_hijacked:
        replacement = build_stolen_hijacked_guide(inputs)
    elif context.contractual_dispute:
        replacement = build_contractual_dispute_guide(inputs)
    else:
        return guide

    return replace(
        replacement,
        show_script_downloads=guide.show_script_downloads,
        alternatives=guide.alternatives,
    )


def _lost_credentials_steps(domain: str) -> tuple[RecoveryStep, ...]:
    return (
        RecoveryStep(
            number=0,
            title="Figure Out Which Registrar Has Your Domain",
            description=(
                "If you do not know or remember which company manages your domain, "
                "you can find out using a free WHOIS lookup."
            ),
            details=(
                f'Go to lookup.icann.org and search for "{domain}".',
                'Look for the "Registrar" field -- this tells you which company manages the domain.',
                "Note the registrar name, their website URL, and any abuse contact info.",
                'Check your old emails for registration confirmation messages -- search for "domain" or "registrar".',
                "If you recognize the registrar name, try to log in with common email addresses you may have used.",
            ),
            urgency=Urgency.IMMEDIATE,
            estimated_time="5-10 minutes",
            difficulty=StepDifficulty.EASY,
            help_text=(
                "Every domain is managed by a registrar. Even if you do not remember choosing one, "
                "the WHOIS lookup will reveal which company has it on file."
            ),
            links=(GuideLink("ICANN WHOIS Lookup", "https://lookup.icann.org"),),
        ),
        RecoveryStep(
            number=0,
            title="Prove You Are the Rightful Owner",
            description=(
                "To recover access to your domain without account credentials, you will need to prove your identity "
                "to the registrar. Gather as much documentation as possible."
            ),
            details=(
                "Government-issued photo ID matching the name on the WHOIS registration.",
                "Business registration documents if the domain is registered to a company.",
                "Old registration confirmation or renewal emails.",
                "Credit card statements or PayPal receipts showing domain payments.",
                "Archived copies of your website (from web.archive.org) proving prior use.",
                "Any correspondence with the registrar from the original email address on file.",
            ),
            urgency=Urgency.IMMEDIATE,
            estimated_time="15-30 minutes",
            difficulty=StepDifficulty.MODERATE,
            help_text=(
                "Registrars handle lost-access requests regularly. The key is proving you are the person "
                "listed as the registrant in the WHOIS record. The more documentation you have, the smoother the process."
            ),
        ),
        RecoveryStep(
            number=0,
            title="Contact the Registrar to Recover Account Access",
            description=(
                "Call the registrar directly and explain that you need to recover access to your domain account. "
                "Phone is much faster than email for this process."
            ),
            details=(
                'Ask for the "account recovery" or "domain recovery" department.',
                "Explain that you are the owner of the domain but have lost access to your account.",
                "Be ready to provide the proof of ownership documents you gathered.",
                "The registrar may need to verify your identity before granting access.",
                "If the email on the account is outdated, the registrar can often update it after identity verification.",
                "Ask for a reference/ticket number so you can follow up.",
            ),
            urgency=Urgency.IMMEDIATE,
            estimated_time="15-30 minutes",
            difficulty=StepDifficulty.MODERATE,
            phone_script=(
                f"Hi, I need help recovering access to my domain account. The domain is {domain}. "
                "I am the registered owner but I've lost access to my account credentials. "
                "I have documentation to prove my ownership. Can you help me recover access?"
            ),
        ),
    )


def prepend_lost_credentials(guide: RecoveryGuide, domain: str) -> RecoveryGuide:
    """Insert registrar identification and account recovery steps before the existing steps."""
    return replace(guide, steps=_lost_credentials_steps(domain) + guide.steps)


def _content_recovery_steps(domain: str) -> tuple[RecoveryStep, ...]:
    return (
        RecoveryStep(
            number=0,
            title="Download Your Website from the Wayback Machine",
            description=(
                "The Internet Archive may have saved copies of your website. "
                "Download them immediately before they are potentially overwritten by new content."
            ),
            details=(
                f'Visit web.archive.org and search for "{domain}".',
                "Browse through the calendar to find the most recent snapshots of your site.",
                'Right-click and "Save As" on important pages to save them to your computer.',
                "For bulk downloads, use the Wayback Machine Downloader tool (free, open source).",
                "Save images, documents, and other files you find in the archived pages.",
                "This content may be the only copy of your website that still exists.",
            ),
            urgency=Urgency.IMMEDIATE,
            estimated_time="30-60 minutes",
            difficulty=StepDifficulty.MODERATE,
            help_text=(
                "The Wayback Machine is a free service that automatically saves copies of websites over time. "
                "It may have snapshots of your site from days, months, or years ago."
            ),
            links=(
                GuideLink("Wayback Machine", "https://web.archive.org"),
                GuideLink("Wayback Machine Downloader", "https://github.com/hartator/wayback-machine-downloader"),
            ),
        ),
        RecoveryStep(
            number=0,
            title="Check for Other Copies of Your Content",
            description=(
                "Your website content may exist in places you have not thought of yet. "
                "Check these sources before they disappear."
            ),
            details=(
                f'Google Cache: Search for "cache:{domain}" in Google for recently cached pages.',
                "Contact your previous hosting provider -- they may have backups for 30-90 days.",
                "Check your CMS (WordPress, Squarespace, Wix) for export/backup options if you still have login access.",
                "Search your email for content you may have drafted, reviewed, or sent to collaborators.",
                "Check your browser history -- you may be able to view cached versions of pages you visited.",
                "Look for local copies on your computer: downloaded files, exported databases, or backup folders.",
            ),
            urgency=Urgency.IMMEDIATE,
            estimated_time="30 minutes",
            difficulty=StepDifficulty.EASY,
            help_text=(
                "Content recovery is most successful when you act quickly. "
                "Google Cache and hosting backups are temporary, so check them as soon as possible."
            ),
        ),
    )


def prepend_content_recovery(guide: RecoveryGuide, domain: str) -> RecoveryGuide:
    """Insert archive download steps before the existing steps and flag script downloads."""
    return replace(
        guide,
        steps=_content_recovery_steps(domain) + guide.steps,
        show_script_downloads=True,
    )


def _content_recovery_if_needed(guide: RecoveryGuide, domain: str, requested: bool) -> RecoveryGuide:
    if requested or guide.show_script_downloads:
        return prepend_content_recovery(guide, domain)
    return guide


def apply_emergency_mode(guide: RecoveryGuide, domain: str) -> RecoveryGuide:
    """
    Keep only immediate steps and put a "call now" step in front.

    Args:
        guide: Guide to filter
        domain: Domain the guide is about

    Returns:
        Guide marked as emergency with a red, prefixed headline
    """
    registrar = guide.registrar_name or "your registrar"
    if guide.registrar_phone:
        call_detail = f"Call NOW: {guide.registrar_phone}"
    else:
        search_name = guide.registrar_name or "domain registrar"
        call_detail = (
            f"Find the phone number on {registrar}'s website or search Google for "
            f'"{search_name} phone number".'
        )

    call_now = RecoveryStep(
        number=0,
        title="Call Your Registrar RIGHT NOW",
        description=(
            f"This is an emergency. Pick up the phone and call {registrar} immediately. "
            "Phone support is the fastest way to get help with urgent domain issues."
        ),
        details=(
            call_detail,
            f'Tell them: "I have an emergency with my domain {domain}. I need immediate help."',
            "Have your account email, domain name, and any ID ready.",
            "If you cannot reach them by phone, try live chat -- it is usually the next fastest option.",
            "Do NOT wait for email support -- it is too slow for emergencies.",
        ),
        urgency=Urgency.IMMEDIATE,
        estimated_time="5 minutes to connect",
        difficulty=StepDifficulty.EASY,
        phone_script=(
            f"Hi, this is an emergency. My domain {domain} needs immediate attention. "
            "[Describe the issue: expired, stolen, website down, etc.]. "
            "Can you help me resolve this right away?"
        ),
    )

    immediate = tuple(step for step in guide.steps if step.urgency is Urgency.IMMEDIATE)
    headline = guide.headline
    if not headline.startswith(EMERGENCY_PREFIX):
        headline = EMERGENCY_PREFIX + headline

    return replace(
        guide,
        steps=(call_now,) + immediate,
        is_emergency_mode=True,
        headline=headline,
        headline_color=HeadlineColor.RED,
    )


def renumber_steps(guide: RecoveryGuide) -> RecoveryGuide:
    """Number steps and alternatives contiguously from 1."""
    return replace(
        guide,
        steps=tuple(replace(step, number=i) for i, step in enumerate(guide.steps, start=1)),
        alternatives=tuple(replace(step, number=i) for i, step in enumerate(guide.alternatives, start=1)),
    )


def build_overlay_pipeline(context: RecoveryContext, inputs: TemplateInputs) -> list[Overlay]:
    """
    Select the overlays a context asks for, in application order.

    Renumbering is always the final overlay.
    """
    domain = inputs.domain
    pipeline: list[Overlay] = []

    if context.stolen_or_hijacked or context.contractual_dispute:
        pipeline.append(partial(apply_replacement, context=context, inputs=inputs))
    if context.lost_credentials:
        pipeline.append(partial(prepend_lost_credentials, domain=domain))
    pipeline.append(
        partial(_content_recovery_if_needed, domain=domain, requested=context.content_recovery_priority)
    )
    if context.emergency_mode:
        pipeline.append(partial(apply_emergency_mode, domain=domain))
    pipeline.append(renumber_steps)

    return pipeline


def apply_overlays(guide: RecoveryGuide, context: RecoveryContext, inputs: TemplateInputs) -> RecoveryGuide:
    """Fold the context's overlays over a base guide."""
    return reduce(lambda current, overlay: overlay(current), build_overlay_pipeline(context, inputs), guide)
