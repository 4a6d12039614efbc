"""
Recovery guide generator.

Turns a lifecycle state (plus whatever registrar, expiry and archive data
is known) into a personalized RecoveryGuide:

1. Select the base template for the lifecycle state
2. Fill in registrar name, contact and support URL where the template has none
3. Fold the context overlays over the guide (replace, prepend, filter)
4. Renumber steps from 1

Two calling conventions converge on the same pipeline: generate() takes
flat arguments, generate_from_report() reads them from a DomainStatusReport.
"""

import math
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Union

from domain_recovery.domain_validator import normalize_domain
from domain_recovery.enums import DomainStatus
from domain_recovery.guide_overlays import apply_overlays
from domain_recovery.guide_templates import TemplateInputs, infer_registrar_url, select_template
from domain_recovery.models import CostRange, DomainStatusReport, RecoveryContext, RecoveryGuide, RegistrarContact
from domain_recovery.signals import ArchiveSignals, parse_timestamp


SECONDS_PER_DAY = 24 * 60 * 60

# States whose templates carry their own fixed cost summary
FIXED_COST_STATES = frozenset({
    DomainStatus.AVAILABLE,
    DomainStatus.RESERVED,
    DomainStatus.UNKNOWN,
})


def _coerce_status(status: Union[DomainStatus, str, None]) -> DomainStatus:
    if isinstance(status, DomainStatus):
        return status
    if not status:
        return DomainStatus.UNKNOWN
    try:
        return DomainStatus(str(status).strip().upper())
    except ValueError:
        return DomainStatus.UNKNOWN


class GuideGenerator:
    """
    Builds recovery guides. Stateless; one instance may be shared freely.
    """

    def generate(
        self,
        domain: str,
        status: Union[DomainStatus, str, None],
        registrar: Optional[str] = None,
        registrar_contact: Optional[RegistrarContact] = None,
        expiry_date: Union[datetime, str, None] = None,
        days_since_expiry: Optional[int] = None,
        days_until_expiry: Optional[int] = None,
        has_archived_content: Optional[bool] = None,
        estimated_cost: Optional[CostRange] = None,
        context: Optional[RecoveryContext] = None,
        now: Optional[datetime] = None,
    ) -> RecoveryGuide:
        """
        Generate a recovery guide from flat arguments.

        An unrecognized status falls back to the UNKNOWN guide. When only an
        expiry date is given, the days since/until expiry are derived from it.

        Args:
            domain: Domain the guide is for
            status: Lifecycle state (enum or its string value)
            registrar: Registrar name
            registrar_contact: Registrar support email/phone
            expiry_date: Expiry date (datetime or ISO-8601 string)
            days_since_expiry: Days since the domain expired
            days_until_expiry: Days until the domain expires
            has_archived_content: Whether archived snapshots exist
            estimated_cost: Cost estimate overriding the template's range
            context: Situational flags selecting overlays
            now: Reference time for deriving expiry days

        Returns:
            RecoveryGuide with steps numbered 1..N

        Raises:
            SignalError: If expiry_date is a string that is not ISO-8601
        """
        clean = normalize_domain(domain)
        lifecycle = _coerce_status(status)

        expiry = parse_timestamp(expiry_date, "expiry_date")
        if expiry is not None and days_since_expiry is None and days_until_expiry is None:
            now = now or datetime.now(timezone.utc)
            diff = math.floor((expiry - now).total_seconds() / SECONDS_PER_DAY)
            if diff >= 0:
                days_until_expiry = diff
            else:
                days_since_expiry = -diff

        inputs = TemplateInputs(
            domain=clean,
            registrar=registrar or None,
            registrar_contact=registrar_contact,
            days_since_expiry=days_since_expiry,
            has_archived_content=has_archived_content,
            estimated_cost=estimated_cost,
        )

        guide = select_template(lifecycle, inputs)
        guide = self._enrich_registrar(guide, inputs)

        if estimated_cost is not None and lifecycle not in FIXED_COST_STATES:
            guide = replace(
                guide,
                cost_summary=replace(
                    guide.cost_summary,
                    min=estimated_cost.min,
                    max=estimated_cost.max,
                    currency=estimated_cost.currency,
                ),
            )

        return apply_overlays(guide, context or RecoveryContext(), inputs)

    def generate_from_report(
        self,
        report: DomainStatusReport,
        archive: Optional[ArchiveSignals] = None,
        context: Optional[RecoveryContext] = None,
        now: Optional[datetime] = None,
    ) -> RecoveryGuide:
        """
        Generate a recovery guide from a status report.

        Args:
            report: Status analyzer output
            archive: Archive signals (snapshots enable the content-recovery steps)
            context: Situational flags selecting overlays
            now: Reference time for deriving expiry days

        Returns:
            RecoveryGuide with steps numbered 1..N
        """
        return self.generate(
            report.domain,
            report.status,
            registrar=report.registrar,
            registrar_contact=report.registrar_contact,
            expiry_date=report.expiry_date,
            days_since_expiry=report.days_since_expiry,
            days_until_expiry=report.days_until_expiry,
            has_archived_content=archive.has_content if archive is not None else None,
            estimated_cost=report.estimated_cost,
            context=context,
            now=now,
        )

    @staticmethod
    def _enrich_registrar(guide: RecoveryGuide, inputs: TemplateInputs) -> RecoveryGuide:
        updates = {}
        if inputs.registrar and not guide.registrar_name:
            updates["registrar_name"] = inputs.registrar
        if inputs.registrar_phone and not guide.registrar_phone:
            updates["registrar_phone"] = inputs.registrar_phone
        if inputs.registrar_email and not guide.registrar_email:
            updates["registrar_email"] = inputs.registrar_email
        if inputs.registrar and not guide.registrar_url:
            url = infer_registrar_url(inputs.registrar)
            if url:
                updates["registrar_url"] = url
        return replace(guide, **updates) if updates else guide
