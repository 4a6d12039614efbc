"""
Data models for the domain recovery engine.

This module defines the output records produced by the classifier, the
valuation engine, the status analyzer and the guide generator. All records
are frozen: they are built once per request and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain_recovery.enums import (
    ClassificationType,
    Confidence,
    DomainStatus,
    FactorImpact,
    GuidePhase,
    HeadlineColor,
    RecoveryDifficulty,
    StepDifficulty,
    Urgency,
    ValuationGrade,
)


@dataclass(frozen=True)
class CostRange:
    """A money range. Used for classifier estimates, status costs and guide costs."""

    min: int
    max: int
    currency: str = "USD"
    breakdown: Optional[str] = None


@dataclass(frozen=True)
class Classification:
    """Result of the brand/premium classifier."""

    domain: str
    type: ClassificationType
    tier: int  # 1 = major brand ... 5 = low value
    is_major_brand: bool
    is_public_company: bool
    estimated_value: CostRange
    confidence: Confidence
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValuationFactor:
    """One named scoring dimension of a valuation."""

    name: str
    score: int  # 0-100
    weight: float  # 0-1, all factors of a valuation sum to 1.0
    impact: FactorImpact
    detail: str


@dataclass(frozen=True)
class EstimatedValue:
    """Low/mid/high dollar estimate."""

    low: int
    mid: int
    high: int
    currency: str = "USD"


@dataclass(frozen=True)
class ComparableReference:
    """A historical sale used as a market reference for a valuation."""

    domain: str
    sale_price: int
    date: str
    similarity: int  # 0-100


@dataclass(frozen=True)
class DomainValuation:
    """Complete valuation of a domain."""

    domain: str
    estimated_value: EstimatedValue
    confidence: int  # 0-100
    factors: tuple[ValuationFactor, ...]
    comparables: tuple[ComparableReference, ...]
    grade: ValuationGrade
    composite_score: float
    timestamp: str


@dataclass(frozen=True)
class RegistrarContact:
    """Support contact of the registrar holding the domain."""

    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class DomainStatusReport:
    """Lifecycle classification of a domain with recovery estimates."""

    domain: str
    status: DomainStatus
    is_registered: bool
    is_active: bool
    is_parked: bool
    is_for_sale: bool
    recovery_difficulty: RecoveryDifficulty
    estimated_cost: CostRange
    estimated_time_weeks: int
    success_rate: int  # 0-100
    expiry_date: Optional[datetime] = None
    deletion_date: Optional[datetime] = None
    days_until_expiry: Optional[int] = None
    days_since_expiry: Optional[int] = None
    registrar: Optional[str] = None
    registrar_contact: Optional[RegistrarContact] = None
    classification: Optional[Classification] = None
    reasons: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    opportunities: tuple[str, ...] = ()


@dataclass(frozen=True)
class GuideLink:
    """An external resource attached to a recovery step."""

    label: str
    url: str


@dataclass(frozen=True)
class RecoveryStep:
    """A single actionable step of a recovery guide."""

    number: int
    title: str
    description: str
    details: tuple[str, ...]
    urgency: Urgency
    difficulty: StepDifficulty
    estimated_time: Optional[str] = None
    help_text: Optional[str] = None
    links: tuple[GuideLink, ...] = ()
    email_template_key: Optional[str] = None
    phone_script: Optional[str] = None


@dataclass(frozen=True)
class RecoveryGuide:
    """Personalized, ordered recovery or acquisition guide."""

    headline: str
    headline_color: HeadlineColor
    summary: str
    status_explanation: str
    phase: GuidePhase
    steps: tuple[RecoveryStep, ...]
    cost_summary: CostRange
    time_summary: str
    success_likelihood: str
    alternatives: tuple[RecoveryStep, ...] = ()
    proof_of_ownership: bool = False
    show_script_downloads: bool = False
    is_emergency_mode: bool = False
    registrar_name: Optional[str] = None
    registrar_phone: Optional[str] = None
    registrar_email: Optional[str] = None
    registrar_url: Optional[str] = None


@dataclass(frozen=True)
class RecoveryContext:
    """Situational flags supplied by the user that select guide overlays."""

    lost_credentials: bool = False
    stolen_or_hijacked: bool = False
    contractual_dispute: bool = False
    emergency_mode: bool = False
    content_recovery_priority: bool = False


@dataclass(frozen=True)
class AnalysisResult:
    """Combined output of a full domain analysis."""

    domain: str
    status_report: DomainStatusReport
    valuation: DomainValuation
    recovery_guide: RecoveryGuide
    recovery_score: int
    timestamp: str
