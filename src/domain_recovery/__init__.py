"""
Domain Recovery - Domain lifecycle classification and recovery guidance engine.

This package classifies where a domain sits in its registration lifecycle,
estimates its market value, and produces a step-by-step recovery guide
tailored to the user's situation. All inputs are signal records gathered
by the caller; the engine performs no network or database I/O.
"""

__version__ = "1.0.0"
__author__ = "Domain Recovery Team"

from domain_recovery.exceptions import (
    DomainRecoveryError,
    ValidationError,
    SignalError,
    ConfigurationError,
    TemplateError,
)
from domain_recovery.enums import (
    DomainStatus,
    RecoveryDifficulty,
    ClassificationType,
    Confidence,
    FactorImpact,
    ValuationGrade,
    Urgency,
    StepDifficulty,
    HeadlineColor,
    GuidePhase,
    LogLevel,
    DomainValidationErrorCode,
)
from domain_recovery.domain_validator import (
    DomainValidator,
    DomainValidationResult,
    DomainValidationError,
    normalize_domain,
    split_domain,
)
from domain_recovery.config import (
    LoggingConfig,
    EngineConfig,
    AppConfig,
    create_default_config,
    load_config_from_file,
    load_config_from_env,
    save_config_to_file,
)
from domain_recovery.models import (
    CostRange,
    Classification,
    ValuationFactor,
    EstimatedValue,
    ComparableReference,
    DomainValuation,
    RegistrarContact,
    DomainStatusReport,
    GuideLink,
    RecoveryStep,
    RecoveryGuide,
    RecoveryContext,
    AnalysisResult,
)
from domain_recovery.signals import (
    RegistrationSignals,
    ArchiveSignals,
    WebsiteSignals,
    DnsSignals,
    SeoSignals,
    SecuritySignals,
    parse_timestamp,
)
from domain_recovery.rdap_parser import (
    registration_from_rdap,
)
from domain_recovery.registrar_directory import (
    RegistrarEntry,
    find_registrar,
    get_all_registrars,
)
from domain_recovery.classifier import (
    DomainClassifier,
    is_major_brand,
)
from domain_recovery.valuation import (
    DomainValuationEngine,
)
from domain_recovery.status_analyzer import (
    DomainStatusAnalyzer,
)
from domain_recovery.recovery_guide import (
    GuideGenerator,
)
from domain_recovery.email_templates import (
    render_email_template,
    TEMPLATE_KEYS,
)
from domain_recovery.audit_logger import (
    AuditLogger,
    LogEntry,
)
from domain_recovery.analyzer import (
    DomainAnalyzer,
)
from domain_recovery.serialization import (
    to_dict,
    to_json,
)
from domain_recovery.self_test import (
    SelfTest,
    SelfTestResult,
    TableCheckResult,
    ConfigValidationResult,
    run_self_test,
)
from domain_recovery.cli import (
    main as cli_main,
    create_parser,
)

__all__ = [
    # Exceptions
    "DomainRecoveryError",
    "ValidationError",
    "SignalError",
    "ConfigurationError",
    "TemplateError",
    # Enums
    "DomainStatus",
    "RecoveryDifficulty",
    "ClassificationType",
    "Confidence",
    "FactorImpact",
    "ValuationGrade",
    "Urgency",
    "StepDifficulty",
    "HeadlineColor",
    "GuidePhase",
    "LogLevel",
    "DomainValidationErrorCode",
    # Domain Validator
    "DomainValidator",
    "DomainValidationResult",
    "DomainValidationError",
    "normalize_domain",
    "split_domain",
    # Configuration
    "LoggingConfig",
    "EngineConfig",
    "AppConfig",
    "create_default_config",
    "load_config_from_file",
    "load_config_from_env",
    "save_config_to_file",
    # Models
    "CostRange",
    "Classification",
    "ValuationFactor",
    "EstimatedValue",
    "ComparableReference",
    "DomainValuation",
    "RegistrarContact",
    "DomainStatusReport",
    "GuideLink",
    "RecoveryStep",
    "RecoveryGuide",
    "RecoveryContext",
    "AnalysisResult",
    # Signals
    "RegistrationSignals",
    "ArchiveSignals",
    "WebsiteSignals",
    "DnsSignals",
    "SeoSignals",
    "SecuritySignals",
    "parse_timestamp",
    "registration_from_rdap",
    # Registrar Directory
    "RegistrarEntry",
    "find_registrar",
    "get_all_registrars",
    # Engine
    "DomainClassifier",
    "is_major_brand",
    "DomainValuationEngine",
    "DomainStatusAnalyzer",
    "GuideGenerator",
    "render_email_template",
    "TEMPLATE_KEYS",
    "DomainAnalyzer",
    # Audit Logger
    "AuditLogger",
    "LogEntry",
    # Serialization
    "to_dict",
    "to_json",
    # Self-Test
    "SelfTest",
    "SelfTestResult",
    "TableCheckResult",
    "ConfigValidationResult",
    "run_self_test",
    # CLI
    "cli_main",
    "create_parser",
]
