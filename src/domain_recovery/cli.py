"""
Command-line interface for the domain recovery engine.

This module provides the main CLI entry point with commands for:
- analyze: Full analysis (valuation, lifecycle state, score, guide)
- status: Lifecycle classification only
- valuate: Valuation only
- classify: Brand/premium classifier only
- guide: Recovery guide for a given lifecycle state
- email: Render an email template
- self-test: Configuration and static table checks
- config: Configuration management

Signal records are read from a JSON file (--signals); nothing is fetched
from the network. Results are printed to stdout as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from domain_recovery import __version__
from domain_recovery.analyzer import DomainAnalyzer
from domain_recovery.audit_logger import AuditLogger
from domain_recovery.classifier import DomainClassifier
from domain_recovery.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    create_default_config,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
)
from domain_recovery.domain_validator import DomainValidator
from domain_recovery.email_templates import get_all_template_keys, render_email_template
from domain_recovery.enums import DomainStatus
from domain_recovery.exceptions import DomainRecoveryError, SignalError, TemplateError
from domain_recovery.models import RecoveryContext
from domain_recovery.rdap_parser import registration_from_rdap
from domain_recovery.recovery_guide import GuideGenerator
from domain_recovery.self_test import SelfTest, print_self_test_result
from domain_recovery.serialization import to_json
from domain_recovery.signals import (
    archive_from_dict,
    dns_from_dict,
    registration_from_dict,
    security_from_dict,
    seo_from_dict,
    website_from_dict,
)
from domain_recovery.status_analyzer import DomainStatusAnalyzer
from domain_recovery.valuation import DomainValuationEngine


SIGNAL_KEYS = ("registration", "archive", "website", "dns", "seo", "security")


def load_signals(path: Optional[str], rdap: bool = False) -> dict:
    """
    Load signal records from a JSON file.

    Args:
        path: Path to a JSON object with optional keys registration, archive,
              website, dns, seo and security (None -> no signals)
        rdap: Treat 'registration' as a raw RDAP domain object

    Returns:
        Dict of signal records keyed by name; absent keys map to None

    Raises:
        SignalError: If the file cannot be read or holds malformed data
    """
    if not path:
        return {key: None for key in SIGNAL_KEYS}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SignalError(
            code="invalid_json",
            message=f"Signals file is not valid JSON: {e}",
            details={"path": path},
        ) from e
    except OSError as e:
        raise SignalError(
            code="unreadable",
            message=f"Could not read signals file: {e}",
            details={"path": path},
        ) from e

    if not isinstance(data, dict):
        raise SignalError(
            code="invalid_type",
            message="Signals file must contain a JSON object",
            details={"path": path},
        )

    registration = data.get("registration")
    if rdap and registration is not None:
        registration_record = registration_from_rdap(registration)
    else:
        registration_record = registration_from_dict(registration)

    return {
        "registration": registration_record,
        "archive": archive_from_dict(data.get("archive")),
        "website": website_from_dict(data.get("website")),
        "dns": dns_from_dict(data.get("dns")),
        "seo": seo_from_dict(data.get("seo")),
        "security": security_from_dict(data.get("security")),
    }


def context_from_args(args: argparse.Namespace) -> RecoveryContext:
    """Build the guide overlay flags from parsed arguments."""
    return RecoveryContext(
        lost_credentials=args.lost_credentials,
        stolen_or_hijacked=args.hijacked,
        contractual_dispute=args.dispute,
        emergency_mode=args.emergency,
        content_recovery_priority=args.content_priority,
    )


def load_app_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration: file (if given) overlaid with environment variables.

    Raises:
        ConfigurationError: If the file exists but cannot be parsed
    """
    base = None
    if config_path:
        base = load_config_from_file(Path(config_path))
    return load_config_from_env(base=base)


def create_logger(config: AppConfig) -> AuditLogger:
    """Create the audit logger writing to stderr."""
    return AuditLogger.from_config(config.logging, output_stream=sys.stderr)


def print_error(error: DomainRecoveryError) -> None:
    """Print an engine error as a JSON object to stderr."""
    print(json.dumps({"error": error.to_dict()}, ensure_ascii=False, default=str), file=sys.stderr)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    config = load_app_config(args.config)
    signals = load_signals(args.signals, rdap=args.rdap)

    analyzer = DomainAnalyzer(config=config.engine, logger=create_logger(config))
    result = analyzer.analyze(
        args.domain,
        context=context_from_args(args),
        **signals,
    )

    print(to_json(result))
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    """Handle the 'status' command."""
    config = load_app_config(args.config)
    signals = load_signals(args.signals, rdap=args.rdap)
    domain = DomainValidator().normalize(args.domain)

    valuation = DomainValuationEngine(config.engine).estimate(
        domain,
        whois=signals["registration"],
        seo=signals["seo"],
        security=signals["security"],
        website=signals["website"],
    )
    archive = signals["archive"]
    website = signals["website"]

    report = DomainStatusAnalyzer().classify(
        domain,
        signals["registration"],
        has_archived_content=archive.has_content if archive is not None else None,
        is_website_live=website.is_online if website is not None else None,
        dns=signals["dns"],
        valuation=valuation,
    )

    print(to_json(report))
    return 0


def cmd_valuate(args: argparse.Namespace) -> int:
    """Handle the 'valuate' command."""
    config = load_app_config(args.config)
    signals = load_signals(args.signals, rdap=args.rdap)
    domain = DomainValidator().normalize(args.domain)

    valuation = DomainValuationEngine(config.engine).estimate(
        domain,
        whois=signals["registration"],
        seo=signals["seo"],
        security=signals["security"],
        website=signals["website"],
    )

    print(to_json(valuation))
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Handle the 'classify' command."""
    domain = DomainValidator().normalize(args.domain)
    classification = DomainClassifier().classify(
        domain,
        age_years=args.age,
        traffic=args.traffic,
        backlinks=args.backlinks,
    )

    print(to_json(classification))
    return 0


def cmd_guide(args: argparse.Namespace) -> int:
    """Handle the 'guide' command."""
    domain = DomainValidator().normalize(args.domain)
    guide = GuideGenerator().generate(
        domain,
        DomainStatus(args.state),
        registrar=args.registrar,
        days_since_expiry=args.days_since_expiry,
        has_archived_content=args.archived or None,
        context=context_from_args(args),
    )

    print(to_json(guide))
    return 0


def cmd_email(args: argparse.Namespace) -> int:
    """Handle the 'email' command."""
    domain = DomainValidator().normalize(args.domain)
    text = render_email_template(
        args.key,
        domain,
        registrar=args.registrar,
        name=args.name,
        mark=args.mark,
        provider=args.provider,
        new_registrar=args.new_registrar,
    )
    if text is None:
        raise TemplateError(
            code="unknown_template",
            message=f"Unknown email template: {args.key}",
            details={"available": sorted(get_all_template_keys())},
        )

    print(text)
    return 0


def cmd_self_test(args: argparse.Namespace) -> int:
    """Handle the 'self-test' command."""
    config = load_app_config(args.config)
    result = SelfTest(config).run()
    print_self_test_result(result)
    return 0 if result.success else 1


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH

    if args.action == "show":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"No configuration found at: {config_path}")
            print("Use 'config init' to create a default configuration.")
            return 1

        print(f"Configuration from: {config_path}")
        print(f"  Log level: {config.logging.level}")
        print(f"  Log format: {config.logging.output_format}")
        print(f"  Audit mode: {config.logging.audit_mode}")
        print(f"  Currency: {config.engine.currency}")
        print(f"  Comparables limit: {config.engine.comparables_limit}")
        print(f"  Similarity threshold: {config.engine.comparable_similarity_threshold}")
        print(f"  Startup self-test: {config.startup_self_test}")
        return 0

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(f"Configuration already exists at: {config_path}")
            print("Use --force to overwrite.")
            return 1

        if save_config_to_file(create_default_config(), config_path):
            print(f"Configuration created at: {config_path}")
            return 0
        return 1

    elif args.action == "validate":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"Error: Could not load config from {config_path}", file=sys.stderr)
            return 1

        validation = SelfTest(config).validate_config()
        if not validation.valid:
            print(f"Configuration at {config_path} is invalid:", file=sys.stderr)
            for error in validation.errors:
                print(f"  - {error}", file=sys.stderr)
            return 1

        print(f"Configuration at {config_path} is valid.")
        for warning in validation.warnings:
            print(f"  Warning: {warning}")
        return 0

    return 1


def _add_signal_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--signals", "-s",
        help="Path to a JSON file with registration/archive/website/dns/seo/security records",
    )
    parser.add_argument(
        "--rdap",
        action="store_true",
        help="Treat the 'registration' record as a raw RDAP domain object",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lost-credentials",
        action="store_true",
        help="Prepend account recovery steps",
    )
    parser.add_argument(
        "--hijacked",
        action="store_true",
        help="Use the stolen/hijacked domain guide",
    )
    parser.add_argument(
        "--dispute",
        action="store_true",
        help="Use the contractual dispute guide",
    )
    parser.add_argument(
        "--emergency",
        action="store_true",
        help="Emergency mode - keep only immediate steps",
    )
    parser.add_argument(
        "--content-priority",
        action="store_true",
        help="Prepend website content recovery steps",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="domain-recovery",
        description="Domain lifecycle classification, valuation and recovery guidance",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'analyze' command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Run the full analysis for a domain",
    )
    analyze_parser.add_argument(
        "domain",
        help="Domain to analyze (e.g., example.com or a pasted URL)",
    )
    _add_signal_arguments(analyze_parser)
    _add_context_arguments(analyze_parser)
    analyze_parser.set_defaults(func=cmd_analyze)

    # 'status' command
    status_parser = subparsers.add_parser(
        "status",
        help="Classify the lifecycle state of a domain",
    )
    status_parser.add_argument("domain", help="Domain to classify")
    _add_signal_arguments(status_parser)
    status_parser.set_defaults(func=cmd_status)

    # 'valuate' command
    valuate_parser = subparsers.add_parser(
        "valuate",
        help="Estimate the value of a domain",
    )
    valuate_parser.add_argument("domain", help="Domain to value")
    _add_signal_arguments(valuate_parser)
    valuate_parser.set_defaults(func=cmd_valuate)

    # 'classify' command
    classify_parser = subparsers.add_parser(
        "classify",
        help="Run the brand/premium classifier",
    )
    classify_parser.add_argument("domain", help="Domain to classify")
    classify_parser.add_argument(
        "--age",
        type=float,
        help="Registration age in years",
    )
    classify_parser.add_argument(
        "--traffic",
        type=int,
        help="Estimated monthly visits",
    )
    classify_parser.add_argument(
        "--backlinks",
        type=int,
        help="Estimated backlink count",
    )
    classify_parser.set_defaults(func=cmd_classify)

    # 'guide' command
    guide_parser = subparsers.add_parser(
        "guide",
        help="Generate a recovery guide for a lifecycle state",
    )
    guide_parser.add_argument("domain", help="Domain the guide is for")
    guide_parser.add_argument(
        "--state",
        required=True,
        choices=[status.value for status in DomainStatus],
        help="Lifecycle state",
    )
    guide_parser.add_argument(
        "--registrar", "-r",
        help="Registrar name",
    )
    guide_parser.add_argument(
        "--days-since-expiry",
        type=int,
        help="Days since the domain expired",
    )
    guide_parser.add_argument(
        "--archived",
        action="store_true",
        help="Archived snapshots of the site exist",
    )
    _add_context_arguments(guide_parser)
    guide_parser.set_defaults(func=cmd_guide)

    # 'email' command
    email_parser = subparsers.add_parser(
        "email",
        help="Render an email template",
    )
    email_parser.add_argument(
        "key",
        help="Template key (e.g., redemption-request, purchase-offer)",
    )
    email_parser.add_argument("domain", help="Domain the email is about")
    email_parser.add_argument("--registrar", "-r", help="Registrar name")
    email_parser.add_argument("--name", help="Your name")
    email_parser.add_argument("--mark", help="Trademark name")
    email_parser.add_argument("--provider", help="Dispute provider or agency")
    email_parser.add_argument("--new-registrar", help="Registrar to transfer to")
    email_parser.set_defaults(func=cmd_email)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    # 'self-test' command
    self_test_parser = subparsers.add_parser(
        "self-test",
        help="Validate configuration and the engine's static tables",
    )
    self_test_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    self_test_parser.set_defaults(func=cmd_self_test)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DomainRecoveryError as e:
        print_error(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
