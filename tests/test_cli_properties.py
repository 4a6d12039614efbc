"""
Tests for the command-line interface.

Each command is driven through main() with captured stdout/stderr.
"""

import json
from pathlib import Path

import pytest
from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

from domain_recovery.cli import create_parser, main
from domain_recovery.config import (
    ENV_AUDIT_KEY,
    ENV_COMPARABLES_LIMIT,
    ENV_CURRENCY,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
)
from domain_recovery.email_templates import TEMPLATE_KEYS


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    for name in (ENV_AUDIT_KEY, ENV_COMPARABLES_LIMIT, ENV_CURRENCY, ENV_LOG_FORMAT):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV_LOG_LEVEL, "error")


def write_signals(tmp_path: Path, data) -> str:
    path = tmp_path / "signals.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def last_error(stderr: str) -> dict:
    return json.loads(stderr.strip().splitlines()[-1])["error"]


class TestAnalyzeCommandProperty:
    """
    Tests for the analyze, status and valuate commands.

    **Feature: domain-recovery-engine, Property 45: Commands print JSON results and exit 0**
    """

    def test_analyze_with_signals(self, tmp_path: Path, capsys) -> None:
        signals = write_signals(tmp_path, {
            "registration": {
                "registrar": "Namecheap",
                "created_date": "2015-01-01T00:00:00Z",
                "expiry_date": "2099-01-01T00:00:00Z",
            },
            "website": {"is_online": True, "http_status": 200},
            "archive": {"snapshot_count": 5},
        })

        assert main(["analyze", "https://CloudRecovery.com/", "--signals", signals]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["domain"] == "cloudrecovery.com"
        assert data["status_report"]["status"] == "ACTIVE_IN_USE"
        assert data["recovery_guide"]["steps"][0]["number"] == 1

    def test_analyze_without_signals(self, capsys) -> None:
        assert main(["analyze", "cloudrecovery.com", "--emergency"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["status_report"]["status"] == "AVAILABLE"
        assert data["recovery_guide"]["is_emergency_mode"] is True

    def test_analyze_rdap_registration(self, tmp_path: Path, capsys) -> None:
        signals = write_signals(tmp_path, {
            "registration": {
                "objectClassName": "domain",
                "ldhName": "CLOUDRECOVERY.COM",
                "events": [
                    {"eventAction": "registration", "eventDate": "2015-01-01T00:00:00Z"},
                    {"eventAction": "expiration", "eventDate": "2099-01-01T00:00:00Z"},
                ],
                "entities": [
                    {
                        "roles": ["registrar"],
                        "vcardArray": ["vcard", [["version", {}, "text", "4.0"], ["fn", {}, "text", "Namecheap"]]],
                    },
                ],
            },
        })

        assert main(["status", "cloudrecovery.com", "--signals", signals, "--rdap"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["is_registered"] is True
        assert data["registrar"] == "Namecheap"

    def test_valuate(self, capsys) -> None:
        assert main(["valuate", "cloudrecovery.com"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data["factors"]) == 7
        assert data["grade"]

    def test_classify(self, capsys) -> None:
        assert main(["classify", "www.google.com", "--age", "20"]) == 0

        assert json.loads(capsys.readouterr().out)["type"] == "MAJOR_BRAND"


class TestGuideAndEmailCommandProperty:
    """
    Property-based tests for the guide and email commands.

    **Feature: domain-recovery-engine, Property 46: Guides and emails render from the command line**
    """

    def test_guide(self, capsys) -> None:
        code = main([
            "guide", "cloudrecovery.com",
            "--state", "EXPIRED_GRACE",
            "--registrar", "Namecheap",
            "--days-since-expiry", "12",
            "--lost-credentials",
        ])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["phase"] == "grace-period"
        assert data["steps"][0]["title"] == "Figure Out Which Registrar Has Your Domain"
        assert "expired 12 days ago" in data["summary"]

    def test_guide_rejects_unknown_state(self) -> None:
        with pytest.raises(SystemExit):
            main(["guide", "cloudrecovery.com", "--state", "LOST"])

    @given(key=st.sampled_from(sorted(TEMPLATE_KEYS)))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_email(self, key: str, capsys) -> None:
        """
        *For any* template key, the email command SHALL print the rendered
        text for the normalized domain.
        """
        assert main(["email", key, "HTTPS://Example.COM/path"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Subject: ")
        assert "example.com" in out.splitlines()[0]

    def test_email_options(self, capsys) -> None:
        assert main(["email", "owner-outreach", "example.com", "--name", "Ada Lovelace"]) == 0

        assert "My name is Ada Lovelace" in capsys.readouterr().out

    def test_unknown_email_template(self, capsys) -> None:
        assert main(["email", "no-such-template", "example.com"]) == 1

        error = last_error(capsys.readouterr().err)
        assert error["code"] == "unknown_template"
        assert error["error_type"] == "TemplateError"
        assert "purchase-offer" in error["details"]["available"]


class TestCommandErrorProperty:
    """
    Tests for error reporting.

    **Feature: domain-recovery-engine, Property 47: Engine errors print a JSON error and exit 1**
    """

    def test_invalid_domain(self, capsys) -> None:
        assert main(["analyze", "bad domain!"]) == 1

        assert last_error(capsys.readouterr().err)["error_type"] == "ValidationError"

    def test_invalid_signals_json(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "signals.json"
        path.write_text("{broken", encoding="utf-8")

        assert main(["analyze", "cloudrecovery.com", "--signals", str(path)]) == 1

        assert last_error(capsys.readouterr().err)["code"] == "invalid_json"

    def test_missing_signals_file(self, tmp_path: Path, capsys) -> None:
        assert main(["status", "cloudrecovery.com", "--signals", str(tmp_path / "absent.json")]) == 1

        assert last_error(capsys.readouterr().err)["code"] == "unreadable"

    def test_signals_must_be_object(self, tmp_path: Path, capsys) -> None:
        signals = write_signals(tmp_path, ["registration"])

        assert main(["status", "cloudrecovery.com", "--signals", signals]) == 1

        assert last_error(capsys.readouterr().err)["code"] == "invalid_type"

    def test_invalid_signal_date(self, tmp_path: Path, capsys) -> None:
        signals = write_signals(tmp_path, {"registration": {"registrar": "X", "expiry_date": "soon"}})

        assert main(["status", "cloudrecovery.com", "--signals", signals]) == 1

        assert last_error(capsys.readouterr().err)["code"] == "invalid_date"

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0

        assert "domain-recovery" in capsys.readouterr().out


class TestConfigCommandProperty:
    """
    Tests for configuration management and self-test commands.

    **Feature: domain-recovery-engine, Property 48: Configuration commands manage a JSON file**
    """

    def test_init_show_validate(self, tmp_path: Path, capsys) -> None:
        path = str(tmp_path / "config.json")

        assert main(["config", "init", "--path", path]) == 0
        assert main(["config", "init", "--path", path]) == 1
        assert main(["config", "init", "--path", path, "--force"]) == 0
        assert main(["config", "show", "--path", path]) == 0
        assert main(["config", "validate", "--path", path]) == 0

        out = capsys.readouterr().out
        assert "Configuration created at" in out
        assert "Currency: USD" in out
        assert "is valid" in out

    def test_show_missing(self, tmp_path: Path, capsys) -> None:
        assert main(["config", "show", "--path", str(tmp_path / "absent.json")]) == 1

        assert "config init" in capsys.readouterr().out

    def test_validate_invalid(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"engine": {"currency": "dollars"}}), encoding="utf-8")

        assert main(["config", "validate", "--path", str(path)]) == 1

        assert "Currency must be a three-letter code" in capsys.readouterr().err

    def test_malformed_config_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")

        assert main(["analyze", "cloudrecovery.com", "--config", str(path)]) == 1

        assert last_error(capsys.readouterr().err)["code"] == "invalid_json"

    def test_self_test(self, capsys) -> None:
        assert main(["self-test"]) == 0

        assert "Self-test passed" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [
        ["analyze", "x.com"],
        ["status", "x.com"],
        ["valuate", "x.com"],
        ["classify", "x.com"],
        ["guide", "x.com", "--state", "UNKNOWN"],
        ["email", "purchase-offer", "x.com"],
        ["config", "show"],
        ["self-test"],
    ])
    def test_parser_commands(self, argv: list) -> None:
        assert create_parser().parse_args(argv).command == argv[0]
