"""
Property-based tests for configuration loading.

Uses Hypothesis for property-based testing to verify that configuration
survives a save/load round trip and that environment overrides apply.
"""

import json
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_recovery.config import (
    ENV_AUDIT_KEY,
    ENV_COMPARABLES_LIMIT,
    ENV_CURRENCY,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    VALID_LOG_LEVELS,
    VALID_OUTPUT_FORMATS,
    AppConfig,
    EngineConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
    create_default_config,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
)
from domain_recovery.exceptions import ConfigurationError


ALL_ENV_VARS = (ENV_LOG_LEVEL, ENV_LOG_FORMAT, ENV_AUDIT_KEY, ENV_CURRENCY, ENV_COMPARABLES_LIMIT)


@st.composite
def app_config_strategy(draw) -> AppConfig:
    """Generate valid application configurations."""
    return AppConfig(
        logging=LoggingConfig(
            level=draw(st.sampled_from(VALID_LOG_LEVELS)),
            audit_mode=draw(st.booleans()),
            audit_signing_key=draw(st.one_of(st.none(), st.text(min_size=1, max_size=40))),
            output_format=draw(st.sampled_from(VALID_OUTPUT_FORMATS)),
        ),
        engine=EngineConfig(
            currency=draw(st.sampled_from(["USD", "EUR", "GBP"])),
            comparables_limit=draw(st.integers(min_value=0, max_value=20)),
            comparable_similarity_threshold=draw(st.integers(min_value=0, max_value=100)),
            include_comparables=draw(st.booleans()),
        ),
        startup_self_test=draw(st.booleans()),
    )


@pytest.fixture
def clean_env(monkeypatch):
    # Registering a set first makes teardown remove values loaded from .env files
    for name in ALL_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestConfigurationRoundTripProperty:
    """
    Property-based tests for configuration persistence.

    **Feature: domain-recovery-engine, Property 37: Configuration round trip preserves data**
    """

    @given(config=app_config_strategy())
    @settings(max_examples=100)
    def test_config_round_trip_preserves_data(self, config: AppConfig) -> None:
        """
        *For any* valid configuration, saving then loading SHALL produce an
        equal configuration.
        """
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "nested" / "config.json"

            assert save_config_to_file(config, path)
            assert load_config_from_file(path) == config

    @given(config=app_config_strategy())
    @settings(max_examples=100)
    def test_dict_form_is_json(self, config: AppConfig) -> None:
        data = config_to_dict(config)

        assert config_from_dict(json.loads(json.dumps(data))) == config

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_config_from_file(tmp_path / "absent.json") is None

    def test_missing_keys_use_defaults(self) -> None:
        config = config_from_dict({})

        assert config.logging.level == "info"
        assert config.logging.output_format == "text"
        assert config.engine == EngineConfig()
        assert not config.startup_self_test

    def test_default_config(self) -> None:
        config = create_default_config()

        assert config.logging.output_format == "text"
        assert config.engine.currency == "USD"
        assert config.engine.comparables_limit == 5


class TestConfigurationErrorProperty:
    """
    Tests for rejected configuration files.

    **Feature: domain-recovery-engine, Property 38: Malformed configuration raises ConfigurationError**
    """

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_file(path)

        assert exc_info.value.code == "invalid_json"
        assert exc_info.value.details["path"] == str(path)

    @pytest.mark.parametrize("data", [[], "text", 42])
    def test_root_must_be_object(self, data) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            config_from_dict(data)

        assert exc_info.value.code == "invalid_config"

    def test_bad_value(self) -> None:
        with pytest.raises(ConfigurationError):
            config_from_dict({"engine": {"comparables_limit": "many"}})

    def test_bad_section(self) -> None:
        with pytest.raises(ConfigurationError):
            config_from_dict({"logging": ["debug"]})


class TestEnvironmentOverrideProperty:
    """
    Tests for environment overrides.

    **Feature: domain-recovery-engine, Property 39: Environment variables override the base configuration**
    """

    def test_no_env_keeps_defaults(self, clean_env, tmp_path: Path) -> None:
        config = load_config_from_env(env_file=tmp_path / "absent.env")

        assert config == create_default_config()

    def test_env_overrides(self, clean_env, tmp_path: Path) -> None:
        clean_env.setenv(ENV_LOG_LEVEL, " DEBUG ")
        clean_env.setenv(ENV_LOG_FORMAT, "json")
        clean_env.setenv(ENV_AUDIT_KEY, "secret-key")
        clean_env.setenv(ENV_CURRENCY, "eur")
        clean_env.setenv(ENV_COMPARABLES_LIMIT, "3")

        config = load_config_from_env(env_file=tmp_path / "absent.env")

        assert config.logging.level == "debug"
        assert config.logging.output_format == "json"
        assert config.logging.audit_mode
        assert config.logging.audit_signing_key == "secret-key"
        assert config.engine.currency == "EUR"
        assert config.engine.comparables_limit == 3

    def test_bad_integer_falls_back(self, clean_env, tmp_path: Path) -> None:
        clean_env.setenv(ENV_COMPARABLES_LIMIT, "lots")

        assert load_config_from_env(env_file=tmp_path / "absent.env").engine.comparables_limit == 5

    def test_env_overrides_base(self, clean_env, tmp_path: Path) -> None:
        base = AppConfig(engine=EngineConfig(comparables_limit=9, include_comparables=False))
        clean_env.setenv(ENV_CURRENCY, "GBP")

        config = load_config_from_env(env_file=tmp_path / "absent.env", base=base)

        assert config.engine.currency == "GBP"
        assert config.engine.comparables_limit == 9
        assert not config.engine.include_comparables

    def test_dotenv_file(self, clean_env, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENV_CURRENCY}=CHF\n", encoding="utf-8")

        config = load_config_from_env(env_file=env_file)

        assert config.engine.currency == "CHF"

    def test_process_env_wins_over_dotenv(self, clean_env, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENV_CURRENCY}=CHF\n", encoding="utf-8")
        clean_env.setenv(ENV_CURRENCY, "JPY")

        assert load_config_from_env(env_file=env_file).engine.currency == "JPY"
