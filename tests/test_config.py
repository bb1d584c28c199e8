"""Tests for configuration loading and client construction."""

import pytest

from moneroo_payments import (
    ClientConfig,
    ClientParameters,
    ConfigurationError,
    MonerooClient,
    PaymentMethod,
    create_client,
    load_client_config,
    read_env_file,
)
from moneroo_payments.core.environment import build_environment


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig.from_mapping({"MONEROO_API_KEY": "sk_test"})
        assert config.api_key == "sk_test"
        assert config.base_url == "https://api.moneroo.io/v1"
        assert config.timeout_seconds == 30
        assert config.default_payment_method is PaymentMethod.MTN_BJ

    @pytest.mark.parametrize("values", [{}, {"MONEROO_API_KEY": "   "}])
    def test_api_key_is_required(self, values):
        with pytest.raises(ConfigurationError, match="MONEROO_API_KEY"):
            ClientConfig.from_mapping(values)

    def test_custom_values(self):
        config = ClientConfig.from_mapping(
            {
                "MONEROO_API_KEY": " sk_live ",
                "MONEROO_API_URL": "https://sandbox.moneroo.io/v1/",
                "MONEROO_TIMEOUT_SECONDS": "12",
                "MONEROO_DEFAULT_METHOD": "orange_sn",
            }
        )
        assert config.api_key == "sk_live"
        assert config.base_url == "https://sandbox.moneroo.io/v1"
        assert config.timeout_seconds == 12
        assert config.default_payment_method is PaymentMethod.ORANGE_SN

    @pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigurationError, match="MONEROO_TIMEOUT_SECONDS"):
            ClientConfig.from_mapping(
                {"MONEROO_API_KEY": "sk_test", "MONEROO_TIMEOUT_SECONDS": timeout}
            )

    def test_unknown_default_method(self):
        with pytest.raises(ConfigurationError, match="MONEROO_DEFAULT_METHOD"):
            ClientConfig.from_mapping(
                {"MONEROO_API_KEY": "sk_test", "MONEROO_DEFAULT_METHOD": "djamo_ci"}
            )

    def test_repr_hides_api_key(self):
        assert "sk_secret" not in repr(ClientConfig(api_key="sk_secret"))


class TestLoadClientConfig:
    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# Moneroo\nMONEROO_API_KEY='sk_from_file'\nexport MONEROO_TIMEOUT_SECONDS=7\n",
            encoding="utf-8",
        )
        config = load_client_config(env_file=str(env_file), base={})
        assert config.api_key == "sk_from_file"
        assert config.timeout_seconds == 7

    def test_base_wins_over_file_and_overrides_win_over_both(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("MONEROO_API_KEY=sk_file\nMONEROO_API_URL=https://file\n")
        config = load_client_config(
            env_file=str(env_file),
            base={"MONEROO_API_URL": "https://base"},
            overrides={"MONEROO_API_KEY": "sk_override"},
        )
        assert config.api_key == "sk_override"
        assert config.base_url == "https://base"

    def test_keyword_arguments(self, tmp_path):
        config = load_client_config(
            env_file=str(tmp_path / "missing.env"),
            base={},
            parameters=ClientParameters(timeout_seconds=9),
            api_key="sk_kw",
            default_payment_method=PaymentMethod.WAVE_SN,
        )
        assert config.api_key == "sk_kw"
        assert config.timeout_seconds == 9
        assert config.default_payment_method is PaymentMethod.WAVE_SN

    def test_missing_key_everywhere(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_client_config(env_file=None, base={})


class TestEnvironment:
    def test_read_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            'export MONEROO_API_KEY="sk_file"\n# sandbox\nMONEROO_API_URL=https://file\nBARE\n',
            encoding="utf-8",
        )
        assert read_env_file(str(env_file)) == {
            "MONEROO_API_KEY": "sk_file",
            "MONEROO_API_URL": "https://file",
        }

    def test_missing_file_is_ignored(self, tmp_path):
        assert read_env_file(str(tmp_path / "nope")) == {}
        assert build_environment(env_file=str(tmp_path / "nope"), base={"A": "1"}) == {"A": "1"}

    def test_precedence(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("A=file\nB=file\nC=file\n", encoding="utf-8")
        merged = build_environment(
            env_file=str(env_file),
            base={"B": "base", "C": "base"},
            overrides={"C": "override"},
        )
        assert merged == {"A": "file", "B": "base", "C": "override"}

    def test_base_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("MONEROO_API_KEY", "sk_process")
        assert build_environment(env_file=None)["MONEROO_API_KEY"] == "sk_process"


class TestCreateClient:
    def test_with_config(self, session):
        config = ClientConfig(api_key="sk_test")
        client = create_client(config=config, session=session)
        assert isinstance(client, MonerooClient)
        assert client.config is config
        assert client.session is session

    def test_config_and_parameters_are_exclusive(self):
        with pytest.raises(ValueError, match="not both"):
            create_client(config=ClientConfig(api_key="sk_test"), api_key="sk_other")

    def test_from_parameters(self):
        client = create_client(env_file=None, base={}, api_key="sk_test")
        assert client.config.api_key == "sk_test"
