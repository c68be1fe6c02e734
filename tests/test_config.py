import pytest
from harvest_api import (
    DEFAULT_BASE_URL,
    HarvestClient,
    HarvestConfig,
    HarvestConfigError,
    create_client_from_env,
    load_env_config,
)

ENV_VARS = (
    "HARVEST_ACCESS_TOKEN",
    "HARVEST_ACCOUNT_ID",
    "HARVEST_BASE_URL",
    "HARVEST_USER_AGENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_env_config_reads_variables(monkeypatch):
    monkeypatch.setenv("HARVEST_ACCESS_TOKEN", " token ")
    monkeypatch.setenv("HARVEST_ACCOUNT_ID", "42")
    monkeypatch.setenv("HARVEST_BASE_URL", "https://proxy.test/v2/")

    config = load_env_config(use_dotenv=False)

    assert config == HarvestConfig(
        access_token="token", account_id="42", base_url="https://proxy.test/v2/"
    )


def test_missing_credentials_raise_config_error():
    with pytest.raises(HarvestConfigError):
        create_client_from_env(use_dotenv=False)


def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("HARVEST_ACCESS_TOKEN", "token")
    monkeypatch.setenv("HARVEST_ACCOUNT_ID", "42")
    monkeypatch.setenv("HARVEST_USER_AGENT", "my-app (ops@example.com)")

    client = create_client_from_env(use_dotenv=False)

    assert isinstance(client, HarvestClient)
    assert client.account_id == "42"
    assert client.base_url == DEFAULT_BASE_URL
    assert client.user_agent == "my-app (ops@example.com)"
    assert client.http.headers["Authorization"] == "Bearer token"


def test_from_env_honours_overrides(monkeypatch):
    monkeypatch.setenv("HARVEST_ACCESS_TOKEN", "token")
    monkeypatch.setenv("HARVEST_ACCOUNT_ID", "42")

    client = HarvestClient.from_env(use_dotenv=False, account_id="7")

    assert client.account_id == "7"


def test_config_error_is_value_error():
    assert issubclass(HarvestConfigError, ValueError)
