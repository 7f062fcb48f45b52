import pytest
from pydantic import ValidationError

from storefront.utils import config_loader
from storefront.utils.config_loader import StorefrontConfig, load_storefront_config

_ENV = ("SUPABASE_URL", "VITE_SUPABASE_URL", "SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY", "INTEGRATIONS_MODE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_loader, "load_dotenv", lambda: False)


def test_env_values_override_file(tmp_path, monkeypatch):
    cfg_file = tmp_path / "storefront.yml"
    cfg_file.write_text("supabase_url: https://file.example\ntimeout_seconds: 4\n", encoding="utf-8")
    monkeypatch.setenv("SUPABASE_URL", "https://env.example/")
    monkeypatch.setenv("VITE_SUPABASE_ANON_KEY", "k")

    cfg = load_storefront_config(cfg_file)

    assert cfg.supabase_url == "https://env.example/"
    assert cfg.rest_base == "https://env.example/rest/v1"
    assert cfg.timeout_seconds == 4
    assert cfg.credentials_configured is True
    assert cfg.auth_headers() == {"apikey": "k", "Authorization": "Bearer k"}


def test_missing_credentials_load_without_crashing(tmp_path, caplog):
    cfg = load_storefront_config(tmp_path / "absent.yml")

    assert cfg.credentials_configured is False
    assert cfg.use_real_integrations is False
    assert "will fail" in caplog.text


@pytest.mark.parametrize(
    "mode,url,expected",
    [("auto", None, False), ("auto", "https://x", True), ("mock", "https://x", False), ("real", None, True)],
)
def test_integrations_mode(mode, url, expected):
    assert StorefrontConfig(supabase_url=url, integrations_mode=mode).use_real_integrations is expected


def test_invalid_file_raises(tmp_path):
    cfg_file = tmp_path / "storefront.yml"
    cfg_file.write_text("timeout_seconds: -1\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_storefront_config(cfg_file)
