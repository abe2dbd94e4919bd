"""Unit tests for sync configuration loading."""

from decimal import Decimal

import pytest

from device_sync.config import SyncConfig, load_sync_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv("DEVICE_API_URL", raising=False)


def _write(tmp_path, text):
    path = tmp_path / "sync.yml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_project_config_matches_defaults():
    """config/sync.yml ships the same values as the code defaults"""
    assert load_sync_config() == SyncConfig()


def test_defaults():
    config = SyncConfig()

    assert config.api_url == "https://api.restful-api.dev/objects"
    assert config.timeout_seconds == 10
    assert config.fixed_price == Decimal("2025.07")
    assert (config.rewrite_from, config.rewrite_to) == ("64 GB", "46GB")


def test_loads_values(tmp_path):
    path = _write(
        tmp_path,
        """
api:
  url: https://catalog.test/objects
  timeout_seconds: 5
pricing:
  fixed_price: "99.95"
capacity_rewrite:
  from: "32 GB"
  to: "23GB"
""",
    )

    config = load_sync_config(path)

    assert config == SyncConfig(
        api_url="https://catalog.test/objects",
        timeout_seconds=5.0,
        fixed_price=Decimal("99.95"),
        rewrite_from="32 GB",
        rewrite_to="23GB",
    )


def test_partial_file_keeps_defaults(tmp_path):
    config = load_sync_config(_write(tmp_path, "pricing:\n  fixed_price: 1.5\n"))

    assert config.fixed_price == Decimal("1.5")
    assert config.api_url == SyncConfig().api_url


def test_empty_file_uses_defaults(tmp_path):
    assert load_sync_config(_write(tmp_path, "")) == SyncConfig()


def test_env_overrides_url(tmp_path, monkeypatch):
    monkeypatch.setenv("DEVICE_API_URL", "https://override.test/objects")

    config = load_sync_config(_write(tmp_path, "api:\n  url: https://file.test\n"))

    assert config.api_url == "https://override.test/objects"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sync_config(str(tmp_path / "missing.yml"))


@pytest.mark.parametrize("text,message", [
    ("api: [1, 2", "Invalid YAML"),
    ("- a\n- b\n", "mapping at the top level"),
    ("api: nope\n", "`api` section must be a mapping"),
    ("api:\n  timeout_seconds: 0\n", "timeout_seconds"),
    ("api:\n  url: ''\n", "api.url"),
    ("pricing:\n  fixed_price: abc\n", "not a valid decimal"),
    ("capacity_rewrite:\n  from: 64\n", "must be strings"),
])
def test_invalid_config(tmp_path, text, message):
    with pytest.raises(ValueError, match=message):
        load_sync_config(_write(tmp_path, text))
