from __future__ import annotations

from railway.diagnostics.config import load_diagnostics_config


def test_diagnostics_config_defaults(monkeypatch) -> None:
    for name in (
        "RAILWAY_DIAGNOSTICS_ENABLED",
        "RAILWAY_DIAGNOSTICS_BUFFER_CAP",
        "RAILWAY_DIAGNOSTICS_CATEGORY_ALLOWLIST",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = load_diagnostics_config()
    assert cfg.enabled is True
    assert cfg.buffer_capacity == 1_000
    assert cfg.category_allowlist == ()


def test_diagnostics_config_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("RAILWAY_DIAGNOSTICS_ENABLED", "off")
    monkeypatch.setenv("RAILWAY_DIAGNOSTICS_BUFFER_CAP", "3")
    monkeypatch.setenv("RAILWAY_DIAGNOSTICS_CATEGORY_ALLOWLIST", "Registry, navigation,registry")

    cfg = load_diagnostics_config()
    assert cfg.enabled is False
    assert cfg.buffer_capacity == 10
    assert cfg.category_allowlist == ("registry", "navigation")


def test_diagnostics_config_ignores_bad_numbers(monkeypatch) -> None:
    monkeypatch.setenv("RAILWAY_DIAGNOSTICS_BUFFER_CAP", "lots")
    assert load_diagnostics_config().buffer_capacity == 1_000
