"""
설정 로딩 테스트
"""
from __future__ import annotations

from wrs_dashboard.core.config import CONFIG, load_firebase_settings


def test_secrets_take_precedence_over_environment():
    settings = load_firebase_settings(
        secrets={"web_api_key": "secret-key", "project_id": "secret-proj"},
        environ={"FIREBASE_WEB_API_KEY": "env-key", "FIREBASE_PROJECT_ID": "env-proj"},
    )

    assert settings.api_key == "secret-key"
    assert settings.project_id == "secret-proj"
    assert settings.auth_enabled
    assert settings.persistence_enabled


def test_api_key_alias_in_secrets():
    settings = load_firebase_settings(secrets={"api_key": "k"}, environ={})
    assert settings.api_key == "k"


def test_environment_fallback():
    settings = load_firebase_settings(
        secrets={},
        environ={"FIREBASE_API_KEY": " env-key ", "FIREBASE_PROJECT_ID": "env-proj"},
    )

    assert settings.api_key == "env-key"
    assert settings.project_id == "env-proj"


def test_missing_settings_disable_remote_features():
    settings = load_firebase_settings(secrets={}, environ={})

    assert settings.api_key == ""
    assert not settings.auth_enabled
    assert not settings.persistence_enabled


def test_chart_defaults():
    chart = CONFIG.chart
    assert (chart.width, chart.height) == (1000, 320)
    assert (chart.pad_left, chart.pad_right, chart.pad_top, chart.pad_bottom) == (70, 18, 22, 52)
    assert chart.domain_pad_ratio == 0.12
