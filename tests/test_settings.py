"""Config loading and profile merge tests."""

from predcheck.config import get_settings, load_config


def _write(path, text):
    path.write_text(text, encoding="utf-8")


def test_profile_overlays_default(tmp_path):
    _write(
        tmp_path / "default.toml",
        '[logging]\nlevel = "WARNING"\nformat = "console"\n\n[validation]\ndeep_nested = false\n',
    )
    _write(tmp_path / "dev.toml", '[logging]\nlevel = "debug"\n\n[validation]\ndeep_nested = true\n')
    raw = load_config("dev", tmp_path)
    assert raw["logging"] == {"level": "debug", "format": "console"}
    settings = get_settings("dev", tmp_path)
    assert settings.deep_nested is True
    assert settings.logging_level == "DEBUG"


def test_missing_profile_keeps_default(tmp_path):
    _write(tmp_path / "default.toml", '[http]\ntimeout_sec = 5\n')
    settings = get_settings("nope", tmp_path)
    assert settings.http_timeout_sec == 5.0


def test_defaults_without_config(tmp_path):
    assert load_config(None, tmp_path) == {}
    settings = get_settings(None, tmp_path)
    assert settings.deep_nested is False
    assert settings.logging_level == "WARNING"
    assert settings.logging_format == "console"
    assert settings.user_agent.startswith("predcheck/")
