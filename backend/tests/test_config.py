import pytest

from resume_polish.config import DEFAULT_TIMEOUT, load_config
from resume_polish.errors import ConfigMissing, ErrorKind


def test_load_config_from_mapping():
    cfg = load_config({
        "AI_API_BASE": "https://api.example.com/v1/",
        "AI_API_KEY": "sk-abc",
        "AI_MODEL": "gpt-4o-mini",
    })
    assert cfg.api_base == "https://api.example.com/v1"
    assert cfg.completions_url == "https://api.example.com/v1/chat/completions"
    assert cfg.api_key == "sk-abc"
    assert cfg.model == "gpt-4o-mini"
    assert cfg.timeout == DEFAULT_TIMEOUT


def test_timeout_override():
    cfg = load_config({"AI_API_BASE": "http://x", "AI_API_KEY": "k", "AI_MODEL": "m", "AI_TIMEOUT": "5"})
    assert cfg.timeout == 5.0


def test_missing_values_are_all_reported():
    with pytest.raises(ConfigMissing) as exc:
        load_config({"AI_API_BASE": "http://x", "AI_MODEL": "  "})
    assert exc.value.missing == ["AI_API_KEY", "AI_MODEL"]
    assert exc.value.kind is ErrorKind.CONFIG_MISSING
    assert "AI_API_KEY" in str(exc.value)


def test_config_is_frozen():
    cfg = load_config({"AI_API_BASE": "http://x", "AI_API_KEY": "k", "AI_MODEL": "m"})
    with pytest.raises(Exception):
        cfg.model = "other"


def test_load_config_reads_environment(monkeypatch):
    import resume_polish.config as config_mod

    monkeypatch.setattr(config_mod, "load_dotenv", lambda: None)
    monkeypatch.setenv("AI_API_BASE", "http://env-base")
    monkeypatch.setenv("AI_API_KEY", "env-key")
    monkeypatch.setenv("AI_MODEL", "env-model")
    cfg = load_config()
    assert (cfg.api_base, cfg.api_key, cfg.model) == ("http://env-base", "env-key", "env-model")


def test_non_numeric_timeout_is_a_config_error():
    with pytest.raises(ConfigMissing) as exc:
        load_config({"AI_API_BASE": "http://x", "AI_API_KEY": "k", "AI_MODEL": "m", "AI_TIMEOUT": "soon"})
    assert exc.value.missing == ["AI_TIMEOUT"]
    assert "soon" in str(exc.value)
