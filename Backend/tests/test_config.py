from pathlib import Path

from inator_studio.core.config import LLMSettings, Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("GEMINI_API_KEY", "DEFAULT_LLM_MODEL", "LLM_TIMEOUT_SECONDS", "STORAGE_DIR", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()
    assert settings.llm.gemini_api_key is None
    assert settings.llm.configured is False
    assert settings.llm.default_model == "gemini-3-flash-preview"
    assert settings.llm.timeout_seconds is None
    assert settings.storage.storage_dir.name == "storage"
    assert settings.paths.frontend_index.name == "index.html"
    assert [f for f in vars(settings.paths)] == ["frontend_index"]
    assert settings.port == 3000


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("DEFAULT_LLM_MODEL", "gemini-other")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()
    assert settings.llm.configured is True
    assert settings.llm.default_model == "gemini-other"
    assert settings.llm.timeout_seconds == 30.0
    assert settings.storage.storage_dir == tmp_path / "data"
    assert settings.port == 8080


def test_blank_api_key_is_unconfigured(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    assert LLMSettings().configured is False


def test_load_settings_reads_env_file(monkeypatch, tmp_path):
    monkeypatch.delenv("STORAGE_DIR", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(f"STORAGE_DIR={tmp_path / 'from-env-file'}\n", encoding="utf-8")

    try:
        settings = load_settings(str(env_file))
        assert settings.storage.storage_dir == Path(tmp_path / "from-env-file")
    finally:
        monkeypatch.delenv("STORAGE_DIR", raising=False)


def test_settings_are_independent_objects():
    assert load_settings() is not load_settings()


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://inator.example")
    assert Settings().cors_origins == ["http://localhost:3000", "https://inator.example"]

    monkeypatch.setenv("CORS_ORIGINS", "*")
    assert Settings().cors_origins == ["*"]


def test_importing_main_builds_no_app():
    import inator_studio.main as main_module

    assert not hasattr(main_module, "app")
    assert callable(main_module.create_app)
