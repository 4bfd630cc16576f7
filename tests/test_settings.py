from utils.settings import Settings


class TestSettings:
    def test_reads_key_and_model_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-env")
        settings = Settings(_env_file=None)
        assert settings.GEMINI_API_KEY == "env-key"
        assert settings.GEMINI_MODEL == "gemini-env"

    def test_key_is_optional_at_startup(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.GEMINI_API_KEY is None
        assert settings.GEMINI_MODEL == "gemini-1.5-flash"

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=file-key\nUNRELATED=1\n", encoding="utf-8")
        settings = Settings(_env_file=env_file)
        assert settings.GEMINI_API_KEY == "file-key"
