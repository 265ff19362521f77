import pytest

from settings import Settings


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.port == 3000
        assert settings.delay_min_ms == 3000
        assert settings.delay_max_ms == 30000
        assert settings.status_table == "canonical"
        assert settings.cors is False
        assert settings.seed is None

    def test_from_env_without_variables(self, monkeypatch):
        for name in (
            "PORT",
            "LIMINAL_HOST",
            "LIMINAL_DELAY_MIN_MS",
            "LIMINAL_DELAY_MAX_MS",
            "LIMINAL_STATUS_TABLE",
            "LIMINAL_VERSES_FILE",
            "LIMINAL_CORS",
            "LIMINAL_SEED",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        assert Settings.from_env() == Settings()


class TestSettingsFromEnv:
    def test_reads_every_variable(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LIMINAL_HOST", "127.0.0.1")
        monkeypatch.setenv("LIMINAL_DELAY_MIN_MS", "10")
        monkeypatch.setenv("LIMINAL_DELAY_MAX_MS", "20")
        monkeypatch.setenv("LIMINAL_STATUS_TABLE", "Verses")
        monkeypatch.setenv("LIMINAL_VERSES_FILE", "/tmp/verses.txt")
        monkeypatch.setenv("LIMINAL_CORS", "true")
        monkeypatch.setenv("LIMINAL_SEED", "42")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()
        assert settings == Settings(
            host="127.0.0.1",
            port=8080,
            delay_min_ms=10,
            delay_max_ms=20,
            status_table="verses",
            verses_file="/tmp/verses.txt",
            cors=True,
            seed=42,
            log_level="DEBUG",
        )

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
    def test_cors_falsy_values(self, monkeypatch, value):
        monkeypatch.setenv("LIMINAL_CORS", value)
        assert Settings.from_env().cors is False

    def test_non_integer_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(ValueError, match="PORT"):
            Settings.from_env()


class TestSettingsValidation:
    def test_min_above_max(self):
        with pytest.raises(ValueError):
            Settings(delay_min_ms=500, delay_max_ms=100)

    def test_negative_delay(self):
        with pytest.raises(ValueError):
            Settings(delay_min_ms=-1)

    def test_unknown_table(self):
        with pytest.raises(ValueError, match="Unknown status table"):
            Settings(status_table="teapots")

    def test_equal_bounds_allowed(self):
        assert Settings(delay_min_ms=0, delay_max_ms=0).delay_max_ms == 0


def test_unknown_log_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        Settings(log_level="CHATTY")


def test_integer_error_is_not_chained(monkeypatch):
    monkeypatch.setenv("LIMINAL_DELAY_MIN_MS", "soon")
    with pytest.raises(ValueError) as excinfo:
        Settings.from_env()
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__ is True
