"""
Tests for configuration and logging setup
"""
import logging
import pytest

from config import AnalyzerConfig
from monitoring import setup_logging


class TestAnalyzerConfig:

    def test_defaults(self, monkeypatch):
        for name in ("USER_AGENT", "TIMEOUT", "SINK", "DB_PATH", "LOG_LEVEL", "LOG_DIR"):
            monkeypatch.delenv(f"SEO_ANALYZER_{name}", raising=False)
        settings = AnalyzerConfig()

        assert settings.user_agent == "SEO Analyzer Bot/1.0"
        assert settings.timeout == 15
        assert settings.sink == "log"
        assert settings.log_dir is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SEO_ANALYZER_TIMEOUT", "5")
        monkeypatch.setenv("SEO_ANALYZER_SINK", "sqlite")
        monkeypatch.setenv("SEO_ANALYZER_LOG_LEVEL", "debug")
        settings = AnalyzerConfig()

        assert settings.timeout == 5
        assert settings.sink == "sqlite"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("field, value", [
        ("sink", "redis"),
        ("log_level", "LOUD"),
        ("timeout", 0),
    ])
    def test_invalid_values(self, monkeypatch, field, value):
        monkeypatch.delenv("SEO_ANALYZER_SINK", raising=False)
        monkeypatch.delenv("SEO_ANALYZER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SEO_ANALYZER_TIMEOUT", raising=False)
        with pytest.raises(ValueError):
            AnalyzerConfig(**{field: value})


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    perf = logging.getLogger("performance")
    saved = (list(root.handlers), root.level, list(perf.handlers), perf.level, perf.propagate)
    yield
    for handler in root.handlers + perf.handlers:
        if handler not in saved[0]:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    perf.handlers[:] = saved[2]
    perf.setLevel(saved[3])
    perf.propagate = saved[4]


class TestSetupLogging:

    def test_console_only(self, restore_logging):
        root = setup_logging("WARNING")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("performance").propagate is True

    def test_log_directory(self, tmp_path, restore_logging):
        log_dir = tmp_path / "logs"
        setup_logging("INFO", str(log_dir))

        logging.getLogger("performance").info("stage timing")
        logging.getLogger("seo_analyzer").error("something broke")
        for handler in logging.getLogger().handlers + logging.getLogger("performance").handlers:
            handler.flush()

        assert (log_dir / "analyzer.log").exists()
        assert "something broke" in (log_dir / "errors.log").read_text(encoding="utf-8")
        assert "stage timing" in (log_dir / "performance.log").read_text(encoding="utf-8")
        assert "stage timing" not in (log_dir / "analyzer.log").read_text(encoding="utf-8")
