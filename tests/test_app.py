"""
Tests for the command line entry point
"""
import json
import pytest
from unittest.mock import patch

import app
from exceptions import AnalysisError, FailureKind
from seo_analyzer import SEOAnalyzer
from storage import NullResultSink, SqliteResultSink

from conftest import make_page


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch('app.setup_logging'):
        yield


@pytest.fixture
def sample_result(fake_fetcher):
    fake_fetcher.html = make_page(h1_count=0)
    return SEOAnalyzer(fetcher=fake_fetcher, sink=NullResultSink()).analyze("https://example.com")


class TestMain:

    @patch('app.SEOAnalyzer')
    def test_text_report(self, mock_analyzer_cls, sample_result, capsys):
        mock_analyzer_cls.return_value.analyze.return_value = sample_result

        assert app.main(["https://example.com", "--sink", "none"]) == 0

        out = capsys.readouterr().out
        assert "Overall score: 85/100" in out
        assert "[CRITICAL] Missing H1 heading" in out
        assert "(high) Add an H1 heading" in out

    @patch('app.SEOAnalyzer')
    def test_json_output(self, mock_analyzer_cls, sample_result, capsys):
        mock_analyzer_cls.return_value.analyze.return_value = sample_result

        assert app.main(["https://example.com", "--json", "--sink", "none"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["overallScore"] == sample_result.overall_score
        assert data["headings"]["h1"] == []

    @patch('app.SEOAnalyzer')
    def test_analysis_failure_exit_code(self, mock_analyzer_cls, capsys):
        mock_analyzer_cls.return_value.analyze.side_effect = AnalysisError(FailureKind.UNREACHABLE)

        assert app.main(["https://example.com", "--sink", "none"]) == 1
        assert "Failed to analyze the website" in capsys.readouterr().err
        mock_analyzer_cls.return_value.close.assert_called_once_with()

    def test_invalid_url_is_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            app.main(["not a url"])
        assert excinfo.value.code == 2

    def test_url_required_without_history(self):
        with pytest.raises(SystemExit):
            app.main([])

    def test_history(self, temp_db, sample_result, capsys):
        SqliteResultSink(temp_db).store(sample_result.url, sample_result)

        assert app.main(["--history", "5", "--db-path", temp_db]) == 0
        assert "https://example.com" in capsys.readouterr().out


class TestFormatSummary:

    def test_max_issues_truncates_list(self, sample_result):
        summary = app.format_summary(sample_result, max_issues=0)

        assert f"Issues ({len(sample_result.issues)}):" in summary
        assert "[CRITICAL]" not in summary
        assert "Recommendations" in summary
