"""
Main SEO Analyzer - runs the fetch, extract, detect, score, recommend pipeline
"""
import logging
from datetime import datetime, timezone

from config import config
from exceptions import AnalysisError, FailureKind
from fact_extractor import FactExtractor, parse_html
from issue_detector import detect_issues
from models import AnalysisResult
from recommendations import generate_recommendations
from scoring import calculate_score
from storage import ResultSink, build_sink
from utils import PageFetcher, FetchError, PerformanceMonitor

logger = logging.getLogger(__name__)


class SEOAnalyzer:
    """Analyzes a single page and returns an immutable AnalysisResult"""

    def __init__(self, fetcher=None, sink: ResultSink = None, extractor: FactExtractor = None):
        self.fetcher = fetcher or PageFetcher(config.user_agent, timeout=config.timeout)
        self.sink = sink if sink is not None else build_sink(config)
        self.extractor = extractor or FactExtractor()

        logger.info("SEO Analyzer initialized successfully")

    def analyze(self, url: str) -> AnalysisResult:
        """
        Fetch ``url`` and analyze it.

        Raises AnalysisError when the page cannot be fetched, answers with a
        non-2xx status, or anything unexpected goes wrong afterwards. There is
        no partial result.
        """
        logger.info(f"Starting analysis for {url}")
        monitor = PerformanceMonitor()

        try:
            with monitor.measure("fetch"):
                page = self.fetcher.fetch(url)
        except FetchError as e:
            logger.error(f"Error fetching {url}: {e}")
            kind = FailureKind.BAD_STATUS if e.status_code is not None else FailureKind.UNREACHABLE
            raise AnalysisError(kind, status_code=e.status_code) from e

        try:
            result = self.analyze_html(url, page.html, page.html_size, monitor)
        except Exception as e:
            logger.exception(f"Error analyzing {url}: {e}")
            raise AnalysisError(FailureKind.INTERNAL) from e

        self._store(url, result)
        logger.info(f"Completed analysis for {url}: score {result.overall_score}, "
                    f"{len(result.issues)} issues")
        return result

    def analyze_html(self, url: str, html: str, html_size: int = None,
                     monitor: PerformanceMonitor = None) -> AnalysisResult:
        """Run the pure part of the pipeline on HTML that was already fetched"""
        monitor = monitor or PerformanceMonitor()
        if html_size is None:
            html_size = len(html.encode('utf-8'))

        with monitor.measure("parse"):
            soup = parse_html(html)
        with monitor.measure("extract"):
            facts = self.extractor.extract(soup, url, html_size)
        with monitor.measure("detect"):
            issues = detect_issues(facts)
        overall_score = calculate_score(issues)
        recommendations = generate_recommendations(issues)

        return AnalysisResult(
            url=url,
            timestamp=datetime.now(timezone.utc).isoformat(),
            facts=facts,
            issues=issues,
            recommendations=recommendations,
            overall_score=overall_score,
        )

    def _store(self, url: str, result: AnalysisResult):
        try:
            self.sink.store(url, result)
        except Exception as e:
            logger.warning(f"Failed to store analysis result for {url}: {e}")

    def close(self):
        """Release the fetcher's HTTP session"""
        close = getattr(self.fetcher, 'close', None)
        if close is not None:
            close()


def analyze(url: str) -> AnalysisResult:
    """Analyze ``url`` with the default fetcher and sink"""
    analyzer = SEOAnalyzer()
    try:
        return analyzer.analyze(url)
    finally:
        analyzer.close()
