"""
Command line entry point for SEO Analyzer
"""
import argparse
import sys
import logging
from typing import List

from config import config, SINK_KINDS
from exceptions import AnalysisError
from models import AnalysisResult
from monitoring import setup_logging
from seo_analyzer import SEOAnalyzer
from storage import SqliteResultSink, build_sink
from utils import validate_url

logger = logging.getLogger(__name__)


def format_summary(result: AnalysisResult, max_issues: int = None) -> str:
    """Plain-text report of one analysis"""
    facts = result.facts
    lines = [
        f"SEO analysis for {result.url}",
        f"Generated: {result.timestamp}",
        f"Overall score: {result.overall_score}/100",
        "",
        f"Title: {facts.meta_tags.title or '(missing)'}",
        f"Description: {facts.meta_tags.description or '(missing)'}",
        f"H1 headings: {len(facts.headings.h1)}",
        f"Images: {facts.images.total} ({facts.images.without_alt} without alt text)",
        f"Links: {facts.links.internal} internal, {facts.links.external} external",
        f"Words: {facts.content.word_count}, readability {facts.content.readability_score:.1f}",
        f"HTTPS: {'yes' if facts.security.https else 'no'}",
        "",
        f"Issues ({len(result.issues)}):",
    ]

    issues = result.issues if max_issues is None else result.issues[:max_issues]
    for issue in issues:
        lines.append(f"  [{issue.type.value.upper()}] {issue.message}")
        if issue.details:
            lines.append(f"      {issue.details}")

    lines.append("")
    lines.append(f"Recommendations ({len(result.recommendations)}):")
    for recommendation in result.recommendations:
        lines.append(f"  ({recommendation.priority.value}) {recommendation.title}")
        lines.append(f"      {recommendation.description}")
        lines.append(f"      Impact: {recommendation.impact}")

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze the on-page SEO of a single URL")
    parser.add_argument("url", nargs="?", help="URL of the page to analyze")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--max-issues", type=int, default=None,
                        help="Only list the first N issues in the text report")
    parser.add_argument("--log-level", default=config.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-dir", default=config.log_dir, help="Also write logs to this directory")
    parser.add_argument("--sink", default=config.sink, choices=SINK_KINDS,
                        help="Where finished analyses are handed off to")
    parser.add_argument("--db-path", default=config.db_path, help="SQLite file for the sqlite sink")
    parser.add_argument("--history", type=int, metavar="N",
                        help="Show the last N analyses stored in the SQLite sink and exit")
    return parser


def main(argv: List[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_dir)

    if args.history is not None:
        for row in SqliteResultSink(args.db_path).recent_results(args.history):
            print(f"{row['timestamp']}  {row['overall_score']:>3}  {row['issue_count']:>2} issues  {row['url']}")
        return 0

    if not args.url:
        parser.error("a URL is required unless --history is given")
    if not validate_url(args.url):
        parser.error(f"not an absolute http(s) URL: {args.url}")

    analyzer = SEOAnalyzer(sink=build_sink(args))

    try:
        result = analyzer.analyze(args.url)
    except AnalysisError as e:
        logger.debug(f"Analysis failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        analyzer.close()

    if args.json:
        print(result.to_json(indent=2))
    else:
        print(format_summary(result, args.max_issues))
    return 0


if __name__ == "__main__":
    sys.exit(main())
