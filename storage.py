"""
Result sinks for SEO Analyzer

A sink receives each finished analysis. Sinks are write-only from the
pipeline's point of view; nothing is ever read back during analysis.
"""
import sqlite3
import logging
from typing import List, Dict, Any

from models import AnalysisResult

logger = logging.getLogger(__name__)


class ResultSink:
    """Base class for places a finished analysis can be handed to"""

    def store(self, url: str, result: AnalysisResult):
        raise NotImplementedError


class NullResultSink(ResultSink):

    def store(self, url: str, result: AnalysisResult):
        pass


class LoggingResultSink(ResultSink):

    def store(self, url: str, result: AnalysisResult):
        logger.info(f"Stored analysis result for {url} (score {result.overall_score})")


class SqliteResultSink(ResultSink):
    """
    Appends every analysis to an SQLite table as a JSON document.

    The table is created on first use, not on construction.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._table_ready = False

    def setup_database(self):
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS analysis_results (
                    id INTEGER PRIMARY KEY,
                    url TEXT,
                    overall_score INTEGER,
                    issue_count INTEGER,
                    result_json TEXT,
                    timestamp TEXT
                )
            ''')
            conn.commit()
        finally:
            conn.close()
        self._table_ready = True

    def store(self, url: str, result: AnalysisResult):
        if not self._table_ready:
            self.setup_database()
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute('''
                INSERT INTO analysis_results
                (url, overall_score, issue_count, result_json, timestamp)
                VALUES (?, ?, ?, ?, ?)
            ''', (url, result.overall_score, len(result.issues), result.to_json(), result.timestamp))
            conn.commit()
            logger.info(f"Saved analysis result for {url}")
        finally:
            conn.close()

    def recent_results(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Most recent rows, newest first, for reporting outside the pipeline"""
        if not self._table_ready:
            self.setup_database()
        conn = sqlite3.connect(self.db_path)
        try:
            rows = conn.execute('''
                SELECT url, overall_score, issue_count, timestamp
                FROM analysis_results ORDER BY id DESC LIMIT ?
            ''', (limit,)).fetchall()
        finally:
            conn.close()
        return [
            {'url': url, 'overall_score': score, 'issue_count': issues, 'timestamp': timestamp}
            for url, score, issues, timestamp in rows
        ]


def build_sink(settings) -> ResultSink:
    """Pick the sink named in the configuration"""
    if settings.sink == "sqlite":
        return SqliteResultSink(settings.db_path)
    if settings.sink == "none":
        return NullResultSink()
    return LoggingResultSink()
